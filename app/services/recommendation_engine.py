# backend/app/services/recommendation_engine.py
from __future__ import annotations

from typing import Dict, List, Tuple

HIGH_RISK_THRESHOLD = 70
MODERATE_RISK_THRESHOLD = 40

# Tier -> recommendations, in display order
RECOMMENDATION_TIERS: Dict[str, Tuple[str, ...]] = {
    "high": (
        "Schedule video consultation",
        "Contact crisis hotline if needed",
        "Try daily meditation",
    ),
    "moderate": (
        "Book appointment with healthcare provider",
        "Start meditation practice",
        "Monitor symptoms",
    ),
    "low": (
        "Continue healthy habits",
        "Regular check-ins",
        "Maintain wellness routine",
    ),
}


def risk_tier(score: int) -> str:
    if score > HIGH_RISK_THRESHOLD:
        return "high"
    if score > MODERATE_RISK_THRESHOLD:
        return "moderate"
    return "low"


def derive_recommendations(score: int) -> List[str]:
    # new list every call; the tier table stays untouched
    return list(RECOMMENDATION_TIERS[risk_tier(score)])


def wellness_score(score: int) -> float:
    """Risk score flipped onto the 0-10 scale the client displays."""
    return round((100 - score) / 10, 1)
