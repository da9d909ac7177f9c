# backend/app/services/safety.py
"""
Crisis-resource disclosure.

Runs when a single answer is recorded, before anything is scored, and never
waits for the assessment to be submitted. A low overall risk score does not
suppress it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.schemas.base import CamelModel
from app.services.catalog import QuestionDefinition
from app.services.scoring import selected_values

logger = logging.getLogger(__name__)

SAFETY_CATEGORY = "safety"
CRISIS_MESSAGE = (
    "If you're experiencing thoughts of self-harm, please contact emergency "
    "services or a crisis hotline immediately. You don't have to go through this alone."
)


class CrisisDisclosure(CamelModel):
    question_id: Optional[str] = None
    message: str = CRISIS_MESSAGE
    hotlines: List[Dict[str, str]]


def crisis_disclosure(
    question_id: Optional[str] = None,
    hotlines: Optional[List[Dict[str, str]]] = None,
) -> CrisisDisclosure:
    return CrisisDisclosure(
        question_id=question_id,
        hotlines=list(hotlines if hotlines is not None else settings.CRISIS_HOTLINES),
    )


def indicates_crisis(question: QuestionDefinition, answer: Any) -> bool:
    if question.category != SAFETY_CATEGORY:
        return False
    if question.kind not in ("single-choice", "multi-choice"):
        return False
    for value in selected_values(answer):
        choice = question.choice(value)
        if choice is not None and choice.crisis:
            return True
    return False


def check_answer(
    question: QuestionDefinition,
    answer: Any,
    hotlines: Optional[List[Dict[str, str]]] = None,
) -> Optional[CrisisDisclosure]:
    """Disclosure to show right now, or None."""
    if not indicates_crisis(question, answer):
        return None
    logger.warning(f"Crisis answer recorded for question {question.id}, disclosing hotlines")
    return crisis_disclosure(question.id, hotlines)
