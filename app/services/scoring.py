# backend/app/services/scoring.py
from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

from app.services.catalog import DEFAULT_CATALOG, QuestionCatalog, QuestionDefinition

RISK_SCORE_MIN = 0
RISK_SCORE_MAX = 100


def _as_number(answer: Any) -> Optional[float]:
    """Finite float for a numeric answer, or None when it isn't one."""
    if isinstance(answer, bool):
        return None
    if not isinstance(answer, (int, float, str)):
        return None
    try:
        value = float(answer.strip() if isinstance(answer, str) else answer)
    except (OverflowError, ValueError):
        return None
    return value if math.isfinite(value) else None


def in_declared_range(question: QuestionDefinition, value: float) -> bool:
    if not math.isfinite(value):
        return False
    if question.min_value is not None and value < question.min_value:
        return False
    if question.max_value is not None and value > question.max_value:
        return False
    return True


def selected_values(answer: Any) -> List[str]:
    """Selected values of a multi-choice answer, de-duplicated, in order."""
    if isinstance(answer, str):
        answer = [answer]
    if not isinstance(answer, (list, tuple, set, frozenset)):
        return []
    out: List[str] = []
    for v in answer:
        if isinstance(v, str) and v not in out:
            out.append(v)
    return out


def clamp_score(raw: int) -> int:
    return max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, int(raw)))


def score_answer(question: QuestionDefinition, answer: Any) -> int:
    """Contribution of one answer to the raw risk total."""
    if answer is None:
        return 0

    if question.kind == "single-choice":
        if not isinstance(answer, str):
            return 0
        choice = question.choice(answer)
        return choice.score if choice else 0

    if question.kind == "multi-choice":
        total = 0
        for value in selected_values(answer):
            choice = question.choice(value)
            if choice:
                total += choice.score
        return total

    if question.kind == "numeric":
        value = _as_number(answer)
        # out-of-range answers are malformed and contribute nothing
        if value is None or not in_declared_range(question, value):
            return 0
        for band in question.bands:
            if value <= band.max_value:
                return band.score
        return 0

    # free-text carries no scoring signal
    return 0


def compute_risk_score(
    responses: Mapping[str, Any],
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> int:
    """
    Sum every answered catalog question's contribution and clamp to [0, 100].

    Answers to ids the catalog does not know are ignored; unanswered
    questions are skipped.
    """
    raw = 0
    for question in catalog:
        if question.id not in responses:
            continue
        raw += score_answer(question, responses[question.id])
    return clamp_score(raw)


def answer_label(question: QuestionDefinition, answer: Any) -> Any:
    if question.kind == "single-choice":
        choice = question.choice(answer) if isinstance(answer, str) else None
        return choice.label if choice else answer
    if question.kind == "multi-choice":
        labels = []
        for value in selected_values(answer):
            choice = question.choice(value)
            labels.append(choice.label if choice else value)
        return ", ".join(labels)
    return answer


def build_response_snapshot(
    responses: Mapping[str, Any],
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> Dict[str, dict]:
    """
    Denormalized copy of the answered questions, stored with the result so it
    stays readable after the catalog changes.
    """
    snapshot: Dict[str, dict] = {}
    for question in catalog:
        if question.id not in responses:
            continue
        answer = responses[question.id]
        snapshot[question.id] = {
            "questionText": question.prompt,
            "answerLabel": answer_label(question, answer),
            "category": question.category,
            "score": score_answer(question, answer),
        }
    return snapshot
