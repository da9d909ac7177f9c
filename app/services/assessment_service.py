# backend/app/services/assessment_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from app.core.timezone import format_time
from app.models.assessment import QuestionnaireResult
from app.services.assessment_store import AssessmentStore
from app.services.catalog import DEFAULT_CATALOG, QuestionCatalog
from app.services.errors import ValidationError
from app.services.recommendation_engine import derive_recommendations, risk_tier, wellness_score
from app.services.scoring import build_response_snapshot, compute_risk_score

logger = logging.getLogger(__name__)

CATEGORY_MAX_LENGTH = QuestionnaireResult.__table__.c.category.type.length


def validate_submission(responses: Any, category: Any) -> None:
    if not responses:
        raise ValidationError("Responses and category are required")
    if not isinstance(responses, Mapping):
        raise ValidationError("responses must be an object keyed by question id")
    if not isinstance(category, str) or not category.strip():
        raise ValidationError("Responses and category are required")
    if len(category.strip()) > CATEGORY_MAX_LENGTH:
        raise ValidationError(f"category must be at most {CATEGORY_MAX_LENGTH} characters")


def submit_assessment(
    db: Session,
    user_id: str,
    responses: Optional[Mapping[str, Any]],
    category: Optional[str],
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> QuestionnaireResult:
    """
    Score, recommend and persist one completed assessment.

    Everything is computed before the database is touched, so a failed write
    leaves nothing behind.
    """
    validate_submission(responses, category)

    snapshot = build_response_snapshot(responses, catalog)
    score = compute_risk_score(responses, catalog)
    recommendations = derive_recommendations(score)
    logger.info(f"📝 Assessment scored: user={user_id}, score={score}, tier={risk_tier(score)}")

    result = QuestionnaireResult(
        user_id=user_id,
        responses=snapshot,
        risk_score=score,
        category=category.strip(),
        recommendations=recommendations,
    )
    return AssessmentStore(db).save(result)


def serialize_result(result: QuestionnaireResult) -> dict:
    return {
        "id": result.id,
        "userId": result.user_id,
        "responses": result.responses,
        "riskScore": result.risk_score,
        "category": result.category,
        "recommendations": list(result.recommendations or []),
        "tier": risk_tier(result.risk_score),
        "wellnessScore": wellness_score(result.risk_score),
        "createdAt": format_time(result.created_at),
    }
