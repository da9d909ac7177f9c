# backend/app/services/assessment_store.py
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.timezone import utc_now
from app.models.assessment import QuestionnaireResult
from app.models.user import User
from app.services.errors import ReferentialError, StorageError

logger = logging.getLogger(__name__)


class AssessmentStore:
    """Append-only history of assessment results, per user."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, result: QuestionnaireResult) -> QuestionnaireResult:
        if result.id is not None:
            raise StorageError(f"assessment {result.id} is already stored")

        try:
            user = self.db.get(User, result.user_id)
        except SQLAlchemyError as e:
            raise StorageError("Failed to look up user") from e
        if user is None:
            raise ReferentialError(f"user {result.user_id} does not exist")

        if result.created_at is None:
            result.created_at = utc_now()

        try:
            self.db.add(result)
            self.db.commit()
            self.db.refresh(result)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Assessment save failed for user={result.user_id}: {e}")
            raise StorageError("Failed to save assessment") from e

        logger.info(f"✅ Assessment saved: id={result.id}, user={result.user_id}, score={result.risk_score}")
        return result

    def _for_user(self, user_id: str):
        # newest first; equal timestamps fall back to insertion order
        return (
            self.db.query(QuestionnaireResult)
            .filter(QuestionnaireResult.user_id == user_id)
            .order_by(QuestionnaireResult.created_at.desc(), QuestionnaireResult.id.desc())
        )

    def latest_for(self, user_id: str) -> Optional[QuestionnaireResult]:
        return self._for_user(user_id).first()

    def history_for(self, user_id: str, limit: int = 10) -> List[QuestionnaireResult]:
        return self._for_user(user_id).limit(limit).all()
