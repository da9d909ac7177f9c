# backend/app/models/assessment.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON

from app.db.base import Base


class QuestionnaireResult(Base):
    """One completed assessment. Append-only: rows are never updated."""
    __tablename__ = "questionnaire_results"

    # auto-increment id doubles as insertion order for same-timestamp ties
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # question id -> {questionText, answerLabel, category, score}
    responses = Column(JSON, nullable=False)
    risk_score = Column(Integer, nullable=False)
    category = Column(String(50), nullable=False)
    recommendations = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
