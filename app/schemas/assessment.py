from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel


class QuestionnaireSubmitIn(CamelModel):
    # both optional here so the service reports the missing field itself
    responses: dict[str, Any] | None = None
    category: str | None = None


class AnswerCheckIn(CamelModel):
    question_id: str = Field(..., min_length=1)
    answer: Any = None
