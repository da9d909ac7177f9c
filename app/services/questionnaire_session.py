# backend/app/services/questionnaire_session.py
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from app.services.catalog import DEFAULT_CATALOG, QuestionCatalog, QuestionDefinition
from app.services.errors import ValidationError
from app.services.safety import CrisisDisclosure, check_answer


class QuestionnaireSession:
    """
    Linear walk through a catalog, one question at a time.

    `index` is the only state besides the answers. `advance()` on the last
    question submits: it returns the submission payload and the session is
    then closed. `retreat()` on the first question does nothing.
    """

    def __init__(
        self,
        catalog: QuestionCatalog = DEFAULT_CATALOG,
        category: str = "general",
        on_crisis: Optional[Callable[[CrisisDisclosure], None]] = None,
    ):
        if len(catalog) == 0:
            raise ValueError("catalog has no questions")
        self.catalog = catalog
        self.category = category
        self.on_crisis = on_crisis
        self.index = 0
        self.submitted = False
        self.answers: Dict[str, Any] = {}
        self.disclosures: List[CrisisDisclosure] = []

    @property
    def current(self) -> Optional[QuestionDefinition]:
        if self.submitted:
            return None
        return self.catalog[self.index]

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == len(self.catalog) - 1

    @property
    def progress(self) -> float:
        return (self.index + 1) / len(self.catalog) * 100

    @property
    def can_proceed(self) -> bool:
        question = self.current
        if question is None:
            return False
        return not question.required or question.id in self.answers

    def answer(self, value: Any) -> Optional[CrisisDisclosure]:
        question = self.current
        if question is None:
            raise ValidationError("questionnaire already submitted")

        if value is None or value == "" or value == []:
            self.answers.pop(question.id, None)
            return None

        self.answers[question.id] = value
        disclosure = check_answer(question, value)
        if disclosure is not None:
            self.disclosures.append(disclosure)
            if self.on_crisis:
                self.on_crisis(disclosure)
        return disclosure

    def advance(self) -> Optional[dict]:
        if self.submitted:
            raise ValidationError("questionnaire already submitted")
        if not self.can_proceed:
            raise ValidationError(f"question {self.current.id!r} needs an answer")

        if self.is_last:
            self.submitted = True
            return self.submission()

        self.index += 1
        return None

    def retreat(self) -> bool:
        if self.submitted or self.is_first:
            return False
        self.index -= 1
        return True

    def submission(self) -> dict:
        # catalog order, answered questions only
        responses = {q.id: self.answers[q.id] for q in self.catalog if q.id in self.answers}
        return {"responses": responses, "category": self.category}
