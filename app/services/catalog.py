# backend/app/services/catalog.py
"""
Question catalog for the wellness assessment.

Each question carries its own scoring rules: choice questions score through
`Choice.score`, numeric questions through an ordered band table. Nothing
outside this module knows which question is which.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

QuestionKind = Literal["single-choice", "multi-choice", "free-text", "numeric"]
CHOICE_KINDS = ("single-choice", "multi-choice")


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    score: int = 0
    # answering with this choice discloses crisis resources immediately
    crisis: bool = False


class NumericBand(BaseModel):
    """Values <= max_value score `score`; bands are checked in order."""
    model_config = ConfigDict(frozen=True)

    max_value: float
    score: int


class QuestionDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    prompt: str
    kind: QuestionKind
    choices: Tuple[Choice, ...] = ()
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    bands: Tuple[NumericBand, ...] = ()
    required: bool = True

    @model_validator(mode="after")
    def _check_shape(self) -> "QuestionDefinition":
        if self.kind in CHOICE_KINDS:
            if not self.choices:
                raise ValueError(f"question {self.id!r}: {self.kind} needs choices")
            values = [c.value for c in self.choices]
            if len(values) != len(set(values)):
                raise ValueError(f"question {self.id!r}: duplicate choice values")
        elif self.choices:
            raise ValueError(f"question {self.id!r}: {self.kind} cannot have choices")

        if self.bands and self.kind != "numeric":
            raise ValueError(f"question {self.id!r}: only numeric questions have bands")
        return self

    def choice(self, value) -> Optional[Choice]:
        for c in self.choices:
            if c.value == value:
                return c
        return None


class QuestionCatalog:
    """Immutable, ordered set of questions."""

    def __init__(self, questions: Sequence[QuestionDefinition], version: str = "v1"):
        self._questions: Tuple[QuestionDefinition, ...] = tuple(questions)
        self._by_id: Dict[str, QuestionDefinition] = {}
        for q in self._questions:
            if q.id in self._by_id:
                raise ValueError(f"duplicate question id {q.id!r}")
            self._by_id[q.id] = q
        self.version = version

    def __iter__(self) -> Iterator[QuestionDefinition]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __getitem__(self, index: int) -> QuestionDefinition:
        return self._questions[index]

    def __contains__(self, question_id) -> bool:
        return question_id in self._by_id

    def get(self, question_id: str) -> Optional[QuestionDefinition]:
        return self._by_id.get(question_id)

    def ids(self) -> List[str]:
        return [q.id for q in self._questions]

    def to_list(self) -> List[dict]:
        return [q.model_dump() for q in self._questions]


def _frequency(qid: str, category: str, prompt: str, options: List[Tuple[str, str]]) -> QuestionDefinition:
    """Four-step single-choice question scored 0 / 1 / 3 / 5."""
    scores = (0, 1, 3, 5)
    return QuestionDefinition(
        id=qid,
        category=category,
        prompt=prompt,
        kind="single-choice",
        choices=tuple(
            Choice(value=value, label=label, score=score)
            for (value, label), score in zip(options, scores)
        ),
    )


DEFAULT_CATALOG = QuestionCatalog([
    _frequency("sleep1", "sleep", "How has your sleep been over the past week?", [
        ("excellent", "Excellent - I sleep well most nights"),
        ("good", "Good - Generally sleep well"),
        ("fair", "Fair - Some difficulty sleeping"),
        ("poor", "Poor - Frequent sleep problems"),
    ]),
    _frequency("mood1", "mood", "How would you describe your mood over the past two weeks?", [
        ("very_positive", "Very positive and happy"),
        ("mostly_positive", "Mostly positive"),
        ("mixed", "Mixed - some good days, some bad"),
        ("mostly_low", "Mostly low or sad"),
    ]),
    QuestionDefinition(
        id="currentMood",
        category="mood",
        prompt="On a scale of 0 to 10, how would you rate your mood right now?",
        kind="numeric",
        min_value=0,
        max_value=10,
        bands=(
            NumericBand(max_value=3, score=25),
            NumericBand(max_value=6, score=10),
        ),
    ),
    _frequency("stress1", "stress", "How often do you feel overwhelmed or stressed?", [
        ("rarely", "Rarely or never"),
        ("sometimes", "Sometimes"),
        ("often", "Often"),
        ("constantly", "Almost constantly"),
    ]),
    QuestionDefinition(
        id="stressSources",
        category="stress",
        prompt="Which of these are causing you stress right now? Select all that apply.",
        kind="multi-choice",
        required=False,
        choices=(
            Choice(value="work", label="Work or school", score=2),
            Choice(value="finances", label="Money or finances", score=2),
            Choice(value="relationships", label="Relationships", score=3),
            Choice(value="health", label="My own or a family member's health", score=3),
            Choice(value="caregiving", label="Caring for others", score=2),
            Choice(value="none", label="None of these", score=0),
        ),
    ),
    _frequency("energy1", "energy", "How are your energy levels throughout the day?", [
        ("high", "High energy most of the day"),
        ("moderate", "Moderate energy"),
        ("low", "Low energy but manageable"),
        ("very_low", "Very low energy, hard to function"),
    ]),
    _frequency("social1", "social", "How do you feel about your relationships and social connections?", [
        ("strong", "Strong and supportive"),
        ("good", "Generally good"),
        ("mixed", "Some good, some challenging"),
        ("isolated", "Feel isolated or disconnected"),
    ]),
    _frequency("anxiety1", "anxiety", "How often do you experience anxiety or worry?", [
        ("rarely", "Rarely"),
        ("occasionally", "Occasionally"),
        ("frequently", "Frequently"),
        ("constantly", "Almost constantly"),
    ]),
    _frequency("coping1", "coping", "How well do you feel you're coping with daily challenges?", [
        ("very_well", "Very well - I handle things easily"),
        ("well", "Well - I manage most things"),
        ("struggling", "Struggling but getting by"),
        ("overwhelmed", "Feeling overwhelmed and unable to cope"),
    ]),
    _frequency("hope1", "mood", "How hopeful do you feel about the future?", [
        ("very_hopeful", "Very hopeful and optimistic"),
        ("hopeful", "Generally hopeful"),
        ("uncertain", "Uncertain about the future"),
        ("hopeless", "Feeling hopeless or pessimistic"),
    ]),
    QuestionDefinition(
        id="selfHarmThoughts",
        category="safety",
        prompt="In the past two weeks, have you had thoughts of harming yourself?",
        kind="single-choice",
        choices=(
            Choice(value="no", label="No", score=0),
            Choice(value="yes", label="Yes", score=5, crisis=True),
        ),
    ),
    QuestionDefinition(
        id="notes",
        category="general",
        prompt="Is there anything else you would like your care team to know?",
        kind="free-text",
        required=False,
    ),
])
