"""
Tests for the risk scoring engine
"""

from app.services.catalog import (
    DEFAULT_CATALOG,
    Choice,
    NumericBand,
    QuestionCatalog,
    QuestionDefinition,
)
from app.services.scoring import (
    build_response_snapshot,
    compute_risk_score,
    score_answer,
)


def _multi(*scores):
    return QuestionDefinition(
        id="multi",
        category="stress",
        prompt="Pick all",
        kind="multi-choice",
        choices=tuple(Choice(value=f"c{i}", label=f"C{i}", score=s) for i, s in enumerate(scores)),
    )


class TestScoreAnswer:

    def test_single_choice_uses_choice_score(self):
        q = DEFAULT_CATALOG.get("sleep1")
        assert score_answer(q, "excellent") == 0
        assert score_answer(q, "poor") == 5

    def test_single_choice_unknown_value_is_zero(self):
        q = DEFAULT_CATALOG.get("sleep1")
        assert score_answer(q, "dreadful") == 0
        assert score_answer(q, None) == 0
        assert score_answer(q, ["poor"]) == 0

    def test_multi_choice_sums_selected(self):
        """three choices scored 2, 2 and 3 contribute 7"""
        q = _multi(2, 2, 3, 4)
        assert score_answer(q, ["c0", "c1", "c2"]) == 7

    def test_multi_choice_ignores_unknown_and_duplicates(self):
        q = _multi(2, 2, 3)
        assert score_answer(q, ["c0", "bogus", "c0"]) == 2

    def test_free_text_scores_nothing(self):
        q = DEFAULT_CATALOG.get("notes")
        assert score_answer(q, "I feel severe and very poor") == 0

    def test_numeric_mood_bands(self):
        q = DEFAULT_CATALOG.get("currentMood")
        assert score_answer(q, 0) == 25
        assert score_answer(q, 3) == 25
        assert score_answer(q, 4) == 10
        assert score_answer(q, 6) == 10
        assert score_answer(q, 7) == 0
        assert score_answer(q, 10) == 0

    def test_numeric_accepts_numeric_strings(self):
        q = DEFAULT_CATALOG.get("currentMood")
        assert score_answer(q, "2") == 25
        assert score_answer(q, "meh") == 0
        assert score_answer(q, True) == 0

    def test_numeric_without_bands_scores_nothing(self):
        q = QuestionDefinition(id="age", category="general", prompt="Age?", kind="numeric")
        assert score_answer(q, 1) == 0

    def test_numeric_too_large_for_float_is_zero(self):
        q = DEFAULT_CATALOG.get("currentMood")
        assert score_answer(q, 10**400) == 0
        assert score_answer(q, -(10**400)) == 0

    def test_numeric_non_finite_is_zero(self):
        q = DEFAULT_CATALOG.get("currentMood")
        assert score_answer(q, "-inf") == 0
        assert score_answer(q, "nan") == 0
        assert score_answer(q, float("-inf")) == 0

    def test_numeric_outside_declared_range_is_zero(self):
        """currentMood is declared 0-10; anything outside contributes nothing"""
        q = DEFAULT_CATALOG.get("currentMood")
        assert score_answer(q, -5) == 0
        assert score_answer(q, 42) == 0
        assert score_answer(q, 10.5) == 0


class TestComputeRiskScore:

    def test_all_zero_answers_give_zero(self):
        responses = {
            "sleep1": "excellent",
            "mood1": "very_positive",
            "currentMood": 9,
            "stressSources": ["none"],
            "selfHarmThoughts": "no",
            "notes": "all good",
        }
        assert compute_risk_score(responses, DEFAULT_CATALOG) == 0

    def test_empty_responses_give_zero(self):
        assert compute_risk_score({}, DEFAULT_CATALOG) == 0

    def test_self_harm_yes_alone(self):
        assert compute_risk_score({"selfHarmThoughts": "yes"}, DEFAULT_CATALOG) == 5

    def test_huge_numeric_answer_still_scores(self):
        assert compute_risk_score({"currentMood": 10**400}, DEFAULT_CATALOG) == 0
        assert compute_risk_score({"currentMood": 10**400, "sleep1": "poor"}, DEFAULT_CATALOG) == 5

    def test_unknown_question_ids_ignored(self):
        responses = {"sleep1": "poor", "notAQuestion": "poor"}
        assert compute_risk_score(responses, DEFAULT_CATALOG) == 5

    def test_unanswered_required_question_is_skipped(self):
        # mood1 is required but missing; no error
        assert compute_risk_score({"sleep1": "fair"}, DEFAULT_CATALOG) == 3

    def test_sums_across_kinds(self):
        responses = {
            "sleep1": "poor",                                  # 5
            "currentMood": 5,                                  # 10
            "stressSources": ["work", "relationships"],        # 2 + 3
            "notes": "anything",                               # 0
        }
        assert compute_risk_score(responses, DEFAULT_CATALOG) == 20

    def test_worst_case_default_catalog_clamps(self):
        responses = {}
        for q in DEFAULT_CATALOG:
            if q.kind == "single-choice":
                responses[q.id] = max(q.choices, key=lambda c: c.score).value
            elif q.kind == "multi-choice":
                responses[q.id] = [c.value for c in q.choices]
            elif q.kind == "numeric":
                responses[q.id] = 0
        score = compute_risk_score(responses, DEFAULT_CATALOG)
        assert 70 < score <= 100

    def test_large_sums_clamp_to_100(self):
        heavy = QuestionCatalog([
            QuestionDefinition(
                id=f"q{i}", category="mood", prompt="?", kind="single-choice",
                choices=(Choice(value="bad", label="Bad", score=40),),
            )
            for i in range(10)
        ])
        responses = {f"q{i}": "bad" for i in range(10)}
        assert compute_risk_score(responses, heavy) == 100

    def test_synthetic_catalog_numeric_bands(self):
        catalog = QuestionCatalog([
            QuestionDefinition(
                id="pain", category="body", prompt="Pain 0-10?", kind="numeric",
                bands=(NumericBand(max_value=10, score=0),),
            ),
        ])
        assert compute_risk_score({"pain": 11}, catalog) == 0


class TestResponseSnapshot:

    def test_snapshot_fields(self):
        snap = build_response_snapshot({"sleep1": "poor", "ghost": "x"}, DEFAULT_CATALOG)
        assert list(snap) == ["sleep1"]
        assert snap["sleep1"] == {
            "questionText": "How has your sleep been over the past week?",
            "answerLabel": "Poor - Frequent sleep problems",
            "category": "sleep",
            "score": 5,
        }

    def test_multi_choice_labels_joined(self):
        snap = build_response_snapshot({"stressSources": ["work", "health"]}, DEFAULT_CATALOG)
        assert snap["stressSources"]["answerLabel"] == "Work or school, My own or a family member's health"
        assert snap["stressSources"]["score"] == 5

    def test_numeric_and_free_text_keep_raw_answer(self):
        snap = build_response_snapshot({"currentMood": 2, "notes": "tired"}, DEFAULT_CATALOG)
        assert snap["currentMood"]["answerLabel"] == 2
        assert snap["currentMood"]["score"] == 25
        assert snap["notes"]["answerLabel"] == "tired"
