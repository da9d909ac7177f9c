"""
Tests for assessment persistence and the submit unit of work
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from app.models import QuestionnaireResult
from app.services.assessment_service import serialize_result, submit_assessment
from app.services.assessment_store import AssessmentStore
from app.services.errors import ReferentialError, StorageError, ValidationError

T0 = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)


def _result(user_id, score=10, created_at=None):
    return QuestionnaireResult(
        user_id=user_id,
        responses={},
        risk_score=score,
        category="general",
        recommendations=["Continue healthy habits"],
        created_at=created_at,
    )


class TestAssessmentStore:

    def test_save_assigns_id_and_timestamp(self, db_session, user):
        saved = AssessmentStore(db_session).save(_result(user.id))
        assert saved.id is not None
        assert saved.created_at is not None

    def test_latest_is_most_recent(self, db_session, user):
        store = AssessmentStore(db_session)
        store.save(_result(user.id, score=10, created_at=T0))
        second = store.save(_result(user.id, score=20, created_at=T0 + timedelta(minutes=5)))
        latest = store.latest_for(user.id)
        assert latest.id == second.id
        assert latest.risk_score == 20

    def test_latest_ignores_insert_order_when_timestamps_differ(self, db_session, user):
        store = AssessmentStore(db_session)
        newer = store.save(_result(user.id, score=30, created_at=T0 + timedelta(days=1)))
        store.save(_result(user.id, score=40, created_at=T0))
        assert store.latest_for(user.id).id == newer.id

    def test_same_timestamp_last_inserted_wins(self, db_session, user):
        store = AssessmentStore(db_session)
        store.save(_result(user.id, score=1, created_at=T0))
        last = store.save(_result(user.id, score=2, created_at=T0))
        assert store.latest_for(user.id).id == last.id

    def test_no_history_returns_none(self, db_session, user):
        assert AssessmentStore(db_session).latest_for(user.id) is None
        assert AssessmentStore(db_session).history_for(user.id) == []

    def test_each_save_appends(self, db_session, user):
        store = AssessmentStore(db_session)
        for i in range(3):
            store.save(_result(user.id, score=i, created_at=T0 + timedelta(hours=i)))
        history = store.history_for(user.id)
        assert [r.risk_score for r in history] == [2, 1, 0]
        assert len(store.history_for(user.id, limit=2)) == 2

    def test_history_is_per_user(self, db_session, user):
        from app.models import User
        other = User(email="other@example.com")
        db_session.add(other)
        db_session.commit()
        store = AssessmentStore(db_session)
        store.save(_result(other.id, created_at=T0))
        assert store.latest_for(user.id) is None

    def test_unknown_user_is_referential_error(self, db_session):
        with pytest.raises(ReferentialError):
            AssessmentStore(db_session).save(_result("no-such-user"))

    def test_saved_result_cannot_be_saved_again(self, db_session, user):
        store = AssessmentStore(db_session)
        saved = store.save(_result(user.id))
        with pytest.raises(StorageError):
            store.save(saved)

    def test_storage_failure_surfaces_and_leaves_nothing(self, db_session, user, monkeypatch):
        def broken_commit():
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        store = AssessmentStore(db_session)
        monkeypatch.setattr(db_session, "commit", broken_commit)
        with pytest.raises(StorageError):
            store.save(_result(user.id))
        monkeypatch.undo()
        assert db_session.query(QuestionnaireResult).count() == 0


class TestSubmitAssessment:

    def test_scores_recommends_and_persists(self, db_session, user):
        result = submit_assessment(db_session, user.id, {"selfHarmThoughts": "yes"}, "general")
        assert result.risk_score == 5
        assert result.recommendations == [
            "Continue healthy habits", "Regular check-ins", "Maintain wellness routine",
        ]
        assert result.responses["selfHarmThoughts"]["answerLabel"] == "Yes"
        assert AssessmentStore(db_session).latest_for(user.id).id == result.id

    def test_high_risk_submission(self, db_session, user):
        responses = {
            "sleep1": "poor", "mood1": "mostly_low", "currentMood": 2, "stress1": "constantly",
            "stressSources": ["work", "finances", "relationships", "health", "caregiving"],
            "energy1": "very_low", "social1": "isolated", "anxiety1": "constantly",
            "coping1": "overwhelmed", "hope1": "hopeless",
        }
        result = submit_assessment(db_session, user.id, responses, "general")
        assert result.risk_score == 5 + 5 + 25 + 5 + 12 + 5 + 5 + 5 + 5 + 5
        assert result.recommendations[0] == "Schedule video consultation"

    @pytest.mark.parametrize("responses,category", [
        (None, "general"),
        ({}, "general"),
        ({"sleep1": "poor"}, None),
        ({"sleep1": "poor"}, "   "),
        (["sleep1"], "general"),
    ])
    def test_invalid_input(self, db_session, user, responses, category):
        with pytest.raises(ValidationError):
            submit_assessment(db_session, user.id, responses, category)
        assert db_session.query(QuestionnaireResult).count() == 0

    def test_unknown_user(self, db_session):
        with pytest.raises(ReferentialError):
            submit_assessment(db_session, "ghost", {"sleep1": "poor"}, "general")

    def test_serialize(self, db_session, user):
        result = submit_assessment(db_session, user.id, {"sleep1": "good"}, "general")
        out = serialize_result(result)
        assert out["riskScore"] == 1
        assert out["tier"] == "low"
        assert out["wellnessScore"] == 9.9
        assert out["userId"] == user.id
        assert out["createdAt"].endswith("+00:00")
