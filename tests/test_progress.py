"""
Tests for meditation streak tracking
"""

from datetime import date, datetime, timedelta, timezone

from app.services.progress import next_streak, record_meditation

DAY = date(2026, 10, 18)


class TestNextStreak:

    def test_first_session(self):
        assert next_streak(0, None, DAY) == 1

    def test_same_day_keeps_streak(self):
        assert next_streak(4, DAY, DAY) == 4

    def test_consecutive_day_extends(self):
        assert next_streak(4, DAY - timedelta(days=1), DAY) == 5

    def test_gap_resets(self):
        assert next_streak(9, DAY - timedelta(days=2), DAY) == 1


class TestRecordMeditation:

    def test_accumulates(self, db_session, user):
        t = datetime(2026, 10, 16, 8, 0, tzinfo=timezone.utc)
        p = record_meditation(db_session, user.id, 10, now=t)
        assert (p.streak, p.total_sessions, p.total_minutes) == (1, 1, 10)

        p = record_meditation(db_session, user.id, 5, now=t + timedelta(hours=3))
        assert (p.streak, p.total_sessions, p.total_minutes) == (1, 2, 15)

        p = record_meditation(db_session, user.id, 20, now=t + timedelta(days=1))
        assert (p.streak, p.total_sessions, p.total_minutes) == (2, 3, 35)

        p = record_meditation(db_session, user.id, 5, now=t + timedelta(days=4))
        assert (p.streak, p.total_sessions, p.total_minutes) == (1, 4, 40)
