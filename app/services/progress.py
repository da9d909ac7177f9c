# backend/app/services/progress.py
import logging
from datetime import date, datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.core.timezone import local_date, utc_now
from app.models.meditation import UserProgress

logger = logging.getLogger(__name__)


def next_streak(current: int, last_day: Optional[date], today: date) -> int:
    """Same day keeps the streak, the following day extends it, any gap resets it."""
    if last_day is None:
        return 1
    if last_day == today:
        return max(current, 1)
    if last_day == today - timedelta(days=1):
        return current + 1
    return 1


def record_meditation(
    db: Session,
    user_id: str,
    duration: int,
    now: Optional[datetime] = None,
) -> UserProgress:
    now = now or utc_now()
    progress = db.query(UserProgress).filter(UserProgress.user_id == user_id).first()

    if progress is None:
        progress = UserProgress(
            user_id=user_id,
            streak=1,
            total_sessions=1,
            total_minutes=duration,
            last_meditation_date=now,
        )
    else:
        progress.streak = next_streak(
            progress.streak or 0,
            local_date(progress.last_meditation_date),
            local_date(now),
        )
        progress.total_sessions = (progress.total_sessions or 0) + 1
        progress.total_minutes = (progress.total_minutes or 0) + duration
        progress.last_meditation_date = now
        progress.updated_at = now

    db.add(progress)
    db.commit()
    db.refresh(progress)
    logger.info(f"🧘 Meditation logged: user={user_id}, streak={progress.streak}, minutes={duration}")
    return progress
