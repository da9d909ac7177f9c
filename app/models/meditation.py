# backend/app/models/meditation.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean

from app.core.timezone import utc_now
from app.db.base import Base


class MeditationSession(Base):
    __tablename__ = "meditation_sessions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    duration = Column(Integer, nullable=False)  # minutes
    category = Column(String(20), nullable=False)  # sleep | anxiety | focus | self-love
    audio_url = Column(String(500))
    image_url = Column(String(500))
    is_featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    streak = Column(Integer, default=0, nullable=False)
    total_sessions = Column(Integer, default=0, nullable=False)
    total_minutes = Column(Integer, default=0, nullable=False)
    last_meditation_date = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
