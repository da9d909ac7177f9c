# backend/app/models/reminder.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean

from app.core.timezone import utc_now
from app.db.base import Base


class Reminder(Base):
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    reminder_time = Column(DateTime(timezone=True), nullable=False)
    type = Column(String(20), nullable=False)  # appointment | medication | meditation
    is_recurring = Column(Boolean, default=False, nullable=False)
    frequency = Column(String(20))  # daily | weekly | monthly
    is_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)
