# backend/app/models/__init__.py
# Import every model so Base.metadata knows all tables before create_all()
from app.models.user import User
from app.models.assessment import QuestionnaireResult
from app.models.chat import ChatLog
from app.models.appointment import Clinic, Appointment
from app.models.reminder import Reminder
from app.models.meditation import MeditationSession, UserProgress

__all__ = [
    "User",
    "QuestionnaireResult",
    "ChatLog",
    "Clinic",
    "Appointment",
    "Reminder",
    "MeditationSession",
    "UserProgress",
]
