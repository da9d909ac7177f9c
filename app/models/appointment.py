# backend/app/models/appointment.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean, JSON

from app.core.timezone import utc_now
from app.db.base import Base


class Clinic(Base):
    __tablename__ = "clinics"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=False)
    latitude = Column(String(30))
    longitude = Column(String(30))
    distance = Column(String(30))
    rating = Column(String(10))
    is_open = Column(Boolean, default=True)
    services = Column(JSON)
    created_at = Column(DateTime(timezone=True), default=utc_now)


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    clinic_id = Column(Integer, ForeignKey("clinics.id"), nullable=True)
    doctor_name = Column(String(100))
    appointment_date = Column(DateTime(timezone=True), nullable=False)
    duration = Column(Integer, default=45)  # minutes
    type = Column(String(20), nullable=False)  # clinic | video
    status = Column(String(20), default="scheduled")  # scheduled | completed | cancelled
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utc_now)
