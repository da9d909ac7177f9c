from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel


class AppointmentIn(CamelModel):
    clinic_id: int | None = None
    doctor_name: str | None = Field(default=None, max_length=100)
    appointment_date: datetime
    duration: int = Field(default=45, gt=0, le=480)
    type: Literal["clinic", "video"]
    notes: str | None = None


class AppointmentStatusIn(CamelModel):
    status: Literal["scheduled", "completed", "cancelled"]


class AppointmentOut(CamelModel):
    id: int
    user_id: str
    clinic_id: int | None
    doctor_name: str | None
    appointment_date: datetime
    duration: int | None
    type: str
    status: str | None
    notes: str | None
    created_at: datetime | None


class ClinicOut(CamelModel):
    id: int
    name: str
    address: str
    latitude: str | None
    longitude: str | None
    distance: str | None
    rating: str | None
    is_open: bool | None
    services: list[str] | None
