from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from app.schemas.base import CamelModel


class ReminderIn(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    reminder_time: datetime
    type: Literal["appointment", "medication", "meditation"]
    is_recurring: bool = False
    frequency: Literal["daily", "weekly", "monthly"] | None = None

    @model_validator(mode="after")
    def _frequency_needs_recurring(self):
        if self.is_recurring and self.frequency is None:
            raise ValueError("recurring reminders need a frequency")
        if not self.is_recurring:
            self.frequency = None
        return self


class ReminderOut(CamelModel):
    id: int
    user_id: str
    title: str
    description: str | None
    reminder_time: datetime
    type: str
    is_recurring: bool
    frequency: str | None
    is_completed: bool
    created_at: datetime | None
