from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class MeditationSessionOut(CamelModel):
    id: int
    title: str
    description: str | None
    duration: int
    category: str
    audio_url: str | None
    image_url: str | None
    is_featured: bool


class MeditationLogIn(CamelModel):
    duration: int = Field(..., gt=0, le=600)


class ProgressOut(CamelModel):
    streak: int = 0
    total_sessions: int = 0
    total_minutes: int = 0
    last_meditation_date: datetime | None = None
