from pydantic import Field

from app.schemas.base import CamelModel


class JoinIn(CamelModel):
    email: str = Field(..., min_length=3, max_length=255)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class UserUpdateIn(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)


class UserOut(CamelModel):
    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    phone_number: str | None
    location: str | None
