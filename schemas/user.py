"""Account registration and login payloads."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, StrictInt, field_validator

MIN_PASSWORD_LENGTH = 6
MIN_AGE = 13
MAX_AGE = 120


class RegisterRequest(BaseModel):
    email: EmailStr = Field(..., description="Unique, case-insensitive")
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    age: StrictInt = Field(..., ge=MIN_AGE, le=MAX_AGE)
    bio: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("bio")
    @classmethod
    def _blank_bio_is_none(cls, value):
        if value is None:
            return None
        return value.strip() or None


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()
