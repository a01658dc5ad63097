from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from devblog.domain.users.entities import SessionPayload
from devblog.shared.errors.validation_types import ValidationErrorType

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_MIN_LENGTH = 8


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if value and not EMAIL_PATTERN.match(value):
        raise PydanticCustomError(
            ValidationErrorType.EMAIL_INVALID,
            "Invalid email address",
            {"pattern": EMAIL_PATTERN.pattern},
        )
    return value


class LoginRequestDTO(BaseModel):
    email: str = Field("", max_length=320)
    password: str = Field("", max_length=128)  # No strength check on login

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @model_validator(mode="after")
    def require_credentials(self) -> LoginRequestDTO:
        if not self.email or not self.password:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Email and password are required",
                {},
            )
        return self


class RegisterRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(max_length=128)
    name: str | None = Field(None, max_length=200)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = _normalize_email(value)
        if not value:
            raise PydanticCustomError(ValidationErrorType.MISSING, "Email is required", {})
        return value

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least 8 characters long",
                {"min_length": PASSWORD_MIN_LENGTH},
            )

        if not re.search(r"[A-Z]", value):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_NO_UPPERCASE,
                "Password must contain at least one uppercase letter",
                {},
            )

        if not re.search(r"[a-z]", value):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_NO_LOWERCASE,
                "Password must contain at least one lowercase letter",
                {},
            )

        if not re.search(r"\d", value):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_NO_DIGIT,
                "Password must contain at least one digit",
                {},
            )

        return value


class SessionUserDTO(BaseModel):
    id: str
    email: str
    name: str | None = None

    @classmethod
    def from_session(cls, session: SessionPayload) -> SessionUserDTO:
        return cls(id=session.user_id, email=session.email, name=session.name)


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    user: SessionUserDTO | None = None


class CurrentSessionDTO(BaseModel):
    authenticated: bool
    user: SessionUserDTO | None = None
