# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

import re

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from jaldrishti.shared.errors.validation import ValidationErrorType

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_PASSWORD_LENGTH = 8


class RegisterRequestDTO(BaseModel):
    """Registration body; extra profile fields are accepted and ignored."""

    email: str = Field(max_length=254, validation_alias=AliasChoices("email", "handle"))
    password: str = Field(max_length=128)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING.value,
                "Email cannot be empty",
                {},
            )

        if not _EMAIL_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.HANDLE_INVALID.value,
                "Email address is not valid",
                {},
            )

        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_BLANK.value,
                "Password cannot be blank",
                {},
            )

        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT.value,
                "Password must be at least {min_length} characters long",
                {"min_length": MIN_PASSWORD_LENGTH},
            )

        return value


class LoginRequestDTO(BaseModel):
    # No format or strength checks on login: a malformed handle must fail the
    # same way as an unknown one.
    email: str = Field(min_length=1, max_length=254, validation_alias=AliasChoices("email", "handle"))
    password: str = Field(min_length=1, max_length=128)


class AuthSuccessDTO(BaseModel):
    success: bool = True


class SessionDTO(BaseModel):
    success: bool = True
    user_identity: int
    email: str
