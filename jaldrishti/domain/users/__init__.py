# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from .entities import SessionCheck, SessionClaims, SessionStatus, User, normalize_handle
from .exceptions import DuplicateHandleError, InvalidCredentialsError
from .repositories import (
    PasswordHasher,
    SessionTokenIssuer,
    SessionTokenVerifier,
    UserRepository,
)

__all__ = [
    "DuplicateHandleError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionCheck",
    "SessionClaims",
    "SessionStatus",
    "SessionTokenIssuer",
    "SessionTokenVerifier",
    "User",
    "UserRepository",
    "normalize_handle",
]
