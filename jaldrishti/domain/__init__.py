# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from .users import (
    DuplicateHandleError,
    InvalidCredentialsError,
    SessionCheck,
    SessionStatus,
    User,
)

__all__ = [
    "DuplicateHandleError",
    "InvalidCredentialsError",
    "SessionCheck",
    "SessionStatus",
    "User",
]
