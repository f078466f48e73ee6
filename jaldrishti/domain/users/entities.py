# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


def normalize_handle(handle: str) -> str:
    return handle.strip().lower()


@dataclass(slots=True, frozen=True)
class User:

    id: int
    handle: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Claims carried inside a signed session token (unix seconds)."""

    user_id: int
    issued_at: int
    expires_at: int


class SessionStatus(str, Enum):
    OK = "ok"
    UNAUTHENTICATED = "unauthenticated"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"


@dataclass(slots=True, frozen=True)
class SessionCheck:
    status: SessionStatus
    claims: SessionClaims | None = None

    @property
    def ok(self) -> bool:
        return self.status is SessionStatus.OK

    @property
    def user_id(self) -> int | None:
        return self.claims.user_id if self.claims else None

    @classmethod
    def rejected(cls, status: SessionStatus) -> SessionCheck:
        return cls(status=status)

    @classmethod
    def accepted(cls, claims: SessionClaims) -> SessionCheck:
        return cls(status=SessionStatus.OK, claims=claims)
