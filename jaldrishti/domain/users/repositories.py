# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

from __future__ import annotations

from typing import Protocol

from .entities import SessionCheck, User


class UserRepository(Protocol):
    def find_by_handle(self, handle: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...
    def count_by_handle(self, handle: str) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenIssuer(Protocol):
    def issue(self, user_id: int) -> str: ...


class SessionTokenVerifier(Protocol):
    def verify(self, token: str | None) -> SessionCheck: ...
