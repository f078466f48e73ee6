# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

"""Stateless signed session tokens.

A token is an itsdangerous URL-safe serialization of ``{"uid", "iat", "exp"}``
signed with HMAC-SHA256 over the server secret. Nothing is stored server-side,
so a token stays valid until ``exp`` even after the client drops the cookie.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Callable
from typing import Any

from itsdangerous import BadData, URLSafeSerializer

from jaldrishti.domain.users.entities import SessionCheck, SessionClaims, SessionStatus
from jaldrishti.domain.users.repositories import SessionTokenIssuer, SessionTokenVerifier

SESSION_SALT = "jaldrishti.session.v1"


def _claims_from_payload(payload: Any) -> SessionClaims | None:
    if not isinstance(payload, dict):
        return None
    values = (payload.get("uid"), payload.get("iat"), payload.get("exp"))
    # bool is an int subclass and never a valid claim
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return None
    user_id, issued_at, expires_at = values
    if expires_at < issued_at:
        return None
    return SessionClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)


class SignedSessionTokens(SessionTokenIssuer, SessionTokenVerifier):
    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._serializer = URLSafeSerializer(
            secret_key,
            salt=SESSION_SALT,
            signer_kwargs={"digest_method": hashlib.sha256},
        )
        self._ttl = int(ttl_seconds)
        self._clock = clock

    def issue(self, user_id: int) -> str:
        now = int(self._clock())
        payload = {"uid": int(user_id), "iat": now, "exp": now + self._ttl}
        return str(self._serializer.dumps(payload))

    def verify(self, token: str | None) -> SessionCheck:
        if not token:
            return SessionCheck.rejected(SessionStatus.UNAUTHENTICATED)

        try:
            payload = self._serializer.loads(token)
        except BadData:
            return SessionCheck.rejected(SessionStatus.INVALID_TOKEN)

        claims = _claims_from_payload(payload)
        if claims is None:
            return SessionCheck.rejected(SessionStatus.INVALID_TOKEN)

        # base64 padding bits let several strings decode to the same signature;
        # only the exact encoding this issuer produces is accepted.
        canonical = str(self._serializer.dumps(payload))
        if not hmac.compare_digest(canonical.encode("utf-8"), token.encode("utf-8")):
            return SessionCheck.rejected(SessionStatus.INVALID_TOKEN)

        if claims.expires_at <= self._clock():
            return SessionCheck.rejected(SessionStatus.TOKEN_EXPIRED)

        return SessionCheck.accepted(claims)


__all__ = ["SESSION_SALT", "SignedSessionTokens"]
