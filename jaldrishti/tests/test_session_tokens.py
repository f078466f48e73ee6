from __future__ import annotations

import hashlib

import pytest
from itsdangerous import URLSafeSerializer

from jaldrishti.application.services.session_tokens import SESSION_SALT, SignedSessionTokens
from jaldrishti.domain.users.entities import SessionStatus

SECRET = "token-test-secret"
NOW = 1_700_000_000.0


def _tokens(now: float = NOW, ttl: int = 3600, secret: str = SECRET) -> SignedSessionTokens:
    return SignedSessionTokens(secret, ttl_seconds=ttl, clock=lambda: now)


def test_issue_then_verify() -> None:
    tokens = _tokens()
    token = tokens.issue(42)

    check = tokens.verify(token)

    assert check.ok
    assert check.user_id == 42
    assert check.claims is not None
    assert check.claims.issued_at == int(NOW)
    assert check.claims.expires_at == int(NOW) + 3600


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_unauthenticated(token: str | None) -> None:
    assert _tokens().verify(token).status is SessionStatus.UNAUTHENTICATED


def test_tampering_any_character_invalidates() -> None:
    tokens = _tokens()
    token = tokens.issue(7)

    for index, char in enumerate(token):
        replacement = "A" if char != "A" else "B"
        tampered = token[:index] + replacement + token[index + 1 :]
        assert tokens.verify(tampered).status is SessionStatus.INVALID_TOKEN, index


def test_truncated_and_garbage_tokens_are_invalid() -> None:
    tokens = _tokens()
    token = tokens.issue(7)

    assert tokens.verify(token[:-1]).status is SessionStatus.INVALID_TOKEN
    assert tokens.verify(token + "x").status is SessionStatus.INVALID_TOKEN
    assert tokens.verify("garbage").status is SessionStatus.INVALID_TOKEN
    assert tokens.verify("a.b.c").status is SessionStatus.INVALID_TOKEN


def test_token_signed_with_other_secret_is_invalid() -> None:
    forged = _tokens(secret="someone-else").issue(1)

    assert _tokens().verify(forged).status is SessionStatus.INVALID_TOKEN


def test_expired_token_with_valid_signature() -> None:
    token = _tokens(now=NOW, ttl=60).issue(1)

    assert _tokens(now=NOW + 59, ttl=60).verify(token).ok
    assert _tokens(now=NOW + 60, ttl=60).verify(token).status is SessionStatus.TOKEN_EXPIRED
    assert _tokens(now=NOW + 86400, ttl=60).verify(token).status is SessionStatus.TOKEN_EXPIRED


def test_expiry_comes_from_token_not_verifier_ttl() -> None:
    token = _tokens(now=NOW, ttl=60).issue(1)

    assert _tokens(now=NOW + 120, ttl=86400).verify(token).status is SessionStatus.TOKEN_EXPIRED


@pytest.mark.parametrize(
    "payload",
    [
        {"uid": 1},
        {"uid": "1", "iat": 0, "exp": 10},
        {"uid": True, "iat": 0, "exp": 10},
        {"uid": 1, "iat": 10, "exp": 5},
        [1, 2, 3],
    ],
)
def test_correctly_signed_but_malformed_claims(payload: object) -> None:
    serializer = URLSafeSerializer(
        SECRET, salt=SESSION_SALT, signer_kwargs={"digest_method": hashlib.sha256}
    )
    token = serializer.dumps(payload)

    assert _tokens(now=1).verify(token).status is SessionStatus.INVALID_TOKEN


def test_rejects_bad_construction() -> None:
    with pytest.raises(ValueError):
        SignedSessionTokens("", ttl_seconds=60)
    with pytest.raises(ValueError):
        SignedSessionTokens(SECRET, ttl_seconds=0)
