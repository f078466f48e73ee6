from __future__ import annotations

import secrets
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from jaldrishti.application.services.password_hashing import (
    HashingUnavailableError,
    WerkzeugPasswordHasher,
)

FAST_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_METHOD)


def test_hash_then_verify_random_secrets(hasher: WerkzeugPasswordHasher) -> None:
    for _ in range(1000):
        secret = secrets.token_urlsafe(12)
        other = secrets.token_urlsafe(12)
        hashed = hasher.hash(secret)

        assert hasher.verify(secret, hashed) is True
        assert hasher.verify(other, hashed) is False


def test_hash_is_salted_and_never_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("Pass1234")
    second = hasher.hash("Pass1234")

    assert first != second
    assert first and first != "Pass1234"
    assert "Pass1234" not in first


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("Pass1234")

    assert hashed.startswith("scrypt:")
    assert WerkzeugPasswordHasher().verify("Pass1234", hashed) is True


@pytest.mark.parametrize(
    "stored",
    ["", "not-a-hash", "md5$salt$abc", "pbkdf2:sha256:notanint$salt$abc", "$$"],
)
def test_verify_returns_false_for_malformed_hash(
    hasher: WerkzeugPasswordHasher, stored: str
) -> None:
    assert hasher.verify("Pass1234", stored) is False


def test_verify_rejects_empty_secret(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("Pass1234")

    assert hasher.verify("", hashed) is False


def test_hash_rejects_empty_secret(hasher: WerkzeugPasswordHasher) -> None:
    with pytest.raises(ValueError):
        hasher.hash("")


def test_hashing_runs_on_executor() -> None:
    with ThreadPoolExecutor(max_workers=1) as executor:
        pooled = WerkzeugPasswordHasher(method=FAST_METHOD, executor=executor, timeout=5)
        hashed = pooled.hash("Pass1234")

        assert pooled.verify("Pass1234", hashed) is True
        assert pooled.verify("Pass12345", hashed) is False


class _StalledExecutor:
    def submit(self, fn, *args, **kwargs) -> Future:
        return Future()


def test_stalled_pool_surfaces_unavailable() -> None:
    pooled = WerkzeugPasswordHasher(
        method=FAST_METHOD, executor=_StalledExecutor(), timeout=0.01  # type: ignore[arg-type]
    )

    with pytest.raises(HashingUnavailableError) as exc_info:
        pooled.hash("Pass1234")

    assert exc_info.value.status == 503
