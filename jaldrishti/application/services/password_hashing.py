"""Password hashing strategies."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor
from concurrent.futures import TimeoutError as FutureTimeoutError
from http import HTTPStatus
from typing import TypeVar

from werkzeug.security import check_password_hash, generate_password_hash

from jaldrishti.domain.users.repositories import PasswordHasher
from jaldrishti.shared.errors import InfrastructureError
from jaldrishti.shared.logging import logger

T = TypeVar("T")


class HashingUnavailableError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            code="hashing_unavailable",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message="Service temporarily unavailable, please retry",
        )


def _check(password: str, hashed: str) -> bool:
    try:
        return bool(check_password_hash(hashed, password))
    except (ValueError, TypeError):
        # Unknown method or malformed parameters in the stored hash.
        return False


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted, deliberately slow hashing via werkzeug (scrypt by default).

    When an executor is supplied, derivations run on it so the number of
    concurrent hash computations is bounded by the pool size rather than by
    the number of request threads.
    """

    def __init__(
        self,
        *,
        method: str = "scrypt",
        executor: Executor | None = None,
        timeout: float | None = None,
    ) -> None:
        self._method = method
        self._executor = executor
        self._timeout = timeout

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("password must not be empty")
        return str(self._run(generate_password_hash, password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        if not password or not hashed or not isinstance(hashed, str):
            return False
        return bool(self._run(_check, password, hashed))

    def _run(self, fn: Callable[..., T], *args, **kwargs) -> T:
        if self._executor is None:
            return fn(*args, **kwargs)
        future = self._executor.submit(fn, *args, **kwargs)
        try:
            return future.result(timeout=self._timeout)
        except FutureTimeoutError as exc:
            future.cancel()
            logger.error(f"password_hashing: derivation exceeded {self._timeout}s")
            raise HashingUnavailableError() from exc


__all__ = ["HashingUnavailableError", "WerkzeugPasswordHasher"]
