from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jaldrishti.app import CONTAINER_KEY, create_app
from jaldrishti.shared.config import AppConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "address-test-secret-0123456789abcdef"
FAST_HASH_METHOD = "pbkdf2:sha256:1000"
LOGIN = {"email": "alice@example.com", "password": "wrong-password"}


def _config(tmp_path: Path, **security: object) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SECRET_KEY=TEST_SECRET,
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'addr.db'}"),
        security=SecurityConfig(
            PASSWORD_HASH_METHOD=FAST_HASH_METHOD,
            HASH_WORKERS=1,
            ENABLE_RATE_LIMIT=True,
            RL_LIMIT=2,
            **security,
        ),
    )


@pytest.fixture()
def make_app() -> Iterator:
    apps: list[Flask] = []

    def factory(config: AppConfig) -> Flask:
        app = create_app(config)
        apps.append(app)
        return app

    yield factory
    for app in apps:
        app.extensions[CONTAINER_KEY].close()


def _login_statuses(client: FlaskClient, attempts: int) -> list[int]:
    return [
        client.post(
            "/api/user/login", json=LOGIN, headers={"X-Forwarded-For": f"10.0.0.{i}"}
        ).status_code
        for i in range(attempts)
    ]


def test_rotating_forwarded_for_is_still_throttled(tmp_path: Path, make_app) -> None:
    app = make_app(_config(tmp_path))

    with app.test_client() as client:
        statuses = _login_statuses(client, 6)

    assert statuses[:2] == [401, 401]
    assert statuses[2:] == [429, 429, 429, 429]


def test_trusted_proxy_forwards_client_address(tmp_path: Path, make_app) -> None:
    app = make_app(_config(tmp_path, TRUSTED_PROXY_COUNT=1))

    with app.test_client() as client:
        statuses = _login_statuses(client, 4)

    # Each forwarded client gets its own bucket behind a trusted proxy.
    assert statuses == [401, 401, 401, 401]


def test_create_app_registers_no_exit_hook(
    tmp_path: Path, make_app, monkeypatch: pytest.MonkeyPatch
) -> None:
    registered: list[object] = []
    monkeypatch.setattr("atexit.register", registered.append)

    make_app(_config(tmp_path))

    assert registered == []


def test_container_close_is_idempotent(tmp_path: Path, make_app) -> None:
    container = make_app(_config(tmp_path)).extensions[CONTAINER_KEY]

    container.close()
    container.close()
