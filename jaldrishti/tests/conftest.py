from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jaldrishti.app import CONTAINER_KEY, create_app
from jaldrishti.shared.config import AppConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-signing-secret-0123456789abcdef"
# Cheap derivation so tests that hash many secrets stay fast.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SECRET_KEY=TEST_SECRET,
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"),
        security=SecurityConfig(
            ENABLE_RATE_LIMIT=False,
            PASSWORD_HASH_METHOD=FAST_HASH_METHOD,
            HASH_WORKERS=2,
        ),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    yield flask_app
    flask_app.extensions[CONTAINER_KEY].close()


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
