# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Jal-Drishti Contributors

import sys
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    populate_by_name=True,
)

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///jaldrishti.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(10.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    connect_timeout: int = Field(5, ge=1, alias="DATABASE_CONNECT_TIMEOUT")

    model_config = _SETTINGS

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class SecurityConfig(BaseSettings):
    # Session cookie
    cookie_name: str = Field("token", alias="COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Strict", alias="COOKIE_SAMESITE")
    session_ttl: int = Field(60 * 60 * 24, ge=60, alias="SESSION_TTL")

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        ["http://localhost:3000", "http://localhost:5173"], alias="ALLOWED_ORIGINS"
    )

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, gt=0, alias="RL_WINDOW")

    # Reverse proxies whose X-Forwarded-* headers are trusted (0 = none)
    trusted_proxy_count: int = Field(0, ge=0, alias="TRUSTED_PROXY_COUNT")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    # Password hashing
    password_hash_method: str = Field("scrypt", alias="PASSWORD_HASH_METHOD")
    hash_workers: int = Field(4, ge=1, alias="HASH_WORKERS")
    hash_timeout: float = Field(30.0, gt=0, alias="HASH_TIMEOUT")

    model_config = _SETTINGS

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("cookie_samesite")
    @classmethod
    def _normalise_samesite(cls, value: str) -> str:
        normalised = value.strip().capitalize()
        if normalised not in ("Strict", "Lax", "None"):
            raise ValueError("COOKIE_SAMESITE must be one of Strict, Lax, None")
        return normalised

    @model_validator(mode="after")
    def _samesite_none_requires_secure(self) -> "SecurityConfig":
        # Browsers drop SameSite=None cookies that are not Secure.
        if self.cookie_samesite == "None" and not self.cookie_secure:
            raise ValueError("COOKIE_SAMESITE=None requires COOKIE_SECURE=true")
        return self


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field(
        "dev", validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET")
    )
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")
    port: int = Field(5000, ge=1, le=65535, alias="PORT")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = _SETTINGS

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in _INSECURE_SECRETS or len(self.secret_key) < 32:
            raise ValueError(
                "SECRET_KEY must be a strong random value (32+ characters) in production"
            )

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("Cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\nPRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


def load_config() -> AppConfig:
    """Read configuration from the process environment and ``.env``."""
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
