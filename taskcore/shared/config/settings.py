# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class _EnvSection(BaseSettings):
    """Config section that reads its own aliases from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_by_name=True,
        extra="ignore",
    )


class AuthConfig(_EnvSection):
    session_ttl_hours: float = Field(24.0, gt=0, alias="SESSION_TTL_HOURS")
    min_password_length: int = Field(6, ge=1, alias="MIN_PASSWORD_LENGTH")
    min_username_length: int = Field(3, ge=1, alias="MIN_USERNAME_LENGTH")

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.session_ttl_hours)


class StorageConfig(_EnvSection):
    backend: Literal["memory", "file", "remote"] = Field("memory", alias="STORAGE_BACKEND")
    directory: Path = Field(Path("instance/storage"), alias="STORAGE_DIR")
    todos_key: str = Field("todos", alias="STORAGE_TODOS_KEY")
    users_key: str = Field("users", alias="STORAGE_USERS_KEY")


class HttpConfig(_EnvSection):
    base_url: str = Field("http://localhost:3000", alias="API_BASE_URL")
    timeout: float = Field(15.0, ge=0.1, alias="API_TIMEOUT")
    todos_endpoint: str = Field("/todos", alias="API_TODOS_ENDPOINT")
    users_endpoint: str = Field("/users", alias="API_USERS_ENDPOINT")

    @field_validator("todos_endpoint", "users_endpoint", mode="after")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        value = value.rstrip("/")
        return value if value.startswith("/") else f"/{value}"


class ResilienceConfig(_EnvSection):
    enabled: bool = Field(False, alias="RESILIENCE_ENABLED")
    max_retries: int = Field(3, ge=0, alias="RESILIENCE_RETRIES")
    backoff_base: float = Field(0.5, ge=0.0, alias="RESILIENCE_BACKOFF_BASE")
    backoff_cap: float = Field(8.0, ge=0.0, alias="RESILIENCE_BACKOFF_CAP")
    circuit_fail_threshold: int = Field(5, ge=1, alias="RESILIENCE_CIRCUIT_THRESHOLD")
    circuit_reset_timeout: float = Field(60.0, ge=0.0, alias="RESILIENCE_CIRCUIT_RESET")

    @field_validator("enabled", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _storage_config_factory() -> StorageConfig:
    return StorageConfig()  # type: ignore[call-arg]


def _http_config_factory() -> HttpConfig:
    return HttpConfig()  # type: ignore[call-arg]


def _resilience_config_factory() -> ResilienceConfig:
    return ResilienceConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    storage: StorageConfig = Field(default_factory=_storage_config_factory)
    http: HttpConfig = Field(default_factory=_http_config_factory)
    resilience: ResilienceConfig = Field(default_factory=_resilience_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "AuthConfig",
    "HttpConfig",
    "ResilienceConfig",
    "StorageConfig",
    "load_config",
]
