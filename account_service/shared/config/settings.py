# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_KEYS = ("dev", "development", "test", "secret", "changeme", "")
_SESSION_STORE_SCHEMES = ("redis://", "rediss://", "unix://", "memory://")


class AppConfig(BaseSettings):
    # Token signing
    token_signing_key: str = Field(alias="API_TOKENS_SIGNING_KEY", min_length=1)
    token_ttl_seconds: int = Field(alias="API_TOKENS_EXPIRATION_TIME", gt=0)

    # Stores
    database_url: str = Field(alias="DATABASE_URL", min_length=1)
    redis_url: str = Field(alias="REDIS_URL", min_length=1)
    store_timeout_seconds: float = Field(5.0, alias="STORE_TIMEOUT_SECONDS", gt=0)

    # Listener
    host: str = Field(alias="HOST", min_length=1)
    port: int = Field(alias="PORT", ge=1, le=65535)

    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    # Account creation sits behind AuthMiddleware unless this is switched off.
    registration_requires_auth: bool = Field(True, alias="REGISTRATION_REQUIRES_AUTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        validate_by_name=True,
    )

    @field_validator("token_ttl_seconds", "port", mode="before")
    @classmethod
    def _parse_strict_int(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("must be an integer")
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise ValueError("must be a positive integer")
            return int(value)
        return value

    @field_validator("redis_url")
    @classmethod
    def _check_session_store_scheme(cls, value: str) -> str:
        if not value.startswith(_SESSION_STORE_SCHEMES):
            raise ValueError(f"unsupported session store url, expected one of {_SESSION_STORE_SCHEMES}")
        return value

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("debug_logging", "registration_requires_auth", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.token_signing_key.lower() in _INSECURE_KEYS or len(self.token_signing_key) < 32:
            raise ValueError(
                "API_TOKENS_SIGNING_KEY must be a strong random value of at least 32 characters in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "load_config"]
