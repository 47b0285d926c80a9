"""
jsend_sdk.tier0_core.config
────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables → explicit overrides. All fields are typed via Pydantic and the
model is frozen: configuration is built once, before the first request,
and only read afterwards.

Invalid values raise ConfigurationError when the config is built, not when
a request is made.

Configure via: JSEND_BASE_URL, JSEND_RESPONSE_HOOK=alert, JSEND_TRANSPORT,
               JSEND_TIMEOUT, JSEND_LOG_LEVEL, JSEND_LOG_FORMAT
"""
from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal, Union

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsend_sdk.tier0_core.errors import ConfigurationError

ALERT = "alert"

Hook = Callable[..., Any]


class JSendConfig(BaseSettings):
    """
    Process-wide client configuration. Fields may be passed by name or set
    through their JSEND_* environment variable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        env_prefix="JSEND_",
    )

    # ── Addressing ────────────────────────────────────────────────────────────
    base_url: str = Field(default="", strict=True)

    # ── Hooks ─────────────────────────────────────────────────────────────────
    request_hook: Union[Hook, None] = Field(default=None, exclude=True)
    response_hook: Union[Hook, Literal["alert"], None] = Field(default=None, exclude=True)

    # ── Transport ─────────────────────────────────────────────────────────────
    transport: Literal["httpx", "mock"] = Field(default="httpx")
    timeout: float = Field(default=30.0, gt=0)

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")

    @field_validator("request_hook", mode="before")
    @classmethod
    def validate_request_hook(cls, v: Any) -> Any:
        if v is not None and not callable(v):
            raise ValueError("request_hook must be callable")
        return v

    @field_validator("response_hook", mode="before")
    @classmethod
    def validate_response_hook(cls, v: Any) -> Any:
        if isinstance(v, str):
            if v.lower() != ALERT:
                raise ValueError(f"response_hook must be callable or {ALERT!r}, got {v!r}")
            return ALERT
        if v is not None and not callable(v):
            raise ValueError("response_hook must be callable")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}, got {v!r}")
        return v.upper()


def load_config(**overrides: Any) -> JSendConfig:
    """
    Build a JSendConfig, failing fast on bad values.

    Usage:
        config = load_config(base_url="https://api.example.com", response_hook="alert")
    """
    try:
        return JSendConfig(**overrides)
    except PydanticValidationError as exc:
        fields = {
            ".".join(str(loc) for loc in err["loc"]): err["msg"]
            for err in exc.errors()
        }
        raise ConfigurationError(
            user_message="Invalid jsend configuration.",
            detail=f"Invalid jsend configuration: {fields}",
            fields=fields,
        ) from exc


@lru_cache(maxsize=1)
def get_config() -> JSendConfig:
    """
    Return the singleton config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return load_config()


def _reset_config() -> None:
    """For tests: clear the config cache."""
    get_config.cache_clear()


__all__ = ["ALERT", "JSendConfig", "load_config", "get_config"]
