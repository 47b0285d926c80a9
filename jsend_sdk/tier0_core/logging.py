"""
jsend_sdk.tier0_core.logging
─────────────────────────────
Structured logs with levels, automatic context injection (request_id,
trace_id), and redaction of sensitive keys.

Minimal stack: structlog (stdout JSON or console)
Configure via: JSEND_LOG_LEVEL, JSEND_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from jsend_sdk.tier0_core.config import JSendConfig, get_config


# ── Configuration ─────────────────────────────────────────────────────────────

def _configure_structlog(config: JSendConfig) -> None:
    log_level = getattr(logging, config.log_level, logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_processor,
    ]

    if config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(default=str)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    sdk_logger = logging.getLogger("jsend_sdk")
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(log_level)


# ── Redaction processor ───────────────────────────────────────────────────────

_REDACT_KEYS = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "auth", "credential", "private_key", "access_token",
    "refresh_token", "client_secret",
})

_REDACTED = "[REDACTED]"


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: _REDACTED if isinstance(k, str) and k.lower() in _REDACT_KEYS else _redact(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Strip sensitive fields from log records, including inside envelopes."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
        elif isinstance(event_dict[key], (dict, list)):
            event_dict[key] = _redact(event_dict[key])
    return event_dict


# ── Public API ────────────────────────────────────────────────────────────────

_configured = False


def get_logger(
    name: str | None = None, config: JSendConfig | None = None
) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Level and format come from *config* (default: get_config()) the first
    time any logger is requested; later calls reuse that setup.

    Usage:
        log = get_logger(__name__)
        log.debug("GET /users/1", envelope={"status": "success", "data": {...}})
    """
    global _configured
    if not _configured:
        _configure_structlog(config if config is not None else get_config())
        _configured = True
    return structlog.get_logger(name or "jsend_sdk")


__all__ = ["get_logger"]
