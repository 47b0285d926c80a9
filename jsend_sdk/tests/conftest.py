"""
jsend_sdk test configuration.

All tests run against the mock transport by default, no network required.
Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Force mock providers for all tests ────────────────────────────────────
# These must be set before any jsend_sdk modules are imported.

os.environ.setdefault("JSEND_TRANSPORT", "mock")
os.environ.setdefault("JSEND_LOG_LEVEL", "DEBUG")
os.environ.setdefault("JSEND_LOG_FORMAT", "console")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_module_singletons():
    """
    Reset all cached singletons between tests.
    This ensures each test gets a fresh config, transport and client.
    """
    from jsend_sdk.tier0_core.config import _reset_config
    from jsend_sdk.tier1_runtime.context import clear_context
    from jsend_sdk.tier3_platform.client import _reset_client
    from jsend_sdk.tier3_platform.transport import _reset_transport

    yield

    _reset_config()
    _reset_transport()
    _reset_client()
    clear_context()


class RecordingLogger:
    """Stands in for the structlog logger and keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level: str):
        def log(event: str, **kw) -> None:
            self.records.append((level, event, kw))
        return log

    def __getattr__(self, level: str):
        if level in ("debug", "info", "warning", "error"):
            return self._record(level)
        raise AttributeError(level)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def mock_transport():
    """Return an empty MockTransport; queue outcomes on it per test."""
    from jsend_sdk.tier3_platform.transport import MockTransport
    return MockTransport()


@pytest.fixture
def make_client(mock_transport, recording_logger):
    """Build a JSendClient on the mock transport with the given config overrides."""
    from jsend_sdk.tier0_core.config import load_config
    from jsend_sdk.tier3_platform.client import JSendClient

    def _make(**overrides):
        return JSendClient(
            load_config(**overrides),
            transport=mock_transport,
            logger=recording_logger,
        )
    return _make
