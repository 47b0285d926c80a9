"""
jsend_sdk.tier1_runtime.context
────────────────────────────────
Request context: correlation IDs carried into log lines and forwarded to
the server as headers.

Uses Python contextvars for async-safe, framework-agnostic storage.
Automatically propagated into logs via structlog contextvars.
"""
from __future__ import annotations

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field

import structlog


# ── Domain model ─────────────────────────────────────────────────────────────

@dataclass
class RequestContext:
    """Correlation metadata for the calls made in the current scope."""
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    trace_id: str | None = None

    def headers(self) -> dict[str, str]:
        headers = {"x-request-id": self.request_id}
        if self.trace_id:
            headers["x-trace-id"] = self.trace_id
        return headers


# ── ContextVar storage ────────────────────────────────────────────────────────

_ctx: ContextVar[RequestContext | None] = ContextVar(
    "jsend_request_context",
    default=None,
)


# ── Public API ────────────────────────────────────────────────────────────────

def get_context() -> RequestContext | None:
    """Return the current request context, if one was set."""
    return _ctx.get()


def set_context(ctx: RequestContext) -> None:
    """Set the request context for the current async scope."""
    _ctx.set(ctx)
    # Sync with structlog contextvars so all log calls get these fields
    structlog.contextvars.bind_contextvars(
        request_id=ctx.request_id,
        trace_id=ctx.trace_id,
    )


def new_context(trace_id: str | None = None) -> RequestContext:
    """Create and activate a new request context. Returns the new context."""
    ctx = RequestContext(trace_id=trace_id)
    set_context(ctx)
    return ctx


def clear_context() -> None:
    _ctx.set(None)
    structlog.contextvars.unbind_contextvars("request_id", "trace_id")


__all__ = ["RequestContext", "get_context", "set_context", "new_context", "clear_context"]
