"""
jsend_sdk.tier0_core.http
──────────────────────────
HTTP primitives shared by the classifier and every transport: status code
constants, the description of an outbound call, the raw response a
transport hands back, and the failure a transport raises when an exchange
did not end in a 2xx.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


# ── Status code constants ──────────────────────────────────────────────────

class HTTP:
    """Standard HTTP status codes."""

    # "no status" as reported by browser-style transports on network failure
    UNREACHABLE = 0

    # 2xx
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204

    # 4xx
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429

    # 5xx
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504


# ── Request description ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Request:
    """One outbound call. Built fresh for every call, never modified."""
    method: str
    url: str
    params: Mapping[str, Any] | None = None
    body: Any = None

    @property
    def line(self) -> str:
        return f"{self.method} {self.url}"


# ── Transport outcomes ────────────────────────────────────────────────────

@dataclass(frozen=True)
class RawResponse:
    """A completed exchange as reported by the transport."""
    status_code: int | None
    status_text: str = ""
    body: Any = None

    @property
    def reached_server(self) -> bool:
        return bool(self.status_code)

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class TransportFailure(Exception):
    """
    Raised by a transport when the exchange did not succeed.

    ``response`` is the raw response for an HTTP-level error and ``None``
    when the server could not be reached at all.
    """

    def __init__(self, response: RawResponse | None = None, reason: str | None = None) -> None:
        self.response = response
        if reason is None:
            if response is not None and response.reached_server:
                reason = f"HTTP {response.status_code} {response.status_text}".rstrip()
            else:
                reason = "server unreachable"
        self.reason = reason
        super().__init__(reason)


__all__ = ["HTTP", "Request", "RawResponse", "TransportFailure"]
