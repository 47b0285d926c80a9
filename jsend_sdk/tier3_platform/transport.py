"""
jsend_sdk.tier3_platform.transport
───────────────────────────────────
The transport collaborator: sends one Request and reports what happened.

- 2xx            → returns a RawResponse
- any other code → raises TransportFailure(response)
- no response    → raises TransportFailure(None)

Backed by: httpx (async HTTP). A mock transport is provided for tests and
local development.

Configure via: JSEND_TRANSPORT=httpx|mock, JSEND_TIMEOUT
"""
from __future__ import annotations

from collections import deque
from typing import Any, Protocol

import httpx

from jsend_sdk.tier0_core.errors import ConfigurationError
from jsend_sdk.tier0_core.http import HTTP, RawResponse, Request, TransportFailure
from jsend_sdk.tier1_runtime.context import get_context

_BODY_METHODS = frozenset({"PUT", "POST", "PATCH"})


class Transport(Protocol):
    async def send(self, request: Request) -> RawResponse: ...


# ── httpx transport ───────────────────────────────────────────────────────────

class HttpxTransport:
    """
    Async HTTP transport over httpx.

    Usage::

        transport = HttpxTransport(timeout=10.0)
        raw = await transport.send(Request("GET", "https://api.example.com/users"))
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        ctx = get_context()
        if ctx:
            headers.update(ctx.headers())
        return headers

    async def send(self, request: Request) -> RawResponse:
        kwargs: dict[str, Any] = {"headers": self._build_headers()}
        if request.params is not None:
            kwargs["params"] = dict(request.params)
        if request.method.upper() in _BODY_METHODS and request.body is not None:
            kwargs["json"] = request.body

        try:
            response = await self._client.request(request.method, request.url, **kwargs)
        except httpx.RequestError as exc:
            raise TransportFailure(None, reason=f"{type(exc).__name__}: {exc}") from exc

        raw = RawResponse(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            body=_decode_body(response),
        )
        if not response.is_success:
            raise TransportFailure(raw)
        return raw

    async def aclose(self) -> None:
        await self._client.aclose()


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code == HTTP.NO_CONTENT or not response.content:
        return None
    text = response.text
    # JSON-looking bodies are decoded whatever the declared content type
    if "json" in response.headers.get("content-type", "") or text.lstrip().startswith(("{", "[")):
        try:
            return response.json()
        except ValueError:
            return text
    return text


# ── Mock transport ────────────────────────────────────────────────────────────

class MockTransport:
    """
    Replays queued outcomes in order and records every request sent.

    Queue a RawResponse for a completed exchange or None for an unreachable
    server. With nothing queued, every call answers 200 with a null body.
    """

    def __init__(self, *outcomes: RawResponse | None) -> None:
        self._outcomes: deque[RawResponse | None] = deque(outcomes)
        self.requests: list[Request] = []

    def queue(self, outcome: RawResponse | None) -> None:
        self._outcomes.append(outcome)

    async def send(self, request: Request) -> RawResponse:
        self.requests.append(request)
        outcome = self._outcomes.popleft() if self._outcomes else RawResponse(HTTP.OK, "OK")
        if outcome is None or not outcome.is_success:
            raise TransportFailure(outcome)
        return outcome


# ── Provider registry ─────────────────────────────────────────────────────────

_transport: Transport | None = None


def _build_transport() -> Transport:
    from jsend_sdk.tier0_core.config import get_config

    config = get_config()
    if config.transport == "httpx":
        return HttpxTransport(timeout=config.timeout)
    if config.transport == "mock":
        return MockTransport()
    raise ConfigurationError(
        user_message=f"Unknown JSEND_TRANSPORT={config.transport!r}. Valid: httpx, mock"
    )


def get_transport() -> Transport:
    global _transport
    if _transport is None:
        _transport = _build_transport()
    return _transport


def _reset_transport() -> None:
    global _transport
    _transport = None


__all__ = ["Transport", "HttpxTransport", "MockTransport", "get_transport"]
