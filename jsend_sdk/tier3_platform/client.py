"""
jsend_sdk.tier3_platform.client
────────────────────────────────
JSend client. Sends a request through the transport, classifies the outcome
into an Envelope, runs the hooks, logs, and settles:

- ``success``          → returns the envelope
- ``fail`` / ``error`` → raises FailResponse / ErrorResponse carrying it

Every call settles exactly once, including when the server is unreachable.
Nothing is retried.

Usage::

    users = jsend("/users/{0}", user_id)
    envelope = await users.get({"expand": "posts"})

    try:
        await jsend("/users").post({"email": "bad"})
    except FailResponse as exc:
        print(exc.envelope.message)
"""
from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from jsend_sdk.tier0_core.config import JSendConfig, get_config
from jsend_sdk.tier0_core.envelope import Envelope, Status
from jsend_sdk.tier0_core.errors import EnvelopeRejected
from jsend_sdk.tier0_core.http import Request, TransportFailure
from jsend_sdk.tier0_core.logging import get_logger
from jsend_sdk.tier1_runtime.classify import classify_failure, classify_success
from jsend_sdk.tier1_runtime.hooks import resolve_response_hook
from jsend_sdk.tier1_runtime.urls import make_url
from jsend_sdk.tier3_platform.transport import Transport, get_transport


class JSendClient:
    """
    Orchestrates single requests. Configuration is read at construction and
    never changed afterwards, so one client may serve concurrent calls.

    structlog output is configured once per process: ``log_level`` and
    ``log_format`` of the first config that builds a logger win.
    """

    def __init__(
        self,
        config: JSendConfig | None = None,
        *,
        transport: Transport | None = None,
        logger: Any = None,
    ) -> None:
        self._config = config if config is not None else get_config()
        self._transport = transport if transport is not None else get_transport()
        self._log = logger if logger is not None else get_logger(
            "jsend_sdk.client", self._config
        )
        self._request_hook = self._config.request_hook
        self._response_hook = resolve_response_hook(self._config.response_hook)

    @property
    def config(self) -> JSendConfig:
        return self._config

    def __call__(self, template: str, *args: Any) -> BoundRequest:
        """Bind a URL built from *template* and positional *args*."""
        return BoundRequest(self, make_url(self._config.base_url, template, *args))

    async def execute(self, request: Request) -> Envelope:
        """Run *request* to completion. Raises EnvelopeRejected unless it succeeds."""
        if self._request_hook is not None:
            self._request_hook(request)

        try:
            raw = await self._transport.send(request)
        except TransportFailure as exc:
            envelope = classify_failure(exc.response)
        else:
            envelope = classify_success(raw)

        if self._response_hook is not None:
            self._response_hook(request, envelope)

        self._log_outcome(request, envelope)

        if envelope.status == Status.SUCCESS:
            return envelope
        raise EnvelopeRejected.for_envelope(envelope, detail=request.line)

    def submit(self, request: Request) -> asyncio.Task[Envelope]:
        """Schedule *request* on the running loop. The task may be awaited by many."""
        return asyncio.ensure_future(self.execute(request))

    def _log_outcome(self, request: Request, envelope: Envelope) -> None:
        if envelope.status == Status.SUCCESS:
            log = self._log.debug
        elif envelope.status == Status.FAIL:
            log = self._log.warning
        else:
            log = self._log.error
        log(
            request.line,
            method=request.method,
            url=request.url,
            status=envelope.status,
            envelope=envelope.as_dict(),
        )


class BoundRequest:
    """One URL, one coroutine per HTTP verb."""

    def __init__(self, client: JSendClient, url: str) -> None:
        self.client = client
        self.url = url

    def __repr__(self) -> str:
        return f"BoundRequest({self.url!r})"

    async def get(self, params: Mapping[str, Any] | None = None) -> Envelope:
        return await self.client.execute(Request("GET", self.url, params=params))

    async def put(self, body: Any = None) -> Envelope:
        return await self.client.execute(Request("PUT", self.url, body=body))

    async def post(self, body: Any = None) -> Envelope:
        return await self.client.execute(Request("POST", self.url, body=body))

    async def patch(self, body: Any = None) -> Envelope:
        return await self.client.execute(Request("PATCH", self.url, body=body))

    async def delete(self) -> Envelope:
        return await self.client.execute(Request("DELETE", self.url))


# ── Default client ────────────────────────────────────────────────────────────

_client: JSendClient | None = None


def get_client() -> JSendClient:
    global _client
    if _client is None:
        _client = JSendClient()
    return _client


def _reset_client() -> None:
    global _client
    _client = None


def jsend(template: str, *args: Any) -> BoundRequest:
    """Bind a URL on the default client: ``await jsend("/users/{0}", 7).get()``."""
    return get_client()(template, *args)


__all__ = ["JSendClient", "BoundRequest", "Request", "get_client", "jsend"]
