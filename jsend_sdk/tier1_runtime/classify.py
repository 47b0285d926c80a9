"""
jsend_sdk.tier1_runtime.classify
─────────────────────────────────
Envelope classifier. Turns whatever the transport produced into exactly one
Envelope. Pure functions: no I/O, no logging, no mutation of their input.

A conforming envelope in the body always wins. The HTTP status only fills
in ``code``/``message`` on an ``error`` envelope that lacks them, and is
used on its own only when the body does not conform.
"""
from __future__ import annotations

from typing import Any

from jsend_sdk.tier0_core.envelope import Envelope, Status, parse_envelope
from jsend_sdk.tier0_core.http import HTTP, RawResponse

UNREACHABLE_CODE = HTTP.UNREACHABLE
UNREACHABLE_MESSAGE = "Cannot reach the server."


def _is_number(value: Any) -> bool:
    # bool is an int subclass but a JSON true is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_success(response: RawResponse) -> Envelope:
    """Classify a response the transport reported as 2xx."""
    envelope = parse_envelope(response.body)
    if envelope is not None:
        return envelope
    data = None if response.status_code == HTTP.NO_CONTENT else response.body
    return Envelope(status=Status.SUCCESS, data=data)


def classify_failure(response: RawResponse | None) -> Envelope:
    """
    Classify an HTTP-level error, or a transport that never reached the
    server (``response`` is None, or carries no status code).

    A ``success`` or ``fail`` body riding on an HTTP error is returned as is.
    """
    body = response.body if response is not None else None
    envelope = parse_envelope(body)

    if envelope is not None:
        if envelope.status != Status.ERROR:
            return envelope
        if response is not None and response.reached_server:
            code, text = response.status_code, response.status_text
        else:
            code = UNREACHABLE_CODE
            text = (response.status_text if response is not None else "") or UNREACHABLE_MESSAGE
        backfill: dict[str, Any] = {}
        if not _is_number(envelope.code):
            backfill["code"] = code
        if not isinstance(envelope.message, str):
            backfill["message"] = text
        if not backfill:
            return envelope
        return Envelope.model_validate({**envelope.as_dict(), **backfill})

    if response is not None and response.reached_server:
        return Envelope(
            status=Status.ERROR,
            code=response.status_code,
            message=response.status_text,
        )
    return Envelope(
        status=Status.ERROR,
        code=UNREACHABLE_CODE,
        message=UNREACHABLE_MESSAGE,
    )


__all__ = [
    "UNREACHABLE_CODE",
    "UNREACHABLE_MESSAGE",
    "classify_success",
    "classify_failure",
]
