"""
jsend_sdk.tier0_core.errors
────────────────────────────
Error taxonomy. Two kinds of error leave this package:

- ConfigurationError: raised synchronously while configuring, never
  while a request is in flight.
- EnvelopeRejected: how a request settles when its envelope is not
  ``success``. The rejected envelope is on ``.envelope``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jsend_sdk.tier0_core.envelope import Envelope


# ── Base error ────────────────────────────────────────────────────────────────

class JSendError(Exception):
    """
    Base class for all jsend_sdk errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context, never shown to users
    """

    code: str = "jsend_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


class ConfigurationError(JSendError):
    """Misconfiguration detected at startup."""
    code = "configuration_error"


# ── Rejections ────────────────────────────────────────────────────────────────

class EnvelopeRejected(JSendError):
    """A request settled with a ``fail`` or ``error`` envelope."""
    code = "rejected"

    def __init__(self, envelope: Envelope, detail: str | None = None) -> None:
        self.envelope = envelope
        message = envelope.message if isinstance(envelope.message, str) else ""
        super().__init__(
            user_message=message or "The request was rejected.",
            detail=detail,
        )

    @property
    def status(self) -> str:
        return self.envelope.status

    def to_dict(self) -> dict:
        return self.envelope.as_dict()

    @classmethod
    def for_envelope(cls, envelope: Envelope, detail: str | None = None) -> EnvelopeRejected:
        """Return the rejection subclass matching the envelope's status."""
        from jsend_sdk.tier0_core.envelope import Status

        if envelope.status == Status.FAIL:
            return FailResponse(envelope, detail)
        if envelope.status == Status.ERROR:
            return ErrorResponse(envelope, detail)
        raise ValueError(f"Cannot reject a {envelope.status!r} envelope")


class FailResponse(EnvelopeRejected):
    """The server declared an application-level failure (``status: fail``)."""
    code = "fail"


class ErrorResponse(EnvelopeRejected):
    """The server, or the transport, reported an error (``status: error``)."""
    code = "error"

    @property
    def status_code(self) -> Any:
        return self.envelope.code


__all__ = [
    "JSendError",
    "ConfigurationError",
    "EnvelopeRejected",
    "FailResponse",
    "ErrorResponse",
]
