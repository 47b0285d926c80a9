"""
jsend_sdk.tier0_core.envelope
──────────────────────────────
The JSend envelope: a three-state result (success / fail / error) that every
request resolves to. Envelopes are open records. Keys the server sends
beyond ``status``/``data``/``message``/``code`` are carried through untouched.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Status(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


_STATUS_VALUES = frozenset(s.value for s in Status)


class Envelope(BaseModel):
    """
    Canonical result of a request.

    - success: ``data`` (may be None)
    - fail:    ``message``
    - error:   ``message`` and ``code``

    ``message`` and ``code`` are left untyped so a server envelope that
    is passed through keeps whatever the server put there.
    """

    model_config = ConfigDict(extra="allow", frozen=True, use_enum_values=True)

    status: Status
    data: Any = None
    message: Any = None
    code: Any = None

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS

    def as_dict(self) -> dict[str, Any]:
        """Return only the keys that were supplied, extras included."""
        return self.model_dump(exclude_unset=True)


# ── Conformance ───────────────────────────────────────────────────────────────

def is_valid_status(value: Any) -> bool:
    return isinstance(value, str) and value in _STATUS_VALUES


def is_envelope(value: Any) -> bool:
    """
    True if *value* is a mapping with a valid JSend ``status``.
    None, lists and primitives never qualify.
    """
    return isinstance(value, Mapping) and is_valid_status(value.get("status"))


def parse_envelope(value: Any) -> Envelope | None:
    """Return *value* as an Envelope if it conforms, otherwise None."""
    if not is_envelope(value):
        return None
    return Envelope.model_validate(dict(value))


def success(data: Any = None, **extra: Any) -> Envelope:
    return Envelope(status=Status.SUCCESS, data=data, **extra)


def fail(message: str, **extra: Any) -> Envelope:
    return Envelope(status=Status.FAIL, message=message, **extra)


def error(message: str, code: int, **extra: Any) -> Envelope:
    return Envelope(status=Status.ERROR, message=message, code=code, **extra)


__all__ = [
    "Status",
    "Envelope",
    "is_valid_status",
    "is_envelope",
    "parse_envelope",
    "success",
    "fail",
    "error",
]
