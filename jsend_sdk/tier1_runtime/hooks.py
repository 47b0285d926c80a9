"""
jsend_sdk.tier1_runtime.hooks
──────────────────────────────
Observer hooks around each call.

- request hook:  ``hook(request)`` runs right before the transport is called.
- response hook: ``hook(request, envelope)`` runs after classification,
  before the outcome is logged and the call settles.

Return values are ignored. ``response_hook="alert"`` selects ``alert_hook``,
which shows every outcome and waits for the user to acknowledge it.
"""
from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

from jsend_sdk.tier0_core.config import ALERT
from jsend_sdk.tier0_core.envelope import Envelope
from jsend_sdk.tier0_core.http import Request

RequestHook = Callable[[Request], Any]
ResponseHook = Callable[[Request, Envelope], Any]


def render(request: Request, envelope: Envelope) -> str:
    return "\n".join([
        request.line,
        json.dumps(envelope.as_dict(), indent=2, default=str),
    ])


def alert_hook(request: Request, envelope: Envelope) -> None:
    """Write the outcome to stderr and block until the user presses Enter."""
    sys.stderr.write(render(request, envelope) + "\n")
    sys.stderr.flush()
    input("Press Enter to continue...")


def resolve_response_hook(hook: ResponseHook | str | None) -> ResponseHook | None:
    if hook == ALERT:
        return alert_hook
    if isinstance(hook, str):
        raise ValueError(f"Unknown response hook {hook!r}. Use a callable or {ALERT!r}.")
    return hook


__all__ = ["RequestHook", "ResponseHook", "render", "alert_hook", "resolve_response_hook"]
