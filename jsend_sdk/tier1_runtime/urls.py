"""
jsend_sdk.tier1_runtime.urls
─────────────────────────────
URL construction from a path template and positional arguments.

Usage:
    make_url("https://api.example.com", "/users/{0}/posts/{1}", 7, 42)
    # → "https://api.example.com/users/7/posts/42"
"""
from __future__ import annotations

import re
from typing import Any

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def is_absolute(url: str) -> bool:
    """True if *url* starts with a scheme (``http://``, ``https://``, ...)."""
    return bool(_SCHEME.match(url))


def format_path(template: str, *args: Any) -> str:
    """Substitute ``{0}``, ``{1}``, ... in *template* with *args*."""
    try:
        return template.format(*args)
    except (IndexError, KeyError) as exc:
        raise ValueError(
            f"URL template {template!r} needs more arguments than the {len(args)} given"
        ) from exc


def make_url(base: str, template: str, *args: Any) -> str:
    """
    Build a request URL. The base is prepended unless the formatted path is
    already absolute.
    """
    path = format_path(template, *args)
    if is_absolute(path):
        return path
    return base + path


__all__ = ["is_absolute", "format_path", "make_url"]
