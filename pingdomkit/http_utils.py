"""Helpers for reading HTTP response headers."""

from __future__ import annotations

from typing import Iterable


def retrieve_cookie(set_cookie_headers: Iterable[str] | None, name: str) -> str:
    """Return the value of cookie *name* from a response's Set-Cookie headers."""
    if set_cookie_headers is None:
        raise LookupError("there is no cookie in the response")
    prefix = name + "="
    for cookie in set_cookie_headers:
        if cookie.startswith(prefix):
            pair = cookie.split(";", 1)[0]
            return pair.split("=")[1]
    raise LookupError(f"cookie '{name}' does not exist in the response")