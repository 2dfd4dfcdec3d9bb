"""JSON and random-string helpers."""

from __future__ import annotations

import json
import secrets
import string
from typing import Any

_LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits


def to_json_no_escape(obj: Any) -> str:
    """Encode *obj* as compact JSON without HTML escaping, ending in a newline."""
    text = json.dumps(obj, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    text = text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    return text + "\n"


def rand_string(n: int) -> str:
    """Return a random string of *n* ASCII letters and digits."""
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    return "".join(secrets.choice(_LETTERS) for _ in range(n))