"""Helpers for safe debug logging.

State values can hold secrets (tokens, passwords).  This module redacts
sensitive fields before state or change payloads reach a log record.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "secret",
        "token",
        "accesstoken",
        "refreshtoken",
        "apikey",
        "authorization",
        "cookie",
    }
)


def redact_for_log(
    value: Any,
    *,
    extra_keys: Collection[str] = (),
    max_string: int = 512,
    _depth: int = 0,
) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Keys are matched case-insensitively against the built-in sensitive names
    and *extra_keys*.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        sensitive = _SENSITIVE_VALUE_KEYS | {key.lower() for key in extra_keys}
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in sensitive:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, extra_keys=extra_keys, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, extra_keys=extra_keys, max_string=max_string, _depth=_depth + 1) for v in value]

    # Callables and other objects are represented without dumping internals.
    return repr(value)
