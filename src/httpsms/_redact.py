"""Helpers for safe debug logging.

API keys and message bodies are replaced outright; phone numbers keep
their country prefix and last two digits so log lines stay correlatable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from httpsms._constants import KEY_API_KEY, KEY_OWNER_PREFIX

_REDACTED = "<redacted>"

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        KEY_API_KEY.lower(),
        "api_key",
        "apikey",
        "x-api-key",
        "authorization",
        "content",
    }
)
_PHONE_KEYS: frozenset[str] = frozenset({"from", "to", "owner", "contact"})


def mask_phone_number(number: str) -> str:
    """Mask the middle digits of *number*, e.g. ``+1800*******99``."""
    if len(number) <= 6:
        return "*" * len(number)
    return number[:5] + "*" * (len(number) - 7) + number[-2:]


def _is_phone_key(key: str) -> bool:
    return key.lower() in _PHONE_KEYS or key.startswith(KEY_OWNER_PREFIX)


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SECRET_KEYS:
                redacted[key] = _REDACTED
            elif _is_phone_key(key) and isinstance(v, str):
                redacted[key] = mask_phone_number(v)
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
