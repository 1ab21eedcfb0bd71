"""Preference-backed settings store.

:class:`Settings` keeps no state of its own: every read and write goes
through the ``preferences`` mapping of the :class:`AppContext` it is
handed. It is the default session-state provider and line-activation
registry for :class:`httpsms.gate.ReceiverGate`.
"""

from __future__ import annotations

import logging
import re

from httpsms._constants import KEY_ACTIVE_STATUS_PREFIX, KEY_API_KEY, KEY_OWNER_PREFIX, PHONE_NUMBER_PATTERN
from httpsms._redact import redact_for_log
from httpsms.context import AppContext
from httpsms.exceptions import HttpSmsSettingsError
from httpsms.models.sim import SimLine

_logger = logging.getLogger(__name__)

_PHONE_RE = re.compile(PHONE_NUMBER_PATTERN)


def _active_key(line: SimLine) -> str:
    return KEY_ACTIVE_STATUS_PREFIX + SimLine(line)


def _owner_key(line: SimLine) -> str:
    return KEY_OWNER_PREFIX + SimLine(line)


class Settings:
    """Read/write access to login state and per-line settings."""

    def get_api_key(self, context: AppContext) -> str | None:
        value = context.preferences.get(KEY_API_KEY)
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    def set_api_key(self, context: AppContext, api_key: str | None) -> None:
        """Store *api_key*; ``None`` or a blank key logs the user out."""
        if api_key is not None and not isinstance(api_key, str):
            raise HttpSmsSettingsError(f"api key must be a string, got {type(api_key).__name__}", key=KEY_API_KEY)
        if api_key is None or not api_key.strip():
            context.preferences.pop(KEY_API_KEY, None)
            _logger.debug("Cleared API key")
            return
        context.preferences[KEY_API_KEY] = api_key.strip()
        _logger.debug("Stored API key %s", redact_for_log({KEY_API_KEY: api_key}))

    def is_logged_in(self, context: AppContext) -> bool:
        return self.get_api_key(context) is not None

    def get_active_status(self, context: AppContext, line: SimLine) -> bool:
        return context.preferences.get(_active_key(line)) is True

    def set_active_status(self, context: AppContext, line: SimLine, active: bool) -> None:
        key = _active_key(line)
        context.preferences[key] = bool(active)
        _logger.debug("Set %s=%s", key, bool(active))

    def get_owner(self, context: AppContext, line: SimLine) -> str | None:
        value = context.preferences.get(_owner_key(line))
        return value if isinstance(value, str) else None

    def set_owner(self, context: AppContext, line: SimLine, phone_number: str | None) -> None:
        """Store the E.164 owner number of *line*; ``None`` clears it."""
        key = _owner_key(line)
        if phone_number is None:
            context.preferences.pop(key, None)
            _logger.debug("Cleared %s", key)
            return
        if not isinstance(phone_number, str):
            raise HttpSmsSettingsError(f"owner must be a string, got {type(phone_number).__name__}", key=key)
        number = phone_number.strip()
        if not _PHONE_RE.fullmatch(number):
            raise HttpSmsSettingsError(f"owner must be an E.164 phone number, got {phone_number!r}", key=key)
        context.preferences[key] = number
        _logger.debug("Set owner %s", redact_for_log({key: number}))

    def clear(self, context: AppContext) -> None:
        """Remove every preference this store manages."""
        managed = [KEY_API_KEY]
        for line in SimLine:
            managed.extend((_active_key(line), _owner_key(line)))
        for key in managed:
            context.preferences.pop(key, None)
        _logger.debug("Cleared %d settings keys", len(managed))
