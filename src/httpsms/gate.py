"""Admission gate for incoming SMS events.

Before an inbound event is processed, :class:`ReceiverGate` checks three
things, in order, stopping at the first failure:

1. the event carries a message ID;
2. a user is logged in;
3. at least one of the two SIM lines is active.

A failed check is an ordinary outcome, not an exception: the gate returns
``False`` and logs why (ERROR for a missing ID, WARNING otherwise).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from httpsms.models.sim import SimLine
from httpsms.settings import Settings

_logger = logging.getLogger(__name__)


@runtime_checkable
class SessionStateProvider(Protocol):
    """Reports whether a user session is authenticated."""

    def is_logged_in(self, context: Any) -> bool: ...


@runtime_checkable
class LineActivationRegistry(Protocol):
    """Reports whether a SIM line is active."""

    def get_active_status(self, context: Any, line: SimLine) -> bool: ...


class ReceiverGate:
    """Decides whether an inbound SMS event may be handled."""

    def __init__(
        self,
        session_provider: SessionStateProvider,
        line_registry: LineActivationRegistry,
    ) -> None:
        self._session_provider = session_provider
        self._line_registry = line_registry

    def is_valid(self, context: Any, message_id: str | None) -> bool:
        if message_id is None:
            _logger.error("cannot handle event because the message ID is null")
            return False

        if not self._session_provider.is_logged_in(context):
            _logger.warning("cannot handle message with id [%s] because the user is not logged in", message_id)
            return False

        if not (
            self._line_registry.get_active_status(context, SimLine.SIM1)
            or self._line_registry.get_active_status(context, SimLine.SIM2)
        ):
            _logger.warning("cannot handle message with id [%s] because the user is not active", message_id)
            return False

        return True


_settings = Settings()
_default_gate = ReceiverGate(_settings, _settings)


def is_valid(context: Any, message_id: str | None) -> bool:
    """Run the admission checks against the default settings store."""
    return _default_gate.is_valid(context, message_id)
