"""Message lifecycle event names."""

from __future__ import annotations

from enum import StrEnum


class MessageEventName(StrEnum):
    SENT = "SENT"
    FAILED = "FAILED"
    DELIVERED = "DELIVERED"
