"""Data models for httpsms."""

from httpsms.models._base import HttpSmsRequest
from httpsms.models.events import MessageEventName
from httpsms.models.requests import (
    MessageEvent,
    MessageIndex,
    MessageOutstanding,
    MessageReceive,
    MessageSend,
)
from httpsms.models.sim import SimLine

__all__ = [
    "HttpSmsRequest",
    "MessageEvent",
    "MessageEventName",
    "MessageIndex",
    "MessageOutstanding",
    "MessageReceive",
    "MessageSend",
    "SimLine",
]
