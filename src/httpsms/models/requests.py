"""Pydantic request models for the message API.

The field constraints here are the full set of rules; see
:class:`httpsms.validators.MessageHandlerValidator` for turning a failed
validation into per-field error messages.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from httpsms._constants import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    LIMIT_MAX,
    LIMIT_MIN,
    PHONE_NUMBER_PATTERN,
    QUERY_MAX_LENGTH,
)
from httpsms.models._base import HttpSmsRequest
from httpsms.models.events import MessageEventName
from httpsms.models.sim import SimLine


class MessageReceive(HttpSmsRequest):
    """An SMS received on the device, to be forwarded."""

    from_: str = Field(alias="from", pattern=PHONE_NUMBER_PATTERN)
    to: str = Field(pattern=PHONE_NUMBER_PATTERN)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    sim: SimLine | None = None


class MessageSend(HttpSmsRequest):
    """An SMS queued for sending from the device."""

    from_: str = Field(alias="from", pattern=PHONE_NUMBER_PATTERN)
    to: str = Field(pattern=PHONE_NUMBER_PATTERN)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    sim: SimLine | None = None


class MessageOutstanding(HttpSmsRequest):
    limit: int = Field(ge=LIMIT_MIN, le=LIMIT_MAX)


class MessageIndex(HttpSmsRequest):
    """Query for listing the messages exchanged with one contact."""

    limit: int = Field(ge=LIMIT_MIN, le=LIMIT_MAX)
    skip: int = Field(ge=0)
    from_: str = Field(alias="from", min_length=1)
    to: str = Field(pattern=PHONE_NUMBER_PATTERN)
    query: str | None = Field(default=None, max_length=QUERY_MAX_LENGTH)


class MessageEvent(HttpSmsRequest):
    """A lifecycle event (sent, failed, delivered) for a known message."""

    event_name: MessageEventName
    message_id: UUID = Field(alias="messageID")
