"""Base model for message API request payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HttpSmsRequest(BaseModel):
    """Base for request payload models.

    Payloads arrive with their wire field names (``from``, ``messageID``),
    which are declared as aliases and are the only accepted keys; unknown
    keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
