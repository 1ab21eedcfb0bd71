"""Validation of message API request payloads.

Each ``validate_*`` method returns a mapping of wire field name to error
messages, empty when the payload is valid. Bad input never raises; use
:func:`raise_for_errors` where an exception is wanted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from httpsms._constants import phone_number_message
from httpsms._redact import redact_for_log
from httpsms.exceptions import HttpSmsValidationError
from httpsms.models._base import HttpSmsRequest
from httpsms.models.requests import (
    MessageEvent,
    MessageIndex,
    MessageOutstanding,
    MessageReceive,
    MessageSend,
)

_logger = logging.getLogger(__name__)

ValidationErrors = dict[str, list[str]]


def _collect_errors(exc: ValidationError, phone_fields: frozenset[str]) -> ValidationErrors:
    errors: ValidationErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        if field in phone_fields and error.get("type") == "string_pattern_mismatch":
            message = phone_number_message(field)
        else:
            message = str(error.get("msg", "invalid value"))
        errors.setdefault(field, []).append(message)
    return errors


def raise_for_errors(errors: ValidationErrors, message: str = "request validation failed") -> None:
    """Raise :class:`HttpSmsValidationError` when *errors* is non-empty."""
    if errors:
        fields = ", ".join(sorted(errors))
        raise HttpSmsValidationError(f"{message}: {fields}", errors=errors)


class MessageHandlerValidator:
    """Validates the payloads handled by the message endpoints."""

    def _validate(
        self,
        model: type[HttpSmsRequest],
        payload: Mapping[str, Any],
        phone_fields: frozenset[str] = frozenset(),
    ) -> ValidationErrors:
        try:
            model.model_validate(dict(payload) if isinstance(payload, Mapping) else payload)
        except ValidationError as exc:
            errors = _collect_errors(exc, phone_fields)
            _logger.debug(
                "%s rejected payload=%s errors=%s",
                model.__name__,
                redact_for_log(payload),
                errors,
            )
            return errors
        return {}

    def validate_message_receive(self, payload: Mapping[str, Any]) -> ValidationErrors:
        return self._validate(MessageReceive, payload, frozenset({"from", "to"}))

    def validate_message_send(self, payload: Mapping[str, Any]) -> ValidationErrors:
        return self._validate(MessageSend, payload, frozenset({"from", "to"}))

    def validate_message_outstanding(self, payload: Mapping[str, Any]) -> ValidationErrors:
        return self._validate(MessageOutstanding, payload)

    def validate_message_index(self, payload: Mapping[str, Any]) -> ValidationErrors:
        return self._validate(MessageIndex, payload, frozenset({"to"}))

    def validate_message_event(self, payload: Mapping[str, Any]) -> ValidationErrors:
        return self._validate(MessageEvent, payload)
