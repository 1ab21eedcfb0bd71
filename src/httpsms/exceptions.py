"""Custom exception hierarchy for httpsms."""

from __future__ import annotations


class HttpSmsError(Exception):
    """Base exception for all httpsms errors."""


class HttpSmsConfigError(HttpSmsError):
    """Invalid or missing configuration."""


class HttpSmsSettingsError(HttpSmsError):
    """A value rejected by the settings store."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class HttpSmsValidationError(HttpSmsError):
    """A request payload failed validation.

    ``errors`` maps each offending wire field name to its error messages,
    in the same shape the validators return.
    """

    def __init__(self, message: str, *, errors: dict[str, list[str]] | None = None) -> None:
        self.errors = errors or {}
        super().__init__(message)
