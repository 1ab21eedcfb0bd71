"""Client configuration for httpsms."""

from __future__ import annotations

import dataclasses
import os
import re
from typing import Any

from httpsms._constants import BASE_URL, PHONE_NUMBER_PATTERN
from httpsms.exceptions import HttpSmsConfigError

_PHONE_RE = re.compile(PHONE_NUMBER_PATTERN)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class HttpSmsConfig:
    """Client configuration.

    Parameters
    ----------
    api_key : str or None
        API key of the logged-in user. ``None`` means nobody is logged in.
    base_url : str
        API base URL.
    sim1_active : bool
        Initial activation flag for the first SIM line.
    sim2_active : bool
        Initial activation flag for the second SIM line.
    sim1_owner : str or None
        E.164 phone number owning the first SIM line.
    sim2_owner : str or None
        E.164 phone number owning the second SIM line.
    """

    api_key: str | None = None
    base_url: str = BASE_URL
    sim1_active: bool = False
    sim2_active: bool = False
    sim1_owner: str | None = None
    sim2_owner: str | None = None

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise HttpSmsConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        for field_name in ("sim1_owner", "sim2_owner"):
            value = getattr(self, field_name)
            if value is not None and not _PHONE_RE.fullmatch(value):
                raise HttpSmsConfigError(f"{field_name} must be an E.164 phone number, got {value!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> HttpSmsConfig:
        """Create configuration from environment variables.

        Reads the optional ``HTTPSMS_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        HttpSmsConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "HTTPSMS_API_KEY": "api_key",
            "HTTPSMS_BASE_URL": "base_url",
            "HTTPSMS_SIM1_OWNER": "sim1_owner",
            "HTTPSMS_SIM2_OWNER": "sim2_owner",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "sim1_active" not in overrides:
            config_kwargs["sim1_active"] = _env_bool(env.get("HTTPSMS_SIM1_ACTIVE"), False)
        if "sim2_active" not in overrides:
            config_kwargs["sim2_active"] = _env_bool(env.get("HTTPSMS_SIM2_ACTIVE"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
