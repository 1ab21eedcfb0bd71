"""Application context handed to the admission gate and settings store."""

from __future__ import annotations

import dataclasses
from typing import Any

from httpsms._constants import KEY_ACTIVE_STATUS_PREFIX, KEY_API_KEY, KEY_OWNER_PREFIX
from httpsms.config import HttpSmsConfig
from httpsms.models.sim import SimLine


@dataclasses.dataclass
class AppContext:
    """Opaque handle carrying the app's key/value preferences.

    Only :class:`httpsms.settings.Settings` should read or write
    ``preferences`` directly.
    """

    config: HttpSmsConfig = dataclasses.field(default_factory=HttpSmsConfig)
    preferences: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_config(cls, config: HttpSmsConfig) -> AppContext:
        """Build a context whose preferences are seeded from *config*."""
        preferences: dict[str, Any] = {
            KEY_ACTIVE_STATUS_PREFIX + SimLine.SIM1: config.sim1_active,
            KEY_ACTIVE_STATUS_PREFIX + SimLine.SIM2: config.sim2_active,
        }
        if config.api_key and config.api_key.strip():
            preferences[KEY_API_KEY] = config.api_key.strip()
        if config.sim1_owner is not None:
            preferences[KEY_OWNER_PREFIX + SimLine.SIM1] = config.sim1_owner
        if config.sim2_owner is not None:
            preferences[KEY_OWNER_PREFIX + SimLine.SIM2] = config.sim2_owner
        return cls(config=config, preferences=preferences)

    @classmethod
    def from_env(cls, **overrides: Any) -> AppContext:
        return cls.from_config(HttpSmsConfig.from_env(**overrides))
