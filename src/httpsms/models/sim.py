"""SIM line selectors."""

from __future__ import annotations

from enum import StrEnum


class SimLine(StrEnum):
    """One of the two fixed SIM lines a device can receive on."""

    SIM1 = "SIM1"
    SIM2 = "SIM2"
