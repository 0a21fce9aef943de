"""Exception types raised by the claimflow core."""

from __future__ import annotations

from typing import Any


class ClaimflowError(Exception):
    """Base class for all claimflow errors."""


class AmountParseError(ClaimflowError, ValueError):
    """An event amount could not be parsed as a number."""

    def __init__(self, value: Any, *, index: int | None = None, field: str = "amount") -> None:
        self.value = value
        self.index = index
        self.field = field
        where = f"record {index}" if index is not None else "record"
        super().__init__(f"{where}: cannot parse {field}={value!r} as a number")


class PeriodValidationError(ClaimflowError, ValueError):
    """Period parameters are missing or out of range."""


class UnknownPresetError(PeriodValidationError):
    """The preset name is not one of the supported presets."""


class ConfigError(ClaimflowError, ValueError):
    """An environment setting holds an unsupported value."""


class EventDateError(ClaimflowError, ValueError):
    """An event timestamp is present but is not an ISO date."""
