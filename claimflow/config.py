"""Environment-driven settings for claimflow."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, cast

from .errors import ConfigError

AmountPolicy = Literal["raise", "zero", "nan"]

AMOUNT_POLICIES: tuple[str, ...] = ("raise", "zero", "nan")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    amount_policy: AmountPolicy = "raise"
    strict_periods: bool = False
    label_format: str = "%b %d"
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Read settings from ``CLAIMFLOW_*`` environment variables.

    - CLAIMFLOW_AMOUNT_POLICY: how unparseable amounts are handled (raise|zero|nan)
    - CLAIMFLOW_STRICT_PERIODS: raise instead of falling back to a custom window
    - CLAIMFLOW_LABEL_FORMAT: strftime pattern for chart point labels
    - CLAIMFLOW_LOG_LEVEL: level used by ``utils.configure_logging``
    """

    policy = os.getenv("CLAIMFLOW_AMOUNT_POLICY", "raise").strip().lower()
    if policy not in AMOUNT_POLICIES:
        raise ConfigError(
            f"CLAIMFLOW_AMOUNT_POLICY must be one of {', '.join(AMOUNT_POLICIES)}; got {policy!r}"
        )

    level = os.getenv("CLAIMFLOW_LOG_LEVEL", "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"CLAIMFLOW_LOG_LEVEL must be a logging level name; got {level!r}")

    strict = os.getenv("CLAIMFLOW_STRICT_PERIODS", "").strip().lower() in _TRUTHY
    label_format = os.getenv("CLAIMFLOW_LABEL_FORMAT") or "%b %d"

    return Settings(
        amount_policy=cast(AmountPolicy, policy),
        strict_periods=strict,
        label_format=label_format,
        log_level=level,
    )
