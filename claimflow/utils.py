"""Shared utilities for claimflow."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

from . import config


def ensure_records(rows: Iterable[Any] | pd.DataFrame) -> list[Any]:
    """Normalise a payload of events to a list.

    DataFrames are converted to record dicts with missing cells (NaN/NaT)
    mapped to ``None``; any other iterable is materialised as-is.
    """

    if isinstance(rows, pd.DataFrame):
        frame = rows.astype(object)
        return frame.where(frame.notna(), None).to_dict("records")

    return list(rows)


def pick(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among ``keys`` in ``record``."""

    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stderr handler; used by the scripts, never by the library."""

    level_name = level or config.get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
