"""Calendar-date helpers.

Dates are plain ``datetime.date`` values; month arithmetic goes through
monthly ``pandas.Period`` objects so no time-of-day or timezone is involved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd

_TIME_SEPARATOR = re.compile(r"[T ]")


def _month_period(year: int, month: int) -> pd.Period:
    if not 1 <= int(month) <= 12:
        raise ValueError(f"month must be in 1..12; got {month!r}")
    return pd.Period(year=int(year), month=int(month), freq="M")


def first_day_of_month(year: int, month: int) -> date:
    return _month_period(year, month).start_time.date()


def last_day_of_month(year: int, month: int) -> date:
    period = _month_period(year, month)
    return date(period.year, period.month, period.days_in_month)


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a (year, month) pair by ``months``, rolling the year either way."""

    period = _month_period(year, month) + months
    return period.year, period.month


def to_calendar_date(value: Any) -> date:
    """Coerce a date-like value to a calendar date without timezone conversion.

    Datetimes (including ``pandas.Timestamp``) are truncated to their own
    date; strings only need a leading ``yyyy-mm-dd``.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).date()
    if isinstance(value, str):
        head = _TIME_SEPARATOR.split(value.strip(), maxsplit=1)[0]
        try:
            return date.fromisoformat(head)
        except ValueError:
            raise ValueError(f"not an ISO calendar date: {value!r}") from None
    raise TypeError(f"cannot interpret {type(value).__name__} as a calendar date")


def date_key(value: Any) -> str:
    """Return the ``yyyy-mm-dd`` bucket key for a timestamp-like value."""

    return to_calendar_date(value).isoformat()


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ``[start, end]`` range of calendar dates."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, value: Any) -> bool:
        return self.start <= to_calendar_date(value) <= self.end

    def as_dict(self) -> dict[str, str]:
        """Query bounds in the ``{"from": ..., "to": ...}`` shape used by data fetchers."""

        return {"from": self.start.isoformat(), "to": self.end.isoformat()}
