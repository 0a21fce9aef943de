"""Reporting-period resolution.

``resolve_window`` turns a dashboard preset into a concrete calendar window.
``complete_month_range`` implements the analytics pages' ranges, which only
ever cover whole months that have already finished.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Literal, get_args

from . import config, dates
from .dates import DateWindow
from .errors import PeriodValidationError, UnknownPresetError
from .months import MonthPair, enumerate_window, full_month_label

logger = logging.getLogger(__name__)

Preset = Literal[
    "current-month",
    "last-month",
    "last-3-months",
    "last-12-months",
    "year",
    "month-select",
    "custom",
]
PRESETS: tuple[str, ...] = get_args(Preset)

RangeKey = Literal[
    "last-month",
    "last-quarter",
    "last-6-months",
    "last-12-months",
    "this-year",
    "last-year",
]
RANGE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("last-month", "Last Month"),
    ("last-quarter", "Last Quarter"),
    ("last-6-months", "Last 6 Months"),
    ("last-12-months", "Last 12 Months"),
    ("this-year", "This Year"),
    ("last-year", "Last Year"),
)

# Trailing windows ending with the current month: preset -> months back from it.
_TRAILING = {
    "current-month": 0,
    "last-3-months": 2,
    "last-12-months": 11,
}


def _month_window(year: int, month: int, months_back: int = 0) -> DateWindow:
    first_year, first_month = dates.add_months(year, month, -months_back)
    return DateWindow(
        start=dates.first_day_of_month(first_year, first_month),
        end=dates.last_day_of_month(year, month),
    )


def _custom_window(start: Any, end: Any, today: date) -> DateWindow:
    return DateWindow(
        start=dates.to_calendar_date(start) if start is not None else today,
        end=dates.to_calendar_date(end) if end is not None else today,
    )


def resolve_window(
    preset: Preset | str,
    *,
    year: int | None = None,
    month: int | None = None,
    start: Any = None,
    end: Any = None,
    today: date | None = None,
    strict: bool | None = None,
) -> DateWindow:
    """Resolve a preset into an inclusive calendar-date window.

    Relative presets are evaluated against ``today`` (defaults to the local
    date). ``month-select`` without a usable year and month, and unknown
    presets, fall back to the custom window; with ``strict`` they raise.
    """

    today = today or date.today()
    if strict is None:
        strict = config.get_settings().strict_periods

    if preset in _TRAILING:
        return _month_window(today.year, today.month, _TRAILING[preset])

    if preset == "last-month":
        prev_year, prev_month = dates.add_months(today.year, today.month, -1)
        return _month_window(prev_year, prev_month)

    if preset == "year":
        y = year if year is not None else today.year
        return DateWindow(start=date(y, 1, 1), end=date(y, 12, 31))

    if preset == "month-select":
        if year is not None and month is not None and 1 <= month <= 12:
            return _month_window(year, month)
        if strict:
            raise PeriodValidationError(
                f"month-select needs a year and a month in 1..12; got year={year!r}, month={month!r}"
            )
        logger.warning(
            "month-select without a valid year/month (year=%r, month=%r); using custom window",
            year,
            month,
        )
    elif preset != "custom":
        if strict:
            raise UnknownPresetError(f"unknown preset {preset!r}; expected one of {', '.join(PRESETS)}")
        logger.warning("unknown preset %r; using custom window", preset)

    return _custom_window(start, end, today)


@dataclass(frozen=True)
class MonthRange:
    """A window made of whole months plus the labels the analytics pages show."""

    window: DateWindow
    months: tuple[MonthPair, ...]
    label: str

    @property
    def months_count(self) -> int:
        return len(self.months)

    @property
    def is_single_month(self) -> bool:
        return len(self.months) == 1


def last_complete_month(today: date | None = None) -> tuple[int, int]:
    """The month before ``today``'s month, as (year, month)."""

    today = today or date.today()
    return dates.add_months(today.year, today.month, -1)


def _range_label(months: tuple[MonthPair, ...], suffix: str) -> str:
    first, last = months[0], months[-1]
    first_label = full_month_label(first.year, first.month)
    if len(months) == 1:
        return f"{first_label} {suffix}"
    return f"{first_label} – {full_month_label(last.year, last.month)} {suffix}"


def complete_month_range(key: RangeKey | str, today: date | None = None) -> MonthRange:
    """Resolve an analytics range key to whole, already finished months.

    Rolling ranges count back from the last complete month, ``this-year``
    runs from January 1 to the end of it and ``last-year`` is the previous
    calendar year. Unknown keys fall back to ``last-12-months``.
    """

    today = today or date.today()
    year, month = last_complete_month(today)

    rolling = {
        "last-month": (0, "(Last complete month)"),
        "last-quarter": (2, "(Last 3 complete months)"),
        "last-6-months": (5, "(Last 6 complete months)"),
        "last-12-months": (11, "(Last 12 complete months)"),
    }

    if key == "this-year":
        # In January nothing of the current year has finished yet.
        window = DateWindow(
            start=date(year, 1, 1) if year == today.year else dates.first_day_of_month(year, month),
            end=dates.last_day_of_month(year, month),
        )
        suffix = "(Year to date – last complete month)"
    elif key == "last-year":
        prev = today.year - 1
        window = DateWindow(start=date(prev, 1, 1), end=date(prev, 12, 31))
        suffix = f"(Full year {prev})"
    else:
        if key not in rolling:
            logger.warning("unknown range key %r; using last-12-months", key)
            key = "last-12-months"
        months_back, suffix = rolling[key]
        window = _month_window(year, month, months_back)

    months = tuple(enumerate_window(window))
    return MonthRange(window=window, months=months, label=_range_label(months, suffix))
