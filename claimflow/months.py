"""Month enumeration for month-by-month breakdowns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import dates
from .dates import DateWindow

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def month_label(year: int, month: int, *, include_year: bool = False) -> str:
    label = MONTH_ABBREVIATIONS[month - 1]
    return f"{label} {year}" if include_year else label


def full_month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


@dataclass(frozen=True)
class MonthPair:
    """One calendar month inside a reporting window."""

    year: int
    month: int
    label: str

    @property
    def window(self) -> DateWindow:
        return DateWindow(
            start=dates.first_day_of_month(self.year, self.month),
            end=dates.last_day_of_month(self.year, self.month),
        )


def enumerate_months(start: Any, end: Any) -> list[MonthPair]:
    """List every (year, month) from ``start``'s month to ``end``'s, inclusive.

    An inverted range yields an empty list.
    """

    first = dates.to_calendar_date(start)
    last = dates.to_calendar_date(end)

    out: list[MonthPair] = []
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        out.append(MonthPair(year=year, month=month, label=month_label(year, month)))
        month += 1
        if month > 12:
            month = 1
            year += 1
    return out


def enumerate_window(window: DateWindow) -> list[MonthPair]:
    return enumerate_months(window.start, window.end)
