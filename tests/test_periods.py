"""Tests for preset windows and complete-month ranges."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from claimflow import periods
from claimflow.dates import DateWindow
from claimflow.errors import PeriodValidationError, UnknownPresetError

TODAY = date(2024, 1, 15)

REFERENCE_DAYS = [
    date(2024, 1, 1),
    date(2024, 2, 29),
    date(2023, 3, 31),
    date(2024, 7, 15),
    date(2024, 12, 31),
]


@pytest.mark.parametrize(
    ("preset", "expected"),
    [
        ("current-month", DateWindow(date(2024, 1, 1), date(2024, 1, 31))),
        ("last-month", DateWindow(date(2023, 12, 1), date(2023, 12, 31))),
        ("last-3-months", DateWindow(date(2023, 11, 1), date(2024, 1, 31))),
        ("last-12-months", DateWindow(date(2023, 2, 1), date(2024, 1, 31))),
        ("year", DateWindow(date(2024, 1, 1), date(2024, 12, 31))),
    ],
)
def test_relative_presets_resolve_against_today(preset: str, expected: DateWindow) -> None:
    assert periods.resolve_window(preset, today=TODAY) == expected


@pytest.mark.parametrize("today", REFERENCE_DAYS)
@pytest.mark.parametrize("preset", periods.PRESETS)
def test_every_preset_yields_ordered_window(preset: str, today: date) -> None:
    window = periods.resolve_window(preset, year=2022, month=6, today=today)
    assert window.start <= window.end


@pytest.mark.parametrize("today", REFERENCE_DAYS)
def test_current_month_contains_today(today: date) -> None:
    window = periods.resolve_window("current-month", today=today)
    assert window.contains(today)
    assert 28 <= window.days <= 31


def test_last_three_months_spans_three_calendar_months() -> None:
    window = periods.resolve_window("last-3-months", today=date(2024, 5, 20))
    assert window.start == date(2024, 3, 1)
    assert window.end == date(2024, 5, 31)


def test_year_preset_with_explicit_year() -> None:
    window = periods.resolve_window("year", year=2023)
    assert window.as_dict() == {"from": "2023-01-01", "to": "2023-12-31"}


def test_month_select_handles_leap_february() -> None:
    window = periods.resolve_window("month-select", year=2024, month=2, today=TODAY)
    assert window == DateWindow(date(2024, 2, 1), date(2024, 2, 29))


def test_month_select_without_month_falls_back_to_today(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="claimflow"):
        window = periods.resolve_window("month-select", year=2024, today=TODAY)

    assert window == DateWindow(TODAY, TODAY)
    assert "month-select" in caplog.text


def test_month_select_fallback_uses_custom_bounds() -> None:
    window = periods.resolve_window(
        "month-select",
        month=13,
        start="2024-03-01",
        end="2024-03-10",
        today=TODAY,
    )
    assert window == DateWindow(date(2024, 3, 1), date(2024, 3, 10))


def test_month_select_strict_raises() -> None:
    with pytest.raises(PeriodValidationError):
        periods.resolve_window("month-select", year=2024, today=TODAY, strict=True)


def test_strict_mode_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAIMFLOW_STRICT_PERIODS", "true")
    with pytest.raises(PeriodValidationError):
        periods.resolve_window("month-select", month=4, today=TODAY)


def test_custom_window_truncates_timestamps() -> None:
    window = periods.resolve_window(
        "custom",
        start="2024-03-05T23:30:00+05:00",
        end=date(2024, 3, 9),
        today=TODAY,
    )
    assert window == DateWindow(date(2024, 3, 5), date(2024, 3, 9))


def test_custom_window_defaults_to_today() -> None:
    window = periods.resolve_window("custom", end="2024-02-01", today=TODAY)
    assert window == DateWindow(TODAY, date(2024, 2, 1))


def test_unknown_preset_degrades_or_raises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="claimflow"):
        window = periods.resolve_window("fortnight", today=TODAY)
    assert window == DateWindow(TODAY, TODAY)
    assert "fortnight" in caplog.text

    with pytest.raises(UnknownPresetError):
        periods.resolve_window("fortnight", today=TODAY, strict=True)


def test_complete_month_range_last_quarter() -> None:
    result = periods.complete_month_range("last-quarter", today=date(2025, 12, 4))

    assert result.window == DateWindow(date(2025, 9, 1), date(2025, 11, 30))
    assert [m.month for m in result.months] == [9, 10, 11]
    assert result.months_count == 3
    assert not result.is_single_month
    assert result.label == "September 2025 – November 2025 (Last 3 complete months)"


def test_complete_month_range_last_month_crosses_year() -> None:
    result = periods.complete_month_range("last-month", today=date(2025, 1, 15))

    assert result.window == DateWindow(date(2024, 12, 1), date(2024, 12, 31))
    assert result.is_single_month
    assert result.label == "December 2024 (Last complete month)"


def test_complete_month_range_this_year() -> None:
    result = periods.complete_month_range("this-year", today=date(2025, 12, 4))
    assert result.window == DateWindow(date(2025, 1, 1), date(2025, 11, 30))
    assert result.months_count == 11


def test_complete_month_range_this_year_in_january() -> None:
    result = periods.complete_month_range("this-year", today=date(2025, 1, 10))
    assert result.window == DateWindow(date(2024, 12, 1), date(2024, 12, 31))
    assert result.is_single_month


def test_complete_month_range_last_year_and_fallback() -> None:
    last_year = periods.complete_month_range("last-year", today=date(2025, 6, 1))
    assert last_year.window == DateWindow(date(2024, 1, 1), date(2024, 12, 31))
    assert last_year.label == "January 2024 – December 2024 (Full year 2024)"

    fallback = periods.complete_month_range("decade", today=date(2025, 6, 1))
    assert fallback.window == DateWindow(date(2024, 6, 1), date(2025, 5, 31))
    assert fallback.months_count == 12


def test_range_options_cover_every_key() -> None:
    keys = [key for key, _ in periods.RANGE_OPTIONS]
    for key in keys:
        assert periods.complete_month_range(key, today=date(2025, 3, 3)).months
