"""Reporting periods and claims/payments time series for the finance dashboard."""

from . import config, dates, errors, months, periods, synth, timeseries, utils
from .dates import DateWindow
from .months import MonthPair, enumerate_months
from .periods import complete_month_range, resolve_window
from .timeseries import AggregatedPoint, ClaimEvent, PaymentEvent, aggregate_timeseries

__all__ = [
	"config",
	"dates",
	"errors",
	"months",
	"periods",
	"synth",
	"timeseries",
	"utils",
	"AggregatedPoint",
	"ClaimEvent",
	"DateWindow",
	"MonthPair",
	"PaymentEvent",
	"aggregate_timeseries",
	"complete_month_range",
	"enumerate_months",
	"resolve_window",
]
