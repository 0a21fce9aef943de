"""Claims/payments aggregation into a per-date series for charting."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, TypedDict

import numpy as np
import pandas as pd

from . import config, dates, utils
from .errors import AmountParseError, ConfigError, EventDateError

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["date", "claims", "payments", "label"]


@dataclass(frozen=True)
class ClaimEvent:
    period_start: Any
    claimed_amount: Any

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ClaimEvent:
        return cls(
            period_start=utils.pick(record, "periodStart", "period_start"),
            claimed_amount=utils.pick(record, "claimedAmount", "claimed_amount"),
        )


@dataclass(frozen=True)
class PaymentEvent:
    amount: Any
    payment_date: Any = None
    created_at: Any = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> PaymentEvent:
        return cls(
            amount=record.get("amount"),
            payment_date=utils.pick(record, "paymentDate", "payment_date"),
            created_at=utils.pick(record, "createdAt", "created_at"),
        )

    @property
    def bucket_date(self) -> Any:
        """``payment_date`` when set, else ``created_at``, else ``None``."""

        return self.payment_date or self.created_at or None


@dataclass(frozen=True)
class AggregatedPoint:
    date: str
    claims_total: float
    payments_total: float
    label: str

    def as_record(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "claims": self.claims_total,
            "payments": self.payments_total,
            "label": self.label,
        }


class TimeseriesSummary(TypedDict):
    claims_total: float
    payments_total: float
    outstanding: float
    collection_rate: float
    days: int


def coerce_amount(
    value: Any,
    policy: str = "raise",
    *,
    index: int | None = None,
    field: str = "amount",
) -> float:
    """Parse an amount that may arrive as a number or a decimal string.

    Unparseable input (``None``, empty or non-numeric strings, booleans) is
    handled by ``policy``: ``"raise"`` raises :class:`AmountParseError`,
    ``"zero"`` returns 0.0 and ``"nan"`` returns NaN.
    """

    parsed: float | None = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, (int, float, Decimal, np.number)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            parsed = None

    if parsed is not None:
        return parsed
    if policy == "zero":
        return 0.0
    if policy == "nan":
        return math.nan
    raise AmountParseError(value, index=index, field=field)


def _events(rows: Iterable[Any] | pd.DataFrame, kind: type) -> list[Any]:
    return [
        row if isinstance(row, kind) else kind.from_record(row)
        for row in utils.ensure_records(rows)
    ]


def _bucket_key(value: Any, index: int, kind: str) -> str:
    try:
        return dates.date_key(value)
    except (TypeError, ValueError) as exc:
        raise EventDateError(f"{kind} {index}: {exc}") from exc


def aggregate_timeseries(
    claims: Iterable[ClaimEvent | Mapping[str, Any]] | pd.DataFrame,
    payments: Iterable[PaymentEvent | Mapping[str, Any]] | pd.DataFrame,
    *,
    amount_policy: str | None = None,
    label_format: str | None = None,
) -> list[AggregatedPoint]:
    """Merge claims and payments into one point per calendar date, sorted by date.

    Claims bucket on ``periodStart``; payments on ``paymentDate`` falling back
    to ``createdAt``. Events with no usable date are dropped and logged.
    """

    if amount_policy is None or label_format is None:
        settings = config.get_settings()
        amount_policy = amount_policy or settings.amount_policy
        label_format = label_format or settings.label_format
    if amount_policy not in config.AMOUNT_POLICIES:
        raise ConfigError(f"amount_policy must be one of {', '.join(config.AMOUNT_POLICIES)}; got {amount_policy!r}")

    buckets: dict[str, list[float]] = {}
    dropped = 0

    for index, claim in enumerate(_events(claims, ClaimEvent)):
        if not claim.period_start:
            dropped += 1
            continue
        key = _bucket_key(claim.period_start, index, "claim")
        amount = coerce_amount(claim.claimed_amount, amount_policy, index=index, field="claimedAmount")
        buckets.setdefault(key, [0.0, 0.0])[0] += amount

    for index, payment in enumerate(_events(payments, PaymentEvent)):
        when = payment.bucket_date
        if when is None:
            dropped += 1
            continue
        key = _bucket_key(when, index, "payment")
        amount = coerce_amount(payment.amount, amount_policy, index=index, field="amount")
        buckets.setdefault(key, [0.0, 0.0])[1] += amount

    if dropped:
        logger.warning("dropped %d event(s) without a usable date", dropped)

    return [
        AggregatedPoint(
            date=key,
            claims_total=totals[0],
            payments_total=totals[1],
            label=date.fromisoformat(key).strftime(label_format),
        )
        for key, totals in sorted(buckets.items())
    ]


def timeseries_frame(points: Iterable[AggregatedPoint]) -> pd.DataFrame:
    """Return the series as a DataFrame ready for a charting widget."""

    records = [point.as_record() for point in points]
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    df = pd.DataFrame(records, columns=FRAME_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df


def summarize_timeseries(points: Iterable[AggregatedPoint]) -> TimeseriesSummary:
    data = list(points)
    claims_total = float(sum(p.claims_total for p in data))
    payments_total = float(sum(p.payments_total for p in data))
    return {
        "claims_total": claims_total,
        "payments_total": payments_total,
        "outstanding": claims_total - payments_total,
        "collection_rate": payments_total / claims_total if claims_total else 0.0,
        "days": len(data),
    }
