"""Deterministic synthetic claim and payment records.

Records mimic what the data-access layer hands over: camelCase keys, ISO
timestamps, amounts sometimes serialised as strings, payments that only carry
``createdAt`` and a few with no date at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

import numpy as np
import pandas as pd

DEFAULT_CLAIM_ROWS = 120
DEFAULT_SEED = 7
DEFAULT_START = date(2024, 1, 1)
HORIZON_DAYS = 365

CLAIM_COLUMNS = ["claimId", "provider", "periodStart", "claimedAmount", "currency"]
PAYMENT_COLUMNS = ["paymentId", "claimId", "provider", "paymentDate", "createdAt", "amount", "currency"]


@dataclass(frozen=True)
class ProviderProfile:
    """Static metadata for an insurance provider."""

    name: str
    claim_range: tuple[float, float]
    paid_share: float  # probability a claim gets a payment
    settle_days: tuple[int, int]
    currency: str = "USD"


PROVIDERS = (
    ProviderProfile("CIC Insurance", (250.0, 1_800.0), 0.85, (14, 45)),
    ProviderProfile("UAP Old Mutual", (400.0, 2_400.0), 0.75, (21, 60)),
    ProviderProfile("Jubilee Health", (150.0, 900.0), 0.9, (7, 30)),
    ProviderProfile("Britam", (300.0, 1_500.0), 0.6, (30, 90)),
)


def _iso_timestamp(day: date, rng: np.random.Generator) -> str:
    hour = int(rng.integers(7, 19))
    minute = int(rng.integers(0, 60))
    return f"{day.isoformat()}T{hour:02d}:{minute:02d}:00Z"


def _as_wire_amount(value: float, rng: np.random.Generator) -> float | str:
    value = round(value, 2)
    return f"{value:.2f}" if rng.random() < 0.35 else value


def generate_claims(
    rows: int = DEFAULT_CLAIM_ROWS,
    *,
    seed: int | None = DEFAULT_SEED,
    start: date = DEFAULT_START,
) -> pd.DataFrame:
    """Generate claim records spread over one year from ``start``."""

    if rows <= 0:
        raise ValueError("rows must be positive")

    rng = np.random.default_rng(seed)
    records: list[dict[str, Any]] = []
    for i in range(rows):
        provider = PROVIDERS[int(rng.integers(0, len(PROVIDERS)))]
        day = start + timedelta(days=int(rng.integers(0, HORIZON_DAYS)))
        low, high = provider.claim_range
        records.append(
            {
                "claimId": f"CLM-{i + 1:05d}",
                "provider": provider.name,
                "periodStart": f"{day.isoformat()}T00:00:00Z",
                "claimedAmount": _as_wire_amount(rng.uniform(low, high), rng),
                "currency": provider.currency,
            }
        )

    df = pd.DataFrame(records, columns=CLAIM_COLUMNS)
    df.sort_values(["periodStart", "claimId"], inplace=True)
    df.reset_index(drop=True, inplace=True)
    return df


def generate_payments(claims: pd.DataFrame, *, seed: int | None = DEFAULT_SEED) -> pd.DataFrame:
    """Generate partial/full payments against a subset of ``claims``."""

    rng = np.random.default_rng(None if seed is None else seed + 1)
    profiles = {p.name: p for p in PROVIDERS}
    records: list[dict[str, Any]] = []

    for claim in claims.to_dict("records"):
        provider = profiles[claim["provider"]]
        if rng.random() > provider.paid_share:
            continue

        claim_day = date.fromisoformat(str(claim["periodStart"])[:10])
        low, high = provider.settle_days
        paid_day = claim_day + timedelta(days=int(rng.integers(low, high + 1)))
        stamp = _iso_timestamp(paid_day, rng)
        amount = float(claim["claimedAmount"]) * rng.uniform(0.7, 1.0)

        payment_date: str | None = paid_day.isoformat()
        created_at: str | None = stamp
        roll = rng.random()
        if roll < 0.04:
            payment_date, created_at = None, None
        elif roll < 0.2:
            payment_date = None

        records.append(
            {
                "paymentId": f"PAY-{len(records) + 1:05d}",
                "claimId": claim["claimId"],
                "provider": provider.name,
                "paymentDate": payment_date,
                "createdAt": created_at,
                "amount": _as_wire_amount(amount, rng),
                "currency": provider.currency,
            }
        )

    return pd.DataFrame(records, columns=PAYMENT_COLUMNS)


def generate_sample_events(
    rows: int = DEFAULT_CLAIM_ROWS,
    *,
    seed: int | None = DEFAULT_SEED,
    start: date = DEFAULT_START,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return matching ``(claims, payments)`` frames."""

    claims = generate_claims(rows, seed=seed, start=start)
    return claims, generate_payments(claims, seed=seed)
