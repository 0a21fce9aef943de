"""Utility script to print a resolved window and its claims/payments series."""

from __future__ import annotations

import argparse
import json

from claimflow import months, periods, synth, timeseries, utils


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--preset", default="year", choices=periods.PRESETS)
    parser.add_argument("--year", type=int, default=synth.DEFAULT_START.year)
    parser.add_argument("--month", type=int)
    parser.add_argument("--rows", type=int, default=synth.DEFAULT_CLAIM_ROWS)
    args = parser.parse_args()

    utils.configure_logging()

    window = periods.resolve_window(args.preset, year=args.year, month=args.month)
    claims, payments = synth.generate_sample_events(rows=args.rows, seed=synth.DEFAULT_SEED)
    points = timeseries.aggregate_timeseries(claims, payments, amount_policy="raise")
    in_window = [p for p in points if window.contains(p.date)]

    payload = {
        "window": window.as_dict(),
        "months": [m.label for m in months.enumerate_window(window)],
        "summary": timeseries.summarize_timeseries(in_window),
        "series": [p.as_record() for p in in_window],
    }
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
