#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging

import pandas as pd

from tokenmetrics import TokenMetricsClient


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch trading signals (/v2/trading-signals)")
    parser.add_argument("--symbol", help="Comma-separated symbols", default="")
    parser.add_argument("--from", dest="from_", help="Start date YYYY-MM-DD", default="")
    parser.add_argument("--to", help="End date YYYY-MM-DD", default="")
    parser.add_argument(
        "--signal", type=int, choices=(-1, 0, 1), default=None, help="1 bullish, -1 bearish, 0 neutral"
    )
    parser.add_argument("--limit", type=int, default=50, help="Rows to fetch")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    client = TokenMetricsClient.from_env()
    payload = client.trading_signals.get(
        symbol=args.symbol or None,
        start_date=args.from_ or None,
        end_date=args.to or None,
        signal=args.signal,
        limit=args.limit,
    )
    df = pd.DataFrame(payload.get("data", []))
    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
