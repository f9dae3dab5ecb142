#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from tokenmetrics import TokenMetricsClient


def main() -> int:
    parser = argparse.ArgumentParser(description="List tokens (/v2/tokens)")
    parser.add_argument("--symbol", help="Comma-separated symbols, e.g. BTC,ETH", default="")
    parser.add_argument("--category", help="Category filter, e.g. layer-1", default="")
    parser.add_argument("--exchange", help="Exchange filter, e.g. binance", default="")
    parser.add_argument("--limit", type=int, default=20, help="Rows per page")
    parser.add_argument("--page", type=int, default=None, help="Page number")
    parser.add_argument("--save", help="Path to save CSV/Parquet (by extension)", default="")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    client = TokenMetricsClient.from_env()
    payload = client.tokens.get(
        symbol=args.symbol or None,
        category=args.category or None,
        exchange=args.exchange or None,
        limit=args.limit,
        page=args.page,
    )
    df = pd.DataFrame(payload.get("data", []))

    if args.save:
        out = Path(args.save)
        out.parent.mkdir(parents=True, exist_ok=True)
        if out.suffix.lower() == ".parquet":
            df.to_parquet(out, index=False)
        else:
            df.to_csv(out, index=False)
        print(f"Saved {len(df)} rows to {out}")

    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
