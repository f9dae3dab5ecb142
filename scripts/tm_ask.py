#!/usr/bin/env python
from __future__ import annotations

import argparse
import json

from tokenmetrics import TokenMetricsClient


def main() -> int:
    parser = argparse.ArgumentParser(description="Ask the Token Metrics AI agent (/v2/tmai)")
    parser.add_argument("prompt", help="Question for the agent")
    parser.add_argument("--raw", action="store_true", help="Print the full JSON response")
    args = parser.parse_args()

    client = TokenMetricsClient.from_env()
    if args.raw:
        print(json.dumps(client.ai_agent.ask(args.prompt), indent=2, ensure_ascii=False))
    else:
        print(client.ai_agent.get_answer_text(args.prompt))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
