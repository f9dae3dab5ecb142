"""Resource accessors bound to one API path each.

Every accessor forwards to its client's `request` and returns the result
untouched, so the same classes serve the blocking client (plain values) and
the async client (awaitables). Only the AI agent's `get_answer_text` needs an
async twin because it post-processes the response.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from .query import merge_options

if TYPE_CHECKING:
    from .client import BaseClient

# Python keyword name -> wire query key, for names that differ.
DATE_ALIASES = {"start_date": "startDate", "end_date": "endDate"}


class Resource:
    path: ClassVar[str] = ""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class QueryResource(Resource):
    """A GET endpoint whose options become query parameters.

    `get` accepts a mapping of wire keys (`{"startDate": "2024-01-01"}`),
    keyword options (`start_date="2024-01-01"`), or both. Keywords win on
    conflicts. Options set to None are left out of the request.
    """

    aliases: ClassVar[Mapping[str, str]] = {}
    defaults: ClassVar[Mapping[str, Any]] = {}

    def get(self, params: Mapping[str, Any] | None = None, /, **options: Any) -> Any:
        query = merge_options(params, options, self.aliases, self.defaults)
        return self._client.request("GET", self.path, params=query)


class Tokens(QueryResource):
    """Token catalogue. Options: token_id, token_name, symbol, category,
    exchange, blockchain_address, limit, page."""

    path = "/v2/tokens"


class HourlyOhlcv(QueryResource):
    """Hourly OHLCV candles. Options: token_id, token_name, symbol,
    start_date, end_date, limit, page."""

    path = "/v2/hourly-ohlcv"
    aliases = DATE_ALIASES


class DailyOhlcv(QueryResource):
    path = "/v2/daily-ohlcv"
    aliases = DATE_ALIASES


class InvestorGrades(QueryResource):
    """Long-term investor grades. Options: token_id, token_name, symbol,
    start_date, end_date, category, exchange, marketcap, fdv, volume,
    investor_grade, limit, page."""

    path = "/v2/investor-grades"
    aliases = {**DATE_ALIASES, "investor_grade": "investorGrade"}


class TraderGrades(QueryResource):
    """Short-term trader grades. Same options as investor grades, with
    trader_grade and tm_trader_grade in place of investor_grade."""

    path = "/v2/trader-grades"
    aliases = {**DATE_ALIASES, "trader_grade": "traderGrade", "tm_trader_grade": "TMTraderGrade"}


class TraderIndices(QueryResource):
    path = "/v2/trader-indices"
    aliases = DATE_ALIASES


class MarketMetrics(QueryResource):
    path = "/v2/market-metrics"
    aliases = DATE_ALIASES


class AIReports(QueryResource):
    path = "/v2/ai-reports"


class TradingSignals(QueryResource):
    """Long/short signals. `signal` filters by direction (1 bullish,
    -1 bearish, 0 neutral)."""

    path = "/v2/trading-signals"
    aliases = DATE_ALIASES


def build_agent_payload(prompt: str) -> dict[str, Any]:
    if not isinstance(prompt, str) or not prompt.strip():
        raise ValueError("prompt must be a non-empty string")
    return {"messages": [{"user": prompt}]}


def extract_answer(envelope: Any) -> str:
    """Pull the answer text out of an AI agent response; empty string if absent."""
    if not isinstance(envelope, Mapping):
        return ""
    answer = envelope.get("answer")
    return "" if answer is None else str(answer)


class AIAgent(Resource):
    """Token Metrics AI chat agent (POST)."""

    path = "/v2/tmai"

    def ask(self, prompt: str) -> Any:
        return self._client.request("POST", self.path, json=build_agent_payload(prompt))

    def get_answer_text(self, prompt: str) -> str:
        return extract_answer(self.ask(prompt))


class AsyncAIAgent(AIAgent):
    async def get_answer_text(self, prompt: str) -> str:  # type: ignore[override]
        return extract_answer(await self.ask(prompt))


RESOURCES: dict[str, type[Resource]] = {
    "tokens": Tokens,
    "hourly_ohlcv": HourlyOhlcv,
    "daily_ohlcv": DailyOhlcv,
    "investor_grades": InvestorGrades,
    "trader_grades": TraderGrades,
    "trader_indices": TraderIndices,
    "market_metrics": MarketMetrics,
    "ai_agent": AIAgent,
    "ai_reports": AIReports,
    "trading_signals": TradingSignals,
}
