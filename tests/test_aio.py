from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from tokenmetrics.aio import AsyncTokenMetricsClient
from tokenmetrics.errors import APIConnectionError, APIError, AuthError
from tokenmetrics.resources import AsyncAIAgent


def make_client(handler, **kwargs) -> AsyncTokenMetricsClient:
    return AsyncTokenMetricsClient(api_key="tm-async-key", transport=httpx.MockTransport(handler), **kwargs)


class TestAsyncTokenMetricsClient:
    def test_missing_api_key(self):
        with pytest.raises(AuthError):
            AsyncTokenMetricsClient(api_key="")

    def test_uses_async_agent(self):
        client = AsyncTokenMetricsClient(api_key="k")
        assert isinstance(client.ai_agent, AsyncAIAgent)

    def test_tokens_symbol_encoded(self, sample_tokens_data):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=sample_tokens_data)

        client = make_client(handler)
        result = asyncio.run(client.tokens.get({"symbol": "BTC,ETH"}))

        assert result == sample_tokens_data
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.host == "api.tokenmetrics.com"
        assert seen[0].url.path == "/v2/tokens"
        assert seen[0].url.params == httpx.QueryParams({"symbol": "BTC,ETH"})
        assert seen[0].headers["x-api-key"] == "tm-async-key"

    def test_get_without_options_has_no_query(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        client = make_client(handler)
        asyncio.run(client.market_metrics.get())

        assert seen[0].url.query == b""
        assert seen[0].url.path == "/v2/market-metrics"

    def test_none_options_not_sent(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        client = make_client(handler)
        asyncio.run(client.trading_signals.get(symbol="BTC", start_date="2024-01-01", end_date=None, signal=1))

        assert dict(seen[0].url.params) == {"symbol": "BTC", "startDate": "2024-01-01", "signal": "1"}

    def test_concurrent_requests(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"symbol": request.url.params["symbol"]})

        client = make_client(handler)

        async def run():
            return await asyncio.gather(
                client.trader_grades.get(symbol="BTC"),
                client.trader_grades.get(symbol="ETH"),
                client.investor_grades.get(symbol="SOL"),
            )

        assert asyncio.run(run()) == [{"symbol": "BTC"}, {"symbol": "ETH"}, {"symbol": "SOL"}]

    def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"success": False, "message": "Rate limit exceeded"})

        client = make_client(handler)

        with pytest.raises(APIError, match="429 Rate limit exceeded") as excinfo:
            asyncio.run(client.tokens.get())

        assert excinfo.value.status_code == 429
        assert excinfo.value.body == {"success": False, "message": "Rate limit exceeded"}

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(APIConnectionError, match="Could not reach"):
            asyncio.run(client.tokens.get())

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler)

        with pytest.raises(APIConnectionError, match="timed out"):
            asyncio.run(client.tokens.get())


class TestAsyncAIAgent:
    def test_ask_and_answer_text(self, sample_agent_answer):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            assert request.method == "POST"
            assert request.url.path == "/v2/tmai"
            return httpx.Response(200, json=sample_agent_answer)

        client = make_client(handler)

        envelope = asyncio.run(client.ai_agent.ask("How is BTC doing?"))
        answer = asyncio.run(client.ai_agent.get_answer_text("How is BTC doing?"))

        assert envelope == sample_agent_answer
        assert answer == sample_agent_answer["answer"]
        assert bodies == [{"messages": [{"user": "How is BTC doing?"}]}] * 2
