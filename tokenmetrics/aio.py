"""Non-blocking client for asyncio code.

Same accessors as TokenMetricsClient; `get`/`ask` return awaitables. Each
request opens its own httpx.AsyncClient, so concurrent calls share nothing.

    btc, eth = await asyncio.gather(
        client.trader_grades.get(symbol="BTC"),
        client.trader_grades.get(symbol="ETH"),
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from .client import BaseClient, decode_response
from .errors import APIConnectionError
from .query import clean_params
from .resources import RESOURCES, AsyncAIAgent, Resource

logger = logging.getLogger(__name__)


@dataclass
class AsyncTokenMetricsClient(BaseClient):
    # Optional httpx transport, e.g. httpx.MockTransport in tests.
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    resource_classes: ClassVar[dict[str, type[Resource]]] = {**RESOURCES, "ai_agent": AsyncAIAgent}

    ai_agent: AsyncAIAgent = field(init=False, repr=False)

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one authenticated request and return the decoded JSON body.

        Raises:
            APIConnectionError: the API could not be reached or timed out
            APIError: the API answered with a non-2xx status
        """
        url = self.url_for(path)
        query = clean_params(params)
        logger.debug(f"{method} {url} params={query}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                res = await client.request(method, url, params=query, json=json, headers=self.headers)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out after {self.timeout}s")
            raise APIConnectionError(f"Token Metrics API request timed out: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise APIConnectionError(f"Could not reach Token Metrics API: {e}") from e
        logger.debug(f"{method} {url} -> {res.status_code}")
        return decode_response(res)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self.request("POST", path, params=params, json=json)
