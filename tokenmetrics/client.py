from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import requests

from .auth import API_URL, build_auth_headers, load_api_key, load_api_url, require_api_key
from .errors import APIConnectionError, APIError, TokenMetricsError
from .query import clean_params
from .resources import (
    RESOURCES,
    AIAgent,
    AIReports,
    DailyOhlcv,
    HourlyOhlcv,
    InvestorGrades,
    MarketMetrics,
    Resource,
    Tokens,
    TraderGrades,
    TraderIndices,
    TradingSignals,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def error_body(response: Any) -> Any:
    """Decoded JSON error payload if there is one, else the response text."""
    try:
        return response.json()
    except ValueError:
        return response.text


def decode_response(response: Any) -> Any:
    """Return the JSON body of a 2xx response, raise APIError otherwise.

    Works with both requests.Response and httpx.Response.
    """
    status = response.status_code
    if not 200 <= status < 300:
        body = error_body(response)
        logger.warning(f"Token Metrics API returned {status} for {response.url}")
        raise APIError.from_status(status, body)
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise TokenMetricsError(f"Token Metrics API returned invalid JSON ({status})") from e


@dataclass
class BaseClient:
    """Configuration shared by the blocking and async clients.

    Each instance owns its key, host and timeout, so differently configured
    clients can live side by side. Resource accessors are attached as
    attributes on construction.
    """

    api_key: str | None = field(default=None, repr=False)
    api_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT

    resource_classes: ClassVar[dict[str, type[Resource]]] = RESOURCES

    tokens: Tokens = field(init=False, repr=False)
    hourly_ohlcv: HourlyOhlcv = field(init=False, repr=False)
    daily_ohlcv: DailyOhlcv = field(init=False, repr=False)
    investor_grades: InvestorGrades = field(init=False, repr=False)
    trader_grades: TraderGrades = field(init=False, repr=False)
    trader_indices: TraderIndices = field(init=False, repr=False)
    market_metrics: MarketMetrics = field(init=False, repr=False)
    ai_agent: AIAgent = field(init=False, repr=False)
    ai_reports: AIReports = field(init=False, repr=False)
    trading_signals: TradingSignals = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.api_key = require_api_key(self.api_key)
        self.api_url = self.api_url.rstrip("/")
        self.headers = build_auth_headers(self.api_key)
        for name, resource_cls in self.resource_classes.items():
            setattr(self, name, resource_cls(self))

    @classmethod
    def from_env(cls, **kwargs: Any):
        """Build a client from TOKEN_METRICS_API_KEY / TOKEN_METRICS_API_URL (env or .env)."""
        api_key = load_api_key()
        kwargs.setdefault("api_url", load_api_url())
        return cls(api_key=api_key, **kwargs)

    def url_for(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"


@dataclass
class TokenMetricsClient(BaseClient):
    """Blocking client built on a requests.Session.

    Examples:
        >>> client = TokenMetricsClient(api_key="tm-...")
        >>> client.tokens.get(symbol="BTC,ETH")
        >>> client.trading_signals.get(symbol="BTC", start_date="2024-01-01", signal=1)
        >>> client.ai_agent.get_answer_text("What is the outlook for ETH?")
    """

    def __post_init__(self) -> None:
        super().__post_init__()
        self.session = requests.Session()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one authenticated request and return the decoded JSON body.

        Raises:
            APIConnectionError: the API could not be reached
            APIError: the API answered with a non-2xx status
        """
        url = self.url_for(path)
        query = clean_params(params)
        logger.debug(f"{method} {url} params={query}")
        try:
            res = self.session.request(
                method,
                url,
                params=query,
                json=json,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise APIConnectionError(f"Could not reach Token Metrics API: {e}") from e
        logger.debug(f"{method} {url} -> {res.status_code}")
        return decode_response(res)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return self.request("POST", path, params=params, json=json)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> TokenMetricsClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
