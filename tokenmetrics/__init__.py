"""Python client for the Token Metrics data API.

This package provides:
- API key loading from the environment or a local .env file
- A thin HTTP client that attaches the key and returns parsed JSON
- Resource accessors (tokens, grades, signals, reports, AI agent, ...)
- An asyncio flavour of the same client built on httpx

Keep this small: every resource is one request and one JSON response.
"""

from .aio import AsyncTokenMetricsClient
from .client import TokenMetricsClient
from .errors import APIConnectionError, APIError, AuthError, TokenMetricsError

__all__ = [
    "TokenMetricsClient",
    "AsyncTokenMetricsClient",
    "TokenMetricsError",
    "AuthError",
    "APIConnectionError",
    "APIError",
]
