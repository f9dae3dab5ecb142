from __future__ import annotations

import json
from unittest.mock import Mock

import pytest

from tokenmetrics import TokenMetricsClient


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Drop Token Metrics variables and run from an empty directory (no stray .env)."""
    for key in ["TOKEN_METRICS_API_KEY", "TOKEN_METRICS_API_URL", "CUSTOM_KEY"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def client():
    return TokenMetricsClient(api_key="tm-test-key")


@pytest.fixture
def make_response():
    """Build a Mock that quacks like requests.Response."""

    def _make(status_code=200, payload=None, text=None, url="https://api.tokenmetrics.com/v2/x"):
        response = Mock()
        response.status_code = status_code
        response.url = url
        if payload is not None:
            body = json.dumps(payload)
            response.json.return_value = payload
        else:
            body = text or ""
            response.json.side_effect = ValueError("Expecting value")
        response.text = body
        response.content = body.encode("utf-8")
        return response

    return _make


@pytest.fixture
def sample_tokens_data():
    """Sample /v2/tokens envelope."""
    return {
        "success": True,
        "message": "Data fetched successfully",
        "length": 2,
        "data": [
            {
                "TOKEN_ID": 3375,
                "TOKEN_NAME": "Bitcoin",
                "TOKEN_SYMBOL": "BTC",
                "EXCHANGE_LIST": [{"exchange_id": "binance", "exchange_name": "Binance"}],
                "CATEGORY_LIST": [{"category_id": 1, "category_name": "Layer 1"}],
            },
            {
                "TOKEN_ID": 3306,
                "TOKEN_NAME": "Ethereum",
                "TOKEN_SYMBOL": "ETH",
                "EXCHANGE_LIST": [{"exchange_id": "binance", "exchange_name": "Binance"}],
                "CATEGORY_LIST": [{"category_id": 1, "category_name": "Layer 1"}],
            },
        ],
    }


@pytest.fixture
def sample_agent_answer():
    """Sample /v2/tmai envelope."""
    return {
        "success": True,
        "message": "Data fetched successfully",
        "answer": "Bitcoin is currently showing a bullish trader grade.",
        "thread": [{"user": "How is BTC doing?"}],
    }
