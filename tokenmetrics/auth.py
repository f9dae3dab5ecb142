from __future__ import annotations

import os

from .errors import AuthError
from .utils.env import load_env_file_if_present

API_URL = "https://api.tokenmetrics.com"
API_KEY_ENV = "TOKEN_METRICS_API_KEY"
API_URL_ENV = "TOKEN_METRICS_API_URL"
API_KEY_HEADER = "x-api-key"


def require_api_key(api_key: str | None) -> str:
    """Return `api_key` stripped, raising AuthError if it is missing or blank."""
    if api_key is None or not str(api_key).strip():
        raise AuthError(f"Missing API key. Pass api_key or set {API_KEY_ENV} in environment or .env")
    return str(api_key).strip()


def load_api_key(env_key: str = API_KEY_ENV, dotenv: bool = True) -> str:
    """Return the Token Metrics API key from environment or .env.

    Raises AuthError if missing.
    """
    if dotenv:
        load_env_file_if_present()
    key = os.getenv(env_key)
    if not key or not key.strip():
        raise AuthError(f"Missing API key. Set {env_key} in environment or .env")
    return key.strip()


def load_api_url(env_key: str = API_URL_ENV) -> str:
    """Return the API base URL override from the environment, or the public host."""
    return os.getenv(env_key) or API_URL


def build_auth_headers(api_key: str) -> dict[str, str]:
    return {API_KEY_HEADER: api_key, "accept": "application/json"}
