"""Query string preparation shared by the blocking and async clients.

Callers may pass options with Pythonic names (`start_date`) while the API
expects camelCase or snake_case wire keys (`startDate`, `token_id`). Each
resource declares its own alias table; unknown names are sent unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any


def to_query_value(value: Any) -> str | int | float:
    """Convert one option value into something requests/httpx encode the same way."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value) if isinstance(value, (set, frozenset)) else value
        return ",".join(str(to_query_value(item)) for item in items)
    if isinstance(value, (int, float, str)):
        return value
    return str(value)


def clean_params(params: Mapping[str, Any] | None) -> dict[str, str | int | float]:
    """Drop None values and normalize the rest. Key order is preserved."""
    if not params:
        return {}
    return {key: to_query_value(value) for key, value in params.items() if value is not None}


def merge_options(
    params: Mapping[str, Any] | None,
    options: Mapping[str, Any],
    aliases: Mapping[str, str],
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, str | int | float]:
    """Combine fixed defaults, a wire-key mapping and keyword options.

    Later sources win: defaults < params < options. Keyword options are
    renamed through `aliases`; keys missing from it pass through as given.
    """
    merged: dict[str, Any] = dict(defaults or {})
    merged.update(params or {})
    for name, value in options.items():
        merged[aliases.get(name, name)] = value
    return clean_params(merged)
