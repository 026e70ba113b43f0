"""
Query string construction for list and scoped requests.

Parameters whose value is ``None`` are dropped entirely, and the remaining
keys are emitted in sorted order so the same request always yields the same
URL.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

import httpx


def format_query_value(value: Any) -> Optional[str]:
    """Render a single query value the way the API expects it.

    Returns ``None`` for values that should not be sent at all: ``None``
    itself and empty sequences.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # Shortest round-trip digits, never exponent notation
        return format(Decimal(repr(value)), "f")
    if isinstance(value, (list, tuple)):
        items = [format_query_value(item) for item in value]
        items = [item for item in items if item is not None]
        return ",".join(items) if items else None
    return str(value)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    Naive datetimes are taken to be UTC. A UTC offset is written as ``Z``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def build_query(params: Mapping[str, Any]) -> str:
    """Encode the present parameters as a sorted query string."""
    pairs = []
    for key in sorted(params):
        rendered = format_query_value(params[key])
        if rendered is not None:
            pairs.append((key, rendered))
    return str(httpx.QueryParams(pairs))


def with_query(path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Append the encoded query to ``path``, or return it untouched."""
    if not params:
        return path
    query = build_query(params)
    return f"{path}?{query}" if query else path
