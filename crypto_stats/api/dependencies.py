"""
FastAPI dependencies — PriceAggregator singleton, path parameter parsing.
"""
from __future__ import annotations

import datetime as dt

from fastapi import HTTPException

from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.data.schemas import Currency
from crypto_stats.errors import InvalidCurrency

# ---------------------------------------------------------------------------
# Global aggregator singleton (set during startup)
# ---------------------------------------------------------------------------
_aggregator: PriceAggregator | None = None


def set_aggregator(aggregator: PriceAggregator) -> None:
    global _aggregator
    _aggregator = aggregator


def get_aggregator() -> PriceAggregator:
    if _aggregator is None:
        raise HTTPException(503, "Server not initialized yet")
    return _aggregator


# ---------------------------------------------------------------------------
# Path parameters
# ---------------------------------------------------------------------------

def parse_currency(currency: str) -> Currency:
    """Resolve the {currency} path segment, 400 if it is not supported."""
    try:
        return Currency.parse(currency)
    except InvalidCurrency as e:
        raise HTTPException(400, str(e))


def parse_day(day: str) -> dt.date:
    """Parse the {day} path segment as YYYY-MM-DD."""
    try:
        return dt.date.fromisoformat(day)
    except ValueError:
        raise HTTPException(400, f"Invalid date: {day} (expected YYYY-MM-DD)")
