"""
Currency enumeration and statistic result shapes.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from crypto_stats.errors import InvalidCurrency


class Currency(str, Enum):
    """Supported currencies. Declaration order is the ranking tie-break order."""
    BTC = "BTC"
    ETH = "ETH"
    LTC = "LTC"
    DOGE = "DOGE"
    XRP = "XRP"

    @classmethod
    def parse(cls, symbol: str) -> "Currency":
        """Resolve a symbol case-insensitively, e.g. "btc" -> Currency.BTC."""
        try:
            return cls(symbol.strip().upper())
        except ValueError:
            raise InvalidCurrency(symbol) from None


# Keys of a StatResult, in response order
STAT_KEYS = ("max", "min", "oldest", "newest")

StatResult = dict[str, Optional[float]]


def empty_stats() -> StatResult:
    """Result for a currency with no prices: every key present, no values."""
    return {key: None for key in STAT_KEYS}
