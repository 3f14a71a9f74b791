"""
Error types surfaced by the price store and aggregator.

Malformed CSV rows never raise; they are skipped where they are read.
A day with no eligible currency is reported as ``None``, not an exception.
"""
from __future__ import annotations


class CryptoStatsError(Exception):
    """Base class for all crypto_stats errors."""


class InvalidCurrency(CryptoStatsError, ValueError):
    """Symbol is not one of the supported currencies."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid currency: {symbol}")
        self.symbol = symbol


class PriceFileNotFound(CryptoStatsError, FileNotFoundError):
    """The price CSV for a currency does not exist."""

    def __init__(self, path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path
