"""
PriceAggregator — load-once cache of price series plus the statistics
computed from it.

Series are read lazily the first time a currency is asked for and kept for
the life of the process. Nothing is ever reloaded, so results are stable
even if the files on disk change afterwards.
"""
from __future__ import annotations

import datetime as dt
import logging
import threading
from decimal import Decimal
from typing import Optional, Union

import pandas as pd

from crypto_stats.analytics.common import normalized_range
from crypto_stats.data.schemas import Currency, StatResult, empty_stats
from crypto_stats.data.store import PriceStore

logger = logging.getLogger(__name__)

NormalizedEntry = tuple[Currency, Decimal]


def series_stats(series: pd.Series) -> StatResult:
    """max/min by price, oldest/newest by timestamp. Empty series → all None."""
    if series.empty:
        return empty_stats()
    return {
        "max": float(series.max()),
        "min": float(series.min()),
        "oldest": float(series.iloc[series.index.argmin()]),
        "newest": float(series.iloc[series.index.argmax()]),
    }


class PriceAggregator:
    """Per-currency series cache with summary statistics on top."""

    def __init__(self, store: PriceStore | None = None) -> None:
        self.store = store if store is not None else PriceStore()
        self._cache: dict[Currency, pd.Series] = {}
        self._locks = {currency: threading.Lock() for currency in Currency}

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def _ensure_loaded(self, currency: Currency) -> pd.Series:
        """Return the cached series, loading it on first use.

        One lock per currency: concurrent first requests for the same
        currency wait for a single load. A failed load caches nothing.
        """
        series = self._cache.get(currency)
        if series is not None:
            return series
        with self._locks[currency]:
            series = self._cache.get(currency)
            if series is None:
                series = self.store.load(currency.value)
                self._cache[currency] = series
        return series

    def loaded_currencies(self) -> list[Currency]:
        return [c for c in Currency if c in self._cache]

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self, currency: Union[Currency, str]) -> StatResult:
        """min, max, oldest and newest price for one currency."""
        if not isinstance(currency, Currency):
            currency = Currency.parse(currency)
        result = series_stats(self._ensure_loaded(currency))
        logger.info("Returning %d statistics for %s", len(result), currency.value)
        return result

    def get_all_stats(self) -> dict[Currency, StatResult]:
        """Stats for every currency. A missing file fails the whole call."""
        result = {currency: series_stats(self._ensure_loaded(currency)) for currency in Currency}
        logger.info("Returning prices for %d currencies", len(result))
        return result

    def get_normalized_ranking(self) -> list[NormalizedEntry]:
        """All currencies sorted by (max - min) / min, highest first.

        A currency whose minimum is zero, or that has no prices, ranks with
        a normalized range of 0. Ties keep enumeration order.
        """
        entries: list[NormalizedEntry] = []
        for currency in Currency:
            series = self._ensure_loaded(currency)
            value = None
            if not series.empty:
                value = normalized_range(series.max(), series.min())
            if value is None:
                logger.error("Cannot calculate normalized range for %s (min price is zero)", currency.value)
                value = Decimal(0)
            entries.append((currency, value))

        entries.sort(key=lambda entry: entry[1], reverse=True)
        logger.info("Returning normalized range for %d currencies", len(entries))
        return entries

    def get_normalized_winner_for_day(self, day: dt.date) -> Optional[Currency]:
        """Currency with the highest normalized range on one local calendar day.

        Currencies with no prices that day, or a zero minimum that day, are
        left out rather than ranked at 0. Returns None if none qualify.
        """
        if isinstance(day, dt.datetime):
            day = day.date()

        ranges: dict[Currency, Decimal] = {}
        for currency in Currency:
            series = self._ensure_loaded(currency)
            day_prices = series[series.index.date == day] if not series.empty else series
            if day_prices.empty:
                logger.warning("No %s price data on %s", currency.value, day)
                continue
            value = normalized_range(day_prices.max(), day_prices.min())
            if value is None:
                logger.warning("Skipping %s on %s: minimum price is zero", currency.value, day)
                continue
            ranges[currency] = value

        winner = max(ranges, key=ranges.get) if ranges else None
        logger.info("Highest normalized range on %s: %s", day, winner.value if winner else None)
        return winner
