"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Callable

import pandas as pd
import pytest

from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.data.schemas import Currency
from crypto_stats.data.store import PriceStore

DAY = dt.date(2022, 1, 1)
NOON = dt.time(12, 0)


def local_ms(day: dt.date, time: dt.time = NOON) -> int:
    """Epoch milliseconds for a local (system time zone) wall-clock time."""
    return int(dt.datetime.combine(day, time).timestamp() * 1000)


def at(day: dt.date, hour: int = 12) -> dt.datetime:
    return dt.datetime.combine(day, dt.time(hour, 0))


def series_of(prices: dict) -> pd.Series:
    """Series keyed by datetimes, insertion order kept (not sorted)."""
    return pd.Series(list(prices.values()), index=pd.DatetimeIndex(list(prices.keys())), dtype="float64")


class StubStore:
    """Stands in for PriceStore: serves in-memory series and counts loads."""

    def __init__(self, series: dict[str, pd.Series] | None = None) -> None:
        self.series = series or {}
        self.loads: list[str] = []

    def load(self, symbol: str) -> pd.Series:
        self.loads.append(symbol)
        return self.series.get(symbol, series_of({}))


@pytest.fixture
def write_prices(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Write raw lines to {tmp}/{SYMBOL}_values.csv and return the path."""
    def _write(symbol: str, lines: list[str]) -> Path:
        path = tmp_path / f"{symbol}_values.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def prices_dir(tmp_path: Path, write_prices) -> Path:
    """One file per currency, all with prices on 2022-01-01.

    Day ranges: BTC 1.5, ETH 1.0, LTC 0.1, DOGE min 0 (excluded), XRP no rows.
    """
    next_day = DAY + dt.timedelta(days=1)
    write_prices("BTC", [
        "timestamp,symbol,price",
        f"{local_ms(DAY)},BTC,2.0",
        f"{local_ms(DAY, dt.time(15, 0))},BTC,5.0",
        f"{local_ms(next_day)},BTC,4.0",
    ])
    write_prices("ETH", [
        f"{local_ms(DAY)},ETH,2.0",
        f"{local_ms(DAY, dt.time(15, 0))},ETH,4.0",
    ])
    write_prices("LTC", [
        f"{local_ms(DAY)},LTC,10.0",
        f"{local_ms(DAY, dt.time(15, 0))},LTC,11.0",
    ])
    write_prices("DOGE", [
        f"{local_ms(DAY)},DOGE,0.0",
        f"{local_ms(DAY, dt.time(15, 0))},DOGE,1.0",
    ])
    write_prices("XRP", [
        f"{local_ms(DAY)},BTC,1.0",
    ])
    return tmp_path


@pytest.fixture
def aggregator(prices_dir: Path) -> PriceAggregator:
    return PriceAggregator(PriceStore(prices_dir))


@pytest.fixture
def all_currencies() -> list[str]:
    return [c.value for c in Currency]


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """configure_logging() replaces root handlers; put pytest's back after each test."""
    import logging
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
