"""
PriceStore — reads one currency's CSV price history into a pandas Series.

Each line is ``timestampMillis,symbol,price``. Rows that are malformed or
belong to another symbol are skipped; only a missing file is an error.
"""
from __future__ import annotations

import datetime as dt
import logging
import math
import re
from pathlib import Path
from typing import Mapping, Optional

import pandas as pd

from crypto_stats.config import (
    PRICES_FOLDER, PRICE_FILE_SUFFIX, COLUMN_COUNT,
    TIMESTAMP_INDEX, SYMBOL_INDEX, PRICE_INDEX,
)
from crypto_stats.errors import PriceFileNotFound

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"[0-9]+")

# Range a pandas DatetimeIndex can hold (nanosecond resolution)
_EARLIEST = pd.Timestamp.min.ceil("us").to_pydatetime()
_LATEST = pd.Timestamp.max.floor("us").to_pydatetime()


# ---------------------------------------------------------------------------
# Series construction
# ---------------------------------------------------------------------------

def build_series(prices: Mapping[dt.datetime, float]) -> pd.Series:
    """Turn a {local datetime: price} mapping into a time-indexed float Series."""
    index = pd.DatetimeIndex(list(prices.keys()), name="timestamp")
    series = pd.Series(list(prices.values()), index=index, dtype="float64", name="price")
    return series.sort_index()


def millis_to_local(timestamp_ms: int) -> dt.datetime:
    """Epoch milliseconds (UTC) → naive datetime in the system time zone."""
    seconds, millis = divmod(timestamp_ms, 1000)
    return dt.datetime.fromtimestamp(seconds) + dt.timedelta(milliseconds=millis)


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------

def _parse_timestamp(field: str) -> Optional[dt.datetime]:
    if not _TIMESTAMP_RE.fullmatch(field):
        return None
    try:
        timestamp = millis_to_local(int(field))
    except (OverflowError, ValueError, OSError):
        return None
    return timestamp if _EARLIEST <= timestamp <= _LATEST else None


def _parse_price(field: str) -> Optional[float]:
    try:
        price = float(field)
    except ValueError:
        return None
    return price if math.isfinite(price) else None


class PriceStore:
    """Loads ``{SYMBOL}_values.csv`` files from a single directory."""

    def __init__(self, directory: Path | str = PRICES_FOLDER) -> None:
        self.directory = Path(directory)

    def price_file_path(self, symbol: str) -> Path:
        return self.directory / f"{symbol}{PRICE_FILE_SUFFIX}"

    def load(self, symbol: str) -> pd.Series:
        """Read every valid row for ``symbol`` into a PriceSeries.

        Raises PriceFileNotFound when the file is missing. A read error part
        way through the file is logged and the rows read so far are returned.
        This silently truncates the series; callers cannot tell a partial
        load from a complete one.
        """
        path = self.price_file_path(symbol)
        if not path.is_file():
            raise PriceFileNotFound(path)
        logger.info("Reading file for currency: %s", symbol)

        prices: dict[dt.datetime, float] = {}
        skipped = 0
        try:
            with path.open(encoding="utf-8", errors="replace") as fh:
                for line_no, line in enumerate(fh, 1):
                    tokens = line.rstrip("\n").split(",")
                    if (
                        len(tokens) != COLUMN_COUNT
                        or not tokens[TIMESTAMP_INDEX]
                        or not tokens[TIMESTAMP_INDEX][0].isdigit()
                    ):
                        logger.warning("%s line %d: unknown row structure, skipped", path.name, line_no)
                        skipped += 1
                        continue

                    timestamp = _parse_timestamp(tokens[TIMESTAMP_INDEX])
                    price = _parse_price(tokens[PRICE_INDEX])
                    if timestamp is None or price is None:
                        logger.warning("%s line %d: malformed timestamp or price, skipped", path.name, line_no)
                        skipped += 1
                        continue

                    if tokens[SYMBOL_INDEX] == symbol:
                        prices[timestamp] = price
        except OSError:
            logger.exception("Error while reading price file %s; keeping %d rows read so far", path, len(prices))

        logger.info("Price file for %s read: %d rows, %d skipped", symbol, len(prices), skipped)
        return build_series(prices)
