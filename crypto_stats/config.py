"""
Crypto Stats — Configuration: paths, constants, file layout.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with CRYPTO_PRICES_DIR env var for deployment
# ---------------------------------------------------------------------------
PRICES_FOLDER = Path(os.environ.get("CRYPTO_PRICES_DIR", str(Path.cwd() / "prices")))

# ---------------------------------------------------------------------------
# Price file layout: one "{SYMBOL}_values.csv" per currency,
# rows of "timestampMillis,symbol,price" (no header required)
# ---------------------------------------------------------------------------
PRICE_FILE_SUFFIX = "_values.csv"
COLUMN_COUNT = 3
TIMESTAMP_INDEX = 0
SYMBOL_INDEX = 1
PRICE_INDEX = 2

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("CRYPTO_STATS_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
