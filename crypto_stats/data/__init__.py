"""Price file loading and the currency enumeration."""
from .schemas import Currency, StatResult, STAT_KEYS, empty_stats
from .store import PriceStore, build_series, millis_to_local
