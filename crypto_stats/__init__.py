"""Crypto Stats — price statistics for a fixed set of cryptocurrencies."""

__version__ = "1.0.0"
