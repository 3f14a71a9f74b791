"""
Crypto Stats — FastAPI app factory.

Price files are read lazily on first request, not at startup.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crypto_stats import __version__
from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.data.store import PriceStore
from crypto_stats.api.dependencies import set_aggregator
from crypto_stats.api.router_meta import router as meta_router
from crypto_stats.api.router_prices import router as prices_router
from crypto_stats.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared aggregator; its cache lives as long as the process."""
    from crypto_stats.config import PRICES_FOLDER
    configure_logging()

    logger.info("CRYPTO_PRICES_DIR = %s (exists = %s)", PRICES_FOLDER, PRICES_FOLDER.is_dir())
    if PRICES_FOLDER.is_dir():
        for f in sorted(PRICES_FOLDER.glob("*_values.csv")):
            logger.info("  - %s (%s bytes)", f.name, f"{f.stat().st_size:,}")

    set_aggregator(PriceAggregator(PriceStore(PRICES_FOLDER)))
    logger.info("Crypto Stats ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Crypto Stats API",
        description="Min, max, oldest, newest and normalized range for supported cryptocurrencies",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(prices_router)
    return app


app = create_app()
