"""
Price endpoints: per-currency stats, all stats, normalized ranking, day winner.
"""
from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.data.schemas import Currency
from crypto_stats.api.dependencies import get_aggregator, parse_currency, parse_day
from crypto_stats.api.response_models import StatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["prices"])


# Fixed paths are registered before /{currency} so they are not read as symbols.

@router.get("/prices", response_model=dict[str, StatsResponse])
def all_prices(aggregator: PriceAggregator = Depends(get_aggregator)):
    """min/max/oldest/newest for every currency."""
    logger.info("called /v1/prices")
    try:
        stats = aggregator.get_all_stats()
    except OSError:
        logger.exception("Error fetching all prices")
        raise HTTPException(500, "Error fetching all prices")
    return {currency.value: result for currency, result in stats.items()}


@router.get("/normalized")
def normalized_ranking(aggregator: PriceAggregator = Depends(get_aggregator)):
    """Currencies sorted by normalized range, highest first."""
    logger.info("called /v1/normalized")
    try:
        ranking = aggregator.get_normalized_ranking()
    except OSError:
        logger.exception("Error fetching normalized data for all currencies")
        raise HTTPException(500, "Error fetching normalized data")
    return [{currency.value: float(value)} for currency, value in ranking]


@router.get("/normalized/{day}", response_class=PlainTextResponse)
def normalized_winner(
    day: dt.date = Depends(parse_day),
    aggregator: PriceAggregator = Depends(get_aggregator),
):
    """Symbol with the highest normalized range on a day (YYYY-MM-DD)."""
    logger.info("called /v1/normalized/{day} with %s", day)
    try:
        winner = aggregator.get_normalized_winner_for_day(day)
    except OSError:
        logger.exception("Error fetching normalized data for day %s", day)
        raise HTTPException(500, f"Error fetching normalized data for day {day}")
    if winner is None:
        raise HTTPException(404, "No data available for the given day")
    return PlainTextResponse(winner.value)


@router.get("/{currency}", response_model=StatsResponse)
def currency_prices(
    currency: Currency = Depends(parse_currency),
    aggregator: PriceAggregator = Depends(get_aggregator),
):
    """min/max/oldest/newest for one currency."""
    logger.info("called /v1/{currency} with %s", currency.value)
    try:
        return aggregator.get_stats(currency)
    except OSError:
        logger.exception("Error fetching prices for currency %s", currency.value)
        raise HTTPException(500, "Error fetching prices")
