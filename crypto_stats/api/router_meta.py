"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.api.dependencies import get_aggregator
from crypto_stats.api.response_models import HealthResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(aggregator: PriceAggregator = Depends(get_aggregator)):
    directory = aggregator.store.directory
    return HealthResponse(
        status="ok",
        prices_dir=str(directory),
        prices_dir_exists=directory.is_dir(),
        loaded=[c.value for c in aggregator.loaded_currencies()],
    )
