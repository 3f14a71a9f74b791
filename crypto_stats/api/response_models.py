"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class StatsResponse(BaseModel):
    max: Optional[float] = None
    min: Optional[float] = None
    oldest: Optional[float] = None
    newest: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    prices_dir: str
    prices_dir_exists: bool
    loaded: list[str]
