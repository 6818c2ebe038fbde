"""
Place API endpoints (map view).
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel

from core import errors
from entries import schemas as entry_schemas

from . import repository

router = APIRouter()


class MapPoint(BaseModel):
    place_corrected: str | None = None
    latitude: float | None = None
    longitude: float | None = None


@router.get("/map-data", response_model=list[MapPoint])
async def map_data():
    return await repository.map_points()


@router.get("/articles-by-city", response_model=list[entry_schemas.Entry])
async def articles_by_city(city: str | None = Query(default=None)):
    city = errors.require(city, "City is required")
    return await repository.entries_by_city(city)
