"""
Timeline API endpoints (monthly and yearly views).
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from core import errors
from entries import schemas as entry_schemas

from . import schemas, service

router = APIRouter()


@router.get("/monthly", response_model=list[schemas.MonthCount])
async def monthly(
    year_from: str | None = Query(default=None, alias="yearFrom"),
    year_to: str | None = Query(default=None, alias="yearTo"),
):
    return await service.monthly_counts(
        year_from=errors.optional_int(year_from, "yearFrom"),
        year_to=errors.optional_int(year_to, "yearTo"),
    )


@router.get("/articles", response_model=list[entry_schemas.Entry])
async def articles(
    month: str | None = Query(default=None),
    year_from: str | None = Query(default=None, alias="yearFrom"),
    year_to: str | None = Query(default=None, alias="yearTo"),
):
    return await service.articles_for_month(
        errors.required_int(month, "month", "Month is required"),
        year_from=errors.optional_int(year_from, "yearFrom"),
        year_to=errors.optional_int(year_to, "yearTo"),
    )


@router.get("/yearly", response_model=list[schemas.YearCount])
async def yearly():
    return await service.yearly_counts()
