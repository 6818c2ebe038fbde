"""
Timeline service: month/year aggregates and drill-down into one month.
"""

from __future__ import annotations

from typing import Any

from core.errors import InvalidParameter

from . import repository


def _check_month(month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidParameter("month must be between 1 and 12")
    return month


async def monthly_counts(*, year_from: int | None = None, year_to: int | None = None) -> list[dict[str, Any]]:
    return await repository.monthly_counts(year_from=year_from, year_to=year_to)


async def articles_for_month(
    month: int,
    *,
    year_from: int | None = None,
    year_to: int | None = None,
) -> list[dict[str, Any]]:
    return await repository.entries_by_month(_check_month(month), year_from=year_from, year_to=year_to)


async def yearly_counts() -> list[dict[str, Any]]:
    return await repository.yearly_counts()
