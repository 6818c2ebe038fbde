"""
Timeline SQL (raw): per-month and per-year aggregates, entries of one month.

Optional inclusive year bounds are appended as extra WHERE conditions with
placeholders numbered after whatever parameters precede them.
"""

from __future__ import annotations

from typing import Any

from core import db
from entries.repository import ENTRY_COLUMNS, row_to_entry


def year_range_conditions(
    *,
    year_from: int | None,
    year_to: int | None,
    first_placeholder: int = 1,
) -> tuple[list[str], list[Any]]:
    """
    Return (conditions, params) for `year >= $n` / `year <= $n`.
    """
    conditions: list[str] = []
    params: list[Any] = []
    if year_from is not None:
        conditions.append(f"year >= ${first_placeholder + len(params)}")
        params.append(year_from)
    if year_to is not None:
        conditions.append(f"year <= ${first_placeholder + len(params)}")
        params.append(year_to)
    return conditions, params


async def monthly_counts(*, year_from: int | None = None, year_to: int | None = None) -> list[dict[str, Any]]:
    conditions, params = year_range_conditions(year_from=year_from, year_to=year_to)
    where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
    rows = await db.fetch_all(
        f"""
        SELECT month, COUNT(*) AS article_count
        FROM data
        {where}
        GROUP BY month
        ORDER BY month ASC
        """,
        *params,
    )
    return [{"month": int(r["month"]), "article_count": int(r["article_count"])} for r in rows]


async def entries_by_month(
    month: int,
    *,
    year_from: int | None = None,
    year_to: int | None = None,
) -> list[dict[str, Any]]:
    conditions, params = year_range_conditions(year_from=year_from, year_to=year_to, first_placeholder=2)
    where = " AND ".join(["month = $1", *conditions])
    rows = await db.fetch_all(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE {where}
        ORDER BY date ASC
        """,
        month,
        *params,
    )
    return [row_to_entry(r) for r in rows]


async def yearly_counts() -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        """
        SELECT year, COUNT(*) AS article_count
        FROM data
        GROUP BY year
        ORDER BY year ASC
        """
    )
    return [{"year": int(r["year"]), "article_count": int(r["article_count"])} for r in rows]
