"""
Place SQL (raw): map coordinates and entries by corrected place name.
"""

from __future__ import annotations

from typing import Any

from core import db
from entries.repository import ENTRY_COLUMNS, like_pattern, row_to_entry


async def map_points() -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        """
        SELECT place_corrected, latitude, longitude
        FROM data
        """
    )
    return [
        {
            "place_corrected": r["place_corrected"],
            "latitude": float(r["latitude"]) if r["latitude"] is not None else None,
            "longitude": float(r["longitude"]) if r["longitude"] is not None else None,
        }
        for r in rows
    ]


async def entries_by_city(city: str) -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE place_corrected LIKE $1 ESCAPE '\\'
        ORDER BY date ASC
        """,
        like_pattern(city),
    )
    return [row_to_entry(r) for r in rows]
