"""
Entry SQL (raw).

All reads against the `data` table that return whole entries live here, plus
the row mapping shared with `timeline/` and `places/`.
"""

from __future__ import annotations

from typing import Any

from core import db

from .tags import parse_tags

ENTRY_COLUMNS = """
  id,
  date,
  day_month,
  year,
  month,
  place,
  place_corrected,
  latitude,
  longitude,
  content,
  words
"""


def like_pattern(fragment: str) -> str:
    """
    Build a `%fragment%` LIKE pattern that matches `fragment` literally.

    Pair with `ESCAPE '\\'` in the SQL.
    """
    escaped = fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def row_to_entry(row: dict[str, Any]) -> dict[str, Any]:
    entry = dict(row)
    entry["words"] = parse_tags(entry.get("words"))
    for key in ("latitude", "longitude"):
        if entry.get(key) is not None:
            entry[key] = float(entry[key])
    return entry


async def _fetch_entries(sql: str, *args: Any) -> list[dict[str, Any]]:
    rows = await db.fetch_all(sql, *args)
    return [row_to_entry(r) for r in rows]


async def entries_by_day_month(day_month: str) -> list[dict[str, Any]]:
    return await _fetch_entries(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE day_month = $1
        ORDER BY year ASC
        """,
        day_month,
    )


async def get_entry(entry_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE id = $1
        """,
        entry_id,
    )
    return row_to_entry(row) if row is not None else None


async def entries_by_tag(tag: str) -> list[dict[str, Any]]:
    """
    Substring match against the stored tag list.
    """
    return await _fetch_entries(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE words LIKE $1 ESCAPE '\\'
        ORDER BY date ASC
        """,
        like_pattern(tag),
    )


async def search_content(query_text: str) -> list[dict[str, Any]]:
    """
    Case-insensitive substring match on the article text.
    """
    return await _fetch_entries(
        f"""
        SELECT {ENTRY_COLUMNS}
        FROM data
        WHERE content ILIKE $1 ESCAPE '\\'
        ORDER BY date ASC
        """,
        like_pattern(query_text),
    )
