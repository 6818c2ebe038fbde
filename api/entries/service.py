"""
Entry service (orchestration).

This is where we:
- resolve "today in history" with a backward day-of-year fallback
- apply the empty-result messages the frontend expects
- call the entry queries (repository)
"""

from __future__ import annotations

import logging
import os
from datetime import date, timedelta
from typing import Any

from . import repository

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_DAYS = 365
NO_DAILY_ENTRIES = "No entries found for today or the past year."
NO_SEARCH_MATCHES = "No matching entries found."


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def fallback_max_days() -> int:
    return _env_int("FALLBACK_MAX_DAYS", DEFAULT_FALLBACK_DAYS)


def day_month_key(day: date) -> str:
    return day.strftime("%d-%m")


async def entries_for_date(reference: date, *, max_days: int | None = None) -> list[dict[str, Any]]:
    """
    Entries published on `reference`'s day-of-year in any year, oldest year first.

    When that day has nothing, step back one calendar day at a time (across
    month and year boundaries, Feb 29 only in leap years) for at most
    `max_days` days. One query per day; store failures propagate.
    """
    if max_days is None:
        max_days = fallback_max_days()
    if max_days < 1:
        raise ValueError("max_days must be at least 1.")

    day = reference
    for step in range(max_days):
        key = day_month_key(day)
        entries = await repository.entries_by_day_month(key)
        if entries:
            logger.info("date_fallback_resolved day_month=%s steps=%s count=%s", key, step, len(entries))
            return entries
        day -= timedelta(days=1)

    logger.info("date_fallback_exhausted reference=%s steps=%s", reference.isoformat(), max_days)
    return []


async def daily(today: date) -> list[dict[str, Any]] | dict[str, str]:
    entries = await entries_for_date(today)
    if not entries:
        return {"message": NO_DAILY_ENTRIES}
    return entries


async def search(query_text: str) -> list[dict[str, Any]] | dict[str, str]:
    entries = await repository.search_content(query_text)
    if not entries:
        return {"message": NO_SEARCH_MATCHES}
    return entries


async def entries_by_tag(tag: str) -> list[dict[str, Any]]:
    return await repository.entries_by_tag(tag)


async def get_entry(entry_id: int) -> dict[str, Any] | None:
    return await repository.get_entry(entry_id)
