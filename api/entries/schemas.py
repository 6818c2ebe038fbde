"""
Pydantic schemas for entry responses.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class Entry(BaseModel):
    id: int
    date: dt.date
    day_month: str = Field(..., pattern=r"^\d{2}-\d{2}$")
    year: int
    month: int = Field(..., ge=1, le=12)
    place: str | None = None
    place_corrected: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    content: str | None = None
    words: list[str] = Field(default_factory=list)


class Message(BaseModel):
    """
    Returned with HTTP 200 when a query legitimately matched nothing.
    """

    message: str
