"""
Pydantic schemas for timeline responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MonthCount(BaseModel):
    month: int = Field(..., ge=1, le=12)
    article_count: int = Field(..., ge=0)


class YearCount(BaseModel):
    year: int
    article_count: int = Field(..., ge=0)
