"""
Entry API endpoints: today in history, tag and text search, single entry page.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from core import errors

from . import schemas, service, views

router = APIRouter()


def get_today() -> date:
    """
    Reference date for `/`. Overridden in tests via `app.dependency_overrides`.
    """
    return date.today()


@router.get("/", response_model=list[schemas.Entry] | schemas.Message)
async def daily(today: date = Depends(get_today)):
    return await service.daily(today)


@router.get("/articles-by-tag", response_model=list[schemas.Entry])
async def articles_by_tag(tag: str | None = Query(default=None)):
    tag = errors.require(tag, "Tag is required")
    return await service.entries_by_tag(tag)


@router.get("/search", response_model=list[schemas.Entry] | schemas.Message)
async def search(q: str | None = Query(default=None)):
    q = errors.require(q, "Bad Request: Please provide a search query.")
    return await service.search(q)


@router.get("/entry", response_class=HTMLResponse)
async def entry_page(entry_id: str | None = Query(default=None, alias="id")) -> Response:
    """
    Standalone HTML page for one entry, logo embedded inline.
    """
    parsed_id = errors.required_int(entry_id, "id", "ID is required")
    entry = await service.get_entry(parsed_id)
    if entry is None:
        return PlainTextResponse(views.ENTRY_NOT_FOUND)
    return HTMLResponse(views.render_entry(entry, logo=views.logo_base64()))
