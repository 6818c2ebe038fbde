"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from core import db


def make_entry(
    entry_id: int,
    published: date,
    *,
    place: str | None = "Hamburg",
    content: str = "Lorem ipsum",
    words: str | None = "['harbour', 'fire']",
) -> dict[str, Any]:
    """A row shaped like `SELECT ... FROM data`."""
    return {
        "id": entry_id,
        "date": published,
        "day_month": published.strftime("%d-%m"),
        "year": published.year,
        "month": published.month,
        "place": place,
        "place_corrected": place,
        "latitude": 53.55,
        "longitude": 9.99,
        "content": content,
        "words": words,
    }


Responder = Callable[[str, tuple], list[dict[str, Any]]]


class FakeStore:
    """
    Stands in for the asyncpg pool. Records every query as (sql, args) with
    whitespace collapsed, and answers through `responder`.
    """

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = list(rows or [])
        self.calls: list[tuple[str, tuple]] = []
        self.fail_on_call: int | None = None
        self.responder: Responder = self._default_responder

    def _default_responder(self, sql: str, args: tuple) -> list[dict[str, Any]]:
        if "WHERE day_month = $1" in sql:
            matches = [r for r in self.rows if r["day_month"] == args[0]]
            return sorted(matches, key=lambda r: r["year"])
        if "WHERE id = $1" in sql:
            return [r for r in self.rows if r["id"] == args[0]]
        return list(self.rows)

    def _record(self, sql: str, args: tuple) -> None:
        self.calls.append((" ".join(sql.split()), args))
        if self.fail_on_call is not None and len(self.calls) >= self.fail_on_call:
            raise db.StoreError("connection refused")

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record(sql, args)
        return [dict(r) for r in self.responder(" ".join(sql.split()), args)]

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._record(sql, args)
        rows = self.responder(" ".join(sql.split()), args)
        return dict(rows[0]) if rows else None

    @property
    def queried_keys(self) -> list[str]:
        return [args[0] for sql, args in self.calls if "day_month = $1" in sql]


@pytest.fixture
def store(monkeypatch):
    fake = FakeStore()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.delenv("FALLBACK_MAX_DAYS", raising=False)
    return fake


@pytest.fixture
def app():
    from main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, store):
    """
    Test client without the lifespan, so no real pool is opened.
    """
    return TestClient(app)
