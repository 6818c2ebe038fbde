"""Tests for the today-in-history date fallback."""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from core.db import StoreError
from entries import service
from tests.conftest import make_entry


def resolve(reference: date, **kwargs):
    return asyncio.run(service.entries_for_date(reference, **kwargs))


class TestDayMonthKey:
    def test_zero_padded(self):
        assert service.day_month_key(date(1920, 6, 5)) == "05-06"

    def test_new_year_steps_back_to_december(self, store):
        resolve(date(2024, 1, 1), max_days=2)
        assert store.queried_keys == ["01-01", "31-12"]

    def test_march_first_steps_to_leap_day_in_leap_year(self, store):
        resolve(date(2024, 3, 1), max_days=2)
        assert store.queried_keys == ["01-03", "29-02"]

    def test_march_first_steps_to_feb_28_in_common_year(self, store):
        resolve(date(2023, 3, 1), max_days=2)
        assert store.queried_keys == ["01-03", "28-02"]


class TestEntriesForDate:
    def test_exact_day_match_uses_one_query(self, store):
        store.rows = [make_entry(1, date(1920, 6, 15))]

        result = resolve(date(2024, 6, 15))

        assert [r["id"] for r in result] == [1]
        assert len(store.calls) == 1
        sql, args = store.calls[0]
        assert "WHERE day_month = $1 ORDER BY year ASC" in sql
        assert args == ("15-06",)

    def test_match_n_days_back_uses_n_plus_one_queries(self, store):
        store.rows = [
            make_entry(7, date(1931, 6, 10)),
            make_entry(3, date(1920, 6, 10)),
            make_entry(9, date(1925, 5, 1)),
        ]

        result = resolve(date(2024, 6, 15))

        assert len(store.calls) == 6
        assert store.queried_keys == ["15-06", "14-06", "13-06", "12-06", "11-06", "10-06"]
        assert [r["year"] for r in result] == [1920, 1931]
        assert {r["day_month"] for r in result} == {"10-06"}

    def test_match_on_last_allowed_day(self, store):
        # 364 days before 2023-06-15 is 2022-06-16.
        store.rows = [make_entry(1, date(1900, 6, 16))]

        result = resolve(date(2023, 6, 15))

        assert len(store.calls) == 365
        assert [r["id"] for r in result] == [1]

    def test_empty_store_exhausts_bound(self, store):
        result = resolve(date(2024, 6, 15))

        assert result == []
        assert len(store.calls) == 365
        assert len(set(store.queried_keys)) == 365

    def test_bound_from_environment(self, store, monkeypatch):
        monkeypatch.setenv("FALLBACK_MAX_DAYS", "30")

        assert resolve(date(2024, 6, 15)) == []
        assert len(store.calls) == 30

    def test_rejects_non_positive_bound(self, store):
        with pytest.raises(ValueError):
            resolve(date(2024, 6, 15), max_days=0)
        assert store.calls == []

    def test_store_failure_propagates_immediately(self, store):
        store.fail_on_call = 3

        with pytest.raises(StoreError):
            resolve(date(2024, 6, 15))

        assert len(store.calls) == 3

    def test_tags_are_decoded(self, store):
        store.rows = [make_entry(1, date(1920, 6, 15), words="['harbour', 'fire']")]

        result = resolve(date(2024, 6, 15))

        assert result[0]["words"] == ["harbour", "fire"]
