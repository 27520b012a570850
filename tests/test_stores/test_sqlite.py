"""Tests for SQLiteStore."""

import importlib
import sys
from datetime import date

import pytest

from day_scheduler import Diary
from day_scheduler.stores import SQLiteStore


@pytest.fixture
async def store(tmp_path):
    s = SQLiteStore(str(tmp_path / "diary.db"))
    yield s
    await s.close()


async def test_get_nonexistent(store):
    assert await store.get("key") is None


async def test_set_get_overwrite(store):
    await store.set("k", "a")
    await store.set("k", "b")
    assert await store.get("k") == "b"


async def test_delete_and_exists(store):
    await store.set("k", "v")
    assert await store.exists("k")
    await store.delete("k")
    assert not await store.exists("k")
    await store.delete("k")  # should not raise


async def test_survives_reopen(tmp_path):
    path = str(tmp_path / "diary.db")
    first = SQLiteStore(path)
    await first.set("diary", "saved")
    await first.close()

    second = SQLiteStore(path)
    try:
        assert await second.get("diary") == "saved"
    finally:
        await second.close()


async def test_diary_round_trip(store, clock):
    diary = Diary(store, clock=clock)
    diary.schedule_for_date(date(2024, 1, 1)).block_at(8).update_note("wrap up")
    await diary.persist()

    fresh = Diary(store, clock=clock)
    assert await fresh.restore()
    assert fresh.schedule_for_date(date(2024, 1, 1)).block_at(8).note == "wrap up"


async def test_memory_database():
    s = SQLiteStore(":memory:")
    try:
        await s.set("k", "v")
        assert await s.get("k") == "v"
    finally:
        await s.close()


def test_missing_aiosqlite_names_the_package(monkeypatch):
    monkeypatch.setitem(sys.modules, "aiosqlite", None)
    monkeypatch.delitem(sys.modules, "day_scheduler.stores.sqlite")
    with pytest.raises(ImportError, match="pip install aiosqlite"):
        importlib.import_module("day_scheduler.stores.sqlite")
