"""Tests for DiaryConfig and store construction."""

import pytest
from pydantic import ValidationError

from day_scheduler import StoreError
from day_scheduler.config import DiaryConfig, StoreConfig, create_store
from day_scheduler.stores import InMemoryStore, SQLiteStore


def test_defaults():
    config = DiaryConfig()
    assert config.starting_hour == 9
    assert config.ending_hour == 18
    assert config.storage_key == "diary"
    assert config.store.type == "memory"


def test_ending_before_starting_rejected():
    with pytest.raises(ValidationError):
        DiaryConfig(starting_hour=17, ending_hour=9)


@pytest.mark.parametrize("kwargs", [{"starting_hour": -1}, {"ending_hour": 25}, {"storage_key": ""}])
def test_out_of_bounds_rejected(kwargs):
    with pytest.raises(ValidationError):
        DiaryConfig(**kwargs)


def test_unknown_store_type_rejected():
    with pytest.raises(ValidationError):
        StoreConfig(type="redis")


def test_create_memory_store():
    assert isinstance(create_store(StoreConfig()), InMemoryStore)


def test_create_sqlite_store(tmp_path):
    store = create_store(StoreConfig(type="sqlite", path=str(tmp_path / "d.db")))
    assert isinstance(store, SQLiteStore)


def test_sqlite_requires_path():
    with pytest.raises(StoreError, match="requires 'path'"):
        create_store(StoreConfig(type="sqlite"))
