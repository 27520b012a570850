"""Shared test fixtures."""

from datetime import datetime

import pytest

from day_scheduler import Diary, FixedClock
from day_scheduler.stores import InMemoryStore


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 1, 1, 10, 30))


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def diary(store, clock):
    return Diary(store, clock=clock)


@pytest.fixture
def workday():
    return datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 18)
