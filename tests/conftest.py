"""Shared fixtures for the finplan test suite."""

import itertools

import pytest

from finplan.config import get_settings
from finplan.services.storage import InMemoryStorage
from finplan.store import LedgerStore


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def frozen_clock():
    """A clock stuck on one millisecond, to provoke id collisions."""
    return lambda: 1_700_000_000_000


@pytest.fixture
def ticking_clock():
    """A clock that advances one millisecond per call."""
    counter = itertools.count(1_700_000_000_000)
    return lambda: next(counter)


@pytest.fixture
def store(storage, ticking_clock) -> LedgerStore:
    ledger = LedgerStore(storage, clock=ticking_clock)
    ledger.initialize()
    return ledger
