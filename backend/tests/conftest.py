"""Pytest configuration and fixtures."""

import pytest
from fakes import FakeClock

from stockwatch.storage import JsonFileStore, MemoryStore


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(tmp_path / "data")
