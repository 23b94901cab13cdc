"""
Global test configuration and fixtures
"""

import pytest

from hexastore.core.index import HexastoreIndex
from tests.fakes.fake_sorted_set import FakeSortedSetStore


@pytest.fixture
def fake_store() -> FakeSortedSetStore:
    """In-memory sorted-set store"""
    return FakeSortedSetStore()


@pytest.fixture
def index(fake_store: FakeSortedSetStore) -> HexastoreIndex:
    """Hexastore index on the fake store"""
    return HexastoreIndex("test-index", fake_store)


# Pytest hooks
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (live Redis)")


def pytest_collection_modifyitems(config, items):
    """경로 기반 자동 마커 추가"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
