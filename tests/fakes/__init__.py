"""
Test Fakes Module

Provides fake implementations for testing without a running Redis.
"""

from tests.fakes.fake_sorted_set import FakeSortedSetStore

__all__ = [
    "FakeSortedSetStore",
]
