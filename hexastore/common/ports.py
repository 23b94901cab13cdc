"""
Common ports (interfaces) used across layers.

The index depends on this interface instead of a concrete store, so the core
can run against Redis or the in-memory fake used by the unit tests.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol


class SortedSetStorePort(Protocol):
    """
    Lexicographically ordered sorted-set store (Redis ZSET semantics).

    Members sharing a score are ordered by byte-wise comparison of the member.
    The index always writes score 0, so that ordering is the only one.
    """

    async def add_members(self, set_key: str, members: Mapping[str, float]) -> int:
        """ZADD: insert members with their scores, idempotent per member"""
        ...

    async def remove_members(self, set_key: str, members: Sequence[str]) -> int:
        """ZREM: remove members, ignoring absent ones"""
        ...

    async def range_by_lex(self, set_key: str, start: bytes, end: bytes) -> list[str]:
        """ZRANGEBYLEX: members between start and end bounds, ascending"""
        ...

    async def delete(self, set_key: str) -> bool:
        """DEL: drop the whole sorted set"""
        ...
