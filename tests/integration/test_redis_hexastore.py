"""
Hexastore on a live Redis

Requires a reachable Redis (HEXASTORE_REDIS_HOST / HEXASTORE_REDIS_PORT,
default localhost:6379). Skipped otherwise. Uses its own sorted set and
deletes it afterwards.
"""

import uuid

import pytest

from hexastore.core.model import Order, Triple, TriplePattern
from hexastore.factory import create_hexastore_index
from hexastore.infra.config import Settings

A = "techmandu@foo.com"
B = "someoneelse@foo.com"


async def _live_index():
    settings = Settings(index_key=f"hexastore-test:{uuid.uuid4().hex}")
    index = create_hexastore_index(settings, configure_logs=False)
    if not await index.store.ping():
        await index.store.close()
        pytest.skip("Redis not reachable")
    await index.clear()
    return index


@pytest.mark.asyncio
async def test_registrant_scenario():
    """Add, query by prefix, remove, and reject a gapped pattern."""
    index = await _live_index()
    try:
        await index.add(A, "Registrant", "914")
        await index.add(A, "Registrant", "12345")
        await index.add(A, "Attendee", "914")
        await index.add(B, "Registrant", "12345")

        result = await index.query("spo", TriplePattern(subject=A, predicate="Registrant"))
        assert result == [Triple(A, "Registrant", "12345"), Triple(A, "Registrant", "914")]

        registrants = await index.query(Order.OSP, TriplePattern(object="914"))
        assert registrants == await index.query_xxo("914")
        assert [t.subject for t in registrants] == [A, A]

        await index.remove(A, "Registrant", "914")

        all_entries = await index.query_xxx()
        assert len(all_entries) == 3
        for order in Order:
            assert Triple(A, "Registrant", "914") not in await index.query(order)
    finally:
        await index.clear()
        await index.store.close()


@pytest.mark.asyncio
async def test_non_ascii_values():
    """UTF-8 values sort and match byte-wise in Redis."""
    index = await _live_index()
    try:
        await index.add("서울", "ÿ", "naïve")
        await index.add("서울", "ÿ", "zeta")

        assert await index.query_spx("서울", "ÿ") == [Triple("서울", "ÿ", "naïve"), Triple("서울", "ÿ", "zeta")]
        assert await index.query_spo("서울", "ÿ", "naïve") == [Triple("서울", "ÿ", "naïve")]
    finally:
        await index.clear()
        await index.store.close()
