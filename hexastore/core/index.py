"""
Hexastore index

Stores every triple under all six field orderings in one sorted set, so any
query fixing a prefix of an order's fields is a single ZRANGEBYLEX.

Each public operation is exactly one store round trip. The six keys of a
triple are written in one batch but not atomically: a concurrent query can
see some orderings of a triple being added or removed and not others.
"""

from dataclasses import dataclass
from typing import Any

from hexastore.common.exceptions import InvalidOrder
from hexastore.common.observability import get_logger
from hexastore.common.ports import SortedSetStorePort
from hexastore.core.key_decoder import decode
from hexastore.core.key_encoder import generate_keys
from hexastore.core.model import Field, Order, Triple, TriplePattern
from hexastore.core.range_builder import build_bounds, build_range

# Every member shares this score; ordering comes from the member bytes.
MEMBER_SCORE = 0


class HexastoreIndex:
    """
    Triple index over a sorted-set store.

    Usage:
        index = HexastoreIndex("triples", RedisSortedSetAdapter())
        await index.add("alice", "knows", "bob")
        await index.query(Order.POS, TriplePattern(predicate="knows"))
        await index.query_xxo("bob")
    """

    def __init__(self, index_key: str, store: SortedSetStorePort, logger: Any | None = None) -> None:
        """
        Args:
            index_key: Name of the backing sorted set
            store: Sorted-set store the keys are written to
            logger: Optional logger, defaults to the module logger
        """
        self.index_key = index_key
        self.store = store
        self.logger = logger if logger is not None else get_logger(__name__)

    async def add(self, subject: str, predicate: str, object: str) -> None:
        keys = generate_keys(Triple(subject, predicate, object))
        await self.store.add_members(self.index_key, dict.fromkeys(sorted(keys), MEMBER_SCORE))
        self.logger.debug(f"Indexed ({subject}, {predicate}, {object}) in {self.index_key}")

    async def remove(self, subject: str, predicate: str, object: str) -> None:
        keys = generate_keys(Triple(subject, predicate, object))
        await self.store.remove_members(self.index_key, sorted(keys))
        self.logger.debug(f"Removed ({subject}, {predicate}, {object}) from {self.index_key}")

    async def query(self, order: Order | str, pattern: TriplePattern | None = None) -> list[Triple]:
        """
        Scan one ordering of the index.

        Results are sorted by the first unfixed field of the order, then the
        next one, byte-wise.

        Args:
            order: Order tag ("spo", "pos", ...) to scan
            pattern: Fields fixed by the query, all absent by default

        Returns:
            Matching triples

        Raises:
            InvalidOrder: If order is not one of the six tags
            InvalidQueryShape: If pattern fixes a field but not its predecessor in order
        """
        resolved = Order.parse(order)
        if resolved is None:
            raise InvalidOrder(order)
        if pattern is None:
            pattern = TriplePattern()

        prefix = build_range(resolved, pattern)
        start, end = build_bounds(prefix, partial=len(pattern.present_fields()) < len(Field))
        members = await self.store.range_by_lex(self.index_key, start, end)

        self.logger.debug(f"Query {prefix!r} on {self.index_key} matched {len(members)} triples")
        return [decode(member) for member in members]

    async def clear(self) -> None:
        """Drop the whole backing sorted set."""
        await self.store.delete(self.index_key)
        self.logger.info(f"Cleared hexastore index {self.index_key}")


# ============================================================
# Shorthand queries
# ============================================================


@dataclass(frozen=True)
class ShorthandQuery:
    """Fixed-shape query: method name, scanned order, positional fields."""

    name: str
    order: Order
    fields: tuple[Field, ...]


SHORTHAND_QUERIES: tuple[ShorthandQuery, ...] = (
    ShorthandQuery("query_xxx", Order.SPO, ()),
    ShorthandQuery("query_sxx", Order.SPO, (Field.SUBJECT,)),
    ShorthandQuery("query_spx", Order.SPO, (Field.SUBJECT, Field.PREDICATE)),
    ShorthandQuery("query_spo", Order.SPO, (Field.SUBJECT, Field.PREDICATE, Field.OBJECT)),
    ShorthandQuery("query_xpx", Order.PSO, (Field.PREDICATE,)),
    ShorthandQuery("query_xpo", Order.POS, (Field.PREDICATE, Field.OBJECT)),
    ShorthandQuery("query_xxo", Order.OSP, (Field.OBJECT,)),
    ShorthandQuery("query_sxo", Order.SOP, (Field.SUBJECT, Field.OBJECT)),
)


def _make_shorthand(shorthand: ShorthandQuery):
    async def method(self: HexastoreIndex, *values: str) -> list[Triple]:
        if len(values) != len(shorthand.fields):
            raise TypeError(f"{shorthand.name}() takes {len(shorthand.fields)} arguments, got {len(values)}")
        pattern = TriplePattern(**{field.value: value for field, value in zip(shorthand.fields, values)})
        return await self.query(shorthand.order, pattern)

    args = ", ".join(field.value for field in shorthand.fields) or "no fields"
    method.__name__ = shorthand.name
    method.__qualname__ = f"HexastoreIndex.{shorthand.name}"
    method.__doc__ = f"Query {shorthand.order.value} with {args} fixed."
    return method


for _shorthand in SHORTHAND_QUERIES:
    setattr(HexastoreIndex, _shorthand.name, _make_shorthand(_shorthand))
