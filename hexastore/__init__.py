"""
Hexastore on Redis

Indexes (subject, predicate, object) triples in one Redis sorted set under
all six field orderings, so every prefix query is a single ZRANGEBYLEX.
"""

from hexastore.common.exceptions import (
    HexastoreError,
    InvalidFieldValue,
    InvalidOrder,
    InvalidQueryShape,
    MalformedKey,
    StoreError,
)
from hexastore.core import HexastoreIndex, Order, Triple, TriplePattern
from hexastore.factory import create_hexastore_index

__version__ = "0.1.0"

__all__ = [
    "HexastoreIndex",
    "Order",
    "Triple",
    "TriplePattern",
    "create_hexastore_index",
    # Errors
    "HexastoreError",
    "InvalidOrder",
    "InvalidQueryShape",
    "InvalidFieldValue",
    "MalformedKey",
    "StoreError",
]
