"""
Hexastore core: key encoding, range building, key decoding and the index.
"""

from hexastore.core.index import SHORTHAND_QUERIES, HexastoreIndex, ShorthandQuery
from hexastore.core.key_decoder import decode
from hexastore.core.key_encoder import encode_key, generate_keys, validate_triple
from hexastore.core.model import (
    INCLUSIVE_MARKER,
    ORDER_FIELDS,
    RANGE_TERMINATOR,
    SEPARATOR,
    Field,
    Order,
    Triple,
    TriplePattern,
)
from hexastore.core.range_builder import build_bounds, build_range

__all__ = [
    # Model
    "Field",
    "Order",
    "Triple",
    "TriplePattern",
    "ORDER_FIELDS",
    "SEPARATOR",
    "RANGE_TERMINATOR",
    "INCLUSIVE_MARKER",
    # Codec
    "encode_key",
    "generate_keys",
    "validate_triple",
    "build_range",
    "build_bounds",
    "decode",
    # Index
    "HexastoreIndex",
    "ShorthandQuery",
    "SHORTHAND_QUERIES",
]
