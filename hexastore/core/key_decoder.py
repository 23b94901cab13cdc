"""
Key decoder

Inverse of key_encoder.encode_key: `pos:<p>:<o>:<s>` -> Triple(s, p, o).
"""

from hexastore.common.exceptions import MalformedKey
from hexastore.core.model import ORDER_FIELDS, SEPARATOR, Order, Triple


def decode(member: str) -> Triple:
    """
    Decode a stored composite key.

    Raises:
        MalformedKey: If the tag is unknown or the key has the wrong number of parts
    """
    tag, *values = member.split(SEPARATOR)
    order = Order.parse(tag)
    if order is None:
        raise MalformedKey(member, f"unknown order {tag!r}")

    sequence = ORDER_FIELDS[order]
    if len(values) != len(sequence):
        raise MalformedKey(member, f"expected {len(sequence)} values, got {len(values)}")

    by_field = {field.value: value for field, value in zip(sequence, values)}
    return Triple(**by_field)
