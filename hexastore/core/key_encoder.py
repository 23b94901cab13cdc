"""
Key encoder

Turns one triple into the six composite keys stored for it, one per order:

    spo:<subject>:<predicate>:<object>
    sop:<subject>:<object>:<predicate>
    ...
"""

from hexastore.common.exceptions import InvalidFieldValue
from hexastore.core.model import ORDER_FIELDS, SEPARATOR, Field, Order, Triple


def validate_triple(triple: Triple) -> None:
    """
    Reject field values that would corrupt the composite key.

    Raises:
        InvalidFieldValue: If a field contains the separator
    """
    for field in Field:
        value = triple.get(field)
        if SEPARATOR in value:
            raise InvalidFieldValue(field.value, value, f"must not contain {SEPARATOR!r}")


def encode_key(order: Order, triple: Triple) -> str:
    values = (triple.get(field) for field in ORDER_FIELDS[order])
    return SEPARATOR.join((order.value, *values))


def generate_keys(triple: Triple) -> frozenset[str]:
    """
    All six composite keys of a triple.

    Raises:
        InvalidFieldValue: If a field contains the separator
    """
    validate_triple(triple)
    return frozenset(encode_key(order, triple) for order in Order)
