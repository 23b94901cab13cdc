"""
Range builder

A query pattern can only be answered by one range scan when the fields it
fixes form a prefix of the order's field sequence. For `spo`:

    {}                               -> "spo"
    {subject}                        -> "spo:<s>"
    {subject, predicate}             -> "spo:<s>:<p>"
    {subject, predicate, object}     -> "spo:<s>:<p>:<o>"
    {subject, object}                -> InvalidQueryShape (no predicate)
"""

from hexastore.common.exceptions import InvalidFieldValue, InvalidQueryShape
from hexastore.core.model import INCLUSIVE_MARKER, ORDER_FIELDS, RANGE_TERMINATOR, SEPARATOR, Order, TriplePattern


def build_range(order: Order, pattern: TriplePattern) -> str:
    """
    Build the key prefix shared by every member matching the pattern.

    Args:
        order: Order whose keys are scanned
        pattern: Fields fixed by the query

    Returns:
        Prefix string, e.g. "spo:alice:knows"

    Raises:
        InvalidQueryShape: If a field is present but its predecessor in the order is absent
        InvalidFieldValue: If a value contains the separator
    """
    parts = [order.value]
    sequence = ORDER_FIELDS[order]

    for i, field in enumerate(sequence):
        value = pattern.get(field)
        if value is None:
            continue
        if i > 0 and not pattern.is_present(sequence[i - 1]):
            raise InvalidQueryShape(order.value, field.value, sequence[i - 1].value)
        if SEPARATOR in value:
            raise InvalidFieldValue(field.value, value, f"must not contain {SEPARATOR!r}")
        parts.append(value)

    return SEPARATOR.join(parts)


def build_bounds(prefix: str, partial: bool = True) -> tuple[bytes, bytes]:
    """
    ZRANGEBYLEX bounds selecting the members under prefix.

    These are narrower than the bare `[prefix` .. `[prefix` + 0xFF pair: a
    partial prefix gets a trailing separator so that "spo:al" does not also
    match "spo:alice:...", and a complete key (partial=False) uses equal
    inclusive bounds so it matches only itself, not "spo:s:p:o2". Without
    both, a fully specified query could return more than one triple.
    """
    encoded = INCLUSIVE_MARKER + prefix.encode("utf-8")
    if not partial:
        return encoded, encoded
    encoded += SEPARATOR.encode("utf-8")
    return encoded, encoded + RANGE_TERMINATOR
