"""
Hexastore data model

Triples, field names, the six order tags and the wire constants shared by
the key encoder, range builder and key decoder.
"""

from dataclasses import dataclass, fields
from enum import Enum

# Wire constants. Composite keys look like `spo:<subject>:<predicate>:<object>`.
SEPARATOR = ":"
# Never produced by UTF-8, so it sorts after every byte of a valid field.
RANGE_TERMINATOR = b"\xff"
INCLUSIVE_MARKER = b"["


class Field(str, Enum):
    """One position of a triple."""

    SUBJECT = "subject"
    PREDICATE = "predicate"
    OBJECT = "object"

    @property
    def initial(self) -> str:
        return self.value[0]


class Order(str, Enum):
    """Field ordering of a composite key, named by the field initials."""

    SPO = "spo"
    SOP = "sop"
    PSO = "pso"
    POS = "pos"
    OSP = "osp"
    OPS = "ops"

    @property
    def fields(self) -> tuple[Field, Field, Field]:
        return ORDER_FIELDS[self]

    @classmethod
    def parse(cls, value: "Order | str") -> "Order | None":
        """Return the matching order, or None when value is not a known tag."""
        if isinstance(value, Order):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_BY_INITIAL = {f.initial: f for f in Field}

ORDER_FIELDS: dict[Order, tuple[Field, Field, Field]] = {
    order: tuple(_BY_INITIAL[initial] for initial in order.value)  # type: ignore[misc]
    for order in Order
}


@dataclass(frozen=True)
class Triple:
    """Directed labeled edge (subject, predicate, object)."""

    subject: str
    predicate: str
    object: str

    def get(self, field: Field) -> str:
        return getattr(self, field.value)

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.subject, self.predicate, self.object)


@dataclass(frozen=True)
class TriplePattern:
    """
    Partially specified triple used for queries.

    Each field is either present (any str, including "") or absent (None).
    Which combinations are valid depends on the order the pattern is
    queried with; see range_builder.build_range.
    """

    subject: str | None = None
    predicate: str | None = None
    object: str | None = None

    def get(self, field: Field) -> str | None:
        return getattr(self, field.value)

    def is_present(self, field: Field) -> bool:
        return self.get(field) is not None

    def present_fields(self) -> tuple[Field, ...]:
        return tuple(Field(f.name) for f in fields(self) if getattr(self, f.name) is not None)

    @classmethod
    def of(cls, triple: Triple) -> "TriplePattern":
        """Fully specified pattern matching exactly one triple."""
        return cls(subject=triple.subject, predicate=triple.predicate, object=triple.object)
