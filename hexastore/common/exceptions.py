"""
Hexastore Exception Hierarchy

Every error raised by the index derives from HexastoreError.

    InvalidOrder        query order tag is not one of the six permutations
    InvalidQueryShape   query pattern is not prefix-closed for its order
    InvalidFieldValue   triple field contains the key separator
    MalformedKey        stored member cannot be decoded back into a triple
    StoreError          the backing sorted-set store failed

StoreError is raised by store adapters only. The index itself never catches
it; callers see it exactly as the adapter raised it.
"""

from typing import Any


class HexastoreError(Exception):
    """Base exception for all hexastore errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize hexastore error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Query Errors
# ============================================================


class InvalidOrder(HexastoreError):
    """Order tag is not one of spo, sop, pso, pos, osp, ops."""

    def __init__(self, order: Any):
        super().__init__("Invalid order requested")
        self.order = order

    def __str__(self) -> str:
        return f"{self.message}: {self.order!r}"


class InvalidQueryShape(HexastoreError):
    """A field was supplied without the field that precedes it in the order."""

    def __init__(self, order: str, field: str, missing: str):
        super().__init__(f"You provided {field}, but there is no {missing} for a {order} query, invalid query")
        self.order = order
        self.field = field
        self.missing = missing


# ============================================================
# Data Errors
# ============================================================


class InvalidFieldValue(HexastoreError):
    """Triple field cannot be stored inside a composite key."""

    def __init__(self, field: str, value: str, reason: str):
        super().__init__(
            f"Invalid {field} value: {reason}",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


class MalformedKey(HexastoreError):
    """Sorted-set member is not a composite key written by the index."""

    def __init__(self, member: str, reason: str):
        super().__init__(f"Malformed hexastore key: {reason}", details={"member": member})
        self.member = member


# ============================================================
# Store Errors
# ============================================================


class StoreError(HexastoreError):
    """Sorted-set store operation failed."""

    def __init__(self, operation: str, set_key: str, cause: Exception):
        super().__init__(
            f"Failed to {operation} on {set_key}: {cause}",
            details={"operation": operation, "set_key": set_key},
        )
        self.operation = operation
        self.set_key = set_key
        self.cause = cause
