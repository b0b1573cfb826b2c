"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the boundary layer can catch them uniformly and map them to user-facing
messages or status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a value was out of range."""


class DuplicateEntityError(DomainException):
    """A catalog uniqueness rule would be violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class RecordNotFoundError(EntityNotFoundError):
    """An order referenced a record that does not exist."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Record with ID {record_id} not found")
        self.record_id = record_id


class InsufficientStockError(DomainException):
    """An order asked for more units than the record has in stock."""

    def __init__(self, record_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for record {record_id} "
            f"(need {requested}, have {available} available)"
        )
        self.record_id = record_id
        self.requested = requested
        self.available = available


class MetadataLookupError(DomainException):
    """External release metadata could not be fetched or parsed."""
