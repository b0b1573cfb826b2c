"""Abstract repository for the Record aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer or in tests.

Implementations must enforce the unique (artist, album, format) index
themselves: the handlers' pre-checks only exist to give a clean error
message, and two racing writers must not both succeed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordstore.domain.model.query import Page, PageRequest, RecordCriteria, SortSpec
from recordstore.domain.model.record import Record, RecordFormat


class RecordRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unused record identifier."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Record | None:
        """Return a record by its ID, or None if not found."""

    @abstractmethod
    def find_by_identity(
        self,
        artist: str,
        album: str,
        format: RecordFormat,
        exclude_id: str | None = None,
    ) -> Record | None:
        """Return the record holding this (artist, album, format) triple.

        ``exclude_id`` skips one record, so an update can check for
        collisions against every *other* record.
        """

    @abstractmethod
    def search(
        self, criteria: RecordCriteria, sort: SortSpec, page: PageRequest
    ) -> Page[Record]:
        """Return one sorted page of matching records plus the match count."""

    @abstractmethod
    def add(self, record: Record) -> None:
        """Insert a new record.

        Raises DuplicateEntityError if the identity triple is taken.
        """

    @abstractmethod
    def save(self, record: Record) -> None:
        """Replace an existing record.

        Raises DuplicateEntityError if the identity triple collides with a
        different record, EntityNotFoundError if the record is gone.
        """

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Delete if exists; return whether a record was removed."""

    @abstractmethod
    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        """Atomically subtract *quantity* if at least that much is in stock.

        Returns False, leaving stock unchanged, when the record is missing
        or holds fewer than *quantity* units.
        """

    @abstractmethod
    def increment_stock(self, record_id: str, quantity: int) -> None:
        """Atomically add *quantity* back to a record's stock."""
