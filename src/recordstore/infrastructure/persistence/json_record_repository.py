"""JSON-file-backed implementation of RecordRepository.

Enforces the unique (artist, album, format) index on every write and
applies stock changes as conditional in-place updates under the
collection lock.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from recordstore.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from recordstore.domain.model.query import (
    RECORD_DEFAULT_SORT,
    RECORD_SORT_FIELDS,
    Page,
    PageRequest,
    RecordCriteria,
    SortSpec,
    sort_items,
)
from recordstore.domain.model.record import Record, RecordCategory, RecordFormat
from recordstore.domain.model.value_objects import Money
from recordstore.domain.repository.record_repository import RecordRepository
from recordstore.infrastructure.persistence.json_collection import (
    JsonCollection,
    new_object_id,
)


class JsonRecordRepository(RecordRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- RecordRepository interface -------------------------------------------

    def next_id(self) -> str:
        taken = {raw["id"] for raw in self._collection.load()}
        while True:
            candidate = new_object_id()
            if candidate not in taken:
                return candidate

    def get_by_id(self, record_id: str) -> Record | None:
        for raw in self._collection.load():
            if raw["id"] == record_id:
                return self._to_domain(raw)
        return None

    def find_by_identity(
        self,
        artist: str,
        album: str,
        format: RecordFormat,
        exclude_id: str | None = None,
    ) -> Record | None:
        raw = self._find_identity(self._collection.load(), (artist, album, format.value), exclude_id)
        return self._to_domain(raw) if raw is not None else None

    def search(
        self, criteria: RecordCriteria, sort: SortSpec, page: PageRequest
    ) -> Page[Record]:
        matching = [
            record
            for record in (self._to_domain(raw) for raw in self._collection.load())
            if criteria.matches(record)
        ]
        ordered = sort_items(matching, sort, RECORD_SORT_FIELDS, RECORD_DEFAULT_SORT)
        return Page(items=page.slice(ordered), total=len(matching))

    def add(self, record: Record) -> None:
        with self._collection.transaction() as documents:
            if any(raw["id"] == record.id for raw in documents):
                raise DuplicateEntityError(f"Record ID {record.id} already in use")
            self._check_unique(documents, record)
            documents.append(self._to_raw(record))

    def save(self, record: Record) -> None:
        with self._collection.transaction() as documents:
            index = self._index_of(documents, record.id)
            if index is None:
                raise EntityNotFoundError("Record not found")
            self._check_unique(documents, record)
            documents[index] = self._to_raw(record)

    def delete(self, record_id: str) -> bool:
        with self._collection.transaction() as documents:
            index = self._index_of(documents, record_id)
            if index is None:
                return False
            del documents[index]
            return True

    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        with self._collection.transaction() as documents:
            index = self._index_of(documents, record_id)
            if index is None or documents[index]["qty"] < quantity:
                return False
            documents[index]["qty"] -= quantity
            return True

    def increment_stock(self, record_id: str, quantity: int) -> None:
        with self._collection.transaction() as documents:
            index = self._index_of(documents, record_id)
            if index is None:
                raise EntityNotFoundError("Record not found")
            documents[index]["qty"] += quantity

    # --- Index helpers --------------------------------------------------------

    @staticmethod
    def _index_of(documents: list[dict], record_id: str) -> int | None:
        for i, raw in enumerate(documents):
            if raw["id"] == record_id:
                return i
        return None

    @staticmethod
    def _find_identity(
        documents: list[dict],
        identity: tuple[str, str, str],
        exclude_id: str | None,
    ) -> dict | None:
        for raw in documents:
            if raw["id"] == exclude_id:
                continue
            if (raw["artist"], raw["album"], raw["format"]) == identity:
                return raw
        return None

    def _check_unique(self, documents: list[dict], record: Record) -> None:
        identity = (record.artist, record.album, record.format.value)
        if self._find_identity(documents, identity, exclude_id=record.id) is not None:
            raise DuplicateEntityError(
                f"Record already exists: {record.artist} - {record.album} "
                f"({record.format.value})"
            )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: Record) -> dict:
        return {
            "id": record.id,
            "artist": record.artist,
            "album": record.album,
            "price": str(record.price.amount),
            "currency": record.price.currency,
            "qty": record.qty,
            "format": record.format.value,
            "category": record.category.value,
            "mbid": record.mbid,
            "tracklist": list(record.tracklist),
            "created": record.created.isoformat(),
            "lastModified": record.last_modified.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Record:
        return Record(
            id=raw["id"],
            artist=raw["artist"],
            album=raw["album"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            qty=raw["qty"],
            format=RecordFormat(raw["format"]),
            category=RecordCategory(raw["category"]),
            mbid=raw.get("mbid"),
            tracklist=list(raw.get("tracklist") or []),
            created=datetime.fromisoformat(raw["created"]),
            last_modified=datetime.fromisoformat(raw["lastModified"]),
        )
