"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
and the MusicBrainz client but keep everything in a dict. No file I/O,
no network, no side effects. Stored entities are copied on the way in
and out, the way a real store would hand back fresh objects.
"""

from __future__ import annotations

import copy
import itertools

from recordstore.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    MetadataLookupError,
)
from recordstore.domain.model.order import Order
from recordstore.domain.model.query import (
    ORDER_DEFAULT_SORT,
    ORDER_SORT_FIELDS,
    RECORD_DEFAULT_SORT,
    RECORD_SORT_FIELDS,
    Page,
    PageRequest,
    RecordCriteria,
    SortSpec,
    sort_items,
)
from recordstore.domain.model.record import Record, RecordCategory, RecordFormat
from recordstore.domain.model.release_metadata import ReleaseMetadata
from recordstore.domain.model.value_objects import Money
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.domain.repository.record_repository import RecordRepository
from recordstore.domain.service.metadata_provider import MetadataProvider


def _hex_ids(prefix: str):
    for n in itertools.count(1):
        yield f"{prefix}{n:0{24 - len(prefix)}x}"


class FakeRecordRepository(RecordRepository):

    def __init__(self, records: list[Record] | None = None) -> None:
        self._store: dict[str, Record] = {}
        self._ids = _hex_ids("aa")
        for r in records or []:
            self._store[r.id] = copy.deepcopy(r)

    def next_id(self) -> str:
        return next(self._ids)

    def get_by_id(self, record_id: str) -> Record | None:
        return copy.deepcopy(self._store.get(record_id))

    def find_by_identity(
        self,
        artist: str,
        album: str,
        format: RecordFormat,
        exclude_id: str | None = None,
    ) -> Record | None:
        for r in self._store.values():
            if r.id != exclude_id and r.identity == (artist, album, format):
                return copy.deepcopy(r)
        return None

    def search(
        self, criteria: RecordCriteria, sort: SortSpec, page: PageRequest
    ) -> Page[Record]:
        matching = [copy.deepcopy(r) for r in self._store.values() if criteria.matches(r)]
        ordered = sort_items(matching, sort, RECORD_SORT_FIELDS, RECORD_DEFAULT_SORT)
        return Page(items=page.slice(ordered), total=len(matching))

    def add(self, record: Record) -> None:
        self._check_unique(record)
        self._store[record.id] = copy.deepcopy(record)

    def save(self, record: Record) -> None:
        if record.id not in self._store:
            raise EntityNotFoundError("Record not found")
        self._check_unique(record)
        self._store[record.id] = copy.deepcopy(record)

    def delete(self, record_id: str) -> bool:
        return self._store.pop(record_id, None) is not None

    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        record = self._store.get(record_id)
        if record is None or record.qty < quantity:
            return False
        record.qty -= quantity
        return True

    def increment_stock(self, record_id: str, quantity: int) -> None:
        self._store[record_id].qty += quantity

    def _check_unique(self, record: Record) -> None:
        for other in self._store.values():
            if other.id != record.id and other.identity == record.identity:
                raise DuplicateEntityError("Record already exists")


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail_on_add: bool = False) -> None:
        self._store: dict[str, Order] = {}
        self._ids = _hex_ids("bb")
        self.fail_on_add = fail_on_add

    def next_id(self) -> str:
        return next(self._ids)

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_page(self, sort: SortSpec, page: PageRequest) -> Page[Order]:
        ordered = sort_items(self._store.values(), sort, ORDER_SORT_FIELDS, ORDER_DEFAULT_SORT)
        return Page(items=page.slice(ordered), total=len(self._store))

    def add(self, order: Order) -> None:
        if self.fail_on_add:
            raise OSError("disk full")
        self._store[order.id] = order


class FakeMetadataProvider(MetadataProvider):
    """Serves canned releases; unknown MBIDs fail like a network error."""

    def __init__(self, releases: dict[str, ReleaseMetadata] | None = None) -> None:
        self._releases = dict(releases or {})
        self.calls: list[str] = []

    def lookup(self, external_id: str) -> ReleaseMetadata:
        self.calls.append(external_id)
        if external_id not in self._releases:
            raise MetadataLookupError(f"no release {external_id}")
        return self._releases[external_id]


def make_record(
    record_id: str = "a" * 24,
    artist: str = "The Beatles",
    album: str = "Abbey Road",
    price: str = "29.99",
    qty: int = 5,
    format: RecordFormat = RecordFormat.VINYL,
    **extra,
) -> Record:
    """Build a stored-looking record with sensible defaults."""
    extra.setdefault("category", RecordCategory.ROCK)
    return Record(
        id=record_id,
        artist=artist,
        album=album,
        price=Money.of(price),
        qty=qty,
        format=format,
        **extra,
    )
