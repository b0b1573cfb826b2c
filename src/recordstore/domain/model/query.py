"""Query objects for catalog and order listings.

These describe *what* to list (criteria), in which order (sort) and which
slice (page). Repositories evaluate them; keeping the semantics here means
every storage adapter filters and sorts identically.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Generic, Iterable, TypeVar

from recordstore.domain.model.order import Order
from recordstore.domain.model.record import Record, RecordCategory, RecordFormat

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page number and a page size, already clamped."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1 or not 1 <= self.limit <= MAX_LIMIT:
            raise ValueError(f"Invalid page request: page={self.page}, limit={self.limit}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)

    def slice(self, items: list[T]) -> list[T]:
        return items[self.offset:self.offset + self.limit]


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    total: int


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = True


@dataclass(frozen=True)
class RecordCriteria:
    """Catalog filter. Every ``None`` field matches everything."""

    artist: str | None = None
    album: str | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool = False

    def matches(self, record: Record) -> bool:
        if self.artist and self.artist.casefold() not in record.artist.casefold():
            return False
        if self.album and self.album.casefold() not in record.album.casefold():
            return False
        if self.format is not None and record.format is not self.format:
            return False
        if self.category is not None and record.category is not self.category:
            return False
        if self.min_price is not None and record.price.amount < self.min_price:
            return False
        if self.max_price is not None and record.price.amount > self.max_price:
            return False
        if self.in_stock and not record.in_stock:
            return False
        return True


# ---------------------------------------------------------------------------
# Sortable fields, keyed by projection name
# ---------------------------------------------------------------------------
RECORD_SORT_FIELDS: dict[str, Callable[[Record], object]] = {
    "id": lambda r: r.id,
    "artist": lambda r: r.artist,
    "album": lambda r: r.album,
    "price": lambda r: r.price.amount,
    "qty": lambda r: r.qty,
    "format": lambda r: r.format.value,
    "category": lambda r: r.category.value,
    "mbid": lambda r: r.mbid,
    "tracklist": lambda r: r.tracklist,
    "created": lambda r: r.created,
    "lastModified": lambda r: r.last_modified,
}
RECORD_DEFAULT_SORT = "lastModified"

ORDER_SORT_FIELDS: dict[str, Callable[[Order], object]] = {
    "id": lambda o: o.id,
    "recordId": lambda o: o.record_id,
    "quantity": lambda o: o.quantity.value,
    "totalPrice": lambda o: o.total_price.amount,
    "orderDate": lambda o: o.order_date,
    "customerName": lambda o: o.customer_name,
    "customerEmail": lambda o: o.customer_email,
    "shippingAddress": lambda o: o.shipping_address,
}
ORDER_DEFAULT_SORT = "orderDate"


def sort_items(
    items: Iterable[T],
    sort: SortSpec,
    fields: dict[str, Callable[[T], object]],
    fallback: str,
) -> list[T]:
    """Sort *items* by a named field, tie-broken by ``id``.

    Unknown field names sort by *fallback*. Missing (``None``) values come
    first in ascending order and last in descending order.
    """
    accessor = fields.get(sort.field) or fields.get(_camel(sort.field)) or fields[fallback]
    ordered = sorted(items, key=lambda item: item.id)  # type: ignore[attr-defined]
    present = [item for item in ordered if accessor(item) is not None]
    missing = [item for item in ordered if accessor(item) is None]
    present.sort(key=accessor, reverse=sort.descending)  # type: ignore[arg-type]
    return present + missing if sort.descending else missing + present


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
