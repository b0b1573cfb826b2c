"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry already-validated input into the handlers; the output DTOs
carry projections back out without exposing domain internals.
``to_dict()`` renders the external (camelCase) projection shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from recordstore.domain.model.order import Order
from recordstore.domain.model.record import Record, RecordCategory, RecordFormat
from recordstore.domain.model.value_objects import Money

T = TypeVar("T")


# --- Input ------------------------------------------------------------------


@dataclass(frozen=True)
class CreateRecordCommand:
    artist: str
    album: str
    price: Money
    qty: int
    format: RecordFormat
    category: RecordCategory
    mbid: str | None = None


@dataclass(frozen=True)
class UpdateRecordCommand:
    """Partial update: ``None`` fields are left untouched."""

    artist: str | None = None
    album: str | None = None
    price: Money | None = None
    qty: int | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    mbid: str | None = None

    @property
    def touches_identity(self) -> bool:
        return any(v is not None for v in (self.artist, self.album, self.format))


@dataclass(frozen=True)
class CreateOrderCommand:
    record_id: str
    quantity: int
    customer_name: str
    customer_email: str
    shipping_address: str


# --- Output -----------------------------------------------------------------


@dataclass(frozen=True)
class RecordDTO:
    id: str
    artist: str
    album: str
    price: Decimal
    qty: int
    format: str
    category: str
    mbid: str | None
    tracklist: list[str]
    created: datetime
    last_modified: datetime

    @staticmethod
    def from_domain(record: Record) -> RecordDTO:
        return RecordDTO(
            id=record.id,
            artist=record.artist,
            album=record.album,
            price=record.price.amount,
            qty=record.qty,
            format=record.format.value,
            category=record.category.value,
            mbid=record.mbid,
            tracklist=list(record.tracklist),
            created=record.created,
            last_modified=record.last_modified,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "artist": self.artist,
            "album": self.album,
            "price": str(self.price),
            "qty": self.qty,
            "format": self.format,
            "category": self.category,
            "mbid": self.mbid,
            "tracklist": list(self.tracklist),
            "created": self.created.isoformat(),
            "lastModified": self.last_modified.isoformat(),
        }


@dataclass(frozen=True)
class OrderDTO:
    id: str
    record_id: str
    quantity: int
    total_price: Decimal
    order_date: datetime
    customer_name: str
    customer_email: str
    shipping_address: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            record_id=order.record_id,
            quantity=order.quantity.value,
            total_price=order.total_price.amount,
            order_date=order.order_date,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            shipping_address=order.shipping_address,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "recordId": self.record_id,
            "quantity": self.quantity,
            "totalPrice": str(self.total_price),
            "orderDate": self.order_date.isoformat(),
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "shippingAddress": self.shipping_address,
        }


@dataclass(frozen=True)
class PageDTO(Generic[T]):
    """Output: one page of a listing plus the numbers to navigate it."""

    data: list[T]
    page: int
    limit: int
    total: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "data": [item.to_dict() for item in self.data],  # type: ignore[attr-defined]
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


@dataclass(frozen=True)
class ReleaseLookupDTO:
    """Output: result of probing the metadata service for one release."""

    success: bool
    mbid: str
    tracks: list[str] = field(default_factory=list)
    artist: str | None = None
    album: str | None = None
    release_date: str | None = None
    error: str | None = None
    duration_ms: int = 0

    @property
    def count(self) -> int:
        return len(self.tracks)

    def to_dict(self) -> dict:
        result = {
            "success": self.success,
            "mbid": self.mbid,
            "tracks": list(self.tracks),
            "count": self.count,
        }
        if self.success:
            result.update(
                artist=self.artist,
                album=self.album,
                releaseDate=self.release_date,
                durationMs=self.duration_ms,
            )
        else:
            result["error"] = self.error
        return result
