"""Record aggregate: one sellable catalog entry.

A record is identified in the catalog by its (artist, album, format)
triple, which must be unique among live records. The catalog handlers
are the only writers; order placement touches stock exclusively through
the repository's atomic ``decrement_stock``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from recordstore.domain.exceptions import ValidationError
from recordstore.domain.model.value_objects import Money


class _LabelledEnum(Enum):

    @classmethod
    def parse(cls, raw: str):
        """Match *raw* against member values or names, ignoring case."""
        wanted = raw.strip().casefold()
        for member in cls:
            if wanted in (member.value.casefold(), member.name.casefold()):
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValidationError(f"Unknown {cls.__name__} {raw!r} (expected one of: {choices})")


class RecordFormat(_LabelledEnum):
    VINYL = "Vinyl"
    CD = "CD"
    CASSETTE = "Cassette"
    DIGITAL = "Digital"


class RecordCategory(_LabelledEnum):
    ROCK = "Rock"
    POP = "Pop"
    JAZZ = "Jazz"
    INDIE = "Indie"
    ALTERNATIVE = "Alternative"
    CLASSICAL = "Classical"
    HIP_HOP = "Hip-Hop"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Record:
    """Aggregate root for catalog entries.

    Use ``Record.create()`` for new records. The plain constructor is kept
    simple so repositories can reconstitute stored records without
    re-validating.
    """

    id: str
    artist: str
    album: str
    price: Money
    qty: int
    format: RecordFormat
    category: RecordCategory
    mbid: str | None = None
    tracklist: list[str] = field(default_factory=list)
    created: datetime = field(default_factory=_utcnow)
    last_modified: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(
        record_id: str,
        artist: str,
        album: str,
        price: Money,
        qty: int,
        format: RecordFormat,
        category: RecordCategory,
        mbid: str | None = None,
        tracklist: list[str] | None = None,
    ) -> Record:
        """Create a new record, enforcing field invariants."""
        _require_text("artist", artist)
        _require_text("album", album)
        _require_stock(qty)
        now = _utcnow()
        return Record(
            id=record_id,
            artist=artist.strip(),
            album=album.strip(),
            price=price,
            qty=qty,
            format=format,
            category=category,
            mbid=mbid,
            tracklist=list(tracklist or []),
            created=now,
            last_modified=now,
        )

    @property
    def identity(self) -> tuple[str, str, RecordFormat]:
        """The (artist, album, format) triple the catalog keeps unique."""
        return (self.artist, self.album, self.format)

    @property
    def in_stock(self) -> bool:
        return self.qty > 0

    def revise(
        self,
        *,
        artist: str | None = None,
        album: str | None = None,
        price: Money | None = None,
        qty: int | None = None,
        format: RecordFormat | None = None,
        category: RecordCategory | None = None,
        mbid: str | None = None,
        tracklist: list[str] | None = None,
    ) -> None:
        """Apply a partial update. ``None`` means "leave unchanged"."""
        if artist is not None:
            _require_text("artist", artist)
            self.artist = artist.strip()
        if album is not None:
            _require_text("album", album)
            self.album = album.strip()
        if price is not None:
            self.price = price
        if qty is not None:
            _require_stock(qty)
            self.qty = qty
        if format is not None:
            self.format = format
        if category is not None:
            self.category = category
        if mbid is not None:
            self.mbid = mbid
        if tracklist is not None:
            self.tracklist = list(tracklist)
        self.last_modified = _utcnow()


def _require_text(name: str, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"Record {name} is required")


def _require_stock(qty: int) -> None:
    if isinstance(qty, bool) or not isinstance(qty, int):
        raise ValidationError(f"Stock quantity must be an integer, got {type(qty).__name__}")
    if qty < 0:
        raise ValidationError("Stock quantity cannot be negative")
