"""Listing queries: named, typed options coerced from flat text parameters.

List requests arrive as a flat key/value set of strings. Coercion here is
deliberately permissive: unusable values fall back to their defaults and
unknown keys are ignored, so a listing never fails on its parameters.
The same page and limit rules apply when a query is built directly.
Integers with more than 18 digits count as unusable.

Defaults and coercion rules:

==========  =======================  =======================================
key         default                  coercion
==========  =======================  =======================================
artist      none                     trimmed text; blank means none
album       none                     trimmed text; blank means none
format      none                     enum, any case; unknown means none
category    none                     enum, any case; unknown means none
minPrice    none                     decimal; unparsable means none
maxPrice    none                     decimal; unparsable means none
inStock     false                    true/1/yes/on (any case) means true
page        1                        integer; < 1 or unparsable means 1
limit       10                       integer; < 1 or unparsable means 10,
                                     capped at 100
sortBy      lastModified/orderDate   any text; unknown fields sort by the
                                     default field
sortOrder   desc                     "asc" means ascending, else descending
==========  =======================  =======================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

from recordstore.domain.exceptions import ValidationError
from recordstore.domain.model.query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    ORDER_DEFAULT_SORT,
    RECORD_DEFAULT_SORT,
    PageRequest,
    RecordCriteria,
    SortSpec,
)
from recordstore.domain.model.record import RecordCategory, RecordFormat

_TRUTHY = {"true", "1", "yes", "on"}
_MAX_INT_DIGITS = 18
_MAX_INT_CHARS = 64


@dataclass(frozen=True)
class RecordQuery:
    artist: str | None = None
    album: str | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool = False
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = RECORD_DEFAULT_SORT
    sort_order: str = "desc"

    def __post_init__(self) -> None:
        _clamp_paging(self)

    @staticmethod
    def from_params(params: Mapping[str, str | None]) -> RecordQuery:
        return RecordQuery(
            artist=coerce_text(params.get("artist")),
            album=coerce_text(params.get("album")),
            format=_coerce_enum(RecordFormat, params.get("format")),
            category=_coerce_enum(RecordCategory, params.get("category")),
            min_price=coerce_decimal(params.get("minPrice")),
            max_price=coerce_decimal(params.get("maxPrice")),
            in_stock=coerce_bool(params.get("inStock")),
            page=coerce_page(params.get("page")),
            limit=coerce_limit(params.get("limit")),
            sort_by=coerce_text(params.get("sortBy")) or RECORD_DEFAULT_SORT,
            sort_order=coerce_sort_order(params.get("sortOrder")),
        )

    def criteria(self) -> RecordCriteria:
        return RecordCriteria(
            artist=self.artist,
            album=self.album,
            format=self.format,
            category=self.category,
            min_price=self.min_price,
            max_price=self.max_price,
            in_stock=self.in_stock,
        )

    def sort(self) -> SortSpec:
        return SortSpec(self.sort_by, descending=self.sort_order != "asc")

    def page_request(self) -> PageRequest:
        return PageRequest(self.page, self.limit)


@dataclass(frozen=True)
class OrderQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = ORDER_DEFAULT_SORT
    sort_order: str = "desc"

    def __post_init__(self) -> None:
        _clamp_paging(self)

    @staticmethod
    def from_params(params: Mapping[str, str | None]) -> OrderQuery:
        return OrderQuery(
            page=coerce_page(params.get("page")),
            limit=coerce_limit(params.get("limit")),
            sort_by=coerce_text(params.get("sortBy")) or ORDER_DEFAULT_SORT,
            sort_order=coerce_sort_order(params.get("sortOrder")),
        )

    def sort(self) -> SortSpec:
        return SortSpec(self.sort_by, descending=self.sort_order != "asc")

    def page_request(self) -> PageRequest:
        return PageRequest(self.page, self.limit)


# --- Coercion helpers ---------------------------------------------------------


def coerce_text(raw: str | int | None) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def coerce_int(raw: str | int | None) -> int | None:
    text = coerce_text(raw)
    if text is None or len(text) > _MAX_INT_CHARS:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    # "2.0" or "1e2": accepted only while the magnitude stays small
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() > _MAX_INT_DIGITS:
        return None
    return int(value)


def coerce_page(raw: str | int | None) -> int:
    value = coerce_int(raw)
    if value is None or value < 1:
        return DEFAULT_PAGE
    return value


def coerce_limit(raw: str | int | None) -> int:
    value = coerce_int(raw)
    if value is None or value < 1:
        return DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


def coerce_decimal(raw: str | None) -> Decimal | None:
    text = coerce_text(raw)
    if text is None:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def coerce_bool(raw: str | None) -> bool:
    text = coerce_text(raw)
    return text is not None and text.casefold() in _TRUTHY


def coerce_sort_order(raw: str | None) -> str:
    text = coerce_text(raw)
    return "asc" if text is not None and text.casefold() == "asc" else "desc"


def _coerce_enum(enum_cls, raw: str | None):
    text = coerce_text(raw)
    if text is None:
        return None
    try:
        return enum_cls.parse(text)
    except ValidationError:
        return None


def _clamp_paging(query: RecordQuery | OrderQuery) -> None:
    # frozen dataclass: the clamped values are written past __setattr__
    object.__setattr__(query, "page", coerce_page(query.page))
    object.__setattr__(query, "limit", coerce_limit(query.limit))
