"""Input validation for the boundary layer.

One function per input shape. Each takes raw values (text from the
command line or decoded JSON) and returns a typed command, or raises
ValidationError naming every field that failed. Handlers assume their
commands came through here and only check business rules.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping, TypeVar

from recordstore.application.dto import (
    CreateOrderCommand,
    CreateRecordCommand,
    UpdateRecordCommand,
)
from recordstore.domain.exceptions import ValidationError
from recordstore.domain.model.order import EMAIL_PATTERN
from recordstore.domain.model.record import RecordCategory, RecordFormat
from recordstore.domain.model.value_objects import Money

E = TypeVar("E")

_MISSING = object()


class _Errors:
    """Collects per-field problems so all of them are reported at once."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def add(self, message: str) -> None:
        self.messages.append(message)

    def raise_if_any(self) -> None:
        if self.messages:
            raise ValidationError("; ".join(self.messages))


def parse_create_record(data: Mapping[str, Any]) -> CreateRecordCommand:
    errors = _Errors()
    artist = _text(data, "artist", errors, required=True)
    album = _text(data, "album", errors, required=True)
    price = _price(data, "price", errors, required=True)
    qty = _integer(data, "qty", errors, minimum=0, required=True)
    fmt = _choice(data, "format", RecordFormat.parse, errors, required=True)
    category = _choice(data, "category", RecordCategory.parse, errors, required=True)
    mbid = _optional_id(data, "mbid", errors)
    errors.raise_if_any()

    return CreateRecordCommand(
        artist=artist,  # type: ignore[arg-type]
        album=album,  # type: ignore[arg-type]
        price=price,  # type: ignore[arg-type]
        qty=qty,  # type: ignore[arg-type]
        format=fmt,  # type: ignore[arg-type]
        category=category,  # type: ignore[arg-type]
        mbid=mbid,
    )


def parse_update_record(data: Mapping[str, Any]) -> UpdateRecordCommand:
    errors = _Errors()
    command = UpdateRecordCommand(
        artist=_text(data, "artist", errors),
        album=_text(data, "album", errors),
        price=_price(data, "price", errors),
        qty=_integer(data, "qty", errors, minimum=0),
        format=_choice(data, "format", RecordFormat.parse, errors),
        category=_choice(data, "category", RecordCategory.parse, errors),
        mbid=_optional_id(data, "mbid", errors),
    )
    errors.raise_if_any()

    if command == UpdateRecordCommand():
        raise ValidationError("Update must change at least one field")
    return command


def parse_create_order(data: Mapping[str, Any]) -> CreateOrderCommand:
    errors = _Errors()
    record_id = _text(data, "recordId", errors, required=True)
    quantity = _integer(data, "quantity", errors, minimum=1, required=True)
    customer_name = _text(data, "customerName", errors, required=True)
    customer_email = _text(data, "customerEmail", errors, required=True)
    shipping_address = _text(data, "shippingAddress", errors, required=True)
    if customer_email is not None and not EMAIL_PATTERN.match(customer_email):
        errors.add(f"customerEmail must be a valid email address, got {customer_email!r}")
    errors.raise_if_any()

    return CreateOrderCommand(
        record_id=record_id,  # type: ignore[arg-type]
        quantity=quantity,  # type: ignore[arg-type]
        customer_name=customer_name,  # type: ignore[arg-type]
        customer_email=customer_email,  # type: ignore[arg-type]
        shipping_address=shipping_address,  # type: ignore[arg-type]
    )


# --- Field helpers ------------------------------------------------------------


def _get(data: Mapping[str, Any], key: str, errors: _Errors, required: bool) -> Any:
    value = data.get(key, _MISSING)
    if value is None:
        value = _MISSING
    if value is _MISSING and required:
        errors.add(f"{key} is required")
    return value


def _text(
    data: Mapping[str, Any], key: str, errors: _Errors, required: bool = False
) -> str | None:
    value = _get(data, key, errors, required)
    if value is _MISSING:
        return None
    if not isinstance(value, str):
        errors.add(f"{key} must be a string")
        return None
    if not value.strip():
        errors.add(f"{key} cannot be empty or contain only whitespace")
        return None
    return value.strip()


def _optional_id(data: Mapping[str, Any], key: str, errors: _Errors) -> str | None:
    value = _get(data, key, errors, required=False)
    if value is _MISSING:
        return None
    if not isinstance(value, str):
        errors.add(f"{key} must be a string")
        return None
    return value.strip() or None


def _price(
    data: Mapping[str, Any], key: str, errors: _Errors, required: bool = False
) -> Money | None:
    value = _get(data, key, errors, required)
    if value is _MISSING:
        return None
    if isinstance(value, bool):
        errors.add(f"{key} must be a number")
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        errors.add(f"{key} must be a number, got {value!r}")
        return None
    if not amount.is_finite() or amount < 0:
        errors.add(f"{key} must be a number >= 0, got {value!r}")
        return None
    return Money(amount)


def _integer(
    data: Mapping[str, Any],
    key: str,
    errors: _Errors,
    minimum: int,
    required: bool = False,
) -> int | None:
    value = _get(data, key, errors, required)
    if value is _MISSING:
        return None

    number: int | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            number = None

    if number is None:
        errors.add(f"{key} must be an integer, got {value!r}")
        return None
    if number < minimum:
        errors.add(f"{key} must be >= {minimum}, got {number}")
        return None
    return number


def _choice(
    data: Mapping[str, Any],
    key: str,
    parse: Callable[[str], E],
    errors: _Errors,
    required: bool = False,
) -> E | None:
    value = _get(data, key, errors, required)
    if value is _MISSING:
        return None
    if not isinstance(value, str):
        errors.add(f"{key} must be a string")
        return None
    try:
        return parse(value)
    except ValidationError as exc:
        errors.add(f"{key}: {exc}")
        return None
