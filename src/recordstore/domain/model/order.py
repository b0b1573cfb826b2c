"""Order aggregate: a customer purchase of one record.

Orders are immutable once placed. The total is a snapshot of the record's
unit price at the moment stock was checked, multiplied by the quantity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from recordstore.domain.exceptions import ValidationError
from recordstore.domain.model.value_objects import Money, Quantity

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.place()`` for new orders.
    """

    id: str
    record_id: str
    quantity: Quantity
    total_price: Money
    customer_name: str
    customer_email: str
    shipping_address: str
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        order_id: str,
        record_id: str,
        quantity: Quantity,
        unit_price: Money,
        customer_name: str,
        customer_email: str,
        shipping_address: str,
    ) -> Order:
        """Create a new order, enforcing customer-detail invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address is required")
        if not customer_email or not EMAIL_PATTERN.match(customer_email.strip()):
            raise ValidationError(f"Invalid customer email: {customer_email!r}")

        return Order(
            id=order_id,
            record_id=record_id,
            quantity=quantity,
            total_price=unit_price * quantity.value,  # <-- price snapshot
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip(),
            shipping_address=shipping_address.strip(),
        )
