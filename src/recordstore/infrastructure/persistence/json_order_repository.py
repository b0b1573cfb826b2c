"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from recordstore.domain.model.order import Order
from recordstore.domain.model.query import (
    ORDER_DEFAULT_SORT,
    ORDER_SORT_FIELDS,
    Page,
    PageRequest,
    SortSpec,
    sort_items,
)
from recordstore.domain.model.value_objects import Money, Quantity
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.infrastructure.persistence.json_collection import (
    JsonCollection,
    new_object_id,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        taken = {raw["id"] for raw in self._collection.load()}
        while True:
            candidate = new_object_id()
            if candidate not in taken:
                return candidate

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._collection.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_page(self, sort: SortSpec, page: PageRequest) -> Page[Order]:
        orders = [self._to_domain(raw) for raw in self._collection.load()]
        ordered = sort_items(orders, sort, ORDER_SORT_FIELDS, ORDER_DEFAULT_SORT)
        return Page(items=page.slice(ordered), total=len(orders))

    def add(self, order: Order) -> None:
        with self._collection.transaction() as documents:
            if any(raw["id"] == order.id for raw in documents):
                raise ValueError(f"Order ID {order.id} already in use")
            documents.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "recordId": order.record_id,
            "quantity": order.quantity.value,
            "totalPrice": str(order.total_price.amount),
            "currency": order.total_price.currency,
            "orderDate": order.order_date.isoformat(),
            "customerName": order.customer_name,
            "customerEmail": order.customer_email,
            "shippingAddress": order.shipping_address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            record_id=raw["recordId"],
            quantity=Quantity(raw["quantity"]),
            total_price=Money(Decimal(raw["totalPrice"]), raw.get("currency", "USD")),
            customer_name=raw["customerName"],
            customer_email=raw["customerEmail"],
            shipping_address=raw["shippingAddress"],
            order_date=datetime.fromisoformat(raw["orderDate"]),
        )
