"""Tests for the JSON-file order repository."""

from decimal import Decimal

import pytest

from recordstore.domain.model.order import Order
from recordstore.domain.model.query import PageRequest, SortSpec
from recordstore.domain.model.value_objects import Money, Quantity
from recordstore.infrastructure.persistence.json_order_repository import JsonOrderRepository


def _order(order_id: str, quantity: int = 2) -> Order:
    return Order.place(
        order_id=order_id,
        record_id="a" * 24,
        quantity=Quantity(quantity),
        unit_price=Money.of("12.50"),
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        shipping_address="1 Penny Lane",
    )


class TestJsonOrderRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order("c" * 24)
        repo.add(order)

        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id("c" * 24)

        assert loaded == order
        assert loaded.total_price.amount == Decimal("25.00")

    def test_missing(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id("c" * 24) is None

    def test_duplicate_id_rejected(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.add(_order("c" * 24))
        with pytest.raises(ValueError):
            repo.add(_order("c" * 24))

    def test_list_page(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        for n in range(1, 5):
            repo.add(_order(f"{n:024x}", quantity=n))

        page = repo.list_page(SortSpec("quantity"), PageRequest(1, 3))

        assert page.total == 4
        assert [o.quantity.value for o in page.items] == [4, 3, 2]
