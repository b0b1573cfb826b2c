"""Tests for the List Orders and Show Order use cases."""

import pytest

from recordstore.application.create_order import CreateOrderHandler
from recordstore.application.dto import CreateOrderCommand
from recordstore.application.list_orders import ListOrdersHandler
from recordstore.application.query import OrderQuery
from recordstore.application.show_order import ShowOrderHandler
from recordstore.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeOrderRepository, FakeRecordRepository, make_record

RECORD_ID = "a" * 24


def _setup(orders: int):
    record_repo = FakeRecordRepository([make_record(RECORD_ID, qty=100)])
    order_repo = FakeOrderRepository()
    create = CreateOrderHandler(order_repo, record_repo)
    placed = [
        create.handle(CreateOrderCommand(
            record_id=RECORD_ID,
            quantity=n,
            customer_name=f"Customer {n}",
            customer_email=f"c{n}@example.com",
            shipping_address="1 Abbey Road",
        ))
        for n in range(1, orders + 1)
    ]
    return order_repo, placed


class TestListOrders:

    def test_empty(self):
        result = ListOrdersHandler(FakeOrderRepository()).handle(OrderQuery())
        assert result.data == []
        assert result.total_pages == 0

    def test_sort_by_quantity_ascending(self):
        order_repo, _ = _setup(3)
        query = OrderQuery.from_params({"sortBy": "quantity", "sortOrder": "asc"})
        result = ListOrdersHandler(order_repo).handle(query)
        assert [o.quantity for o in result.data] == [1, 2, 3]

    def test_paging(self):
        order_repo, _ = _setup(5)
        result = ListOrdersHandler(order_repo).handle(OrderQuery.from_params({"limit": "2", "page": "3"}))
        assert len(result.data) == 1
        assert result.total == 5
        assert result.total_pages == 3

    def test_projection_keys(self):
        order_repo, _ = _setup(1)
        item = ListOrdersHandler(order_repo).handle(OrderQuery()).to_dict()["data"][0]
        assert set(item) == {
            "id", "recordId", "quantity", "totalPrice", "orderDate",
            "customerName", "customerEmail", "shippingAddress",
        }


class TestShowOrder:

    def test_show_existing(self):
        order_repo, placed = _setup(1)
        dto = ShowOrderHandler(order_repo).handle(placed[0].id)
        assert dto == placed[0]

    def test_show_missing(self):
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            ShowOrderHandler(FakeOrderRepository()).handle("f" * 24)
