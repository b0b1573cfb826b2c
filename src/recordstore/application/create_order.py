"""Application service: Create Order use case.

Orchestrates the flow between the record catalog and the order book.
This is the only place that coordinates both aggregates.

Stock is taken *before* the order is written, through the repository's
conditional decrement, so two orders racing for the last copies cannot
both succeed. If writing the order fails afterwards, the units are put
back and the error propagates: a stored order always has its stock
deducted.
"""

from __future__ import annotations

import logging

from recordstore.application.dto import CreateOrderCommand, OrderDTO
from recordstore.domain.model.order import Order
from recordstore.domain.model.value_objects import Quantity
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.domain.repository.record_repository import RecordRepository
from recordstore.domain.service.stock_allocation_service import StockAllocationService

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        record_repo: RecordRepository,
    ) -> None:
        self._order_repo = order_repo
        self._record_repo = record_repo

    def handle(self, command: CreateOrderCommand) -> OrderDTO:
        """Place an order for one record.

        Steps:
        1. Load the record and check its stock (RecordNotFound /
           InsufficientStock).
        2. Price the order from the record's *current* unit price.
        3. Atomically decrement stock; a refused decrement means another
           order got there first (InsufficientStock).
        4. Persist the order, restoring stock if that fails.
        """
        quantity = Quantity(command.quantity)
        stock = StockAllocationService(self._record_repo)

        record = stock.check(command.record_id, quantity)
        order = Order.place(
            order_id=self._order_repo.next_id(),
            record_id=record.id,
            quantity=quantity,
            unit_price=record.price,
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            shipping_address=command.shipping_address,
        )

        stock.allocate(record.id, quantity)
        try:
            self._order_repo.add(order)
        except Exception:
            logger.error("Failed to store order for record %s; restoring stock", record.id)
            stock.release(record.id, quantity)
            raise

        logger.info(
            "Order %s placed: %d x record %s for %s",
            order.id, quantity.value, record.id, order.total_price,
        )
        return OrderDTO.from_domain(order)
