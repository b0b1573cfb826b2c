"""Domain service: Stock Allocation.

Coordinates the cross-aggregate step of taking stock from a record for an
order. It lives in the domain layer because "never sell what is not on
the shelf" is a core business rule, not just orchestration.

Allocation is two-phase:
  Phase 1: pre-check the record's current quantity so the caller gets a
            clear error with the numbers involved.
  Phase 2: apply the repository's conditional decrement. Concurrent
            orders may have drained the record since phase 1, so a
            refused decrement is also reported as insufficient stock.
"""

from __future__ import annotations

import logging

from recordstore.domain.exceptions import InsufficientStockError, RecordNotFoundError
from recordstore.domain.model.record import Record
from recordstore.domain.model.value_objects import Quantity
from recordstore.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)


class StockAllocationService:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def check(self, record_id: str, quantity: Quantity) -> Record:
        """Load the record and verify it can cover *quantity*."""
        record = self._record_repo.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        if record.qty < quantity.value:
            raise InsufficientStockError(record_id, quantity.value, record.qty)
        return record

    def allocate(self, record_id: str, quantity: Quantity) -> None:
        """Atomically take *quantity* units out of stock."""
        if self._record_repo.decrement_stock(record_id, quantity.value):
            return

        # The decrement was refused: work out why for the error message.
        current = self._record_repo.get_by_id(record_id)
        if current is None:
            raise RecordNotFoundError(record_id)
        raise InsufficientStockError(record_id, quantity.value, current.qty)

    def release(self, record_id: str, quantity: Quantity) -> None:
        """Return previously allocated units to stock."""
        logger.warning("Returning %d unit(s) to stock of record %s", quantity.value, record_id)
        self._record_repo.increment_stock(record_id, quantity.value)
