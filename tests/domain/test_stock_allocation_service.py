"""Unit tests for the StockAllocationService domain service."""

import pytest

from recordstore.domain.exceptions import InsufficientStockError, RecordNotFoundError
from recordstore.domain.model.value_objects import Quantity
from recordstore.domain.service.stock_allocation_service import StockAllocationService
from tests.fakes import FakeRecordRepository, make_record

RECORD_ID = "a" * 24


def _setup(qty: int = 5):
    repo = FakeRecordRepository([make_record(RECORD_ID, qty=qty)])
    return StockAllocationService(repo), repo


class TestCheck:

    def test_returns_record_when_stock_suffices(self):
        svc, _ = _setup(qty=5)
        assert svc.check(RECORD_ID, Quantity(5)).id == RECORD_ID

    def test_missing_record(self):
        svc, _ = _setup()
        with pytest.raises(RecordNotFoundError) as exc_info:
            svc.check("0" * 24, Quantity(1))
        assert exc_info.value.record_id == "0" * 24

    def test_insufficient_stock_reports_numbers(self):
        svc, _ = _setup(qty=2)
        with pytest.raises(InsufficientStockError) as exc_info:
            svc.check(RECORD_ID, Quantity(3))
        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2


class TestAllocate:

    def test_allocate_decrements_stock(self):
        svc, repo = _setup(qty=5)
        svc.allocate(RECORD_ID, Quantity(3))
        assert repo.get_by_id(RECORD_ID).qty == 2

    def test_allocate_refused_when_drained_since_check(self):
        svc, repo = _setup(qty=5)
        svc.check(RECORD_ID, Quantity(4))
        repo.decrement_stock(RECORD_ID, 3)  # a concurrent order

        with pytest.raises(InsufficientStockError, match="have 2 available"):
            svc.allocate(RECORD_ID, Quantity(4))
        assert repo.get_by_id(RECORD_ID).qty == 2

    def test_allocate_on_deleted_record(self):
        svc, repo = _setup()
        repo.delete(RECORD_ID)
        with pytest.raises(RecordNotFoundError):
            svc.allocate(RECORD_ID, Quantity(1))


class TestRelease:

    def test_release_restores_stock(self):
        svc, repo = _setup(qty=5)
        svc.allocate(RECORD_ID, Quantity(5))
        svc.release(RECORD_ID, Quantity(5))
        assert repo.get_by_id(RECORD_ID).qty == 5
