"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordstore.domain.model.order import Order
from recordstore.domain.model.query import Page, PageRequest, SortSpec


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unused order identifier."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_page(self, sort: SortSpec, page: PageRequest) -> Page[Order]:
        """Return one sorted page of orders plus the overall count."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order. Orders are never updated."""
