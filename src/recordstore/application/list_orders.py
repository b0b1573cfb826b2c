"""Application service: List Orders use case (query)."""

from __future__ import annotations

from recordstore.application.dto import OrderDTO, PageDTO
from recordstore.application.query import OrderQuery
from recordstore.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, query: OrderQuery) -> PageDTO[OrderDTO]:
        page_request = query.page_request()
        page = self._order_repo.list_page(query.sort(), page_request)
        return PageDTO(
            data=[OrderDTO.from_domain(o) for o in page.items],
            page=page_request.page,
            limit=page_request.limit,
            total=page.total,
            total_pages=page_request.total_pages(page.total),
        )
