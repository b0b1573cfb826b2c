"""Application service: List Records use case (query)."""

from __future__ import annotations

from recordstore.application.dto import PageDTO, RecordDTO
from recordstore.application.query import RecordQuery
from recordstore.domain.repository.record_repository import RecordRepository


class ListRecordsHandler:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def handle(self, query: RecordQuery) -> PageDTO[RecordDTO]:
        """Return one filtered, sorted page of the catalog."""
        page_request = query.page_request()
        page = self._record_repo.search(query.criteria(), query.sort(), page_request)
        return PageDTO(
            data=[RecordDTO.from_domain(r) for r in page.items],
            page=page_request.page,
            limit=page_request.limit,
            total=page.total,
            total_pages=page_request.total_pages(page.total),
        )
