"""Application service: Show Record use case (query)."""

from __future__ import annotations

from recordstore.application.dto import RecordDTO
from recordstore.domain.exceptions import EntityNotFoundError
from recordstore.domain.repository.record_repository import RecordRepository


class ShowRecordHandler:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def handle(self, record_id: str) -> RecordDTO:
        record = self._record_repo.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("Record not found")
        return RecordDTO.from_domain(record)
