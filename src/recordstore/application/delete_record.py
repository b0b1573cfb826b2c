"""Application service: Delete Record use case.

Orders keep their reference to a deleted record; nothing cascades.
"""

from __future__ import annotations

import logging

from recordstore.domain.exceptions import EntityNotFoundError
from recordstore.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)


class DeleteRecordHandler:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def handle(self, record_id: str) -> None:
        if not self._record_repo.delete(record_id):
            raise EntityNotFoundError("Record not found")
        logger.info("Deleted record %s", record_id)
