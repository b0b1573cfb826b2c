"""Application service: Create Record use case.

Checks the catalog's uniqueness rule, enriches the record with a track
listing when an external identifier is given, and persists it. A failed
enrichment never blocks creation: the record is stored with an empty
track list.
"""

from __future__ import annotations

import logging

from recordstore.application.dto import CreateRecordCommand, RecordDTO
from recordstore.domain.exceptions import DuplicateEntityError
from recordstore.domain.model.record import Record
from recordstore.domain.repository.record_repository import RecordRepository
from recordstore.domain.service.metadata_provider import MetadataProvider

logger = logging.getLogger(__name__)


class CreateRecordHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        metadata_provider: MetadataProvider,
    ) -> None:
        self._record_repo = record_repo
        self._metadata_provider = metadata_provider

    def handle(self, command: CreateRecordCommand) -> RecordDTO:
        """Add a new record to the catalog.

        Steps:
        1. Reject a duplicate (artist, album, format) before any write.
        2. Fetch the track listing if an MBID was supplied (slow path).
        3. Build the Record and let the repository insert it; the
           repository's unique index is the final guard against races.
        """
        existing = self._record_repo.find_by_identity(
            command.artist, command.album, command.format
        )
        if existing is not None:
            raise DuplicateEntityError(
                f"Record already exists: {command.artist} - {command.album} "
                f"({command.format.value})"
            )

        tracklist: list[str] = []
        if command.mbid:
            tracklist = self._metadata_provider.fetch(command.mbid).tracks

        record = Record.create(
            record_id=self._record_repo.next_id(),
            artist=command.artist,
            album=command.album,
            price=command.price,
            qty=command.qty,
            format=command.format,
            category=command.category,
            mbid=command.mbid,
            tracklist=tracklist,
        )
        self._record_repo.add(record)

        logger.info(
            "Created record %s: %s - %s (%s), %d track(s)",
            record.id, record.artist, record.album, record.format.value, len(tracklist),
        )
        return RecordDTO.from_domain(record)
