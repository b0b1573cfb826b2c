"""Application service: Update Record use case.

A partial update. Changing any part of the (artist, album, format)
triple re-checks uniqueness against every *other* record. Changing the
MBID re-fetches the track listing; if that lookup fails the previous
track listing is kept rather than cleared.
"""

from __future__ import annotations

import logging

from recordstore.application.dto import RecordDTO, UpdateRecordCommand
from recordstore.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from recordstore.domain.repository.record_repository import RecordRepository
from recordstore.domain.service.metadata_provider import MetadataProvider

logger = logging.getLogger(__name__)


class UpdateRecordHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        metadata_provider: MetadataProvider,
    ) -> None:
        self._record_repo = record_repo
        self._metadata_provider = metadata_provider

    def handle(self, record_id: str, command: UpdateRecordCommand) -> RecordDTO:
        record = self._record_repo.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("Record not found")

        if command.touches_identity:
            artist = command.artist if command.artist is not None else record.artist
            album = command.album if command.album is not None else record.album
            fmt = command.format if command.format is not None else record.format
            clash = self._record_repo.find_by_identity(
                artist, album, fmt, exclude_id=record.id
            )
            if clash is not None:
                raise DuplicateEntityError(
                    f"Record already exists: {artist} - {album} ({fmt.value})"
                )

        tracklist: list[str] | None = None
        if command.mbid is not None and command.mbid != record.mbid:
            metadata = self._metadata_provider.fetch(command.mbid)
            if metadata.available:
                tracklist = metadata.tracks
            else:
                logger.info("Keeping previous track list for record %s", record.id)

        record.revise(
            artist=command.artist,
            album=command.album,
            price=command.price,
            qty=command.qty,
            format=command.format,
            category=command.category,
            mbid=command.mbid,
            tracklist=tracklist,
        )
        self._record_repo.save(record)

        logger.info("Updated record %s", record.id)
        return RecordDTO.from_domain(record)
