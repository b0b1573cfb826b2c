"""Application service: Lookup Release use case.

Probes the metadata service for one MBID and reports what came back,
including the failure reason. Used to check the integration by hand;
nothing is written to the catalog.
"""

from __future__ import annotations

import time

from recordstore.application.dto import ReleaseLookupDTO
from recordstore.domain.exceptions import MetadataLookupError
from recordstore.domain.service.metadata_provider import MetadataProvider


class LookupReleaseHandler:

    def __init__(self, metadata_provider: MetadataProvider) -> None:
        self._metadata_provider = metadata_provider

    def handle(self, mbid: str) -> ReleaseLookupDTO:
        started = time.monotonic()
        try:
            metadata = self._metadata_provider.lookup(mbid)
        except MetadataLookupError as exc:
            return ReleaseLookupDTO(success=False, mbid=mbid, error=str(exc))

        return ReleaseLookupDTO(
            success=True,
            mbid=mbid,
            tracks=list(metadata.tracks),
            artist=metadata.artist,
            album=metadata.album,
            release_date=metadata.release_date,
            duration_ms=round((time.monotonic() - started) * 1000),
        )
