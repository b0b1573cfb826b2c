"""Port for external release metadata (track listings).

Implementations only need ``lookup``, which raises MetadataLookupError on
any failure. ``fetch`` is what the catalog uses: it never raises, and
degrades failed lookups to an unavailable, empty result.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from recordstore.domain.exceptions import MetadataLookupError
from recordstore.domain.model.release_metadata import ReleaseMetadata

logger = logging.getLogger(__name__)


class MetadataProvider(ABC):

    @abstractmethod
    def lookup(self, external_id: str) -> ReleaseMetadata:
        """Fetch metadata for a release, raising MetadataLookupError on failure."""

    def fetch(self, external_id: str) -> ReleaseMetadata:
        try:
            return self.lookup(external_id)
        except MetadataLookupError as exc:
            logger.warning("Metadata lookup for %s failed: %s", external_id, exc)
            return ReleaseMetadata.unavailable()
