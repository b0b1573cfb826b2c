"""MusicBrainz client: release track listings for catalog enrichment.

Looks up a release by MBID through the MusicBrainz XML web service and
reduces the document to a ReleaseMetadata. The service asks anonymous
clients for at most one request per second, so every lookup waits a
fixed delay *before* its request; callers creating or updating records
with an MBID should expect that latency. Exactly one attempt is made per
lookup, with no retries and no caching.

Expected document shape (every level optional)::

    metadata
      release
        title
        date
        artist-credit / name-credit / (name | artist/name)
        medium-list / medium* / track-list / track* / recording / title
"""

from __future__ import annotations

import logging
import time
from typing import Callable
from urllib.parse import quote
from xml.etree import ElementTree as ET

import requests

from recordstore.domain.exceptions import MetadataLookupError
from recordstore.domain.model.release_metadata import ReleaseMetadata
from recordstore.domain.service.metadata_provider import MetadataProvider
from recordstore.infrastructure.external.xml_node import XmlNode

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://musicbrainz.org/ws/2"
DEFAULT_USER_AGENT = "RecordStore/1.0.0 (contact@recordstore.example)"
DEFAULT_REQUEST_DELAY = 1.0
DEFAULT_TIMEOUT = 10.0
UNKNOWN_TRACK = "Unknown Track"


class MusicBrainzClient(MetadataProvider):
    """MetadataProvider backed by the MusicBrainz web service."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.request_delay = request_delay
        self.timeout = timeout
        self._session = session or requests.Session()
        self._sleep = sleep

    def lookup(self, external_id: str) -> ReleaseMetadata:
        url = f"{self.base_url}/release/{quote(external_id, safe='')}"

        if self.request_delay > 0:
            self._sleep(self.request_delay)

        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                params={"inc": "artist-credits recordings"},
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/xml",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise MetadataLookupError(f"MusicBrainz request failed: {exc}") from exc

        return parse_release(response.content)


def parse_release(document: bytes | str) -> ReleaseMetadata:
    """Reduce a MusicBrainz release document to ReleaseMetadata.

    Missing elements only thin out the result; the one hard failure is a
    document that is not XML at all.
    """
    try:
        root = XmlNode(ET.fromstring(document))
    except ET.ParseError as exc:
        raise MetadataLookupError(f"Malformed MusicBrainz document: {exc}") from exc

    release = root if root.name == "release" else root.child("release")

    return ReleaseMetadata(
        tracks=_tracks(release),
        artist=_artist(release),
        album=release.child("title").text(),
        release_date=release.child("date").text(),
    )


def _artist(release: XmlNode) -> str | None:
    credit = release.path("artist-credit", "name-credit")
    return credit.child("name").text() or credit.path("artist", "name").text()


def _tracks(release: XmlNode) -> list[str]:
    tracks: list[str] = []
    for medium in release.child("medium-list").children("medium"):
        for track in medium.child("track-list").children("track"):
            tracks.append(track.path("recording", "title").text() or UNKNOWN_TRACK)
    return tracks
