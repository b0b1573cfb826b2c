"""Release metadata fetched from an external catalog service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReleaseMetadata:
    """Best-effort description of a release.

    ``available`` is False when the lookup itself failed (network error,
    bad status, unreadable document). A successful lookup of a sparse
    document is still available, just with empty fields.
    """

    tracks: list[str] = field(default_factory=list)
    artist: str | None = None
    album: str | None = None
    release_date: str | None = None
    available: bool = True

    @staticmethod
    def unavailable() -> ReleaseMetadata:
        return ReleaseMetadata(available=False)
