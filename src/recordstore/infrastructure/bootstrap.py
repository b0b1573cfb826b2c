"""Builds the JSON stores and the MusicBrainz client from ``Settings``.

Each factory takes an explicit ``Settings`` or reads ``RECORDSTORE_*`` from
the environment, so CLI commands and tests point at the same data
directory the same way.
"""

from __future__ import annotations

from recordstore.infrastructure.config import Settings
from recordstore.infrastructure.external.musicbrainz_client import MusicBrainzClient
from recordstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from recordstore.infrastructure.persistence.json_record_repository import (
    JsonRecordRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def record_repository(config: Settings | None = None) -> JsonRecordRepository:
    config = config or settings()
    return JsonRecordRepository(config.data_dir / "records.json")


def order_repository(config: Settings | None = None) -> JsonOrderRepository:
    config = config or settings()
    return JsonOrderRepository(config.data_dir / "orders.json")


def metadata_provider(config: Settings | None = None) -> MusicBrainzClient:
    config = config or settings()
    return MusicBrainzClient(
        base_url=config.musicbrainz_url,
        user_agent=config.user_agent,
        request_delay=config.musicbrainz_delay,
        timeout=config.musicbrainz_timeout,
    )
