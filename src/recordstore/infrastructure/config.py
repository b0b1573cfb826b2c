"""Runtime settings, read from ``RECORDSTORE_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from recordstore.infrastructure.external.musicbrainz_client import (
    DEFAULT_BASE_URL,
    DEFAULT_REQUEST_DELAY,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "RECORDSTORE_"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = Path("data")
    musicbrainz_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    musicbrainz_delay: float = DEFAULT_REQUEST_DELAY
    musicbrainz_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = Settings()

        def get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        return Settings(
            data_dir=Path(get("DATA_DIR") or defaults.data_dir),
            musicbrainz_url=get("MUSICBRAINZ_URL") or defaults.musicbrainz_url,
            user_agent=get("USER_AGENT") or defaults.user_agent,
            musicbrainz_delay=_float(get("MUSICBRAINZ_DELAY"), defaults.musicbrainz_delay),
            musicbrainz_timeout=_float(get("MUSICBRAINZ_TIMEOUT"), defaults.musicbrainz_timeout),
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
        )


def _float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric setting %r, using %s", raw, default)
        return default
    return value if value >= 0 else default
