"""A JSON array file used as a small document collection.

Every read and every read-modify-write runs under an exclusive lock file
next to the collection (``records.json.lock`` for ``records.json``), so
separate CLI processes working on the same data directory are serialized
as well as threads. Writes go to a temporary file that is then renamed
over the collection, so readers never see a half-written file.
"""

from __future__ import annotations

import json
import os
import secrets
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock

LOCK_TIMEOUT = 30.0


def new_object_id() -> str:
    """24 hex characters, shaped like a document-store object id."""
    return secrets.token_hex(12)


class JsonCollection:

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT) -> None:
        self._file_path = file_path.resolve()
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = FileLock(
            self._file_path.with_name(self._file_path.name + ".lock"),
            timeout=lock_timeout,
        )
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        with self._lock:
            return self._read()

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Yield the documents for in-place edits; persist on clean exit.

        The lock is held from the read until the write has been renamed
        into place, so a conditional update cannot interleave with another
        process's update of the same collection.
        """
        with self._lock:
            documents = self._read()
            yield documents
            self._persist(documents)

    def _read(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, documents: list[dict]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(documents, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.write_text("[]", encoding="utf-8")
