"""A JSON array stored in one file, rewritten atomically.

Writes go to a temporary file in the same directory which then replaces
the target, so readers see either the old contents or the new contents
and never a partial write.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from storefront.domain.exceptions import StorageError


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path.name}: {exc}") from exc
        if not isinstance(records, list):
            raise StorageError(
                f"Cannot read {self._file_path.name}: expected a JSON array"
            )
        return records

    def persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        directory = self._file_path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StorageError(
                    f"Cannot create {self._file_path.name}: {exc}"
                ) from exc
