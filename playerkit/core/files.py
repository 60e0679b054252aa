"""
Stored-file metadata and download links.

The manifest (PLAYERKIT_FILES_FILE, YAML or JSON) is either a list of
records or a mapping with a "files" list:

    files:
      - id: 7
        filename: b.ogg
        created: 2024-01-01T00:00:00Z
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from playerkit.core.overrides import load_document
from playerkit.core.player.models import FileRecord
from playerkit.core.settings import env_path, site_url

_log = logging.getLogger("playerkit.files")


def _as_utc(dt: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileStore:
    def __init__(self, records: Optional[Iterable[FileRecord]] = None, base_url: Optional[str] = None):
        self._by_id: Dict[int, FileRecord] = {}
        for rec in records or []:
            if rec.id in self._by_id:
                raise ValueError(f"Duplicate file id: {rec.id}")
            self._by_id[rec.id] = rec
        self.base_url = base_url if base_url is not None else site_url()

    @classmethod
    def from_env(cls, path: Optional[Path] = None) -> "FileStore":
        resolved = path if path is not None else env_path("PLAYERKIT_FILES_FILE", "files.yaml")
        data = load_document(resolved, label="files")
        if isinstance(data, dict):
            data = data.get("files")
        if data is None:
            return cls()
        if not isinstance(data, list):
            _log.warning("Files manifest %s must hold a list, got %s", resolved, type(data).__name__)
            return cls()

        records: List[FileRecord] = []
        for raw in data:
            try:
                records.append(FileRecord.model_validate(raw))
            except ValidationError as exc:
                _log.warning("Skipping invalid file record %r: %s", raw, exc.errors())
        _log.info("Loaded %d file records from %s", len(records), resolved)
        return cls(records)

    def records(self) -> List[FileRecord]:
        return [self._by_id[k] for k in sorted(self._by_id)]

    def find(
        self,
        *,
        id: Optional[int] = None,
        filename: Optional[str] = None,
        cutoff: Optional[datetime] = None,
    ) -> Optional[FileRecord]:
        """
        First record matching `id` or exact `filename` created at or before
        `cutoff`. Records from the future are invisible.
        """
        limit = _as_utc(cutoff or utc_now())

        if id is not None:
            candidates = [self._by_id[id]] if id in self._by_id else []
        elif filename is not None:
            candidates = [r for r in self.records() if r.filename == filename]
        else:
            return None

        for rec in candidates:
            if _as_utc(rec.created) <= limit:
                return rec
        return None

    __call__ = find

    def download_url(self, file_id: int, filename: str) -> str:
        return f"{self.base_url}file_download/{int(file_id)}/{quote(filename)}"
