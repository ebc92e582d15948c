"""Filesystem and on-disk cache implementations.

Usage example:
    from pathlib import Path

    from dog_breed_matcher.infrastructure.filesystem import DiskCache, LocalFileSystem

    fs = LocalFileSystem()
    breeds = fs.read_json(Path("data/reference/breeds.json"))

    cache = DiskCache(Path("data/cache/dog_api"), max_age_seconds=86400)
    cache.set("breeds", breeds)
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import override

from ..exceptions import JsonFileError
from ..io_validation import IncomingDataError, validate_json_as
from ..protocols import Cache, FileSystem


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def read_json(self, path: Path) -> object:
        payload = path.read_text(encoding="utf-8")
        try:
            return validate_json_as(object, payload)
        except IncomingDataError as exc:
            raise JsonFileError(path) from exc

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()


@dataclass
class DiskCache(Cache):
    """File-based JSON cache keyed by the SHA-256 of the cache key.

    Entries older than ``max_age_seconds`` are treated as missing; ``0``
    keeps entries forever.
    """

    cache_dir: Path
    max_age_seconds: int = 0

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        h = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{h}.json"

    def _is_fresh(self, path: Path) -> bool:
        if self.max_age_seconds <= 0:
            return True
        return time.time() - path.stat().st_mtime < self.max_age_seconds

    @override
    def get(self, key: str) -> object | None:
        p = self._path(key)
        if not p.exists() or not self._is_fresh(p):
            return None
        try:
            return validate_json_as(object, p.read_text(encoding="utf-8"))
        except IncomingDataError as exc:
            raise JsonFileError(p) from exc

    @override
    def set(self, key: str, value: object) -> None:
        p = self._path(key)
        p.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")

