"""Cache fakes for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import override

from dog_breed_matcher.protocols import Cache


def _empty_store() -> dict[str, object]:
    return {}


@dataclass
class InMemoryCache(Cache):
    """In-memory cache for testing."""

    _store: dict[str, object] = field(default_factory=_empty_store)

    @override
    def get(self, key: str) -> object | None:
        return self._store.get(key)

    @override
    def set(self, key: str, value: object) -> None:
        self._store[key] = value
