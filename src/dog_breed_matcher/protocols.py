"""Protocol definitions for dependency injection.

These protocols define the interfaces the application layer depends on,
so tests can substitute in-memory fakes for HTTP, cache and disk access.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class HttpClient(Protocol):
    """Abstract HTTP client for JSON API requests."""

    def get_json(self, url: str, cache_key: str | None = None) -> object:
        """Fetch and decode JSON from URL, optionally using cache.

        Args:
            url: The URL to fetch.
            cache_key: Optional cache key. If provided and cached, return cached value.

        Returns:
            The decoded JSON document (the breed catalog is a list).
        """
        ...


@runtime_checkable
class Cache(Protocol):
    """Abstract cache for decoded JSON documents."""

    def get(self, key: str) -> object | None:
        """Retrieve cached value by key, or None if not present."""
        ...

    def set(self, key: str, value: object) -> None:
        """Store value in cache with given key."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for catalog files and configuration."""

    def read_json(self, path: Path) -> object:
        """Read and decode a JSON file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...


@runtime_checkable
class RetryPolicy(Protocol):
    """Abstract retry policy for transient failures."""

    max_retries: int
    retry_statuses: tuple[int, ...]
    retry_exceptions: tuple[type[Exception], ...]

    def compute_backoff(self, attempt: int, retry_after: int | None = None) -> float:
        """Return a delay for the next retry attempt."""
        ...
