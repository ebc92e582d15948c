"""Concrete infrastructure implementations."""

from .filesystem import DiskCache, LocalFileSystem
from .http import CachedHttpClient, build_dog_api_client, parse_retry_after
from .resilience import RetryPolicy

__all__ = [
    "CachedHttpClient",
    "DiskCache",
    "LocalFileSystem",
    "RetryPolicy",
    "build_dog_api_client",
    "parse_retry_after",
]
