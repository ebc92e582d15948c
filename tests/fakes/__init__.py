"""Exports for test fakes."""

from .cache import InMemoryCache
from .filesystem import InMemoryFileSystem
from .http import FakeHttpClient

__all__ = [
    "FakeHttpClient",
    "InMemoryCache",
    "InMemoryFileSystem",
]
