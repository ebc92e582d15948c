"""Pytest fixtures shared across the suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest

from dog_breed_matcher.domain.profile import UserProfile
from dog_breed_matcher.types import BreedRecord
from tests.fakes import FakeHttpClient, InMemoryCache, InMemoryFileSystem
from tests.support.breeds import make_breed, make_profile
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    Tests that need HTTP should use FakeHttpClient or a MagicMock session.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture
def in_memory_cache() -> InMemoryCache:
    """Provide an in-memory cache for tests."""
    return InMemoryCache()


@pytest.fixture
def fake_http_client() -> FakeHttpClient:
    """Provide a fake HTTP client for tests."""
    return FakeHttpClient()


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()


@pytest.fixture
def sample_breeds() -> list[BreedRecord]:
    """A small catalog covering big/small, calm/energetic and barky breeds."""
    return [
        make_breed(
            1,
            "Pug",
            temperament="Docile, Clever, Charming, Stubborn, Sociable, Playful, Quiet, Attentive",
            bred_for="Lapdog",
            weight="6 - 8",
        ),
        make_breed(
            2,
            "Labrador Retriever",
            temperament="Kind, Outgoing, Agile, Gentle, Intelligent, Trusting, Even Tempered",
            bred_for="Water retrieving",
            weight="25 - 36",
        ),
        make_breed(
            3,
            "Cavalier King Charles Spaniel",
            temperament="Fearless, Affectionate, Sociable, Patient, Playful, Adaptable",
            bred_for="Lapdog",
            weight="6 - 8",
        ),
        make_breed(
            4,
            "Border Collie",
            temperament="Tenacious, Keen, Energetic, Responsive, Alert, Intelligent",
            bred_for="Sheep herder",
            weight="14 - 20",
        ),
        make_breed(
            5,
            "Basenji",
            temperament="Alert, Watchful, Vocal, Independent",
            bred_for="Hunting",
            weight="9 - 11",
        ),
        make_breed(
            6,
            "Mystery Mix",
            temperament=None,
            bred_for=None,
            weight=None,
        ),
    ]


@pytest.fixture
def apartment_profile() -> UserProfile:
    """A beginner in a small apartment who wants a cuddly, quiet dog."""
    return make_profile(
        free_time="low",
        activity_level="sedentary",
        noise_tolerance="low",
        housing="small_apartment",
        experience="beginner",
        affection_need="high",
    )
