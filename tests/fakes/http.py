"""HTTP fakes for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import override

from dog_breed_matcher.protocols import HttpClient
from tests.support.errors import FakeResponseMissingError


def _empty_responses() -> dict[str, object]:
    return {}


def _empty_calls() -> list[tuple[str, str | None]]:
    return []


@dataclass
class FakeHttpClient(HttpClient):
    """Fake HTTP client that returns canned JSON documents."""

    responses: dict[str, object] = field(default_factory=_empty_responses)
    calls: list[tuple[str, str | None]] = field(default_factory=_empty_calls)
    error: Exception | None = None

    @override
    def get_json(self, url: str, cache_key: str | None = None) -> object:
        self.calls.append((url, cache_key))
        if self.error is not None:
            raise self.error
        # Match by URL substring for flexibility
        for pattern, response in self.responses.items():
            if pattern in url:
                return response
        raise FakeResponseMissingError(url)
