"""Rank catalog breeds by compatibility with a profile."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import cast

from ..types import BreedImage, BreedRecord, BreedWeight, RankedBreed
from .profile import UserProfile
from .scoring import score_breed

DEFAULT_MIN_SCORE = 2
DEFAULT_RESULT_LIMIT = 10


@dataclass(frozen=True)
class ScoredBreed:
    """A catalog breed paired with its compatibility score."""

    breed: BreedRecord
    score: int

    @property
    def name(self) -> str | None:
        name = self.breed.get("name")
        return name if isinstance(name, str) else None

    def to_result(self) -> RankedBreed:
        """Build the response entry.

        Temperament text is passed through untouched; ``weight`` and ``image``
        are shallow copies of the catalog objects, unknown keys included.
        """
        breed: Mapping[str, object] = self.breed
        breed_id = breed.get("id")
        weight = breed.get("weight")
        image = breed.get("image")
        return {
            "id": breed_id if isinstance(breed_id, int | str) else None,
            "name": self.name,
            "temperament": _optional_text(breed.get("temperament")),
            "weight": _as_weight(weight),
            "life_span": _optional_text(breed.get("life_span")),
            "bred_for": _optional_text(breed.get("bred_for")),
            "score": self.score,
            "image": _as_image(image),
        }


def _optional_text(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _as_weight(value: object) -> BreedWeight | None:
    if not isinstance(value, Mapping):
        return None
    return cast(BreedWeight, dict(cast(Mapping[str, object], value)))


def _as_image(value: object) -> BreedImage | None:
    if not isinstance(value, Mapping):
        return None
    return cast(BreedImage, dict(cast(Mapping[str, object], value)))


def rank_breeds(
    breeds: Iterable[BreedRecord],
    profile: UserProfile,
    threshold: int = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> list[ScoredBreed]:
    """Score, filter and order breeds for a profile.

    Breeds scoring below ``threshold`` are dropped. The sort is stable, so equal
    scores keep the catalog order. At most ``limit`` entries are returned.
    """
    if limit <= 0:
        return []
    scored = [ScoredBreed(breed=breed, score=score_breed(breed, profile)) for breed in breeds]
    eligible = [item for item in scored if item.score >= threshold]
    eligible.sort(key=lambda item: item.score, reverse=True)
    return eligible[:limit]
