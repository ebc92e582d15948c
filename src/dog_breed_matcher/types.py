"""Typed data contracts used inside the matcher after IO validation."""

from __future__ import annotations

from typing import TypedDict


class BreedWeight(TypedDict, total=False):
    """Catalog weight ranges, e.g. ``{"metric": "25 - 30", "imperial": "55 - 66"}``."""

    metric: str | None
    imperial: str | None


class BreedImage(TypedDict, total=False):
    """Catalog image reference."""

    id: str
    url: str
    width: int
    height: int


class BreedRecord(TypedDict, total=False):
    """Breed record as supplied by the catalog.

    Every key is optional; domain code reads them defensively so that missing
    or garbled values degrade to "unknown" instead of failing the scoring pass.
    """

    id: int | str
    name: str
    temperament: str | None
    bred_for: str | None
    breed_group: str | None
    origin: str | None
    weight: BreedWeight | None
    height: BreedWeight | None
    life_span: str | None
    reference_image_id: str | None
    image: BreedImage | None


class RankedBreed(TypedDict):
    """One entry of the ranked match response."""

    id: int | str | None
    name: str | None
    temperament: str | None
    weight: BreedWeight | None
    life_span: str | None
    bred_for: str | None
    score: int
    image: BreedImage | None


class UserProfilePayload(TypedDict):
    """Wire shape of a questionnaire profile (camelCase keys)."""

    freeTime: str
    activityLevel: str
    noiseTolerance: str
    housing: str
    experience: str
    affectionNeed: str


class MatchResponse(TypedDict):
    """Response document returned by the match use case."""

    user_profile: UserProfilePayload
    results: list[RankedBreed]
