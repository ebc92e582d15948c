"""Qualitative traits derived from raw catalog breed records.

Usage example:
    from dog_breed_matcher.domain.traits import derive_traits

    traits = derive_traits(
        {
            "name": "Beagle",
            "temperament": "Amiable, Even Tempered, Excitable, Determined, Gentle, Intelligent",
            "bred_for": "Rabbit, hare hunting",
            "weight": {"metric": "9 - 14"},
        }
    )
    assert traits.energy == "medium"
    assert traits.apartment_suitable
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal

from ..types import BreedRecord

type Level = Literal["low", "medium", "high"]

HIGH_ENERGY_WORDS = frozenset(
    {
        "energetic",
        "active",
        "agile",
        "alert",
        "high-spirited",
        "playful",
        "spirited",
        "athletic",
    }
)

LOW_ENERGY_WORDS = frozenset({"calm", "laid-back", "relaxed"})

# Substrings of "bred for" text that mark a working purpose
WORKING_PURPOSE_MARKERS = ("hunting", "herding", "working")

AFFECTIONATE_WORDS = frozenset(
    {
        "affectionate",
        "loving",
        "friendly",
        "gentle",
        "companion",
        "loyal",
        "sweet",
    }
)

DIFFICULT_WORDS = frozenset(
    {
        "independent",
        "stubborn",
        "dominant",
        "aggressive",
        "strong willed",
        "headstrong",
    }
)

VOCAL_WORDS = frozenset({"alert", "watchful", "vocal"})

HIGH_ENERGY_WORD_POINTS = 2
LOW_ENERGY_WORD_POINTS = -1
WORKING_PURPOSE_POINTS = 2
MEDIUM_ENERGY_MIN_POINTS = 1
HIGH_ENERGY_MIN_POINTS = 3

APARTMENT_MAX_WEIGHT_KG = 20.0

_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class DerivedTraits:
    """Traits computed for one breed during one scoring call."""

    energy: Level
    affectionate: bool
    difficult_for_beginners: bool
    vocalness: Level
    average_weight_kg: float | None
    apartment_suitable: bool


def _text_field(breed: Mapping[str, object], key: str) -> str | None:
    value = breed.get(key)
    return value if isinstance(value, str) else None


def parse_temperament_words(text: str | None) -> list[str]:
    """Split comma-separated temperament text into lowercase words."""
    if not text:
        return []
    words = (part.strip().lower() for part in text.split(","))
    return [word for word in words if word]


def _parse_leading_number(fragment: str) -> float | None:
    match = _LEADING_NUMBER_RE.match(fragment)
    if match is None:
        return None
    return float(match.group(1))


def average_weight_kg(weight_range_text: str | None) -> float | None:
    """Average the numbers in a ``"low - high"`` weight range.

    Fragments that do not start with a number are ignored, so ``"23"`` gives
    ``23.0`` and ``"NaN - 8"`` gives ``8.0``. Returns ``None`` when nothing parses.
    """
    if not weight_range_text:
        return None
    values = [
        value
        for value in (_parse_leading_number(part) for part in weight_range_text.split("-"))
        if value is not None
    ]
    if not values:
        return None
    return sum(values) / len(values)


def breed_weight_kg(breed: BreedRecord | Mapping[str, object]) -> float | None:
    """Return the average metric weight of a breed, or ``None`` if unknown."""
    weight = breed.get("weight")
    if not isinstance(weight, Mapping):
        return None
    metric = weight.get("metric")
    return average_weight_kg(metric if isinstance(metric, str) else None)


def energy_level(words: Iterable[str], bred_for: str | None) -> Level:
    """Classify energy from temperament words and the breed's original purpose."""
    points = 0
    for word in words:
        if word in HIGH_ENERGY_WORDS:
            points += HIGH_ENERGY_WORD_POINTS
        if word in LOW_ENERGY_WORDS:
            points += LOW_ENERGY_WORD_POINTS

    if bred_for:
        purpose = bred_for.lower()
        if any(marker in purpose for marker in WORKING_PURPOSE_MARKERS):
            points += WORKING_PURPOSE_POINTS

    if points >= HIGH_ENERGY_MIN_POINTS:
        return "high"
    if points >= MEDIUM_ENERGY_MIN_POINTS:
        return "medium"
    return "low"


def is_affectionate(words: Iterable[str]) -> bool:
    return any(word in AFFECTIONATE_WORDS for word in words)


def is_difficult_for_beginners(words: Iterable[str]) -> bool:
    return any(word in DIFFICULT_WORDS for word in words)


def vocalness(words: Iterable[str]) -> Level:
    """Estimate how much a breed barks from alert/watchful/vocal words."""
    matches = sum(1 for word in words if word in VOCAL_WORDS)
    if matches == 0:
        return "low"
    if matches == 1:
        return "medium"
    return "high"


def _fits_small_apartment(weight_kg: float | None, energy: Level) -> bool:
    if weight_kg is not None and weight_kg > APARTMENT_MAX_WEIGHT_KG:
        return False
    return energy != "high"


def is_apartment_suitable(breed: BreedRecord | Mapping[str, object]) -> bool:
    """Return whether a breed suits a small apartment (unknown weight counts as small)."""
    words = parse_temperament_words(_text_field(breed, "temperament"))
    energy = energy_level(words, _text_field(breed, "bred_for"))
    return _fits_small_apartment(breed_weight_kg(breed), energy)


def derive_traits(breed: BreedRecord | Mapping[str, object]) -> DerivedTraits:
    """Compute every trait of a breed in a single pass over its record."""
    words = parse_temperament_words(_text_field(breed, "temperament"))
    weight_kg = breed_weight_kg(breed)
    energy = energy_level(words, _text_field(breed, "bred_for"))
    return DerivedTraits(
        energy=energy,
        affectionate=is_affectionate(words),
        difficult_for_beginners=is_difficult_for_beginners(words),
        vocalness=vocalness(words),
        average_weight_kg=weight_kg,
        apartment_suitable=_fits_small_apartment(weight_kg, energy),
    )
