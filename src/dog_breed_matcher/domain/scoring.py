"""Compatibility scoring rules for breed/profile pairs.

Each dimension of the questionnaire is scored by its own rule function over
``(DerivedTraits, UserProfile)``. The breed's score is the plain sum of every
rule's delta: there is no clamping and no early exit.

Usage example:
    from dog_breed_matcher.domain.profile import UserProfile
    from dog_breed_matcher.domain.scoring import score_breed

    profile = UserProfile(
        free_time="low",
        activity_level="sedentary",
        noise_tolerance="low",
        housing="small_apartment",
        experience="beginner",
        affection_need="high",
    )
    breed = {"temperament": "Calm, Gentle, Loyal", "weight": {"metric": "5 - 8"}}
    assert score_breed(breed, profile) == 10
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..types import BreedRecord
from .profile import UserProfile
from .traits import APARTMENT_MAX_WEIGHT_KG, DerivedTraits, Level, derive_traits

type ScoringRule = Callable[[DerivedTraits, UserProfile], int]

# (free_time, energy) -> delta
FREE_TIME_ENERGY_DELTAS: MappingProxyType[tuple[str, Level], int] = MappingProxyType(
    {
        ("low", "low"): 3,
        ("low", "medium"): 1,
        ("low", "high"): -3,
        ("medium", "medium"): 3,
        ("medium", "low"): 1,
        ("high", "high"): 3,
    }
)

SEDENTARY_HIGH_ENERGY_PENALTY = -2
ACTIVE_HIGH_ENERGY_BONUS = 2

SMALL_APARTMENT_SUITABLE_BONUS = 3
SMALL_APARTMENT_UNSUITABLE_PENALTY = -2
LARGE_APARTMENT_BONUS = 1
YARD_LARGE_DOG_BONUS = 2
YARD_HIGH_ENERGY_BONUS = 1

BEGINNER_DIFFICULT_PENALTY = -3
BEGINNER_EASY_BONUS = 1
ADVANCED_DIFFICULT_BONUS = 1

HIGH_AFFECTION_BONUS = 3
LOW_AFFECTION_PENALTY = -1

LOW_NOISE_TOLERANCE_PENALTY = -3
MEDIUM_NOISE_TOLERANCE_PENALTY = -1


def score_free_time(traits: DerivedTraits, profile: UserProfile) -> int:
    """Match the owner's free time against the breed's energy."""
    return FREE_TIME_ENERGY_DELTAS.get((profile.free_time, traits.energy), 0)


def score_activity(traits: DerivedTraits, profile: UserProfile) -> int:
    if traits.energy != "high":
        return 0
    if profile.activity_level == "sedentary":
        return SEDENTARY_HIGH_ENERGY_PENALTY
    if profile.activity_level == "high":
        return ACTIVE_HIGH_ENERGY_BONUS
    return 0


def score_housing(traits: DerivedTraits, profile: UserProfile) -> int:
    """Score the home size.

    The two ``house_with_yard`` bonuses are independent and stack, so a large,
    high-energy breed gets both.
    """
    if profile.housing == "small_apartment":
        if traits.apartment_suitable:
            return SMALL_APARTMENT_SUITABLE_BONUS
        return SMALL_APARTMENT_UNSUITABLE_PENALTY
    if profile.housing == "large_apartment":
        return LARGE_APARTMENT_BONUS
    if profile.housing == "house_with_yard":
        delta = 0
        weight = traits.average_weight_kg
        if weight is not None and weight > APARTMENT_MAX_WEIGHT_KG:
            delta += YARD_LARGE_DOG_BONUS
        if traits.energy == "high":
            delta += YARD_HIGH_ENERGY_BONUS
        return delta
    return 0


def score_experience(traits: DerivedTraits, profile: UserProfile) -> int:
    if profile.experience == "beginner":
        if traits.difficult_for_beginners:
            return BEGINNER_DIFFICULT_PENALTY
        return BEGINNER_EASY_BONUS
    if profile.experience == "advanced" and traits.difficult_for_beginners:
        return ADVANCED_DIFFICULT_BONUS
    return 0


def score_affection(traits: DerivedTraits, profile: UserProfile) -> int:
    if not traits.affectionate:
        return 0
    if profile.affection_need == "high":
        return HIGH_AFFECTION_BONUS
    if profile.affection_need == "low":
        return LOW_AFFECTION_PENALTY
    return 0


def score_noise(traits: DerivedTraits, profile: UserProfile) -> int:
    if traits.vocalness != "high":
        return 0
    if profile.noise_tolerance == "low":
        return LOW_NOISE_TOLERANCE_PENALTY
    if profile.noise_tolerance == "medium":
        return MEDIUM_NOISE_TOLERANCE_PENALTY
    return 0


# Dimension name -> rule, in questionnaire order.
SCORING_RULES: MappingProxyType[str, ScoringRule] = MappingProxyType(
    {
        "free_time": score_free_time,
        "activity": score_activity,
        "housing": score_housing,
        "experience": score_experience,
        "affection": score_affection,
        "noise": score_noise,
    }
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-dimension contributions to one breed's compatibility score."""

    traits: DerivedTraits
    contributions: MappingProxyType[str, int]

    @property
    def total(self) -> int:
        """Sum of every dimension's delta (unbounded, may be negative)."""
        return sum(self.contributions.values())


def score_breakdown(
    breed: BreedRecord | Mapping[str, object],
    profile: UserProfile,
    rules: Mapping[str, ScoringRule] = SCORING_RULES,
) -> ScoreBreakdown:
    """Derive traits once and apply every rule to them."""
    traits = derive_traits(breed)
    contributions = {name: rule(traits, profile) for name, rule in rules.items()}
    return ScoreBreakdown(traits=traits, contributions=MappingProxyType(contributions))


def score_breed(breed: BreedRecord | Mapping[str, object], profile: UserProfile) -> int:
    """Return the signed compatibility score of a breed for a profile."""
    return score_breakdown(breed, profile).total
