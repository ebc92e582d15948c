"""Questionnaire profile used to score breeds.

Usage example:
    from dog_breed_matcher.domain.profile import UserProfile

    profile = UserProfile(
        free_time="high",
        activity_level="high",
        noise_tolerance="high",
        housing="house_with_yard",
        experience="advanced",
        affection_need="high",
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

FREE_TIME_CHOICES = ("low", "medium", "high")
ACTIVITY_LEVEL_CHOICES = ("sedentary", "moderate", "high")
NOISE_TOLERANCE_CHOICES = ("low", "medium", "high")
HOUSING_CHOICES = ("small_apartment", "large_apartment", "house_with_yard")
EXPERIENCE_CHOICES = ("beginner", "intermediate", "advanced")
AFFECTION_NEED_CHOICES = ("low", "medium", "high")

# Field name -> allowed answers, in questionnaire order.
PROFILE_CHOICES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "free_time": FREE_TIME_CHOICES,
        "activity_level": ACTIVITY_LEVEL_CHOICES,
        "noise_tolerance": NOISE_TOLERANCE_CHOICES,
        "housing": HOUSING_CHOICES,
        "experience": EXPERIENCE_CHOICES,
        "affection_need": AFFECTION_NEED_CHOICES,
    }
)

# Field name -> camelCase name used by request/response documents.
PROFILE_WIRE_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "free_time": "freeTime",
        "activity_level": "activityLevel",
        "noise_tolerance": "noiseTolerance",
        "housing": "housing",
        "experience": "experience",
        "affection_need": "affectionNeed",
    }
)


@dataclass(frozen=True)
class UserProfile:
    """Answers to the six lifestyle questions.

    Values are plain strings. The scorer never rejects an answer: anything
    outside the vocabularies above simply matches no rule.
    """

    free_time: str
    activity_level: str
    noise_tolerance: str
    housing: str
    experience: str
    affection_need: str
