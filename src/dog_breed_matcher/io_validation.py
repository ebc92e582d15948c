"""Pydantic-based validation helpers for inbound payloads.

Usage example:
    from dog_breed_matcher.io_validation import parse_user_profile

    profile = parse_user_profile(
        {
            "freeTime": "medium",
            "activityLevel": "moderate",
            "noiseTolerance": "high",
            "housing": "large_apartment",
            "experience": "intermediate",
            "affectionNeed": "high",
        }
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, cast

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from .domain.profile import PROFILE_CHOICES, PROFILE_WIRE_NAMES, UserProfile
from .exceptions import CatalogResponseError, ProfileValidationError
from .observability import get_logger
from .types import BreedRecord

logger = get_logger("dog_breed_matcher.io_validation")


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def _normalise_answer(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class _UserProfileModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    free_time: Literal["low", "medium", "high"]
    activity_level: Literal["sedentary", "moderate", "high"]
    noise_tolerance: Literal["low", "medium", "high"]
    housing: Literal["small_apartment", "large_apartment", "house_with_yard"]
    experience: Literal["beginner", "intermediate", "advanced"]
    affection_need: Literal["low", "medium", "high"]

    @field_validator("*", mode="before")
    @classmethod
    def _normalise(cls, value: object) -> object:
        return _normalise_answer(value)


def _collect_profile_answers(payload: Mapping[str, object]) -> dict[str, object]:
    answers: dict[str, object] = {}
    for field_name, wire_name in PROFILE_WIRE_NAMES.items():
        if wire_name in payload:
            answers[field_name] = payload[wire_name]
        elif field_name in payload:
            answers[field_name] = payload[field_name]
    return answers


def parse_user_profile(payload: Mapping[str, object]) -> UserProfile:
    """Validate questionnaire answers and build a profile.

    Accepts camelCase (``freeTime``) or snake_case (``free_time``) keys. Answers
    are trimmed and lowercased before being checked against their vocabulary.

    Raises:
        ProfileValidationError: For the first missing, empty or unknown answer.
    """
    answers = _collect_profile_answers(payload)
    try:
        model = _UserProfileModel.model_validate(answers)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = first.get("loc", ())
        field_name = str(location[0]) if location else "profile"
        raise ProfileValidationError(
            field_name,
            _normalise_answer(answers.get(field_name)),
            PROFILE_CHOICES.get(field_name, ()),
        ) from exc

    return UserProfile(
        free_time=model.free_time,
        activity_level=model.activity_level,
        noise_tolerance=model.noise_tolerance,
        housing=model.housing,
        experience=model.experience,
        affection_need=model.affection_need,
    )


def parse_breed_records(payload: object) -> list[BreedRecord]:
    """Accept a decoded catalog document as a list of breed records.

    Only the outer shape is enforced. Items that are not JSON objects are
    skipped with a warning; field values are left for the domain to read
    defensively.

    Raises:
        CatalogResponseError: If the payload is not a list.
    """
    if not isinstance(payload, list):
        raise CatalogResponseError.not_a_list(type(payload).__name__)

    records: list[BreedRecord] = []
    skipped = 0
    for item in cast(list[object], payload):
        try:
            record = validate_as(dict[str, object], item)
        except IncomingDataError:
            skipped += 1
            continue
        records.append(cast(BreedRecord, record))

    if skipped:
        logger.warning("Skipped %s catalog entries that are not JSON objects", skipped)
    return records
