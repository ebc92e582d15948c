"""Typed parsing and validation for matcher config files.

Example ``matcher.toml``:
    schema_version = 1

    [matcher]
    breeds_path = "data/reference/breeds.json"
    min_score = 3
    result_limit = 5
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class MatcherConfigFile:
    """Validated matcher config values loaded from a TOML file."""

    dog_api_base_url: str | None = None
    timeout_seconds: float | None = None
    max_retries: int | None = None
    cache_dir: str | None = None
    cache_max_age_seconds: int | None = None
    breeds_path: str | None = None
    min_score: int | None = None
    result_limit: int | None = None


class _MatcherSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    dog_api_base_url: str | None = None
    timeout_seconds: float | None = None
    max_retries: int | None = None
    cache_dir: str | None = None
    cache_max_age_seconds: int | None = None
    breeds_path: str | None = None
    min_score: int | None = None
    result_limit: int | None = None

    @field_validator("dog_api_base_url", "cache_dir", "breeds_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("dog_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().rstrip("/")

    @field_validator("result_limit")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator("max_retries", "cache_max_age_seconds")
    @classmethod
    def _validate_non_negative_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 0:
            raise ValueError
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_timeout(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value <= 0.0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    matcher: _MatcherSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_matcher_config_file(*, path: Path, fs: FileSystem) -> MatcherConfigFile:
    """Load and validate a matcher TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.matcher
    return MatcherConfigFile(
        dog_api_base_url=section.dog_api_base_url,
        timeout_seconds=section.timeout_seconds,
        max_retries=section.max_retries,
        cache_dir=section.cache_dir,
        cache_max_age_seconds=section.cache_max_age_seconds,
        breeds_path=section.breeds_path,
        min_score=section.min_score,
        result_limit=section.result_limit,
    )
