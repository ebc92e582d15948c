"""Centralised, injectable configuration for the dog breed matcher."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import MatcherConfigFile
from .domain.ranking import DEFAULT_MIN_SCORE, DEFAULT_RESULT_LIMIT
from .exceptions import MatcherError

DEFAULT_DOG_API_BASE_URL = "https://api.thedogapi.com/v1"
DEFAULT_CACHE_DIR = "data/cache/dog_api"
DEFAULT_CACHE_MAX_AGE_SECONDS = 86400


class NumberEnvVarError(MatcherError, ValueError):
    """Raised when an environment variable must be a number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a number.")


class IntegerEnvVarError(MatcherError, ValueError):
    """Raised when an environment variable must be an integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be an integer.")


class PositiveIntegerEnvVarError(MatcherError, ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


@dataclass(frozen=True)
class MatcherConfig:
    """Immutable configuration for catalog access and ranking.

    Load from environment with `MatcherConfig.from_env()` or construct directly for testing.
    """

    # TheDogAPI
    dog_api_key: str = ""
    dog_api_base_url: str = DEFAULT_DOG_API_BASE_URL
    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_factor: float = 0.5
    backoff_max_seconds: float = 60.0
    backoff_jitter_seconds: float = 0.1
    cache_dir: str = DEFAULT_CACHE_DIR
    cache_max_age_seconds: int = DEFAULT_CACHE_MAX_AGE_SECONDS

    # Local catalog file (bypasses the API when set)
    breeds_path: str = ""

    # Ranking
    min_score: int = DEFAULT_MIN_SCORE
    result_limit: int = DEFAULT_RESULT_LIMIT

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            MatcherConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            dog_api_key=os.getenv("DOG_API_KEY", "").strip(),
            dog_api_base_url=os.getenv("DOG_API_BASE_URL", DEFAULT_DOG_API_BASE_URL)
            .strip()
            .rstrip("/")
            or DEFAULT_DOG_API_BASE_URL,
            timeout_seconds=_parse_float(
                os.getenv("DOG_API_TIMEOUT_SECONDS", ""),
                default=30.0,
                env_name="DOG_API_TIMEOUT_SECONDS",
            ),
            max_retries=_parse_int(
                os.getenv("DOG_API_MAX_RETRIES", ""),
                default=3,
                env_name="DOG_API_MAX_RETRIES",
            ),
            backoff_factor=_parse_float(
                os.getenv("DOG_API_BACKOFF_FACTOR", ""),
                default=0.5,
                env_name="DOG_API_BACKOFF_FACTOR",
            ),
            backoff_max_seconds=_parse_float(
                os.getenv("DOG_API_BACKOFF_MAX_SECONDS", ""),
                default=60.0,
                env_name="DOG_API_BACKOFF_MAX_SECONDS",
            ),
            backoff_jitter_seconds=_parse_float(
                os.getenv("DOG_API_BACKOFF_JITTER_SECONDS", ""),
                default=0.1,
                env_name="DOG_API_BACKOFF_JITTER_SECONDS",
            ),
            cache_dir=os.getenv("BREED_CACHE_DIR", DEFAULT_CACHE_DIR).strip() or DEFAULT_CACHE_DIR,
            cache_max_age_seconds=_parse_int(
                os.getenv("BREED_CACHE_MAX_AGE_SECONDS", ""),
                default=DEFAULT_CACHE_MAX_AGE_SECONDS,
                env_name="BREED_CACHE_MAX_AGE_SECONDS",
            ),
            breeds_path=os.getenv("BREEDS_PATH", "").strip(),
            min_score=_parse_int(
                os.getenv("MATCH_MIN_SCORE", ""),
                default=DEFAULT_MIN_SCORE,
                env_name="MATCH_MIN_SCORE",
            ),
            result_limit=_parse_positive_int(
                os.getenv("MATCH_RESULT_LIMIT", ""),
                default=DEFAULT_RESULT_LIMIT,
                env_name="MATCH_RESULT_LIMIT",
            ),
        )

    def with_overrides(
        self,
        *,
        min_score: int | None = None,
        result_limit: int | None = None,
        breeds_path: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            min_score=self.min_score if min_score is None else min_score,
            result_limit=self.result_limit if result_limit is None else result_limit,
            breeds_path=self.breeds_path if breeds_path is None else breeds_path.strip(),
        )

    def with_file_overrides(self, file_config: MatcherConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            dog_api_base_url=self.dog_api_base_url
            if file_config.dog_api_base_url is None
            else file_config.dog_api_base_url,
            timeout_seconds=self.timeout_seconds
            if file_config.timeout_seconds is None
            else file_config.timeout_seconds,
            max_retries=self.max_retries
            if file_config.max_retries is None
            else file_config.max_retries,
            cache_dir=self.cache_dir if file_config.cache_dir is None else file_config.cache_dir,
            cache_max_age_seconds=self.cache_max_age_seconds
            if file_config.cache_max_age_seconds is None
            else file_config.cache_max_age_seconds,
            breeds_path=self.breeds_path
            if file_config.breeds_path is None
            else file_config.breeds_path,
            min_score=self.min_score if file_config.min_score is None else file_config.min_score,
            result_limit=self.result_limit
            if file_config.result_limit is None
            else file_config.result_limit,
        )


def _parse_float(value: str, *, default: float, env_name: str) -> float:
    """Parse an optional number from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        return float(text)
    except ValueError as exc:
        raise NumberEnvVarError(env_name) from exc


def _parse_int(value: str, *, default: int, env_name: str) -> int:
    """Parse an optional integer from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError as exc:
        raise IntegerEnvVarError(env_name) from exc


def _parse_positive_int(value: str, *, default: int, env_name: str) -> int:
    """Parse an optional positive integer from an environment variable."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed
