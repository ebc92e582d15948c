"""Match use case: questionnaire answers in, ranked breeds out.

Usage example:
    >>> from dog_breed_matcher.application.matching import run_match
    >>> from dog_breed_matcher.config import MatcherConfig
    >>> config = MatcherConfig.from_env()
    >>> http_client = ...  # Injected HttpClient from the CLI/composition root
    >>> result = run_match(
    ...     profile={
    ...         "freeTime": "high",
    ...         "activityLevel": "high",
    ...         "noiseTolerance": "medium",
    ...         "housing": "house_with_yard",
    ...         "experience": "advanced",
    ...         "affectionNeed": "high",
    ...     },
    ...     config=config,
    ...     http_client=http_client,
    ... )
    >>> result.to_payload()["results"][0]["score"]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from ..config import MatcherConfig
from ..domain.profile import UserProfile
from ..domain.ranking import ScoredBreed, rank_breeds
from ..domain.scoring import ScoreBreakdown, score_breakdown
from ..domain.traits import DerivedTraits, derive_traits
from ..exceptions import BreedNotFoundError, CatalogClientMissingError, MatcherConfigMissingError
from ..infrastructure import LocalFileSystem
from ..io_validation import parse_user_profile
from ..observability import get_logger
from ..protocols import FileSystem, HttpClient
from ..types import BreedRecord, MatchResponse, UserProfilePayload
from .catalog import fetch_breeds, load_breeds_file

logger = get_logger("dog_breed_matcher.matching")


def profile_payload(profile: UserProfile) -> UserProfilePayload:
    """Return the profile with the camelCase keys used by response documents."""
    return {
        "freeTime": profile.free_time,
        "activityLevel": profile.activity_level,
        "noiseTolerance": profile.noise_tolerance,
        "housing": profile.housing,
        "experience": profile.experience,
        "affectionNeed": profile.affection_need,
    }


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one match request."""

    user_profile: UserProfile
    results: list[ScoredBreed]
    candidates: int

    def to_payload(self) -> MatchResponse:
        return {
            "user_profile": profile_payload(self.user_profile),
            "results": [item.to_result() for item in self.results],
        }


@dataclass(frozen=True)
class BreedExplanation:
    """Derived traits of one breed and, optionally, its score breakdown."""

    breed: BreedRecord
    traits: DerivedTraits
    breakdown: ScoreBreakdown | None = None


def resolve_profile(profile: UserProfile | Mapping[str, object]) -> UserProfile:
    """Validate raw answers; profiles that are already built pass through."""
    if isinstance(profile, UserProfile):
        return profile
    return parse_user_profile(profile)


def load_breeds(
    *,
    config: MatcherConfig,
    http_client: HttpClient | None,
    fs: FileSystem,
    breeds_path: str | Path | None = None,
    use_cache: bool = True,
) -> list[BreedRecord]:
    """Load breeds from a local file when one is configured, else from the API."""
    path_text = str(breeds_path) if breeds_path else config.breeds_path
    if path_text:
        return load_breeds_file(Path(path_text), fs)
    if http_client is None:
        raise CatalogClientMissingError()
    return fetch_breeds(
        http_client=http_client,
        base_url=config.dog_api_base_url,
        use_cache=use_cache,
    )


def run_match(
    *,
    profile: UserProfile | Mapping[str, object],
    config: MatcherConfig | None = None,
    http_client: HttpClient | None = None,
    fs: FileSystem | None = None,
    breeds_path: str | Path | None = None,
    use_cache: bool = True,
) -> MatchResult:
    """Rank catalog breeds for one questionnaire.

    Args:
        profile: A built profile or raw answers (camelCase or snake_case keys).
        config: Matcher configuration (required; load at entry point).
        http_client: Catalog client; not needed when a breeds file is used.
        fs: Optional filesystem for testing.
        breeds_path: Local catalog file overriding ``config.breeds_path``.
        use_cache: Whether the API response cache may be used.

    Returns:
        The validated profile and at most ``config.result_limit`` scored breeds.
    """
    if config is None:
        raise MatcherConfigMissingError()

    fs = fs or LocalFileSystem()
    user_profile = resolve_profile(profile)
    breeds = load_breeds(
        config=config,
        http_client=http_client,
        fs=fs,
        breeds_path=breeds_path,
        use_cache=use_cache,
    )

    results = rank_breeds(
        breeds,
        user_profile,
        threshold=config.min_score,
        limit=config.result_limit,
    )
    logger.info(
        "Ranked %s breeds: returning %s (min score %s, limit %s)",
        len(breeds),
        len(results),
        config.min_score,
        config.result_limit,
    )
    return MatchResult(user_profile=user_profile, results=results, candidates=len(breeds))


def find_breed(breeds: Iterable[BreedRecord], name: str) -> BreedRecord:
    """Return the first breed whose name matches, ignoring case and surrounding space."""
    wanted = name.strip().lower()
    for breed in breeds:
        breed_name = breed.get("name")
        if isinstance(breed_name, str) and breed_name.strip().lower() == wanted:
            return breed
    raise BreedNotFoundError(name)


def explain_breed(
    *,
    breed_name: str,
    breeds: Iterable[BreedRecord],
    profile: UserProfile | Mapping[str, object] | None = None,
) -> BreedExplanation:
    """Show how the scorer sees one breed, with a breakdown when a profile is given."""
    breed = find_breed(breeds, breed_name)
    if profile is None:
        return BreedExplanation(breed=breed, traits=derive_traits(breed))
    breakdown = score_breakdown(breed, resolve_profile(profile))
    return BreedExplanation(breed=breed, traits=breakdown.traits, breakdown=breakdown)

