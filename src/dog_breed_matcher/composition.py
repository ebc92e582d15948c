"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import MatcherConfig
from .infrastructure import LocalFileSystem, build_dog_api_client
from .protocols import HttpClient


def build_cli_dependencies(
    *,
    config: MatcherConfig,
    build_http_client: bool,
) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Matcher configuration (used for API client wiring).
        build_http_client: Whether to construct the catalog client. The API key header
            is only sent when DOG_API_KEY is set.
    """
    fs = LocalFileSystem()
    http_client: HttpClient | None = None
    if build_http_client:
        http_client = build_dog_api_client(
            api_key=config.dog_api_key,
            cache_dir=config.cache_dir,
            cache_max_age_seconds=config.cache_max_age_seconds,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
            max_backoff_seconds=config.backoff_max_seconds,
            jitter_seconds=config.backoff_jitter_seconds,
            timeout_seconds=config.timeout_seconds,
        )
    return CliDependencies(fs=fs, http_client=http_client)


app = create_app(build_cli_dependencies)
