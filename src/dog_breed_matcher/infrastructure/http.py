"""HTTP client for TheDogAPI breed catalog.

Usage example:
    from dog_breed_matcher.infrastructure.http import build_dog_api_client

    client = build_dog_api_client(
        api_key="live_...",
        cache_dir="data/cache/dog_api",
        cache_max_age_seconds=86400,
        max_retries=3,
        backoff_factor=0.5,
        max_backoff_seconds=60.0,
        jitter_seconds=0.1,
        timeout_seconds=30.0,
    )
    breeds = client.get_json("https://api.thedogapi.com/v1/breeds", cache_key="breeds")
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import override

import requests

from ..exceptions import (
    AuthenticationError,
    CatalogResponseError,
    CatalogUnavailableError,
    RateLimitError,
)
from ..io_validation import IncomingDataError, validate_json_as
from ..observability import get_logger
from ..protocols import Cache, HttpClient, RetryPolicy
from .filesystem import DiskCache
from .resilience import RetryPolicy as RetryPolicyImpl

logger = get_logger("dog_breed_matcher.infrastructure.http")

API_KEY_HEADER = "x-api-key"


def build_dog_api_client(
    *,
    api_key: str,
    cache_dir: str | Path,
    cache_max_age_seconds: int,
    max_retries: int,
    backoff_factor: float,
    max_backoff_seconds: float,
    jitter_seconds: float,
    timeout_seconds: float,
) -> CachedHttpClient:
    session = requests.Session()
    session.headers["Accept"] = "application/json"
    if api_key:
        session.headers[API_KEY_HEADER] = api_key
    cache = DiskCache(Path(cache_dir), max_age_seconds=cache_max_age_seconds)
    retry_policy = RetryPolicyImpl(
        max_retries=max_retries,
        backoff_factor=backoff_factor,
        max_backoff_seconds=max_backoff_seconds,
        jitter_seconds=jitter_seconds,
    )
    return CachedHttpClient(
        session=session,
        cache=cache,
        retry_policy=retry_policy,
        timeout_seconds=timeout_seconds,
    )


def parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    """Parse Retry-After header into seconds, if available."""
    if not headers:
        return None
    value = headers.get("Retry-After")
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        dt = parsedate_to_datetime(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        delta = (dt - datetime.now(UTC)).total_seconds()
        return max(0, int(delta))
    except (AttributeError, OverflowError, TypeError, ValueError):
        return None


def _response_details(response: requests.Response) -> str:
    """Return a compact status/body summary for error reporting."""
    try:
        body = response.text
    except (UnicodeDecodeError, ValueError, requests.RequestException):
        body = "<unreadable>"
    if not isinstance(body, str):
        body = "<unreadable>"
    body = " ".join(body.split())
    if len(body) > 300:
        body = body[:300] + "..."
    return f"status={response.status_code}, body={body}"


class CachedHttpClient(HttpClient):
    """JSON HTTP client with response caching and retries.

    - 401/403 raise AuthenticationError immediately
    - 429 and 5xx responses are retried with backoff, honouring Retry-After
    - timeouts and connection errors are retried with backoff
    - a body that is not JSON raises CatalogResponseError
    - exhausted retries and other HTTP errors raise CatalogUnavailableError
    """

    def __init__(
        self,
        *,
        session: requests.Session,
        cache: Cache,
        retry_policy: RetryPolicy | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.session = session
        self.cache = cache
        self.retry_policy = retry_policy or RetryPolicyImpl()
        self.timeout_seconds = timeout_seconds

    @override
    def get_json(self, url: str, cache_key: str | None = None) -> object:
        """Fetch JSON from URL, serving and filling the cache when a key is given.

        Raises:
            AuthenticationError: If the API returns 401 or 403
            RateLimitError: If 429 responses outlast every retry
            CatalogResponseError: If the body is not JSON
            CatalogUnavailableError: If retries run out or another HTTP error is returned
        """
        if cache_key:
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.info("Cache hit: %s", cache_key)
                return cached

        attempt = 0
        while True:
            try:
                r = self.session.get(url, timeout=self.timeout_seconds)
            except self.retry_policy.retry_exceptions as exc:
                if attempt < self.retry_policy.max_retries:
                    delay = self.retry_policy.compute_backoff(attempt)
                    logger.warning(
                        "Request to %s failed (%s); retrying in %.1fs", url, exc, delay
                    )
                    time.sleep(delay)
                    attempt += 1
                    continue
                raise CatalogUnavailableError(url, str(exc)) from exc

            if r.status_code == 401:
                raise AuthenticationError.for_status_401(_response_details(r))

            if r.status_code == 403:
                raise AuthenticationError.for_status_403(_response_details(r))

            if r.status_code in self.retry_policy.retry_statuses:
                retry_after = parse_retry_after(getattr(r, "headers", None))
                if attempt < self.retry_policy.max_retries:
                    delay = self.retry_policy.compute_backoff(attempt, retry_after)
                    logger.warning(
                        "HTTP %s from %s; retrying in %.1fs", r.status_code, url, delay
                    )
                    time.sleep(delay)
                    attempt += 1
                    continue
                if r.status_code == 429:
                    logger.warning("Rate limit response: %s", _response_details(r))
                    raise RateLimitError(retry_after or 60)

            try:
                r.raise_for_status()
            except requests.HTTPError as exc:
                raise CatalogUnavailableError(url, _response_details(r)) from exc

            try:
                data = validate_json_as(object, r.text)
            except IncomingDataError as exc:
                raise CatalogResponseError.not_json() from exc

            if cache_key:
                self.cache.set(cache_key, data)

            return data
