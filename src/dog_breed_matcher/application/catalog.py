"""Breed catalog access: TheDogAPI or a local JSON export of it.

Usage example:
    >>> from pathlib import Path
    >>> from dog_breed_matcher.application.catalog import load_breeds_file
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> breeds = load_breeds_file(Path("data/reference/breeds.json"), fs)
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import BreedsFileNotFoundError
from ..io_validation import parse_breed_records
from ..observability import get_logger
from ..protocols import FileSystem, HttpClient
from ..types import BreedRecord

BREEDS_CACHE_KEY = "breeds"

logger = get_logger("dog_breed_matcher.catalog")


def breeds_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/breeds"


def fetch_breeds(
    *,
    http_client: HttpClient,
    base_url: str,
    use_cache: bool = True,
) -> list[BreedRecord]:
    """Fetch every breed from the catalog API.

    Args:
        http_client: JSON client (cache, retries and auth are its concern).
        base_url: API root, e.g. ``https://api.thedogapi.com/v1``.
        use_cache: Serve from and refresh the response cache when true.

    Returns:
        Breed records in catalog order.
    """
    url = breeds_url(base_url)
    payload = http_client.get_json(url, cache_key=BREEDS_CACHE_KEY if use_cache else None)
    breeds = parse_breed_records(payload)
    logger.info("Catalog: %s breeds from %s", len(breeds), url)
    return breeds


def load_breeds_file(path: Path, fs: FileSystem) -> list[BreedRecord]:
    """Load breed records from a JSON array saved from the catalog API."""
    if not fs.exists(path):
        raise BreedsFileNotFoundError(str(path))
    breeds = parse_breed_records(fs.read_json(path))
    logger.info("Catalog: %s breeds from %s", len(breeds), path)
    return breeds
