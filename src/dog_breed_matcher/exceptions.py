"""Custom exceptions for the dog breed matcher.

The scoring core never raises for malformed breed data; these exceptions cover
the layers around it (catalog access, profile validation, configuration).
"""

from __future__ import annotations

from pathlib import Path


class MatcherError(Exception):
    """Base exception for all matcher errors."""

    pass


class AuthenticationError(MatcherError):
    """Raised when TheDogAPI rejects the configured API key.

    This is a fatal error - retrying will not help.
    """

    def __init__(self, message: str = "Dog API authentication failed") -> None:
        super().__init__(
            f"{message}\n"
            "Please check DOG_API_KEY in .env is correct.\n"
            "Get a key at: https://thedogapi.com/"
        )

    @classmethod
    def for_status_401(cls, details: str) -> AuthenticationError:
        return cls(f"Dog API returned 401 Unauthorized ({details})")

    @classmethod
    def for_status_403(cls, details: str) -> AuthenticationError:
        return cls(f"Dog API returned 403 Forbidden ({details})")


class RateLimitError(MatcherError):
    """Raised when the catalog keeps answering 429 after all retries."""

    def __init__(self, retry_after: int = 60) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded. Retry after {retry_after} seconds.")


class CatalogResponseError(MatcherError):
    """Raised when the breed catalog returns something other than a JSON list."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Unexpected breed catalog response: {detail}")

    @classmethod
    def not_json(cls) -> CatalogResponseError:
        return cls("body is not valid JSON")

    @classmethod
    def not_a_list(cls, kind: str) -> CatalogResponseError:
        return cls(f"expected a JSON array of breeds, got {kind}")


class CatalogUnavailableError(MatcherError):
    """Raised when the breed catalog cannot be reached or answers with an HTTP error."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Breed catalog unavailable at {url}: {detail}")


class CatalogClientMissingError(MatcherError):
    """Raised when breeds must be fetched but no catalog client is configured."""

    def __init__(self) -> None:
        super().__init__(
            "No breed source available. Wire a catalog API client "
            "or pass --breeds-file / BREEDS_PATH to use a local catalog."
        )


class BreedsFileNotFoundError(MatcherError):
    """Raised when a local breed catalog file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Breeds file not found: {path}")


class BreedNotFoundError(MatcherError):
    """Raised when a breed name is not present in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Breed not found in catalog: {name}")


class ProfileValidationError(MatcherError):
    """Raised when a questionnaire answer is missing or outside its vocabulary."""

    def __init__(self, field: str, value: object, allowed: tuple[str, ...]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        if value is None or value == "":
            message = f"Missing profile field: {field}"
        else:
            message = f"Invalid value for {field}: {value!r} (expected one of {', '.join(allowed)})"
        super().__init__(message)


class ConfigFileNotFoundError(MatcherError):
    """Raised when a requested config file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(MatcherError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(MatcherError):
    """Raised when a config file does not match the expected schema."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is invalid: {detail}")


class JsonFileError(MatcherError):
    """Raised when a file that should hold JSON cannot be decoded."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File does not contain valid JSON: {path}")


class MatcherConfigMissingError(MatcherError):
    """Raised when a use case is called without a loaded configuration."""

    def __init__(self) -> None:
        super().__init__(
            "MatcherConfig is required. Load it once at the entry point with "
            "MatcherConfig.from_env() and pass it through."
        )
