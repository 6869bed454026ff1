"""Settings for the npms.io batch fetcher."""

from __future__ import annotations

from dataclasses import dataclass

from npms_colorizer.errors import ConfigError

NPMS_MGET_URL = "https://api.npms.io/v2/package/mget"

# Max number of package names npms.io accepts per mget request.
NPMS_BULK_LIMIT = 250

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class FetcherSettings:
    """Endpoint, batch size and per-request timeout for BatchScoreFetcher."""

    api_url: str = NPMS_MGET_URL
    bulk_limit: int = NPMS_BULK_LIMIT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.api_url:
            raise ConfigError("api_url must not be empty.")
        if self.bulk_limit < 1:
            raise ConfigError(f"bulk_limit must be at least 1, got {self.bulk_limit}.")
        if self.timeout_seconds <= 0:
            raise ConfigError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}."
            )
