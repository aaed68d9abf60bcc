"""
Error kinds raised while answering a search.

Only ServiceUnavailable is meant to reach the caller as its own status code;
UpstreamError and MalformedUpstreamData are absorbed inside the provider
adapters outside production mode.
"""

from typing import Iterable


class ForestSentinelError(Exception):
    """Base class for every error raised by this package."""


class LocationNotFound(ForestSentinelError):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Location not found: {query!r}")


class ServiceUnavailable(ForestSentinelError):
    """A required provider cannot be used in production mode."""

    def __init__(self, missing: Iterable[str], message: str | None = None):
        self.missing = list(missing)
        if message is None:
            message = (f"Production mode requires real API keys. Missing: {', '.join(self.missing)}. "
                       f"Please configure these environment variables.")
        self.message = message
        super().__init__(message)


class UpstreamError(ForestSentinelError):
    def __init__(self, provider: str, cause: BaseException | str):
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider} upstream failed: {cause}")


class MalformedUpstreamData(ForestSentinelError):
    """Payload from a provider could not be interpreted at all."""
