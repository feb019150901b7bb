# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Error types raised by the search router.

Three kinds of failure reach a tool caller: a bad parameter, a rate or quota
rejection, and an upstream failure. The tool layer renders each of them as
text, so the messages here are written for the model reading them.
"""

from __future__ import annotations

import math

from pydantic import ValidationError


class BraveSearchError(Exception):
    """Base class for every error the router raises."""


class ConfigError(BraveSearchError):
    """Raised when the server configuration is incomplete or malformed."""


class InvalidParamsError(BraveSearchError):
    """A tool argument failed validation."""

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> InvalidParamsError:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
            for error in exc.errors()
        )
        return cls(f"Invalid arguments: {problems}")


class RateLimitError(BraveSearchError):
    """The request was refused by the local rate limiter."""


class RateLimitExceeded(RateLimitError):
    """Another call was accepted less than the minimum interval ago."""

    def __init__(self, retry_after: float) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded: retry after {max(1, math.ceil(retry_after))}s")


class QuotaExceeded(RateLimitError):
    """The monthly request ceiling has been reached."""

    def __init__(self, quota: int) -> None:
        self.quota = quota
        super().__init__(f"Monthly quota exceeded: {quota} requests already made this month")


class UpstreamError(BraveSearchError):
    """The Brave API answered with an error or with a body we cannot read."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, reason: str, body: str) -> UpstreamError:
        message = f"Brave API error: {status_code} {reason}".rstrip()
        if body:
            message = f"{message}\n{body}"
        return cls(message, status_code=status_code, body=body)


__all__ = [
    "BraveSearchError",
    "ConfigError",
    "InvalidParamsError",
    "QuotaExceeded",
    "RateLimitError",
    "RateLimitExceeded",
    "UpstreamError",
]
