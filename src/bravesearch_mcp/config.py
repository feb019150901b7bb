# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Server configuration resolved from explicit values and the environment."""

from __future__ import annotations

from dataclasses import dataclass, fields
import os
from typing import Any, Final

from .errors import ConfigError
from .rate_limit import DEFAULT_MIN_INTERVAL, DEFAULT_MONTHLY_QUOTA


DEFAULT_BASE_URL: Final[str] = "https://api.search.brave.com/res/v1"
DEFAULT_TIMEOUT: Final[float] = 30.0

ENV_API_KEY: Final[str] = "BRAVE_API_KEY"
ENV_BASE_URL: Final[str] = "BRAVE_API_BASE_URL"
ENV_TIMEOUT: Final[str] = "BRAVE_API_TIMEOUT"
ENV_MIN_INTERVAL: Final[str] = "BRAVESEARCH_MCP_MIN_INTERVAL"
ENV_MONTHLY_QUOTA: Final[str] = "BRAVESEARCH_MCP_MONTHLY_QUOTA"

_ENV_NAMES: Final[dict[str, str]] = {
    "api_key": ENV_API_KEY,
    "base_url": ENV_BASE_URL,
    "timeout": ENV_TIMEOUT,
    "min_interval": ENV_MIN_INTERVAL,
    "monthly_quota": ENV_MONTHLY_QUOTA,
}


@dataclass(slots=True)
class BraveSearchConfig:
    """Settings for the router and its rate limiter."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    min_interval: float = DEFAULT_MIN_INTERVAL
    monthly_quota: int = DEFAULT_MONTHLY_QUOTA

    @classmethod
    def from_env(cls, **overrides: Any) -> BraveSearchConfig:
        """Build a config, preferring non-``None`` overrides to the environment.

        Raises:
            ConfigError: No API key was given, or a numeric variable does not
                parse.
        """
        values: dict[str, Any] = {}
        for field in fields(cls):
            explicit = overrides.get(field.name)
            if explicit is not None:
                values[field.name] = explicit
                continue
            raw = os.getenv(_ENV_NAMES[field.name])
            if raw is None or not raw.strip():
                continue
            values[field.name] = _coerce(field.name, raw.strip(), field.type)

        if not values.get("api_key"):
            raise ConfigError(f"A Brave API key is required; pass --api-key or set {ENV_API_KEY}")
        return cls(**values)


def _coerce(name: str, raw: str, annotation: Any) -> Any:
    converter = {"float": float, "int": int}.get(str(annotation))
    if converter is None:
        return raw
    try:
        return converter(raw)
    except ValueError as exc:
        raise ConfigError(f"{_ENV_NAMES[name]} must be a number, got {raw!r}") from exc


__all__ = ["BraveSearchConfig", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
