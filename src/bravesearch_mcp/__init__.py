# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Brave Search exposed as Model Context Protocol tools."""

from __future__ import annotations

from .config import BraveSearchConfig
from .enums import Country, Freshness, Language
from .errors import (
    BraveSearchError,
    ConfigError,
    InvalidParamsError,
    QuotaExceeded,
    RateLimitError,
    RateLimitExceeded,
    UpstreamError,
)
from .rate_limit import RateLimiter, RateLimiterState
from .router import BraveSearchRouter
from .search_tools import build_server
from .server import MCPServer
from .tool import tool


__all__ = [
    "BraveSearchConfig",
    "BraveSearchError",
    "BraveSearchRouter",
    "ConfigError",
    "Country",
    "Freshness",
    "InvalidParamsError",
    "Language",
    "MCPServer",
    "QuotaExceeded",
    "RateLimitError",
    "RateLimitExceeded",
    "RateLimiter",
    "RateLimiterState",
    "UpstreamError",
    "build_server",
    "tool",
]
