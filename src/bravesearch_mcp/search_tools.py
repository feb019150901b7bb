# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""MCP tools backed by :class:`~bravesearch_mcp.router.BraveSearchRouter`.

Every router failure comes back to the model as an ``isError`` text result
instead of a protocol error, so it can read why the search did not happen.
"""

from __future__ import annotations

from collections.abc import Awaitable
from importlib.metadata import PackageNotFoundError, version

from mcp import types

from .errors import BraveSearchError
from .models import LocalSearchParams, NewsSearchParams, WebSearchParams
from .router import BraveSearchRouter
from .server import MCPServer
from .server.adapters import error_result
from .tool import tool
from .utils import get_logger


SERVER_NAME = "bravesearch-mcp"
INSTRUCTIONS = "Brave Search MCP Server for web, news and local search."

WEB_SEARCH_DESCRIPTION = (
    "Performs a web search using the Brave Search API, ideal for general queries, news, articles, "
    "and online content. Supports pagination with count and offset."
)
NEWS_SEARCH_DESCRIPTION = (
    "Searches recent news articles using the Brave News Search API. Results can be narrowed by "
    "country, language and freshness."
)
LOCAL_SEARCH_DESCRIPTION = (
    "Searches for local businesses and places using Brave's Local Search API. Returns names, "
    "addresses, ratings, phone numbers and opening hours. Falls back to a web search when no "
    "local results are found."
)

_logger = get_logger("bravesearch_mcp.tools")


def _package_version() -> str | None:
    try:
        return version("bravesearch-mcp")
    except PackageNotFoundError:
        return None


async def _run(operation: str, call: Awaitable[str]) -> str | types.CallToolResult:
    try:
        return await call
    except BraveSearchError as exc:
        _logger.warning("%s failed: %s", operation, exc)
        return error_result(str(exc))


def build_server(router: BraveSearchRouter, **server_options) -> MCPServer:
    """Create an :class:`MCPServer` exposing the three search tools."""

    server = MCPServer(SERVER_NAME, version=_package_version(), instructions=INSTRUCTIONS, **server_options)

    with server.binding():

        @tool(name="brave_web_search", description=WEB_SEARCH_DESCRIPTION, input_model=WebSearchParams)
        async def brave_web_search(query: str, count: int, offset: int) -> str | types.CallToolResult:
            return await _run("web search", router.web_search(query, count=count, offset=offset))

        @tool(name="brave_news_search", description=NEWS_SEARCH_DESCRIPTION, input_model=NewsSearchParams)
        async def brave_news_search(
            query: str,
            count: int,
            offset: int,
            country: str | None,
            search_lang: str | None,
            freshness: str | None,
        ) -> str | types.CallToolResult:
            return await _run(
                "news search",
                router.news_search(
                    query,
                    count=count,
                    offset=offset,
                    country=country,
                    search_lang=search_lang,
                    freshness=freshness,
                ),
            )

        @tool(name="brave_local_search", description=LOCAL_SEARCH_DESCRIPTION, input_model=LocalSearchParams)
        async def brave_local_search(query: str, count: int) -> str | types.CallToolResult:
            return await _run("local search", router.local_search(query, count=count))

    return server


__all__ = ["INSTRUCTIONS", "SERVER_NAME", "build_server"]
