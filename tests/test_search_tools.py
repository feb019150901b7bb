# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

from __future__ import annotations

import httpx
from mcp import types
import pytest

from bravesearch_mcp.search_tools import INSTRUCTIONS, SERVER_NAME, build_server
from tests.helpers import FakeBraveAPI, run_with_context, web_payload


pytestmark = pytest.mark.anyio

TOOL_NAMES = ["brave_local_search", "brave_news_search", "brave_web_search"]


@pytest.fixture
def server(brave_api: FakeBraveAPI, limiter):
    return build_server(brave_api.router(limiter))


async def test_server_exposes_the_search_tools(server) -> None:
    assert server.name == SERVER_NAME
    assert server.instructions == INSTRUCTIONS
    assert server.tool_names == TOOL_NAMES


async def test_tool_schemas_come_from_parameter_models(server) -> None:
    definitions = server.tools.definitions

    web = definitions["brave_web_search"].inputSchema
    assert web["required"] == ["query"]
    assert set(web["properties"]) == {"query", "count", "offset"}
    assert web["properties"]["count"]["default"] == 10
    assert web["additionalProperties"] is False

    local = definitions["brave_local_search"].inputSchema
    assert set(local["properties"]) == {"query", "count"}
    assert local["properties"]["count"]["default"] == 5

    news = definitions["brave_news_search"].inputSchema
    assert {"country", "search_lang", "freshness"} <= set(news["properties"])
    assert "title" not in news


async def test_web_search_tool_returns_text(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", web_payload(("Rust", "A language", "https://rust-lang.org")))

    result = await server.invoke_tool("brave_web_search", query="rust")

    assert not result.isError
    assert result.content[0].text == "Title: Rust\nDescription: A language\nURL: https://rust-lang.org"
    assert dict(brave_api.requests[0].url.params)["count"] == "10"


async def test_news_search_tool_passes_filters(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/news/search", {"results": []})

    result = await server.invoke_tool("brave_news_search", query="markets", country="de", freshness="day")

    assert result.content[0].text == "No news results found"
    params = brave_api.requests[0].url.params
    assert params["country"] == "DE"
    assert params["freshness"] == "pd"


async def test_invalid_arguments_become_error_results(server, brave_api: FakeBraveAPI) -> None:
    result = await server.invoke_tool("brave_web_search", query="rust", count=0)

    assert result.isError
    assert result.content[0].text.startswith("Invalid arguments: count")
    assert brave_api.requests == []


async def test_oversized_arguments_are_capped(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", web_payload())

    result = await server.invoke_tool("brave_web_search", query="rust", count=50, offset=12)

    assert not result.isError
    params = brave_api.requests[0].url.params
    assert (params["count"], params["offset"]) == ("20", "9")


async def test_rate_limit_becomes_error_result(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", web_payload())

    first = await server.invoke_tool("brave_web_search", query="one")
    second = await server.invoke_tool("brave_local_search", query="two")

    assert not first.isError
    assert second.isError
    assert second.content[0].text == "Rate limit exceeded: retry after 1s"
    assert len(brave_api.requests) == 1


async def test_upstream_failure_becomes_error_result(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", httpx.Response(503, text="maintenance"))

    result = await server.invoke_tool("brave_web_search", query="rust")

    assert result.isError
    assert result.content[0].text == "Brave API error: 503 Service Unavailable\nmaintenance"


async def test_unknown_tool(server) -> None:
    result = await server.invoke_tool("brave_image_search", query="cats")

    assert result.isError
    assert result.content[0].text == 'Tool "brave_image_search" is not available'


async def test_protocol_handlers(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", web_payload(("Rust", "A language", "https://rust-lang.org")))

    list_handler = server.request_handlers[types.ListToolsRequest]
    listed = await run_with_context(object(), list_handler, types.ListToolsRequest(method="tools/list"))
    assert sorted(tool.name for tool in listed.root.tools) == TOOL_NAMES

    call_handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="brave_web_search", arguments={"query": "rust", "count": 1}),
    )
    called = await run_with_context(object(), call_handler, request)
    assert called.root.isError is False
    assert called.root.content[0].text.startswith("Title: Rust")


async def test_protocol_error_result(server) -> None:
    call_handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="brave_web_search", arguments={"query": ""}),
    )

    called = await run_with_context(object(), call_handler, request)

    assert called.root.isError is True
    assert called.root.content[0].text.startswith("Invalid arguments: query")


async def test_null_arguments_use_defaults(server, brave_api: FakeBraveAPI) -> None:
    brave_api.on("/web/search", web_payload(("Rust", "A language", "https://rust-lang.org")))
    call_handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(
            name="brave_web_search", arguments={"query": "rust", "count": None, "offset": None}
        ),
    )

    called = await run_with_context(object(), call_handler, request)

    assert called.root.isError is False
    assert dict(brave_api.requests[0].url.params) == {"q": "rust", "count": "10", "offset": "0"}
