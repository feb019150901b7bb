# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""STDIO transport adapter built on the reference MCP SDK.

Delegates to the SDK's ``stdio_server`` helper, which handles newline-delimited
JSON-RPC traffic over ``stdin``/``stdout``.
"""

from __future__ import annotations

from mcp.server.stdio import stdio_server

from .base import BaseTransport


class StdioTransport(BaseTransport):
    """Run an :class:`bravesearch_mcp.server.MCPServer` over STDIO."""

    TRANSPORT = ("stdio", "STDIO", "Standard IO")

    async def run(self, *, raise_exceptions: bool = False, stateless: bool = False) -> None:
        init_options = self.server.create_initialization_options()

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream, write_stream, init_options, raise_exceptions=raise_exceptions, stateless=stateless
            )
