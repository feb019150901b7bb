# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""HTTP + Server-Sent Events transport adapter.

Clients open an event stream with ``GET /sse``; the first event names the URL
they ``POST`` their JSON-RPC messages to. Each stream runs its own server
session.
"""

from __future__ import annotations

from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from ._asgi import ASGITransportBase


class SSETransport(ASGITransportBase):
    """Serve an :class:`bravesearch_mcp.server.MCPServer` over HTTP+SSE."""

    TRANSPORT = ("sse", "SSE", "Server-Sent Events")

    DEFAULT_PATH = "/sse"
    MESSAGES_PATH = "/messages/"

    def build_app(self, *, path: str) -> Starlette:
        sse = SseServerTransport(self.MESSAGES_PATH, security_settings=self.security_settings)

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                    stateless=self.stateless,
                )
            return Response()

        return Starlette(
            routes=[
                Route(path, endpoint=handle_sse, methods=["GET"]),
                Mount(self.MESSAGES_PATH, app=sse.handle_post_message),
            ]
        )


__all__ = ["SSETransport"]
