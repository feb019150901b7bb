# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Streamable HTTP transport adapter."""

from __future__ import annotations

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.routing import Route

from ._asgi import ASGITransportBase, SessionManagerHandler


class StreamableHTTPTransport(ASGITransportBase):
    """Serve an :class:`bravesearch_mcp.server.MCPServer` over Streamable HTTP."""

    TRANSPORT = ("streamable-http", "Streamable HTTP", "shttp", "http")

    def build_app(self, *, path: str) -> Starlette:
        manager = StreamableHTTPSessionManager(
            self.server, security_settings=self.security_settings, stateless=self.stateless
        )
        handler = SessionManagerHandler(
            session_manager=manager,
            transport_label=self.transport_display_name,
            allowed_scopes=self.ALLOWED_SCOPES,
        )
        return Starlette(routes=[Route(path, handler)], lifespan=handler.lifespan())


__all__ = ["StreamableHTTPTransport"]
