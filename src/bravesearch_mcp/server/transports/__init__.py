# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Transport adapters for the MCP server.

These thin wrappers isolate the reference SDK's transport primitives so that
the server class only deals with names and factories.
"""

from __future__ import annotations

from ._asgi import ASGITransportBase, SessionManagerHandler
from .base import BaseTransport, TransportFactory
from .sse import SSETransport
from .stdio import StdioTransport
from .streamable_http import StreamableHTTPTransport

__all__ = [
    "ASGITransportBase",
    "BaseTransport",
    "SSETransport",
    "SessionManagerHandler",
    "StdioTransport",
    "StreamableHTTPTransport",
    "TransportFactory",
]
