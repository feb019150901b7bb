# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Tool registration utilities.

While a :class:`~bravesearch_mcp.server.MCPServer` is inside its
:meth:`binding <bravesearch_mcp.server.MCPServer.binding>` context, functions
decorated with :func:`tool` are registered on it as MCP tools.
"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel


if TYPE_CHECKING:  # pragma: no cover - type-checking helpers only
    from .server import MCPServer


ToolFn = Callable[..., Any]


@dataclass(slots=True)
class ToolSpec:
    """In-memory representation of a tool definition.

    ``input_model`` validates the arguments, and its JSON schema becomes the
    advertised ``inputSchema``.
    """

    name: str
    fn: ToolFn
    input_model: type[BaseModel]
    description: str = ""


_ACTIVE_SERVER: ContextVar[MCPServer | None] = ContextVar("_bravesearch_active_server", default=None)


def get_active_server() -> MCPServer | None:
    """Return the server currently binding tool definitions, if any."""
    return _ACTIVE_SERVER.get()


def set_active_server(server: MCPServer) -> Any:
    return _ACTIVE_SERVER.set(server)


def reset_active_server(token: Any) -> None:
    _ACTIVE_SERVER.reset(token)


def tool(
    name: str | None = None,
    *,
    input_model: type[BaseModel],
    description: str | None = None,
) -> Callable[[ToolFn], ToolFn]:
    """Register the decorated callable as a tool on the server being bound.

    Outside :meth:`MCPServer.binding <bravesearch_mcp.server.MCPServer.binding>`
    the callable is returned unchanged.
    """

    def decorator(fn: ToolFn) -> ToolFn:
        desc = (description if description is not None else (fn.__doc__ or "")).strip()
        spec = ToolSpec(
            name=name or fn.__name__ or "anonymous",
            fn=fn,
            input_model=input_model,
            description=desc,
        )

        server = get_active_server()
        if server is not None:
            server.register_tool(spec)

        return fn

    return decorator


__all__ = [
    "ToolSpec",
    "ToolFn",
    "tool",
    "get_active_server",
    "set_active_server",
    "reset_active_server",
]
