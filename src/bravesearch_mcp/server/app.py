"""MCP server built on the reference SDK's low-level ``Server``."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from contextlib import contextmanager
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel.server import NotificationOptions, Server
from mcp.server.lowlevel.server import lifespan as default_lifespan
from mcp.server.models import InitializationOptions
from mcp.server.transport_security import TransportSecuritySettings
from mcp.shared.exceptions import McpError

from ..tool import ToolSpec, reset_active_server, set_active_server
from ..utils import get_logger
from .services import ToolsService
from .transports import BaseTransport, SSETransport, StdioTransport, StreamableHTTPTransport, TransportFactory

_LOOPBACK_HOSTS = ["127.0.0.1:*", "localhost:*"]
_LOOPBACK_ORIGINS = ["http://127.0.0.1:*", "http://localhost:*"]


class MCPServer(Server[Any, Any]):
    """Tool-serving MCP server with a pluggable transport registry."""

    def __init__(
        self,
        name: str,
        *,
        version: str | None = None,
        instructions: str | None = None,
        lifespan: Callable[[Server[Any, Any]], Any] = default_lifespan,
        transport: str | None = None,
        http_security: TransportSecuritySettings | None = None,
    ) -> None:
        super().__init__(name, version=version, instructions=instructions, lifespan=lifespan)
        self._default_transport = transport.lower() if transport else "stdio"
        self._logger = get_logger(f"bravesearch_mcp.server.{name}")
        self.tools = ToolsService(logger=self._logger)

        self._http_security_settings = (
            http_security if http_security is not None else self.default_http_security_settings()
        )

        self._transport_factories: dict[str, TransportFactory] = {}
        self.register_transport("stdio", lambda server: StdioTransport(server))
        self.register_transport(
            "sse",
            lambda server: SSETransport(server, security_settings=self._http_security_settings),
        )
        self.register_transport(
            "streamable-http",
            lambda server: StreamableHTTPTransport(server, security_settings=self._http_security_settings),
            aliases=("streamable_http", "shttp", "http"),
        )

        # //////////////////////////////////////////////////////////////////
        # Register default handlers
        # //////////////////////////////////////////////////////////////////

        @self.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return await self.tools.list_tools()

        @self.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.ContentBlock]:
            result = await self.tools.call_tool(name, arguments or {})
            if result.isError:
                message = "Tool execution failed"
                if result.content:
                    first = result.content[0]
                    if isinstance(first, types.TextContent) and first.text:
                        message = first.text
                # The SDK turns handler exceptions into an isError result carrying this text.
                raise McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=message))
            return list(result.content)

    # //////////////////////////////////////////////////////////////////
    # Tools
    # //////////////////////////////////////////////////////////////////

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def tool_names(self) -> list[str]:
        return self.tools.tool_names

    def register_tool(self, spec: ToolSpec) -> ToolSpec:
        return self.tools.register(spec)

    async def invoke_tool(self, name: str, **arguments: Any) -> types.CallToolResult:
        return await self.tools.call_tool(name, arguments)

    @contextmanager
    def binding(self):
        """Register every ``@tool`` declared inside the block on this server."""
        token = set_active_server(self)
        try:
            yield self
        finally:
            reset_active_server(token)

    # //////////////////////////////////////////////////////////////////
    # Initialization
    # //////////////////////////////////////////////////////////////////

    def create_initialization_options(
        self,
        notification_options: NotificationOptions | None = None,
        experimental_capabilities: dict[str, dict[str, Any]] | None = None,
    ) -> InitializationOptions:
        return super().create_initialization_options(
            notification_options=notification_options or NotificationOptions(),
            experimental_capabilities=experimental_capabilities or {},
        )

    # //////////////////////////////////////////////////////////////////
    # Transport registry
    # //////////////////////////////////////////////////////////////////

    @staticmethod
    def default_http_security_settings(extra_hosts: Iterable[str] = ()) -> TransportSecuritySettings:
        """Return loopback-only DNS-rebinding protection for the HTTP transports."""

        return TransportSecuritySettings(
            enable_dns_rebinding_protection=True,
            allowed_hosts=[*_LOOPBACK_HOSTS, *extra_hosts],
            allowed_origins=list(_LOOPBACK_ORIGINS),
        )

    def configure_http_security(self, settings: TransportSecuritySettings | None) -> None:
        """Replace the guard used by the SSE and Streamable HTTP transports."""

        self._http_security_settings = settings if settings is not None else self.default_http_security_settings()

    def register_transport(
        self,
        name: str,
        factory: TransportFactory,
        *,
        aliases: Iterable[str] | None = None,
    ) -> None:
        canonical = name.lower()
        self._transport_factories[canonical] = factory
        for alias in aliases or ():
            self._transport_factories[alias.lower()] = factory

    def _transport_for_name(self, name: str) -> BaseTransport:
        factory = self._transport_factories.get(name.lower())
        if factory is None:
            raise ValueError(f"Unsupported transport '{name}'.")
        transport = factory(self)
        if not isinstance(transport, BaseTransport):
            raise TypeError("Transport factory must return a BaseTransport instance")
        return transport

    async def serve(self, *, transport: str | None = None, **kwargs: Any) -> None:
        """Run the server on *transport* (default set at construction)."""

        selected = transport or self._default_transport
        transport_instance = self._transport_for_name(selected)
        self._logger.info("starting %s", transport_instance.transport_display_name)
        await transport_instance.run(**kwargs)
