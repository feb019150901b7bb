# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Shared ASGI transport primitives.

Building blocks for transports that expose an ``MCPServer`` over HTTP.
Concrete subclasses build the Starlette application; this base class owns the
defaults and runs the application under uvicorn.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from mcp.server.transport_security import TransportSecuritySettings
from starlette.applications import Starlette
from uvicorn import Config, Server

from .base import BaseTransport


if TYPE_CHECKING:
    from starlette.types import Receive, Scope, Send

    from ..app import MCPServer


class SessionManagerProtocol(Protocol):
    """Minimal contract required of the reference SDK session managers."""

    async def handle_request(self, scope: Scope, receive: Receive, send: Send) -> None: ...

    def run(self) -> AbstractAsyncContextManager[None]: ...


@dataclass(slots=True)
class SessionManagerHandler:
    """ASGI adapter that connects the server session manager to the runtime."""

    session_manager: SessionManagerProtocol
    transport_label: str
    allowed_scopes: tuple[str, ...]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        scope_type = scope.get("type")
        if scope_type not in self.allowed_scopes:
            allowed = ", ".join(self.allowed_scopes)
            message = f"{self.transport_label} only handles ASGI scopes: {allowed} (got {scope_type!r})."
            raise TypeError(message)

        await self.session_manager.handle_request(scope, receive, send)

    def lifespan(self) -> Callable[[Starlette], AbstractAsyncContextManager[None]]:
        """Return an ASGI lifespan hook bound to the session manager."""

        @asynccontextmanager
        async def _lifespan(
            _app: Starlette,
        ) -> AsyncIterator[None]:  # pragma: no cover - exercised via integration tests
            async with self.session_manager.run():
                yield

        return _lifespan


class ASGITransportBase(BaseTransport, ABC):
    """Template for transports that present an :class:`MCPServer` via ASGI."""

    ALLOWED_SCOPES: tuple[str, ...] = ("http",)
    DEFAULT_HOST: str = "127.0.0.1"
    DEFAULT_PORT: int = 3000
    DEFAULT_PATH: str = "/mcp"
    DEFAULT_LOG_LEVEL: str = "info"

    def __init__(
        self,
        server: MCPServer,
        *,
        security_settings: TransportSecuritySettings | None = None,
        stateless: bool = False,
    ) -> None:
        super().__init__(server)
        self._security_settings = security_settings
        self._stateless = stateless

    @property
    def security_settings(self) -> TransportSecuritySettings | None:
        """Return the DNS-rebinding guard configuration, if any."""
        return self._security_settings

    @property
    def stateless(self) -> bool:
        """Return ``True`` when incoming requests should be treated statelessly."""
        return self._stateless

    async def run(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        path: str | None = None,
        log_level: str | None = None,
        **uvicorn_options: Any,
    ) -> None:
        host = host or self.DEFAULT_HOST
        port = port or self.DEFAULT_PORT
        path = path or self.DEFAULT_PATH
        log_level = log_level or self.DEFAULT_LOG_LEVEL

        app = self.build_app(path=path)
        self.server.logger.info("serving %s on http://%s:%s%s", self.transport_display_name, host, port, path)

        config = Config(app=app, host=host, port=port, log_level=log_level, **uvicorn_options)
        await Server(config).serve()

    @abstractmethod
    def build_app(self, *, path: str) -> Starlette:
        """Return the Starlette application serving MCP at *path*."""


__all__ = ["ASGITransportBase", "SessionManagerHandler", "SessionManagerProtocol"]
