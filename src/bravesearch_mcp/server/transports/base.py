"""Shared transport primitives for :mod:`bravesearch_mcp.server`.

Provides a minimal base class that transports subclass and a factory
signature that `MCPServer` uses to instantiate transports lazily.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..app import MCPServer


class BaseTransport(ABC):
    """Common base for server transports.

    Subclasses receive the active :class:`MCPServer` instance so they can obtain
    initialization options. Implementations define :meth:`run`, which accepts
    keyword arguments specific to the transport (host/port for HTTP,
    ``raise_exceptions`` for stdio).
    """

    TRANSPORT: tuple[str, ...] = ()

    def __init__(self, server: "MCPServer") -> None:
        self._server = server

    @property
    def server(self) -> "MCPServer":
        """Return the owning :class:`MCPServer`."""

        return self._server

    @property
    def transport_display_name(self) -> str:
        names = self.TRANSPORT
        return f"{names[1] if len(names) > 1 else type(self).__name__} transport"

    @abstractmethod
    async def run(self, **kwargs: Any) -> None:
        """Start the transport and block until it shuts down."""


@runtime_checkable
class TransportFactory(Protocol):
    """Callable that produces a configured transport for an ``MCPServer``."""

    def __call__(self, server: "MCPServer") -> BaseTransport:  # pragma: no cover - protocol
        ...


__all__ = ["BaseTransport", "TransportFactory"]
