# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Shared test helpers: fake clocks, a fake Brave API and request contexts."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
from types import SimpleNamespace
from typing import Any

import httpx
from mcp.server.lowlevel.server import request_ctx
from mcp.shared.context import RequestContext

from bravesearch_mcp.router import BraveSearchRouter


API_PREFIX = "/res/v1"

_REQUEST_COUNTER = count(1)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCalendar:
    def __init__(self, year: int = 2025, month: int = 1) -> None:
        self.period = (year, month)

    def __call__(self) -> tuple[int, int]:
        return self.period

    def next_month(self) -> None:
        year, month = self.period
        self.period = (year + 1, 1) if month == 12 else (year, month + 1)


Responder = httpx.Response | dict[str, Any] | Callable[[httpx.Request], httpx.Response]


class FakeBraveAPI:
    """``httpx.MockTransport`` handler keyed by endpoint path.

    Values are JSON payloads, ready-made responses, or callables receiving the
    request. Every request is recorded in :attr:`requests`.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Responder] = {}
        self.requests: list[httpx.Request] = []

    def on(self, endpoint: str, responder: Responder) -> None:
        self.routes[f"{API_PREFIX}{endpoint}"] = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.routes.get(request.url.path)
        if responder is None:
            return httpx.Response(404, text=f"no fake route for {request.url.path}")
        if callable(responder):
            return responder(request)
        if isinstance(responder, httpx.Response):
            return responder
        return httpx.Response(200, json=responder)

    def paths(self) -> list[str]:
        return [request.url.path.removeprefix(API_PREFIX) for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def router(self, limiter=None, api_key: str = "test-key") -> BraveSearchRouter:
        return BraveSearchRouter(api_key, rate_limiter=limiter, client=self.client())


def web_payload(*results: tuple[str, str, str]) -> dict[str, Any]:
    return {
        "type": "search",
        "web": {
            "type": "search",
            "results": [{"title": title, "description": desc, "url": url} for title, desc, url in results],
        },
    }


async def run_with_context(session: Any, func, *args):
    """Execute *func* with ``request_ctx`` bound to *session*."""
    ctx = RequestContext(
        request_id=next(_REQUEST_COUNTER),
        meta=None,
        session=session,  # type: ignore[arg-type]
        lifespan_context={},
        request=SimpleNamespace(scope=None),
    )
    token = request_ctx.set(ctx)
    try:
        return await func(*args)
    finally:
        request_ctx.reset(token)
