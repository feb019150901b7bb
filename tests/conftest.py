from __future__ import annotations

import logging

import pytest

from bravesearch_mcp.rate_limit import RateLimiter
from tests.helpers import FakeBraveAPI, FakeCalendar, FakeClock


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def calendar() -> FakeCalendar:
    return FakeCalendar()


@pytest.fixture
def limiter(clock: FakeClock, calendar: FakeCalendar) -> RateLimiter:
    return RateLimiter(clock=clock, calendar=calendar)


@pytest.fixture
def brave_api() -> FakeBraveAPI:
    return FakeBraveAPI()


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
