from __future__ import annotations

import pytest

from bravesearch_mcp.config import DEFAULT_BASE_URL, BraveSearchConfig
from bravesearch_mcp.errors import ConfigError
from bravesearch_mcp.router import BraveSearchRouter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BRAVE_API_KEY",
        "BRAVE_API_BASE_URL",
        "BRAVE_API_TIMEOUT",
        "BRAVESEARCH_MCP_MIN_INTERVAL",
        "BRAVESEARCH_MCP_MONTHLY_QUOTA",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRAVE_API_KEY", "env-key")

    config = BraveSearchConfig.from_env()

    assert config.api_key == "env-key"
    assert config.base_url == DEFAULT_BASE_URL
    assert config.min_interval == 1.0
    assert config.monthly_quota == 15000


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRAVE_API_KEY", "env-key")
    monkeypatch.setenv("BRAVE_API_BASE_URL", "http://localhost:9999/res/v1")
    monkeypatch.setenv("BRAVE_API_TIMEOUT", "5")
    monkeypatch.setenv("BRAVESEARCH_MCP_MIN_INTERVAL", "0.25")
    monkeypatch.setenv("BRAVESEARCH_MCP_MONTHLY_QUOTA", "2000")

    config = BraveSearchConfig.from_env()

    assert config.base_url == "http://localhost:9999/res/v1"
    assert config.timeout == 5.0
    assert config.min_interval == 0.25
    assert config.monthly_quota == 2000


def test_explicit_values_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRAVE_API_KEY", "env-key")

    config = BraveSearchConfig.from_env(api_key="flag-key", monthly_quota=10)

    assert config.api_key == "flag-key"
    assert config.monthly_quota == 10


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_api_key(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is not None:
        monkeypatch.setenv("BRAVE_API_KEY", value)

    with pytest.raises(ConfigError, match="BRAVE_API_KEY"):
        BraveSearchConfig.from_env()


def test_malformed_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRAVE_API_KEY", "env-key")
    monkeypatch.setenv("BRAVESEARCH_MCP_MONTHLY_QUOTA", "lots")

    with pytest.raises(ConfigError, match="BRAVESEARCH_MCP_MONTHLY_QUOTA"):
        BraveSearchConfig.from_env()


@pytest.mark.anyio
async def test_router_from_config() -> None:
    config = BraveSearchConfig(api_key="k", min_interval=2.0, monthly_quota=7)

    async with BraveSearchRouter.from_config(config) as router:
        state = router.rate_limiter.state()

    assert state.monthly_count == 0
    assert router.rate_limiter.min_interval == 2.0
    assert router.rate_limiter.monthly_quota == 7
