# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Search operations backed by the Brave Search REST API.

:class:`BraveSearchRouter` exposes one coroutine per search kind. Each one
validates its arguments, passes the shared :class:`RateLimiter` gate once,
issues its GET request(s) and renders the JSON answer as plain text. Failures
are raised as :mod:`bravesearch_mcp.errors` exceptions; turning them into tool
output is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, BraveSearchConfig
from .errors import InvalidParamsError, UpstreamError
from .formatting import format_local_results, format_news_results, format_web_results
from .models import (
    DescriptionsResponse,
    LocalSearchParams,
    NewsSearchParams,
    NewsSearchResponse,
    PoiResponse,
    WebSearchParams,
    WebSearchResponse,
)
from .rate_limit import RateLimiter
from .utils import get_logger


ModelT = TypeVar("ModelT", bound=BaseModel)

WEB_SEARCH_PATH = "/web/search"
NEWS_SEARCH_PATH = "/news/search"
LOCAL_POIS_PATH = "/local/pois"
LOCAL_DESCRIPTIONS_PATH = "/local/descriptions"

_logger = get_logger("bravesearch_mcp.router")


def validate_params(model: type[ModelT], **arguments: Any) -> ModelT:
    """Validate tool arguments, dropping the ones left unset.

    Raises:
        InvalidParamsError: An argument is missing, malformed or out of range.
    """
    supplied = {key: value for key, value in arguments.items() if value is not None}
    try:
        return model.model_validate(supplied)
    except ValidationError as exc:
        raise InvalidParamsError.from_validation_error(exc) from exc


class BraveSearchRouter:
    """Client for the web, news and local search endpoints.

    The router owns an :class:`httpx.AsyncClient` unless one is injected, and
    closes only a client it created. Use it as an async context manager or
    call :meth:`aclose` when done.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: RateLimiter | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self.rate_limiter = rate_limiter or RateLimiter()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: BraveSearchConfig, *, client: httpx.AsyncClient | None = None) -> BraveSearchRouter:
        limiter = RateLimiter(config.min_interval, config.monthly_quota)
        return cls(
            config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            rate_limiter=limiter,
            client=client,
        )

    async def __aenter__(self) -> BraveSearchRouter:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Search operations
    # ------------------------------------------------------------------

    async def web_search(self, query: str, count: int | None = None, offset: int | None = None) -> str:
        params = validate_params(WebSearchParams, query=query, count=count, offset=offset)
        await self.rate_limiter.check_and_record()
        return await self._web_search(params)

    async def news_search(
        self,
        query: str,
        count: int | None = None,
        offset: int | None = None,
        country: str | None = None,
        search_lang: str | None = None,
        freshness: str | None = None,
    ) -> str:
        params = validate_params(
            NewsSearchParams,
            query=query,
            count=count,
            offset=offset,
            country=country,
            search_lang=search_lang,
            freshness=freshness,
        )
        await self.rate_limiter.check_and_record()

        query_params: dict[str, Any] = {"q": params.query, "count": params.count, "offset": params.offset}
        if params.country is not None:
            query_params["country"] = params.country.value
        if params.search_lang is not None:
            query_params["search_lang"] = params.search_lang.value
        if params.freshness is not None:
            query_params["freshness"] = params.freshness.code

        data = await self._get(NEWS_SEARCH_PATH, query_params, NewsSearchResponse)
        return format_news_results(data.results)

    async def local_search(self, query: str, count: int | None = None) -> str:
        """Search local businesses, falling back to a web search.

        Location ids found by the first request are resolved through the POI
        and description endpoints. When there are none, the same query and
        count go to the web endpoint instead. All requests made here count as
        a single admission by the rate limiter.
        """
        params = validate_params(LocalSearchParams, query=query, count=count)
        await self.rate_limiter.check_and_record()

        data = await self._get(
            WEB_SEARCH_PATH,
            {"q": params.query, "search_lang": "en", "result_filter": "locations", "count": params.count},
            WebSearchResponse,
        )
        location_ids = data.location_ids
        if not location_ids:
            _logger.debug("no local results for %r; falling back to web search", params.query)
            return await self._web_search(WebSearchParams(query=params.query, count=params.count))

        pois = await self._get(LOCAL_POIS_PATH, _ids_params(location_ids), PoiResponse)
        descriptions = await self._get(LOCAL_DESCRIPTIONS_PATH, _ids_params(location_ids), DescriptionsResponse)
        return format_local_results(pois.results, descriptions.descriptions)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _web_search(self, params: WebSearchParams) -> str:
        data = await self._get(
            WEB_SEARCH_PATH,
            {"q": params.query, "count": params.count, "offset": params.offset},
            WebSearchResponse,
        )
        return format_web_results(data.web_results)

    async def _get(self, path: str, params: Any, model: type[ModelT]) -> ModelT:
        url = f"{self._base_url}{path}"
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self._api_key,
        }
        _logger.debug("GET %s", url, extra={"context": {"params": params}})

        try:
            response = await self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            _logger.warning("request to %s failed: %s", url, exc)
            raise UpstreamError(f"Brave API request failed: {exc}") from exc

        if not response.is_success:
            _logger.warning("Brave API returned %s for %s", response.status_code, url)
            raise UpstreamError.from_status(response.status_code, response.reason_phrase, response.text)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            _logger.warning("unreadable response from %s", url)
            raise UpstreamError(f"Brave API returned an unreadable response: {exc}", body=response.text) from exc


def _ids_params(ids: Sequence[str]) -> list[tuple[str, str]]:
    return [("ids", location_id) for location_id in ids]


__all__ = ["BraveSearchRouter", "validate_params"]
