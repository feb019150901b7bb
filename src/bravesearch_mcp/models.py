# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Pydantic models for tool arguments and Brave API payloads.

The parameter models double as the source of each tool's ``inputSchema``. The
response models accept both the camelCase keys the API returns and snake_case
spellings, and ignore anything they do not render.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .enums import Country, Freshness, Language


MAX_QUERY_CHARS = 400
MAX_QUERY_WORDS = 50
MAX_COUNT = 20
MAX_OFFSET = 9

_UPPER_BOUNDS = {"count": MAX_COUNT, "offset": MAX_OFFSET}


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class _SearchParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    query: str = Field(description=f"Search query (max {MAX_QUERY_CHARS} chars, {MAX_QUERY_WORDS} words)")

    @field_validator("query")
    @classmethod
    def _check_query(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be empty")
        if len(value) > MAX_QUERY_CHARS:
            raise ValueError(f"query is longer than {MAX_QUERY_CHARS} characters")
        if len(value.split()) > MAX_QUERY_WORDS:
            raise ValueError(f"query has more than {MAX_QUERY_WORDS} words")
        return value

    @field_validator("count", "offset", mode="before", check_fields=False)
    @classmethod
    def _default_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("count", "offset", check_fields=False)
    @classmethod
    def _cap(cls, value: int, info: ValidationInfo) -> int:
        # Values above the API maximum are capped, not rejected.
        return min(value, _UPPER_BOUNDS[info.field_name])


class WebSearchParams(_SearchParams):
    count: int = Field(default=10, ge=1, description="Number of results (1-20, default 10)")
    offset: int = Field(default=0, ge=0, description="Pagination offset (max 9, default 0)")


class NewsSearchParams(_SearchParams):
    count: int = Field(default=10, ge=1, description="Number of results (1-20, default 10)")
    offset: int = Field(default=0, ge=0, description="Pagination offset (max 9, default 0)")
    country: Country | None = Field(default=None, description="Two-letter country code, or ALL")
    search_lang: Language | None = Field(default=None, description="Language code of the results, e.g. en")
    freshness: Freshness | None = Field(
        default=None, description="Only return news from the past hour, day, week, month or year"
    )

    @field_validator("country", mode="before")
    @classmethod
    def _parse_country(cls, value: Any) -> Any:
        return None if value in (None, "") else Country.parse(value)

    @field_validator("search_lang", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Any:
        return None if value in (None, "") else Language.parse(value)

    @field_validator("freshness", mode="before")
    @classmethod
    def _parse_freshness(cls, value: Any) -> Any:
        return None if value in (None, "") else Freshness.parse(value)


class LocalSearchParams(_SearchParams):
    query: str = Field(description="Local search query (e.g. 'pizza near Central Park')")
    count: int = Field(default=5, ge=1, description="Number of results (1-20, default 5)")


# ---------------------------------------------------------------------------
# API responses
# ---------------------------------------------------------------------------


def _alias(camel: str, snake: str) -> Any:
    return Field(default=None, validation_alias=AliasChoices(camel, snake))


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WebResult(_Payload):
    title: str = ""
    description: str = ""
    url: str = ""


class _WebResults(_Payload):
    results: list[WebResult] = Field(default_factory=list)


class LocationRef(_Payload):
    id: str
    title: str | None = None


class _LocationResults(_Payload):
    results: list[LocationRef] = Field(default_factory=list)


class WebSearchResponse(_Payload):
    web: _WebResults = Field(default_factory=_WebResults)
    locations: _LocationResults = Field(default_factory=_LocationResults)

    @property
    def web_results(self) -> list[WebResult]:
        return self.web.results

    @property
    def location_ids(self) -> list[str]:
        return [location.id for location in self.locations.results]


class MetaUrl(_Payload):
    hostname: str | None = None


class NewsResult(_Payload):
    title: str = ""
    description: str = ""
    url: str = ""
    age: str | None = None
    meta_url: MetaUrl | None = _alias("metaUrl", "meta_url")


class NewsSearchResponse(_Payload):
    results: list[NewsResult] = Field(default_factory=list)


class Address(_Payload):
    street_address: str | None = _alias("streetAddress", "street_address")
    address_locality: str | None = _alias("addressLocality", "address_locality")
    address_region: str | None = _alias("addressRegion", "address_region")
    postal_code: str | None = _alias("postalCode", "postal_code")

    def parts(self) -> list[str]:
        return [
            part
            for part in (self.street_address, self.address_locality, self.address_region, self.postal_code)
            if part
        ]


class Coordinates(_Payload):
    latitude: float
    longitude: float


class Rating(_Payload):
    rating_value: float | None = _alias("ratingValue", "rating_value")
    rating_count: int | None = _alias("ratingCount", "rating_count")


class PointOfInterest(_Payload):
    id: str
    name: str = ""
    address: Address = Field(default_factory=Address)
    coordinates: Coordinates | None = None
    phone: str | None = None
    rating: Rating | None = None
    opening_hours: list[str] | None = _alias("openingHours", "opening_hours")
    price_range: str | None = _alias("priceRange", "price_range")


class PoiResponse(_Payload):
    results: list[PointOfInterest] = Field(default_factory=list)


class DescriptionsResponse(_Payload):
    descriptions: dict[str, str] = Field(default_factory=dict)


__all__ = [
    "MAX_COUNT",
    "MAX_OFFSET",
    "MAX_QUERY_CHARS",
    "MAX_QUERY_WORDS",
    "Address",
    "Coordinates",
    "DescriptionsResponse",
    "LocalSearchParams",
    "LocationRef",
    "NewsResult",
    "NewsSearchParams",
    "NewsSearchResponse",
    "PoiResponse",
    "PointOfInterest",
    "Rating",
    "WebResult",
    "WebSearchParams",
    "WebSearchResponse",
]
