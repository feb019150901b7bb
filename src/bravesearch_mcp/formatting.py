# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Plain-text rendering of Brave API responses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .models import NewsResult, PointOfInterest, WebResult


NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description available"


def format_web_results(results: Iterable[WebResult]) -> str:
    blocks = [f"Title: {item.title}\nDescription: {item.description}\nURL: {item.url}" for item in results]
    return "\n\n".join(blocks) if blocks else "No web results found"


def format_news_results(results: Iterable[NewsResult]) -> str:
    blocks = []
    for item in results:
        source = item.meta_url.hostname if item.meta_url and item.meta_url.hostname else NOT_AVAILABLE
        blocks.append(
            f"Title: {item.title}\n"
            f"Source: {source}\n"
            f"Age: {item.age or NOT_AVAILABLE}\n"
            f"Description: {item.description}\n"
            f"URL: {item.url}"
        )
    return "\n\n".join(blocks) if blocks else "No news results found"


def format_local_results(pois: Iterable[PointOfInterest], descriptions: Mapping[str, str]) -> str:
    """Render one block per place, separated by ``---`` lines.

    Missing fields print as ``N/A``; a missing review count prints as ``0``.
    """
    blocks = []
    for poi in pois:
        address = ", ".join(poi.address.parts()) or NOT_AVAILABLE
        rating = NOT_AVAILABLE
        reviews = 0
        if poi.rating is not None:
            if poi.rating.rating_value is not None:
                rating = _format_number(poi.rating.rating_value)
            reviews = poi.rating.rating_count or 0
        hours = ", ".join(poi.opening_hours or []) or NOT_AVAILABLE

        blocks.append(
            f"Name: {poi.name}\n"
            f"Address: {address}\n"
            f"Phone: {poi.phone or NOT_AVAILABLE}\n"
            f"Rating: {rating} ({reviews} reviews)\n"
            f"Price Range: {poi.price_range or NOT_AVAILABLE}\n"
            f"Hours: {hours}\n"
            f"Description: {descriptions.get(poi.id, NO_DESCRIPTION)}"
        )
    return "\n---\n".join(blocks) if blocks else "No local results found"


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


__all__ = ["format_local_results", "format_news_results", "format_web_results"]
