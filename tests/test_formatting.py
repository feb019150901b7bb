from __future__ import annotations

from bravesearch_mcp.formatting import format_local_results, format_news_results, format_web_results
from bravesearch_mcp.models import NewsResult, PointOfInterest, WebResult


def test_web_results_are_separated_by_blank_lines():
    text = format_web_results(
        [
            WebResult(title="One", description="First", url="https://one.example"),
            WebResult(title="Two", description="Second", url="https://two.example"),
        ]
    )

    assert text == (
        "Title: One\nDescription: First\nURL: https://one.example\n\n"
        "Title: Two\nDescription: Second\nURL: https://two.example"
    )


def test_empty_results():
    assert format_web_results([]) == "No web results found"
    assert format_news_results([]) == "No news results found"
    assert format_local_results([], {}) == "No local results found"


def test_news_result_includes_source_and_age():
    item = NewsResult.model_validate(
        {
            "title": "Launch",
            "description": "Rocket lifts off",
            "url": "https://news.example/launch",
            "age": "2 hours ago",
            "meta_url": {"hostname": "news.example"},
        }
    )

    assert format_news_results([item]) == (
        "Title: Launch\nSource: news.example\nAge: 2 hours ago\n"
        "Description: Rocket lifts off\nURL: https://news.example/launch"
    )


def test_news_result_without_metadata():
    text = format_news_results([NewsResult(title="T", description="D", url="U")])

    assert "Source: N/A" in text
    assert "Age: N/A" in text


def test_local_results_fill_missing_fields():
    full = PointOfInterest.model_validate(
        {
            "id": "a",
            "name": "Joe's Pizza",
            "address": {
                "streetAddress": "7 Carmine St",
                "addressLocality": "New York",
                "addressRegion": "NY",
                "postalCode": "10014",
            },
            "phone": "+1 212-366-1182",
            "rating": {"ratingValue": 4.0, "ratingCount": 1200},
            "openingHours": ["Mo-Su 10:00-04:00"],
            "priceRange": "$",
        }
    )
    bare = PointOfInterest(id="b", name="Mystery Spot")

    text = format_local_results([full, bare], {"a": "Classic slice joint"})
    first, second = text.split("\n---\n")

    assert first == (
        "Name: Joe's Pizza\n"
        "Address: 7 Carmine St, New York, NY, 10014\n"
        "Phone: +1 212-366-1182\n"
        "Rating: 4 (1200 reviews)\n"
        "Price Range: $\n"
        "Hours: Mo-Su 10:00-04:00\n"
        "Description: Classic slice joint"
    )
    assert second == (
        "Name: Mystery Spot\n"
        "Address: N/A\n"
        "Phone: N/A\n"
        "Rating: N/A (0 reviews)\n"
        "Price Range: N/A\n"
        "Hours: N/A\n"
        "Description: No description available"
    )
