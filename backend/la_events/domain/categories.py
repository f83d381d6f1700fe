"""Provider taxonomies mapped onto the app's closed category set.

Every mapper is total: missing, empty or unrecognized input resolves to a
default category instead of raising.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import EventCategory

DEFAULT_CATEGORY = EventCategory.ENTERTAINMENT

YELP_BAR_QUERIES = {"bars", "nightlife"}


def _lower(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def _nested_name(payload: Any, key: str) -> str:
    if not isinstance(payload, dict):
        return ""
    inner = payload.get(key)
    if not isinstance(inner, dict):
        return ""
    return _lower(inner.get("name"))


def map_ticketmaster_category(classifications: Any) -> EventCategory:
    """Sport and art signals win over the broad segment default."""
    if not isinstance(classifications, list) or not classifications:
        return DEFAULT_CATEGORY
    primary = classifications[0]
    segment = _nested_name(primary, "segment")
    genre = _nested_name(primary, "genre")

    if segment == "sports" or "sport" in genre:
        return EventCategory.SPORTS
    if segment == "arts & theatre" or "art" in genre or "theatre" in genre:
        return EventCategory.ARTS
    return DEFAULT_CATEGORY


def map_yelp_category(query_category: Any) -> EventCategory:
    if _lower(query_category) in YELP_BAR_QUERIES:
        return EventCategory.BARS
    return EventCategory.FOOD


def map_eventbrite_category(category_name: Optional[Any], subcategory_name: Optional[Any] = None) -> EventCategory:
    category = _lower(category_name)
    subcategory = _lower(subcategory_name)

    if "music" in category or "entertainment" in category:
        return EventCategory.ENTERTAINMENT
    if "food" in category or "drink" in category:
        return EventCategory.FOOD
    if "sports" in category or "fitness" in category:
        return EventCategory.SPORTS
    if "arts" in category or "culture" in category:
        return EventCategory.ARTS
    if "nightlife" in subcategory or "bar" in subcategory:
        return EventCategory.BARS
    return DEFAULT_CATEGORY
