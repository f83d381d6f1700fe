import pytest

from la_events.domain.categories import (
    map_eventbrite_category,
    map_ticketmaster_category,
    map_yelp_category,
)
from la_events.domain.models import EventCategory

ALL_CATEGORIES = set(EventCategory)


def _tm(segment=None, genre=None):
    classification = {}
    if segment is not None:
        classification["segment"] = {"name": segment}
    if genre is not None:
        classification["genre"] = {"name": genre}
    return [classification]


@pytest.mark.parametrize(
    "classifications, expected",
    [
        (_tm("Sports", "Basketball"), EventCategory.SPORTS),
        (_tm("Miscellaneous", "Motorsports/Racing"), EventCategory.SPORTS),
        (_tm("Arts & Theatre", "Comedy"), EventCategory.ARTS),
        (_tm("Miscellaneous", "Fine Art"), EventCategory.ARTS),
        (_tm("Film", "Theatre"), EventCategory.ARTS),
        (_tm("Music", "Rock"), EventCategory.ENTERTAINMENT),
        (_tm(), EventCategory.ENTERTAINMENT),
        ([], EventCategory.ENTERTAINMENT),
        (None, EventCategory.ENTERTAINMENT),
        ("Sports", EventCategory.ENTERTAINMENT),
        ([None], EventCategory.ENTERTAINMENT),
        ([{"segment": "Sports"}], EventCategory.ENTERTAINMENT),
        ([{"segment": {"name": None}, "genre": {"name": 42}}], EventCategory.ENTERTAINMENT),
    ],
)
def test_ticketmaster_mapping(classifications, expected):
    assert map_ticketmaster_category(classifications) == expected


def test_ticketmaster_sport_signal_beats_art_signal():
    assert map_ticketmaster_category(_tm("Sports", "Martial Arts")) == EventCategory.SPORTS


@pytest.mark.parametrize(
    "query, expected",
    [
        ("bars", EventCategory.BARS),
        ("nightlife", EventCategory.BARS),
        ("NightLife", EventCategory.BARS),
        ("restaurants", EventCategory.FOOD),
        ("foodtrucks", EventCategory.FOOD),
        ("", EventCategory.FOOD),
        (None, EventCategory.FOOD),
    ],
)
def test_yelp_mapping(query, expected):
    assert map_yelp_category(query) == expected


@pytest.mark.parametrize(
    "category, subcategory, expected",
    [
        ("Music", None, EventCategory.ENTERTAINMENT),
        ("Film, Media & Entertainment", None, EventCategory.ENTERTAINMENT),
        ("Food & Drink", None, EventCategory.FOOD),
        ("Sports & Fitness", None, EventCategory.SPORTS),
        ("Performing & Visual Arts", None, EventCategory.ARTS),
        ("Community & Culture", None, EventCategory.ARTS),
        ("Other", "Nightlife", EventCategory.BARS),
        ("Other", "Wine Bar Crawl", EventCategory.BARS),
        ("Food & Drink", "Nightlife", EventCategory.FOOD),
        ("Business", "Networking", EventCategory.ENTERTAINMENT),
        (None, None, EventCategory.ENTERTAINMENT),
        ("", "", EventCategory.ENTERTAINMENT),
        (123, ["bar"], EventCategory.ENTERTAINMENT),
    ],
)
def test_eventbrite_mapping(category, subcategory, expected):
    assert map_eventbrite_category(category, subcategory) == expected


@pytest.mark.parametrize("value", [None, "", "???", 0, {}, [], [{}], {"name": "x"}, "sports"])
def test_mappers_are_total(value):
    assert map_ticketmaster_category(value) in ALL_CATEGORIES
    assert map_yelp_category(value) in ALL_CATEGORIES
    assert map_eventbrite_category(value, value) in ALL_CATEGORIES
