import httpx
import pytest

from la_events.config import Settings
from la_events.domain.models import EventCategory
from la_events.providers.events.yelp import YelpEventsProvider


def _business(business_id: str, name: str, **extra) -> dict:
    payload = {
        "id": business_id,
        "name": name,
        "url": f"https://www.yelp.com/biz/{business_id}",
        "image_url": f"https://img/{business_id}.jpg",
        "categories": [{"alias": "x", "title": "Tacos"}, {"alias": "y", "title": "Mexican"}],
        "location": {"display_address": ["123 Main St", "Los Angeles, CA 90012"]},
        "coordinates": {"latitude": 34.05, "longitude": -118.25},
    }
    payload.update(extra)
    return payload


@pytest.mark.asyncio
async def test_yelp_queries_each_category_and_merges_in_order():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        category = request.url.params["categories"]
        requested.append(category)
        assert request.headers["Authorization"] == "Bearer yelp-key"
        return httpx.Response(200, json={"businesses": [_business(f"{category}-1", category.title())]})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        provider = YelpEventsProvider(api_key="yelp-key", settings=Settings(), client=client)
        events = await provider.fetch_events()

    assert requested == ["restaurants", "bars", "nightlife", "foodtrucks"]
    assert [e.id for e in events] == [
        "yelp-restaurants-1",
        "yelp-bars-1",
        "yelp-nightlife-1",
        "yelp-foodtrucks-1",
    ]
    assert [e.category for e in events] == [
        EventCategory.FOOD,
        EventCategory.BARS,
        EventCategory.BARS,
        EventCategory.FOOD,
    ]
    first = events[0]
    assert first.description == "Tacos, Mexican"
    assert first.address == "123 Main St, Los Angeles, CA 90012"
    assert (first.date, first.time) == ("Ongoing", "See hours")
    assert first.ticket_url == "https://www.yelp.com/biz/restaurants-1"


@pytest.mark.asyncio
async def test_yelp_failed_subcategory_does_not_stop_the_rest():
    def handler(request: httpx.Request) -> httpx.Response:
        category = request.url.params["categories"]
        if category == "bars":
            return httpx.Response(429, json={"error": {"code": "TOO_MANY_REQUESTS_PER_SECOND"}})
        return httpx.Response(200, json={"businesses": [_business(f"{category}-1", "Spot")]})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        provider = YelpEventsProvider(api_key="yelp-key", settings=Settings(), client=client)
        events = await provider.fetch_events()

    assert [e.id for e in events] == ["yelp-restaurants-1", "yelp-nightlife-1", "yelp-foodtrucks-1"]


@pytest.mark.asyncio
async def test_yelp_business_defaults():
    sparse = {"id": "bare", "name": "Bare Bar", "location": {}, "coordinates": {}}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params["categories"] == "bars":
            return httpx.Response(200, json={"businesses": [sparse, {"name": "missing id"}]})
        return httpx.Response(200, json={})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        provider = YelpEventsProvider(api_key="yelp-key", settings=Settings(), client=client)
        events = await provider.fetch_events()

    assert len(events) == 1
    event = events[0]
    assert event.description == "Great spot in LA"
    assert event.address == "Location TBA"
    assert (event.latitude, event.longitude) == (34.0522, -118.2437)
    assert event.image_url is None


@pytest.mark.asyncio
async def test_yelp_without_key_returns_empty():
    provider = YelpEventsProvider(settings=Settings())
    assert await provider.fetch_events() == []
