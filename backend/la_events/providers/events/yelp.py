from __future__ import annotations

from typing import List, Optional

import httpx

from la_events.config import Settings
from la_events.domain.categories import map_yelp_category
from la_events.domain.formatting import join_parts, parse_coordinate
from la_events.domain.models import Event, EventCategory

from .base import HttpEventsProvider


class YelpEventsProvider(HttpEventsProvider):
    """Restaurants and bars from the Yelp Fusion business search.

    Yelp only filters one category per query, so each sub-category is fetched
    separately and the results are merged in query order.
    """

    BASE_URL = "https://api.yelp.com/v3/businesses/search"
    QUERY_CATEGORIES = ("restaurants", "bars", "nightlife", "foodtrucks")
    RADIUS_METERS = 25000
    LIMIT = 25

    name = "yelp"
    api_key_env = "YELP_API_KEY"

    def _configured_key(self, settings: Settings) -> Optional[str]:
        return settings.yelp_api_key

    async def _fetch(self, client: httpx.AsyncClient) -> List[Event]:
        merged: List[Event] = []
        for query_category in self.QUERY_CATEGORIES:
            params = {
                "latitude": str(self.settings.center_lat),
                "longitude": str(self.settings.center_lon),
                "radius": str(self.RADIUS_METERS),
                "categories": query_category,
                "limit": str(self.LIMIT),
                "sort_by": "rating",
                "open_now": "false",
            }
            data = await self._get_json(
                client,
                self.BASE_URL,
                params=params,
                headers=self._bearer_headers(),
                label=query_category,
            )
            if data is None:
                continue
            category = map_yelp_category(query_category)
            merged.extend(
                self._map_items(data.get("businesses"), lambda item: self._map_business(item, category))
            )
        return merged

    def _map_business(self, business: dict, category: EventCategory) -> Event:
        titles = [c.get("title") for c in business.get("categories") or [] if isinstance(c, dict)]
        description = join_parts(titles) or "Great spot in LA"
        location = business.get("location") or {}
        coordinates = business.get("coordinates") or {}
        return Event(
            id=f"yelp-{business['id']}",
            title=business["name"],
            description=description,
            category=category,
            date="Ongoing",
            time="See hours",
            address=join_parts(location.get("display_address") or []) or "Location TBA",
            latitude=parse_coordinate(coordinates.get("latitude"), self.settings.center_lat, bound=90.0),
            longitude=parse_coordinate(coordinates.get("longitude"), self.settings.center_lon),
            image_url=business.get("image_url") or None,
            ticket_url=business.get("url"),
            source=self.name,
        )
