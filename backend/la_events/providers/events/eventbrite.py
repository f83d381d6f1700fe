from __future__ import annotations

from typing import List, Optional

import httpx

from la_events.config import Settings
from la_events.domain.categories import map_eventbrite_category
from la_events.domain.formatting import format_date, format_time, parse_coordinate, split_local_datetime
from la_events.domain.models import Event

from .base import HttpEventsProvider


class EventbriteEventsProvider(HttpEventsProvider):
    BASE_URL = "https://www.eventbriteapi.com/v3/events/search/"
    WITHIN = "50mi"

    name = "eventbrite"
    api_key_env = "EVENTBRITE_API_KEY"

    def _configured_key(self, settings: Settings) -> Optional[str]:
        return settings.eventbrite_api_key

    async def _fetch(self, client: httpx.AsyncClient) -> List[Event]:
        params = {
            "location.latitude": str(self.settings.center_lat),
            "location.longitude": str(self.settings.center_lon),
            "location.within": self.WITHIN,
            "expand": "venue",
            "sort_by": "date",
        }
        data = await self._get_json(
            client,
            self.BASE_URL,
            params=params,
            headers=self._bearer_headers(),
            label="events",
        )
        if data is None:
            return []
        return self._map_items(data.get("events"), self._map_event)

    def _map_event(self, payload: dict) -> Event:
        venue = payload.get("venue") or None
        local_start = (payload.get("start") or {}).get("local")
        day, clock = split_local_datetime(local_start)
        address = ((venue or {}).get("address") or {}).get("localized_address_display")
        return Event(
            id=f"eb-{payload['id']}",
            title=payload["name"]["text"],
            description=(payload.get("description") or {}).get("text") or payload.get("summary") or "Community event",
            category=map_eventbrite_category(
                (payload.get("category") or {}).get("name"),
                (payload.get("subcategory") or {}).get("name"),
            ),
            date=format_date(day),
            time=format_time(clock),
            address=address or "Location TBA",
            latitude=parse_coordinate((venue or {}).get("latitude"), self.settings.center_lat, bound=90.0),
            longitude=parse_coordinate((venue or {}).get("longitude"), self.settings.center_lon),
            image_url=(payload.get("logo") or {}).get("url"),
            ticket_url=payload.get("url"),
            source=self.name,
        )
