from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

import httpx

from la_events.config import Settings
from la_events.domain.categories import map_ticketmaster_category
from la_events.domain.formatting import (
    format_date,
    format_time,
    join_parts,
    parse_coordinate,
    select_best_image,
)
from la_events.domain.models import Event

from .base import HttpEventsProvider


class TicketmasterEventsProvider(HttpEventsProvider):
    BASE_URL = "https://app.ticketmaster.com/discovery/v2/events.json"
    RADIUS_MILES = 50
    PAGE_SIZE = 100

    name = "ticketmaster"
    api_key_env = "TICKETMASTER_API_KEY"

    def _configured_key(self, settings: Settings) -> Optional[str]:
        return settings.ticketmaster_api_key

    async def _fetch(self, client: httpx.AsyncClient) -> List[Event]:
        params = {
            "apikey": self.api_key,
            "latlong": f"{self.settings.center_lat},{self.settings.center_lon}",
            "radius": str(self.RADIUS_MILES),
            "unit": "miles",
            "size": str(self.PAGE_SIZE),
            "sort": "date,asc",
            "startDateTime": self._format_ts(datetime.now(timezone.utc)),
        }
        data = await self._get_json(client, self.BASE_URL, params=params, label="events")
        if data is None:
            return []
        events = (data.get("_embedded") or {}).get("events")
        return self._map_items(events, self._map_event)

    def _map_event(self, payload: dict) -> Event:
        venues = (payload.get("_embedded") or {}).get("venues") or []
        venue = venues[0] if venues else None
        location = (venue or {}).get("location") or {}
        start = (payload.get("dates") or {}).get("start") or {}
        title = payload["name"]
        venue_name = (venue or {}).get("name")

        if venue:
            address = join_parts(
                [
                    venue_name,
                    (venue.get("city") or {}).get("name"),
                    (venue.get("state") or {}).get("stateCode"),
                ]
            ) or "Location TBA"
        else:
            address = "Location TBA"

        return Event(
            id=f"tm-{payload['id']}",
            title=title,
            description=payload.get("info") or payload.get("pleaseNote") or f"{title} at {venue_name or 'TBA'}",
            category=map_ticketmaster_category(payload.get("classifications")),
            date=format_date(start.get("localDate")),
            time=format_time(start.get("localTime")),
            address=address,
            latitude=parse_coordinate(location.get("latitude"), self.settings.center_lat, bound=90.0),
            longitude=parse_coordinate(location.get("longitude"), self.settings.center_lon),
            image_url=select_best_image(payload.get("images")),
            ticket_url=payload.get("url"),
            source=self.name,
        )

    @staticmethod
    def _format_ts(value: datetime) -> str:
        value = value.astimezone(timezone.utc).replace(microsecond=0)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
