from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Sequence

from la_events.services.stats_store import StatsStore

from .geo import LA_TRANSIT_STATIONS, TransitStation, nearby_transit
from .models import Event, EventCategory, EventStats, ParkingInfo

TRENDING_FACTOR = 1.5

# Canned per-category guidance, not live availability
PARKING_BY_CATEGORY: Dict[EventCategory, ParkingInfo] = {
    EventCategory.ENTERTAINMENT: ParkingInfo(
        available=True,
        cost="$15-$40",
        locations=("Venue parking structure", "Nearby paid lots"),
    ),
    EventCategory.FOOD: ParkingInfo(
        available=True,
        cost="$5-$15",
        locations=("Street parking", "Validated lot parking"),
    ),
    EventCategory.SPORTS: ParkingInfo(
        available=True,
        cost="$25-$60",
        locations=("Stadium lots", "Pre-paid event parking"),
    ),
    EventCategory.ARTS: ParkingInfo(
        available=True,
        cost="$10-$25",
        locations=("Museum and theater garages", "Street parking"),
    ),
    EventCategory.BARS: ParkingInfo(
        available=True,
        cost="$8-$20",
        locations=("Street parking", "Valet at select venues"),
    ),
}


def parking_for_category(category) -> ParkingInfo:
    try:
        key = EventCategory(category)
    except ValueError:
        key = EventCategory.ENTERTAINMENT
    return PARKING_BY_CATEGORY[key]


def trending_flags(scores: Sequence[float], factor: float = TRENDING_FACTOR) -> List[bool]:
    """Flag scores strictly above ``factor`` times the batch mean."""
    if not scores:
        return []
    mean = sum(scores) / len(scores)
    threshold = factor * mean
    return [score > threshold for score in scores]


class EnrichmentEngine:
    def __init__(
        self,
        stats_store: StatsStore,
        transit_stations: Sequence[TransitStation] = LA_TRANSIT_STATIONS,
    ) -> None:
        self.stats_store = stats_store
        self.transit_stations = transit_stations

    def enrich(self, events: Iterable[Event]) -> List[Event]:
        batch = list(events)
        if not batch:
            return []
        stats: List[EventStats] = [self.stats_store.get_or_seed(event.id) for event in batch]
        flags = trending_flags([float(item.score) for item in stats])
        enriched: List[Event] = []
        for event, counters, trending in zip(batch, stats, flags):
            enriched.append(
                replace(
                    event,
                    view_count=counters.views,
                    favorite_count=counters.favorites,
                    is_trending=trending,
                    parking_info=parking_for_category(event.category),
                    nearby_transit=nearby_transit(event.latitude, event.longitude, self.transit_stations),
                )
            )
        return enriched
