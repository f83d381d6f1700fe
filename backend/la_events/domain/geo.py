from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .models import TransitStop

EARTH_RADIUS_MI = 3959
FEET_PER_MILE = 5280
TRANSIT_RADIUS_MI = 2.0
MAX_TRANSIT_STOPS = 2


@dataclass(frozen=True)
class TransitStation:
    type: str
    name: str
    lat: float
    lon: float


# Metro Rail, light rail and busway stations around central LA
LA_TRANSIT_STATIONS: Tuple[TransitStation, ...] = (
    TransitStation("metro", "7th St/Metro Center", 34.0486, -118.2587),
    TransitStation("metro", "Pershing Square", 34.0492, -118.2512),
    TransitStation("metro", "Union Station", 34.0562, -118.2365),
    TransitStation("metro", "Civic Center/Grand Park", 34.0549, -118.2462),
    TransitStation("metro", "Wilshire/Western", 34.0620, -118.3089),
    TransitStation("metro", "Hollywood/Highland", 34.1016, -118.3387),
    TransitStation("metro", "Hollywood/Vine", 34.1016, -118.3258),
    TransitStation("metro", "Universal City/Studio City", 34.1397, -118.3625),
    TransitStation("light_rail", "Pico", 34.0408, -118.2662),
    TransitStation("light_rail", "Expo Park/USC", 34.0182, -118.2853),
    TransitStation("light_rail", "Chinatown", 34.0639, -118.2358),
    TransitStation("light_rail", "Little Tokyo/Arts District", 34.0501, -118.2377),
    TransitStation("light_rail", "Downtown Santa Monica", 34.0140, -118.4912),
    TransitStation("bus", "37th St/USC", 34.0224, -118.2736),
    TransitStation("bus", "Harbor Fwy", 33.9287, -118.2810),
    TransitStation("bus", "El Monte", 34.0769, -118.0369),
)


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MI * c


def format_distance(miles: float) -> str:
    if miles < 1:
        return f"{round(miles * FEET_PER_MILE)} ft"
    return f"{miles:.1f} mi"


def nearby_transit(
    lat: float,
    lon: float,
    stations: Sequence[TransitStation] = LA_TRANSIT_STATIONS,
    *,
    radius_mi: float = TRANSIT_RADIUS_MI,
    limit: int = MAX_TRANSIT_STOPS,
) -> Tuple[TransitStop, ...]:
    in_range: List[Tuple[float, TransitStation]] = []
    for station in stations:
        distance = haversine_miles(lat, lon, station.lat, station.lon)
        if distance <= radius_mi:
            in_range.append((distance, station))
    in_range.sort(key=lambda item: item[0])
    return tuple(
        TransitStop(type=station.type, station=station.name, distance=format_distance(distance))
        for distance, station in in_range[:limit]
    )
