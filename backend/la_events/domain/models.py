from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EventCategory(str, Enum):
    ENTERTAINMENT = "entertainment"
    FOOD = "food"
    SPORTS = "sports"
    ARTS = "arts"
    BARS = "bars"


@dataclass(frozen=True)
class ParkingInfo:
    available: bool
    cost: Optional[str] = None
    locations: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"available": self.available, "cost": self.cost, "locations": list(self.locations)}


@dataclass(frozen=True)
class TransitStop:
    type: str
    station: str
    distance: str

    def to_dict(self) -> dict:
        return {"type": self.type, "station": self.station, "distance": self.distance}


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    description: str
    category: EventCategory
    date: str
    time: str
    address: str
    latitude: float
    longitude: float
    image_url: Optional[str] = None
    ticket_url: Optional[str] = None
    source: Optional[str] = None
    # Filled in by the enrichment pass only
    view_count: Optional[int] = None
    favorite_count: Optional[int] = None
    is_trending: Optional[bool] = None
    parking_info: Optional[ParkingInfo] = None
    nearby_transit: Optional[Tuple[TransitStop, ...]] = None

    def to_dict(self) -> dict:
        payload = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": EventCategory(self.category).value,
            "date": self.date,
            "time": self.time,
            "address": self.address,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        optional = {
            "imageUrl": self.image_url,
            "ticketUrl": self.ticket_url,
            "viewCount": self.view_count,
            "favoriteCount": self.favorite_count,
            "isTrending": self.is_trending,
            "parkingInfo": self.parking_info.to_dict() if self.parking_info else None,
            "nearbyTransit": (
                [stop.to_dict() for stop in self.nearby_transit] if self.nearby_transit is not None else None
            ),
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


@dataclass
class EventStats:
    views: int = 0
    favorites: int = 0

    @property
    def score(self) -> int:
        return self.favorites * 10 + self.views
