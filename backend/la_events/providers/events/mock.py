from __future__ import annotations

from typing import List

from la_events.domain.models import Event, EventCategory

MOCK_SOURCE = "mock"

# Served when every provider comes back empty; ordered the way the date sort
# would order them.
MOCK_EVENTS: tuple[Event, ...] = (
    Event(
        id="mock-1",
        title="Hollywood Bowl Concert",
        description="Live music under the stars",
        category=EventCategory.ENTERTAINMENT,
        date="Dec 15, 2025",
        time="7:30 PM",
        address="2301 N Highland Ave, Los Angeles, CA",
        latitude=34.1122,
        longitude=-118.3391,
        source=MOCK_SOURCE,
    ),
    Event(
        id="mock-2",
        title="Lakers vs. Warriors",
        description="NBA regular season game downtown",
        category=EventCategory.SPORTS,
        date="Dec 20, 2025",
        time="7:00 PM",
        address="1111 S Figueroa St, Los Angeles, CA",
        latitude=34.0430,
        longitude=-118.2673,
        source=MOCK_SOURCE,
    ),
    Event(
        id="mock-3",
        title="Grand Central Market",
        description="Diverse food marketplace",
        category=EventCategory.FOOD,
        date="Ongoing",
        time="11:00 AM",
        address="317 S Broadway, Los Angeles, CA",
        latitude=34.0509,
        longitude=-118.2489,
        source=MOCK_SOURCE,
    ),
    Event(
        id="mock-4",
        title="The Broad",
        description="Contemporary art museum on Grand Avenue",
        category=EventCategory.ARTS,
        date="Ongoing",
        time="10:00 AM",
        address="221 S Grand Ave, Los Angeles, CA",
        latitude=34.0545,
        longitude=-118.2500,
        source=MOCK_SOURCE,
    ),
    Event(
        id="mock-5",
        title="The Varnish",
        description="Speakeasy cocktail bar in the Historic Core",
        category=EventCategory.BARS,
        date="Ongoing",
        time="7:00 PM",
        address="118 E 6th St, Los Angeles, CA",
        latitude=34.0463,
        longitude=-118.2497,
        source=MOCK_SOURCE,
    ),
)


def mock_events() -> List[Event]:
    return list(MOCK_EVENTS)
