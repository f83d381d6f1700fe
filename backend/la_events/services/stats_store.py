from __future__ import annotations

import random
from typing import Dict, Optional, Protocol

from la_events.domain.models import EventStats

SEED_VIEWS_RANGE = (50, 4999)
SEED_FAVORITES_RANGE = (5, 499)


class StatsStore(Protocol):
    """Per-event view/favorite counters scoped to the process lifetime."""

    def get(self, event_id: str) -> Optional[EventStats]:
        ...

    def get_or_seed(self, event_id: str) -> EventStats:
        ...

    def set(self, event_id: str, stats: EventStats) -> None:
        ...

    def increment_views(self, event_id: str) -> int:
        ...

    def adjust_favorites(self, event_id: str, delta: int) -> int:
        ...


class InMemoryStatsStore:
    """Dict-backed store; counters start from pseudo-random seed values."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._stats: Dict[str, EventStats] = {}

    def get(self, event_id: str) -> Optional[EventStats]:
        stats = self._stats.get(event_id)
        if stats is None:
            return None
        return EventStats(views=stats.views, favorites=stats.favorites)

    def get_or_seed(self, event_id: str) -> EventStats:
        stats = self._stats.get(event_id)
        if stats is None:
            stats = EventStats(
                views=self._rng.randint(*SEED_VIEWS_RANGE),
                favorites=self._rng.randint(*SEED_FAVORITES_RANGE),
            )
            self._stats[event_id] = stats
        return EventStats(views=stats.views, favorites=stats.favorites)

    def set(self, event_id: str, stats: EventStats) -> None:
        self._stats[event_id] = EventStats(views=stats.views, favorites=stats.favorites)

    def increment_views(self, event_id: str) -> int:
        self.get_or_seed(event_id)
        stats = self._stats[event_id]
        stats.views += 1
        return stats.views

    def adjust_favorites(self, event_id: str, delta: int) -> int:
        self.get_or_seed(event_id)
        stats = self._stats[event_id]
        stats.favorites = max(0, stats.favorites + delta)
        return stats.favorites

    def __len__(self) -> int:
        return len(self._stats)
