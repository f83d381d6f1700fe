from __future__ import annotations

from typing import Iterable, List, Set

from .models import Event


def dedupe_events(events: Iterable[Event]) -> List[Event]:
    """Keep the first occurrence of every event id, preserving input order."""
    seen: Set[str] = set()
    unique: List[Event] = []
    for event in events:
        if event.id in seen:
            continue
        seen.add(event.id)
        unique.append(event)
    return unique
