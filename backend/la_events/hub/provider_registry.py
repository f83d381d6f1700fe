from __future__ import annotations

from typing import Dict, List, Optional

import httpx

from la_events.config import Settings
from la_events.providers.events.base import EventsProvider
from la_events.providers.events.eventbrite import EventbriteEventsProvider
from la_events.providers.events.ticketmaster import TicketmasterEventsProvider
from la_events.providers.events.yelp import YelpEventsProvider


class ProviderRegistry:
    """Simple in-memory registry for event providers.

    Registration order is the priority order used when results are combined.
    """

    def __init__(self) -> None:
        self._providers: Dict[str, EventsProvider] = {}

    def register(self, name: str, provider: EventsProvider) -> None:
        if name in self._providers:
            raise ValueError(f"Provider '{name}' already registered")
        self._providers[name] = provider

    def get(self, name: str) -> EventsProvider:
        try:
            return self._providers[name]
        except KeyError as exc:
            raise KeyError(f"Provider '{name}' is not registered") from exc

    def list(self) -> List[str]:
        return list(self._providers.keys())


def build_default_registry(
    settings: Optional[Settings] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> ProviderRegistry:
    settings = settings or Settings.from_env()
    registry = ProviderRegistry()
    for provider_cls in (TicketmasterEventsProvider, YelpEventsProvider, EventbriteEventsProvider):
        registry.register(provider_cls.name, provider_cls(settings=settings, client=client))
    return registry
