from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from la_events.config import Settings
from la_events.domain.dedupe import dedupe_events
from la_events.domain.enrichment import EnrichmentEngine
from la_events.domain.formatting import parse_display_date
from la_events.domain.models import Event
from la_events.infra.logging import get_logger
from la_events.providers.events.base import EventsProvider
from la_events.providers.events.mock import MOCK_SOURCE, mock_events
from la_events.services.stats_store import InMemoryStatsStore, StatsStore

from .provider_registry import ProviderRegistry, build_default_registry

logger = get_logger(__name__)


@dataclass
class AggregationResult:
    events: List[Event]
    sources: Dict[str, int]
    fallback: bool = False
    errors: List[Tuple[str, Exception]] = field(default_factory=list)

    def to_payload(self) -> dict:
        return {
            "events": [event.to_dict() for event in self.events],
            "sources": dict(self.sources),
        }


@dataclass
class _ProviderOutcome:
    name: str
    events: List[Event] = field(default_factory=list)
    error: Optional[Exception] = None


def sort_by_date(events: Sequence[Event]) -> List[Event]:
    """Dated events first in calendar order; undated ones keep their order at the end."""

    def _key(item: Tuple[int, Event]) -> Tuple[int, date, int]:
        index, event = item
        parsed = parse_display_date(event.date)
        if parsed is None:
            return (1, date.max, index)
        return (0, parsed, index)

    return [event for _, event in sorted(enumerate(events), key=_key)]


class EventHub:
    def __init__(
        self,
        registry: ProviderRegistry,
        enrichment: EnrichmentEngine,
        *,
        provider_timeout: Optional[float] = Settings.provider_timeout,
        fallback_events: Callable[[], List[Event]] = mock_events,
    ) -> None:
        self._registry = registry
        self.enrichment = enrichment
        self.provider_timeout = provider_timeout
        self._fallback_events = fallback_events

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        stats_store: Optional[StatsStore] = None,
    ) -> "EventHub":
        settings = settings or Settings.from_env()
        return cls(
            build_default_registry(settings),
            EnrichmentEngine(stats_store or InMemoryStatsStore()),
            provider_timeout=settings.provider_timeout,
        )

    @property
    def stats_store(self) -> StatsStore:
        return self.enrichment.stats_store

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    async def aggregate(self) -> AggregationResult:
        """Fetch, merge and enrich events from every provider.

        Never raises: an empty merge or an unexpected error both produce the
        enriched fallback dataset.
        """
        errors: List[Tuple[str, Exception]] = []
        try:
            outcomes = await self._fan_out()
            sources: Dict[str, int] = {}
            combined: List[Event] = []
            for outcome in outcomes:
                sources[outcome.name] = len(outcome.events)
                combined.extend(outcome.events)
                if outcome.error is not None:
                    errors.append((outcome.name, outcome.error))

            unique = dedupe_events(combined)
            enriched = self.enrichment.enrich(unique)
            fallback = not enriched
            if fallback:
                logger.warning("aggregation_empty_using_fallback", providers=self._registry.list())
                enriched = self.enrichment.enrich(self._fallback_events())
                sources[MOCK_SOURCE] = len(enriched)

            events = sort_by_date(enriched)
            sources["total"] = len(events)
            logger.info("aggregation_complete", fallback=fallback, sources=sources)
            return AggregationResult(events=events, sources=sources, fallback=fallback, errors=errors)
        except Exception:
            logger.exception("aggregation_failed_using_fallback")
            return self._fallback_result(errors)

    def record_view(self, event_id: str) -> int:
        return self.stats_store.increment_views(event_id)

    def record_favorite(self, event_id: str, favorited: bool) -> int:
        return self.stats_store.adjust_favorites(event_id, 1 if favorited else -1)

    async def _fan_out(self) -> List[_ProviderOutcome]:
        names = self._registry.list()
        outcomes = await asyncio.gather(
            *(self._fetch_from_provider(name, self._registry.get(name)) for name in names)
        )
        return list(outcomes)

    async def _fetch_from_provider(self, name: str, provider: EventsProvider) -> _ProviderOutcome:
        try:
            if self.provider_timeout:
                events = await asyncio.wait_for(provider.fetch_events(), timeout=self.provider_timeout)
            else:
                events = await provider.fetch_events()
        except asyncio.TimeoutError as exc:
            logger.warning("provider_timeout", provider=name, timeout=self.provider_timeout)
            return _ProviderOutcome(name=name, error=exc)
        except Exception as exc:
            logger.warning("provider_failed", provider=name, error=repr(exc))
            return _ProviderOutcome(name=name, error=exc)
        return _ProviderOutcome(name=name, events=list(events or []))

    def _fallback_result(self, errors: List[Tuple[str, Exception]]) -> AggregationResult:
        raw = self._fallback_events()
        try:
            events = self.enrichment.enrich(raw)
        except Exception:
            logger.exception("fallback_enrichment_failed")
            events = list(raw)
        sources = {MOCK_SOURCE: len(events), "total": len(events)}
        return AggregationResult(events=events, sources=sources, fallback=True, errors=errors)
