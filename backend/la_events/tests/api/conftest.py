from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from la_events.api.main import create_app
from la_events.config import Settings
from la_events.hub.event_hub import EventHub
from la_events.services.stats_store import InMemoryStatsStore


def _build_api_client(settings: Settings):
    # No API keys configured: every provider is skipped and the fallback set is served
    hub = EventHub.from_settings(settings, stats_store=InMemoryStatsStore(random.Random(7)))
    app = create_app(hub=hub, settings=settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def api_client():
    yield from _build_api_client(Settings(log_level="CRITICAL"))


@pytest.fixture()
def api_client_restricted_origin():
    yield from _build_api_client(Settings(log_level="CRITICAL", frontend_origin="http://localhost:5173"))
