from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from la_events.api.routers import events
from la_events.config import Settings
from la_events.hub.event_hub import EventHub
from la_events.infra.logging import configure_logging


def create_app(hub: Optional[EventHub] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging("la-events-api", level=settings.log_level, fmt=settings.log_format)

    app = FastAPI(title="LA Events API", version="0.1.0")
    app.state.settings = settings
    app.state.hub = hub or EventHub.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=settings.frontend_origin != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(events.router, prefix="/api")
    return app


app = create_app()
