from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from la_events.api.deps import get_hub
from la_events.hub.event_hub import EventHub

router = APIRouter(tags=["events"])


@router.get("/events")
async def list_events(hub: EventHub = Depends(get_hub)):
    """Aggregated, enriched events. Always answers 200; see ``sources`` for provenance."""
    result = await hub.aggregate()
    return result.to_payload()


@router.post("/events/{event_id}/view")
async def record_view(event_id: str, hub: EventHub = Depends(get_hub)):
    views = hub.record_view(event_id)
    return {"success": True, "views": views}


@router.post("/events/{event_id}/favorite")
async def record_favorite(
    event_id: str,
    favorited: bool = Body(..., embed=True),
    hub: EventHub = Depends(get_hub),
):
    favorites = hub.record_favorite(event_id, favorited)
    return {"success": True, "favorites": favorites}
