import asyncio
import json
from typing import Optional

import typer

from la_events.config import Settings
from la_events.hub.event_hub import EventHub
from la_events.infra.logging import configure_logging

app = typer.Typer(help="CLI for the LA events aggregation pipeline")


def _build_hub(settings: Settings) -> EventHub:
    configure_logging("la-events-cli", level=settings.log_level, fmt="console")
    return EventHub.from_settings(settings)


@app.command("events")
def cli_events(
    as_json: bool = typer.Option(False, "--json", help="Print the raw API payload"),
    limit: Optional[int] = typer.Option(None, help="Maximum number of events to print"),
):
    """Run one aggregation and print the result."""
    settings = Settings.from_env()
    hub = _build_hub(settings)
    result = asyncio.run(hub.aggregate())
    events = result.events[:limit] if limit is not None else result.events

    if as_json:
        payload = result.to_payload()
        payload["events"] = [event.to_dict() for event in events]
        typer.echo(json.dumps(payload, indent=2))
        raise typer.Exit(code=0)

    counts = ", ".join(f"{name}={count}" for name, count in result.sources.items())
    typer.echo(f"sources: {counts}")
    if result.fallback:
        typer.echo("No live provider data; showing fallback events")
    typer.echo("id\tcategory\tdate\ttime\ttrending\ttitle")
    for event in events:
        trending = "yes" if event.is_trending else "no"
        typer.echo(f"{event.id}\t{event.category.value}\t{event.date}\t{event.time}\t{trending}\t{event.title}")


@app.command("providers")
def cli_providers():
    """List registered providers and whether an API key is configured."""
    settings = Settings.from_env()
    hub = _build_hub(settings)
    for name in hub.registry.list():
        provider = hub.registry.get(name)
        status = "configured" if getattr(provider, "configured", False) else "missing API key"
        typer.echo(f"{name}\t{status}")


if __name__ == "__main__":
    app()
