import json

import pytest
from typer.testing import CliRunner

from la_events.cli.main import app
from la_events.providers.events.mock import mock_events


@pytest.fixture(autouse=True)
def _offline_env(monkeypatch):
    for var in ("TICKETMASTER_API_KEY", "YELP_API_KEY", "EVENTBRITE_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")


def test_events_command_prints_table():
    runner = CliRunner()
    result = runner.invoke(app, ["events"])
    assert result.exit_code == 0
    assert "sources: ticketmaster=0, yelp=0, eventbrite=0" in result.stdout
    assert "No live provider data" in result.stdout
    for event in mock_events():
        assert event.id in result.stdout


def test_events_command_json_with_limit():
    runner = CliRunner()
    result = runner.invoke(app, ["events", "--json", "--limit", "2"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["id"] for item in payload["events"]] == ["mock-1", "mock-2"]
    assert payload["sources"]["total"] == len(mock_events())


def test_providers_command_reports_key_status(monkeypatch):
    monkeypatch.setenv("YELP_API_KEY", "yelp-key")
    runner = CliRunner()
    result = runner.invoke(app, ["providers"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines == [
        "ticketmaster\tmissing API key",
        "yelp\tconfigured",
        "eventbrite\tmissing API key",
    ]
