from la_events.domain.dedupe import dedupe_events
from la_events.domain.models import Event, EventCategory


def _event(event_id: str, title: str = "Show") -> Event:
    return Event(
        id=event_id,
        title=title,
        description="",
        category=EventCategory.ENTERTAINMENT,
        date="TBA",
        time="TBA",
        address="Location TBA",
        latitude=34.0522,
        longitude=-118.2437,
    )


def test_first_occurrence_wins_and_order_is_kept():
    events = [
        _event("tm-1", "first"),
        _event("yelp-1"),
        _event("tm-1", "second"),
        _event("eb-9"),
        _event("yelp-1", "dup"),
    ]

    unique = dedupe_events(events)

    assert [e.id for e in unique] == ["tm-1", "yelp-1", "eb-9"]
    assert unique[0].title == "first"
    assert unique[1].title == "Show"


def test_dedupe_is_idempotent():
    events = [_event("a"), _event("b"), _event("a"), _event("c"), _event("b")]
    once = dedupe_events(events)
    assert dedupe_events(once) == once


def test_no_duplicate_ids_remain():
    events = [_event(str(i % 3)) for i in range(20)]
    unique = dedupe_events(events)
    ids = [e.id for e in unique]
    assert len(ids) == len(set(ids)) == 3


def test_empty_input():
    assert dedupe_events([]) == []
