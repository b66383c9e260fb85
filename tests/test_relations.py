"""Tests for cross-reference helpers."""

from relnet.network.relations import EntityRelations, filter_events, resolve_people_ids
from tests.factories import make_event, make_person, make_relationship


def test_resolve_people_ids() -> None:
    assert resolve_people_ids(" P1, P2 ,,P3 ") == ["P1", "P2", "P3"]
    assert resolve_people_ids("") == []


def test_person_name_falls_back_to_id() -> None:
    relations = EntityRelations([make_person("P1", name="Alice")])

    assert relations.person_name("P1") == "Alice"
    assert relations.person_name("P404") == "P404"


def test_events_for_person_newest_first() -> None:
    events = [
        make_event("E1", "P1", "Neutral", 1, date="2024-01-05"),
        make_event("E2", "P2", "Neutral", 1, date="2024-06-01"),
        make_event("E3", "P2, P1", "Neutral", 1, date="2024-03-10"),
        make_event("E4", "P10", "Neutral", 1, date="2024-12-01"),
    ]
    relations = EntityRelations([make_person("P1")], events=events)

    assert [e.id for e in relations.events_for_person("P1")] == ["E3", "E1"]


def test_people_for_event_skips_unknown_ids() -> None:
    relations = EntityRelations([make_person("P1"), make_person("P2")])
    event = make_event("E1", "P2,P9,P1", "Negative", 3)

    assert [p.id for p in relations.people_for_event(event)] == ["P2", "P1"]


def test_relationships_for_person() -> None:
    relationships = [
        make_relationship("R1", "P1", "P2"),
        make_relationship("R2", "P3", "P1"),
        make_relationship("R3", "P2", "P3"),
    ]
    relations = EntityRelations([], relationships=relationships)

    assert [r.id for r in relations.relationships_for_person("P1")] == ["R1", "R2"]


def test_filter_events() -> None:
    events = [
        make_event("E1", "P1", "Negative", 1, type="Conflict", date="2024-01-01"),
        make_event("E2", "P1", "Positive", 1, type="Meeting", date="2024-02-01"),
        make_event("E3", "P1", "Negative", 1, type="Conflict", date="2024-03-01"),
        make_event("E4", "P1", "Negative", 1, type="Email", date=""),
    ]

    assert [e.id for e in filter_events(events)] == ["E3", "E2", "E1", "E4"]
    assert [e.id for e in filter_events(events, event_type="Conflict")] == ["E3", "E1"]
    assert [e.id for e in filter_events(events, impact="Negative", event_type="Email")] == ["E4"]
