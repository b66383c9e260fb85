"""Cross-reference helpers between people, relationships and events."""

from collections.abc import Sequence

from relnet.domain.entities import Person, Relationship, RelationshipEvent


def resolve_people_ids(people_ids: str) -> list[str]:
    """Split a comma separated ID list, trimming tokens and dropping empty ones."""
    return [token.strip() for token in people_ids.split(",") if token.strip()]


def sort_by_date_desc(events: Sequence[RelationshipEvent]) -> list[RelationshipEvent]:
    """Newest first. ISO dates compare correctly as strings."""
    return sorted(events, key=lambda event: event.date, reverse=True)


def filter_events(
    events: Sequence[RelationshipEvent],
    event_type: str | None = None,
    impact: str | None = None,
) -> list[RelationshipEvent]:
    """Events list view: optional exact type and impact filters, newest first."""
    filtered = [
        event
        for event in events
        if (not event_type or event.type == event_type) and (not impact or event.impact == impact)
    ]
    return sort_by_date_desc(filtered)


class EntityRelations:
    """Lookups across one snapshot of people, relationships and events."""

    def __init__(
        self,
        people: Sequence[Person],
        events: Sequence[RelationshipEvent] = (),
        relationships: Sequence[Relationship] = (),
    ):
        self.people = list(people)
        self.events = list(events)
        self.relationships = list(relationships)
        self._people_by_id: dict[str, Person] = {}
        for person in self.people:
            self._people_by_id.setdefault(person.id, person)

    def get_person(self, person_id: str) -> Person | None:
        return self._people_by_id.get(person_id)

    def person_name(self, person_id: str) -> str:
        """Name of the person, or the raw ID when no such person is known."""
        person = self._people_by_id.get(person_id)
        return person.name if person else person_id

    def events_for_person(self, person_id: str) -> list[RelationshipEvent]:
        """Events listing the person, newest first."""
        return sort_by_date_desc(
            [event for event in self.events if person_id in resolve_people_ids(event.people_ids)]
        )

    def people_for_event(self, event: RelationshipEvent) -> list[Person]:
        """Persons listed on an event. Unknown IDs are skipped."""
        return [
            self._people_by_id[person_id]
            for person_id in resolve_people_ids(event.people_ids)
            if person_id in self._people_by_id
        ]

    def relationships_for_person(self, person_id: str) -> list[Relationship]:
        return [
            relationship
            for relationship in self.relationships
            if person_id in (relationship.person_a_id, relationship.person_b_id)
        ]
