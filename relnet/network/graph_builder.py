"""Reduction of people and relationships into a filtered node/link graph."""

from collections.abc import Sequence

from relnet.domain.entities import Person, Relationship
from relnet.domain.graph import FilterState, GraphLink, GraphNode, NetworkGraph


def available_departments(people: Sequence[Person]) -> list[str]:
    """Sorted unique non-empty departments, used as the department facet values."""
    return sorted({person.department for person in people if person.department})


def build_graph(
    people: Sequence[Person],
    relationships: Sequence[Relationship],
    filters: FilterState | None = None,
) -> NetworkGraph:
    """Build the graph projection for the current filters.

    People are filtered by department and risk level first. Relationships are
    kept only when both endpoints survived, then filtered by type and sentiment.
    Relationships pointing at unknown people are dropped.

    Args:
        people: Person snapshot
        relationships: Relationship snapshot
        filters: Facet filters, no restriction when not provided

    Returns:
        NetworkGraph with nodes and links in input order
    """
    filters = filters or FilterState()

    surviving_people = [person for person in people if _person_matches(person, filters)]
    surviving_ids = {person.id for person in surviving_people}

    surviving_relationships = [
        relationship
        for relationship in relationships
        if relationship.person_a_id in surviving_ids
        and relationship.person_b_id in surviving_ids
        and _relationship_matches(relationship, filters)
    ]

    return NetworkGraph(
        nodes=[_to_node(person) for person in surviving_people],
        links=[_to_link(relationship) for relationship in surviving_relationships],
    )


def _person_matches(person: Person, filters: FilterState) -> bool:
    if filters.departments and person.department not in filters.departments:
        return False
    if filters.risk_levels and person.risk_level not in filters.risk_levels:
        return False
    return True


def _relationship_matches(relationship: Relationship, filters: FilterState) -> bool:
    if filters.relationship_types and relationship.type not in filters.relationship_types:
        return False
    if filters.sentiments and relationship.sentiment not in filters.sentiments:
        return False
    return True


def _to_node(person: Person) -> GraphNode:
    return GraphNode(
        id=person.id,
        name=person.name,
        title=person.title,
        department=person.department,
        influence=person.influence,
        risk_level=person.risk_level,
    )


def _to_link(relationship: Relationship) -> GraphLink:
    return GraphLink(
        id=relationship.id,
        type=relationship.type,
        strength=relationship.strength,
        sentiment=relationship.sentiment,
        direction=relationship.direction,
        source=relationship.person_a_id,
        target=relationship.person_b_id,
    )
