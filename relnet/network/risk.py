"""Risk classification from historical negative events."""

from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel

from relnet.domain.entities import PEOPLE_TABLE, Number, Person, RelationshipEvent, RiskLevel
from relnet.table_stores.base import TableStore, TableStoreError

from .relations import resolve_people_ids

HIGH_RISK_THRESHOLD = 15
MEDIUM_RISK_THRESHOLD = 8


class RiskWriteFailure(BaseModel):
    person_id: str
    level: RiskLevel
    message: str


class RiskUpdate(BaseModel):
    """Outcome of syncing computed risk levels back to the People table.

    Attributes:
        people: New snapshot; persons whose write succeeded carry their new level
        updated: IDs of persons whose level was written
        failures: Writes that failed, one entry per person
    """

    people: list[Person] = []
    updated: list[str] = []
    failures: list[RiskWriteFailure] = []


def classify_risk(score: Number) -> RiskLevel:
    if score >= HIGH_RISK_THRESHOLD:
        return "High"
    if score >= MEDIUM_RISK_THRESHOLD:
        return "Medium"
    return "Low"


def risk_scores(
    people: Sequence[Person], events: Sequence[RelationshipEvent]
) -> dict[str, Number]:
    """Sum the severity of negative-impact events for every known person.

    A person listed twice in one event is counted twice. Unknown IDs are ignored.
    """
    scores: dict[str, Number] = {person.id: 0 for person in people}

    for event in events:
        if event.impact != "Negative":
            continue
        for person_id in resolve_people_ids(event.people_ids):
            if person_id in scores:
                scores[person_id] += event.severity

    return scores


def calculate_risk_scores(
    people: Sequence[Person], events: Sequence[RelationshipEvent]
) -> dict[str, RiskLevel]:
    """Map every person ID to a risk level derived from their negative events.

    Args:
        people: Known persons
        events: Events to score

    Returns:
        Dictionary mapping person ID to Low, Medium or High
    """
    return {
        person_id: classify_risk(score)
        for person_id, score in risk_scores(people, events).items()
    }


async def update_risk_levels(
    people: Sequence[Person],
    events: Sequence[RelationshipEvent],
    store: TableStore,
) -> RiskUpdate:
    """Write recomputed risk levels for persons whose stored level changed.

    Writes are issued one at a time. A failed write is recorded and the
    remaining persons are still processed; nothing is retried.

    Args:
        people: Current person snapshot
        events: Events to score
        store: Table store holding the People table

    Returns:
        RiskUpdate with the new snapshot, written IDs and failures
    """
    computed = calculate_risk_scores(people, events)
    update = RiskUpdate()

    for person in people:
        level = computed.get(person.id)
        if level is None or level == person.risk_level:
            update.people.append(person)
            continue

        try:
            await store.write_fields(PEOPLE_TABLE, person.id, {"RiskLevel": level})
        except TableStoreError as e:
            logger.warning(f"Failed to write risk level {level} for {person.id}: {e}")
            update.failures.append(
                RiskWriteFailure(person_id=person.id, level=level, message=str(e))
            )
            update.people.append(person)
            continue

        logger.info(f"Risk level of {person.id} changed {person.risk_level or '-'} -> {level}")
        update.updated.append(person.id)
        update.people.append(person.model_copy(update={"risk_level": level}))

    return update
