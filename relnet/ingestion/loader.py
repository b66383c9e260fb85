"""Loading the three network tables from a table store."""

import logging

from relnet.domain.entities import (
    EVENTS_TABLE,
    PEOPLE_TABLE,
    RELATIONSHIPS_TABLE,
    DataLoadResult,
    Person,
    Relationship,
    RelationshipEvent,
    ValidationError,
)
from relnet.table_stores.base import TableNotFoundError, TableStore

from .row_parser import EntityT, parse_rows

logger = logging.getLogger(__name__)


async def load_network(store: TableStore) -> DataLoadResult:
    """Load and parse people, relationships and events.

    A missing table is reported as a validation error and leaves that entity
    list empty; the other tables still load.

    Args:
        store: Table store to read from

    Returns:
        DataLoadResult with parsed entities and all validation errors
    """
    errors: list[ValidationError] = []

    people = await _load_table(store, PEOPLE_TABLE, Person, errors)
    relationships = await _load_table(store, RELATIONSHIPS_TABLE, Relationship, errors)
    events = await _load_table(store, EVENTS_TABLE, RelationshipEvent, errors)

    logger.info(
        f"Loaded {len(people)} people, {len(relationships)} relationships, "
        f"{len(events)} events ({len(errors)} errors)"
    )
    return DataLoadResult(
        people=people, relationships=relationships, events=events, errors=errors
    )


async def _load_table(
    store: TableStore,
    table: str,
    model: type[EntityT],
    errors: list[ValidationError],
) -> list[EntityT]:
    try:
        data = await store.load_table(table)
    except TableNotFoundError:
        logger.warning(f"Table {table} not found")
        errors.append(
            ValidationError(table=table, row=0, field="", message=f"Sheet '{table}' not found")
        )
        return []

    return parse_rows(data.headers, data.rows, table, errors, model)
