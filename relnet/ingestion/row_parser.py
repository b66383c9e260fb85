"""Coercion of raw table rows into typed entity records."""

import math
from collections.abc import Sequence
from datetime import date, datetime, time
from typing import Any, TypeVar

from loguru import logger

from relnet.domain.entities import Entity, Number, ValidationError

NUMERIC_FIELDS = frozenset({"Influence", "Strength", "Severity"})
ID_FIELD = "ID"

EntityT = TypeVar("EntityT", bound=Entity)


def coerce_number(value: Any) -> Number:
    """Best-effort numeric parse. Anything that is not a finite number becomes 0.

    Args:
        value: Raw cell value

    Returns:
        An int when the value is integral, otherwise a float
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        # float() accepts digit separators such as "1_000"
        if "_" in text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def coerce_text(value: Any) -> str:
    """String form of a cell value; empty cells become an empty string."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time.min:
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def parse_rows(
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    table: str,
    errors: list[ValidationError],
    model: type[EntityT],
) -> list[EntityT]:
    """Parse raw rows of one table into entity records.

    Cells are zipped to headers by position; a row shorter than the headers
    yields empty cells. Rows without a non-empty ID are rejected and reported
    in ``errors``, which is shared across tables.

    Args:
        headers: Column names in table order
        rows: Raw row values from the same table
        table: Table label used in validation errors
        errors: Error list to append rejected rows to
        model: Entity model to build for each row

    Returns:
        Parsed records in row order
    """
    records: list[EntityT] = []

    for index, row in enumerate(rows, start=1):
        fields: dict[str, Any] = {}
        for column, header in enumerate(headers):
            value = row[column] if column < len(row) else None
            if header in NUMERIC_FIELDS:
                fields[header] = coerce_number(value)
            else:
                fields[header] = coerce_text(value)

        if not fields.get(ID_FIELD):
            logger.debug(f"Rejecting row {index} of {table}: missing ID")
            errors.append(
                ValidationError(table=table, row=index, field=ID_FIELD, message="Missing ID")
            )
            continue

        records.append(model.model_validate(fields))

    return records
