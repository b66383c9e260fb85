from typing import Any, Protocol

from pydantic import BaseModel


class TableData(BaseModel):
    """Header names and raw data rows of one table."""

    headers: list[str]
    rows: list[list[Any]] = []


class TableStoreError(Exception):
    """Base class for table store failures."""


class TableNotFoundError(TableStoreError):
    def __init__(self, table: str) -> None:
        super().__init__(f"Table {table} not found")
        self.table = table


class RowNotFoundError(TableStoreError):
    def __init__(self, table: str, row_id: str) -> None:
        super().__init__(f"Row {row_id} not found in table {table}")
        self.table = table
        self.row_id = row_id


class ColumnNotFoundError(TableStoreError):
    def __init__(self, table: str, column: str) -> None:
        super().__init__(f"Column {column} not found in table {table}")
        self.table = table
        self.column = column


class TableWriteError(TableStoreError):
    def __init__(self, table: str, row_id: str, reason: str) -> None:
        super().__init__(f"Failed to write row {row_id} of table {table}: {reason}")
        self.table = table
        self.row_id = row_id


class TableStore(Protocol):
    """Protocol for tabular storage backends holding the network tables."""

    async def load_table(self, name: str) -> TableData:
        """Load headers and non-blank data rows of a table.

        Raises:
            TableNotFoundError: If the table does not exist
        """
        ...

    async def write_fields(self, table: str, row_id: str, fields: dict[str, Any]) -> None:
        """Set named fields on the row whose ID column equals ``row_id``.

        Raises:
            TableNotFoundError: If the table does not exist
            ColumnNotFoundError: If the table has no ID column
            RowNotFoundError: If no row has the given ID
            TableWriteError: If the change could not be persisted
        """
        ...

    def table_names(self) -> list[str]:
        """Get the names of all tables in the store."""
        ...
