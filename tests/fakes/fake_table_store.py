from typing import Any

from relnet.table_stores.base import (
    ColumnNotFoundError,
    RowNotFoundError,
    TableData,
    TableNotFoundError,
    TableStore,
    TableStoreError,
)


class FakeTableStore(TableStore):
    """In-memory table store that records writes and can fail on chosen rows."""

    def __init__(
        self, tables: dict[str, TableData] | None = None, failing_ids: set[str] | None = None
    ) -> None:
        self._tables = tables or {}
        self.failing_ids = failing_ids or set()
        self.writes: list[tuple[str, str, dict[str, Any]]] = []

    def table_names(self) -> list[str]:
        return list(self._tables.keys())

    async def load_table(self, name: str) -> TableData:
        if name not in self._tables:
            raise TableNotFoundError(name)
        return self._tables[name]

    async def write_fields(self, table: str, row_id: str, fields: dict[str, Any]) -> None:
        if table not in self._tables:
            raise TableNotFoundError(table)
        if row_id in self.failing_ids:
            raise TableStoreError(f"Write to {row_id} rejected")

        data = self._tables[table]
        if "ID" not in data.headers:
            raise ColumnNotFoundError(table, "ID")
        id_column = data.headers.index("ID")
        for row in data.rows:
            if str(row[id_column]) == row_id:
                for field, value in fields.items():
                    if field in data.headers:
                        row[data.headers.index(field)] = value
                self.writes.append((table, row_id, fields))
                return
        raise RowNotFoundError(table, row_id)
