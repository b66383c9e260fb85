import asyncio
from io import BytesIO
from pathlib import Path
from typing import Any

from loguru import logger
from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.worksheet.worksheet import Worksheet

from relnet.domain.entities import (
    EVENTS_HEADERS,
    EVENTS_TABLE,
    PEOPLE_HEADERS,
    PEOPLE_TABLE,
    RELATIONSHIPS_HEADERS,
    RELATIONSHIPS_TABLE,
)
from relnet.table_stores.base import (
    ColumnNotFoundError,
    RowNotFoundError,
    TableData,
    TableNotFoundError,
    TableStore,
    TableWriteError,
)

TEMPLATE_TABLES = {
    PEOPLE_TABLE: PEOPLE_HEADERS,
    RELATIONSHIPS_TABLE: RELATIONSHIPS_HEADERS,
    EVENTS_TABLE: EVENTS_HEADERS,
}


def create_template(workbook: Workbook | None = None) -> Workbook:
    """Add the People, Relationships and Events sheets with their header rows.

    Sheets that already exist are left untouched.

    Args:
        workbook: Workbook to extend. A new one is created if not provided.

    Returns:
        The workbook containing the template sheets
    """
    if workbook is None:
        workbook = Workbook()
        workbook.remove(workbook.active)

    for name, headers in TEMPLATE_TABLES.items():
        if name in workbook.sheetnames:
            continue
        sheet = workbook.create_sheet(name)
        sheet.append(headers)
        for cell in sheet[1]:
            cell.font = Font(bold=True)

    workbook.active = workbook.sheetnames.index(PEOPLE_TABLE)
    return workbook


class WorkbookTableStore(TableStore):
    """Table store over an Excel workbook held in memory, one worksheet per table."""

    def __init__(self, workbook: Workbook, filepath: str | Path | None = None) -> None:
        """Initialize WorkbookTableStore.

        Args:
            workbook: Loaded openpyxl workbook
            filepath: Path used by save() when no explicit path is given. When set,
                     every write_fields() call saves the workbook to this path. A failed
                     save undoes the write and raises TableWriteError.
        """
        self._workbook = workbook
        self._filepath = str(filepath) if filepath else None

    @classmethod
    def load(cls, filepath: str | Path) -> "WorkbookTableStore":
        """Open a workbook file. A missing file starts a new template workbook."""
        if Path(filepath).exists():
            return cls(load_workbook(filepath), filepath=filepath)
        logger.info(f"No workbook at {filepath}, starting from template")
        return cls(create_template(), filepath=filepath)

    @classmethod
    def from_bytes(cls, content: bytes) -> "WorkbookTableStore":
        """Open an uploaded workbook held in memory."""
        return cls(load_workbook(BytesIO(content)))

    @classmethod
    def template(cls) -> "WorkbookTableStore":
        return cls(create_template())

    def table_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    async def load_table(self, name: str) -> TableData:
        sheet = self._get_sheet(name)
        rows = sheet.iter_rows(values_only=True)
        header_row = next(rows, None)
        if header_row is None:
            return TableData(headers=[], rows=[])

        headers = ["" if value is None else str(value) for value in header_row]
        data_rows = [list(row) for row in rows if not _is_blank(row)]
        logger.debug(f"Loaded {len(data_rows)} rows from sheet {name}")
        return TableData(headers=headers, rows=data_rows)

    async def write_fields(self, table: str, row_id: str, fields: dict[str, Any]) -> None:
        sheet = self._get_sheet(table)
        headers = [cell.value for cell in sheet[1]]
        if "ID" not in headers:
            raise ColumnNotFoundError(table, "ID")
        id_column = headers.index("ID") + 1

        for row in range(2, sheet.max_row + 1):
            value = sheet.cell(row=row, column=id_column).value
            if value is not None and _cell_id(value) == row_id:
                previous: dict[int, Any] = {}
                for field, field_value in fields.items():
                    if field not in headers:
                        logger.warning(f"Skipping unknown column {field} in sheet {table}")
                        continue
                    cell = sheet.cell(row=row, column=headers.index(field) + 1)
                    previous.setdefault(cell.column, cell.value)
                    cell.value = field_value
                if self._filepath:
                    try:
                        await self.save()
                    except OSError as e:
                        # Undo so the workbook in memory matches the file
                        for column, old_value in previous.items():
                            sheet.cell(row=row, column=column, value=old_value)
                        raise TableWriteError(table, row_id, str(e)) from e
                return

        raise RowNotFoundError(table, row_id)

    async def save(self, filepath: str | Path | None = None) -> None:
        """Save the workbook to disk.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )
        await asyncio.to_thread(self._workbook.save, str(save_path))

    def to_bytes(self) -> bytes:
        buffer = BytesIO()
        self._workbook.save(buffer)
        return buffer.getvalue()

    def _get_sheet(self, name: str) -> Worksheet:
        if name not in self._workbook.sheetnames:
            raise TableNotFoundError(name)
        return self._workbook[name]


def _is_blank(row: tuple[Any, ...]) -> bool:
    return all(value is None or value == "" for value in row)


def _cell_id(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
