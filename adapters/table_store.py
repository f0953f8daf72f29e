"""Table store adapter - the only path from repositories to the workbook.

The workbook itself is an external collaborator exposing named sheets. A
sheet hands back its full content as a matrix whose first row holds the
headers, appends rows at the end and overwrites single cells addressed by
0-based (row, column) positions in that matrix.

The adapter keeps no cache: every read fetches the whole sheet again.
"""

import logging
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from app.exceptions import NotFoundError

logger = logging.getLogger("barbook.store")

Row = List[Any]


class TableHandle(Protocol):
    """One sheet of the workbook"""

    def read_all(self) -> List[Row]:
        ...

    def append_row(self, values: Sequence[Any]) -> None:
        ...

    def set_cell_value(self, row: int, col: int, value: Any) -> None:
        ...

    def clear(self) -> None:
        ...


class Workbook(Protocol):
    """A collection of named sheets"""

    def get_sheet(self, name: str) -> Optional[TableHandle]:
        ...

    def insert_sheet(self, name: str) -> TableHandle:
        ...


class TableStoreAdapter:
    """
    Thin facade over a workbook used by every repository.

    Row indices returned by find_row_index_by_key and accepted by set_cell are
    positions in the read_all() matrix, so data rows start at 1.
    """

    def __init__(self, workbook: Workbook):
        self.workbook = workbook

    def _sheet(self, table_name: str) -> TableHandle:
        sheet = self.workbook.get_sheet(table_name)
        if sheet is None:
            logger.error("Table %s not found", table_name)
            raise NotFoundError(
                f"{table_name} sheet not found",
                details={"table": table_name},
                code="table_not_found",
            )
        return sheet

    def read_all(self, table_name: str) -> Tuple[Row, List[Row]]:
        """Return (headers, data rows) for a table"""
        data = self._sheet(table_name).read_all()
        if not data:
            return [], []
        return list(data[0]), [list(row) for row in data[1:]]

    def append_row(self, table_name: str, row: Sequence[Any]) -> None:
        """Append a row after the last one; no uniqueness check"""
        self._sheet(table_name).append_row(list(row))

    def set_cell(self, table_name: str, row_index: int, column_index: int, value: Any) -> None:
        self._sheet(table_name).set_cell_value(row_index, column_index, value)

    def find_row_index_by_key(
        self, table_name: str, key_column: str, key_value: Any
    ) -> Optional[int]:
        """Index of the first data row whose key_column equals key_value, or None"""
        headers, rows = self.read_all(table_name)
        if key_column not in headers:
            return None
        key_index = headers.index(key_column)
        for offset, row in enumerate(rows):
            if key_index < len(row) and row[key_index] == key_value:
                return offset + 1
        return None

    def has_table(self, table_name: str) -> bool:
        return self.workbook.get_sheet(table_name) is not None

    def create_table(self, table_name: str, headers: Sequence[str]) -> None:
        """Create the table, or clear an existing one, and write its header row"""
        sheet = self.workbook.get_sheet(table_name)
        if sheet is None:
            sheet = self.workbook.insert_sheet(table_name)
        sheet.clear()
        sheet.append_row(list(headers))
        logger.info("Table %s initialized with %d columns", table_name, len(headers))
