"""In-memory workbook used by tests and the ``memory`` store backend."""

import copy
from typing import Any, Dict, List, Optional, Sequence


class InMemorySheet:
    """A sheet held as a list of rows"""

    def __init__(self, name: str):
        self.name = name
        self.rows: List[List[Any]] = []

    def read_all(self) -> List[List[Any]]:
        # Callers get a snapshot; edits must go through set_cell_value
        return copy.deepcopy(self.rows)

    def append_row(self, values: Sequence[Any]) -> None:
        self.rows.append(list(values))

    def set_cell_value(self, row: int, col: int, value: Any) -> None:
        if row < 0 or row >= len(self.rows):
            raise IndexError(f"Row {row} out of range for sheet {self.name}")
        target = self.rows[row]
        if col >= len(target):
            target.extend([""] * (col + 1 - len(target)))
        target[col] = value

    def clear(self) -> None:
        self.rows = []


class InMemoryWorkbook:
    """Named collection of in-memory sheets"""

    def __init__(self):
        self.sheets: Dict[str, InMemorySheet] = {}

    def get_sheet(self, name: str) -> Optional[InMemorySheet]:
        return self.sheets.get(name)

    def insert_sheet(self, name: str) -> InMemorySheet:
        sheet = InMemorySheet(name)
        self.sheets[name] = sheet
        return sheet

    def sheet_names(self) -> List[str]:
        return list(self.sheets)
