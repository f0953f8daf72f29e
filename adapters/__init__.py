"""
Adapters package - access to the external tabular store.
The table store adapter plus the in-memory and SQL-backed workbooks.
"""

from adapters.table_store import TableStoreAdapter, TableHandle, Workbook
from adapters.memory_store import InMemoryWorkbook, InMemorySheet
from adapters.sql_store import SqlWorkbook, SqlSheet

__all__ = [
    "TableStoreAdapter",
    "TableHandle",
    "Workbook",
    "InMemoryWorkbook",
    "InMemorySheet",
    "SqlWorkbook",
    "SqlSheet",
]
