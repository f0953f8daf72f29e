"""
Workbook initialization - creates the five tables with their header rows.
"""

import logging
from typing import List

from adapters.table_store import TableStoreAdapter
from domain.tables import ALL_TABLES

logger = logging.getLogger("barbook.schema")


def initialize_all_tables(store: TableStoreAdapter) -> List[str]:
    """Create (or clear and re-create) every table with its header row

    Existing rows in these tables are discarded.

    Returns:
        Names of the initialized tables, in creation order
    """
    logger.info("Starting table initialization...")
    names = []
    for schema in ALL_TABLES:
        store.create_table(schema.name, schema.headers)
        names.append(schema.name)
    logger.info("All tables initialized successfully")
    return names
