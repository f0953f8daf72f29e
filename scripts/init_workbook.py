#!/usr/bin/env python3
"""
Initialize the workbook tables
Creates (or resets) Enhanced_Ingredients, Recipes, Recipe_Ingredients,
Suppliers and Inventory with their header rows, then runs a read check.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.log_config import setup_logging

logger = logging.getLogger("barbook.init_workbook")


def check_core_api(store) -> bool:
    """Exercise the ingredient read paths against the initialized tables"""
    from repositories import IngredientRepository

    try:
        repo = IngredientRepository(store)
        vodkas = repo.get_by_category("Vodka")
        logger.info(f"Found {len(vodkas)} vodka ingredients")
        premium = repo.search("premium")
        logger.info(f"Found {len(premium)} ingredients matching 'premium'")
        return True
    except Exception as e:
        logger.error(f"✗ Core API check failed: {e}")
        return False


def main(store=None) -> int:
    """Initialize every table; returns a process exit code"""
    from app.config import settings
    from core.dependencies import get_table_store
    from repositories import initialize_all_tables

    logger.info("=" * 60)
    logger.info(f"{settings.app_name} Workbook Initialization")
    logger.info("=" * 60)

    store = store or get_table_store()
    try:
        tables = initialize_all_tables(store)
    except Exception as e:
        logger.error(f"✗ Failed to initialize tables: {e}")
        return 1

    logger.info(f"✓ Initialized {len(tables)} tables: {', '.join(tables)}")

    if not check_core_api(store):
        return 1

    logger.info("✓ Workbook ready")
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(main())
