"""
Centralized dependency wiring.
Builds the workbook selected by settings and the repositories on top of it.
"""

from functools import lru_cache

from adapters import InMemoryWorkbook, SqlWorkbook, TableStoreAdapter, Workbook
from app.config import Settings, StoreBackend, settings
from repositories import (
    IngredientRepository,
    InventoryRepository,
    RecipeRepository,
    SupplierRepository,
)


def build_workbook(config: Settings = None) -> Workbook:
    """Create the workbook for the configured backend"""
    config = config or settings
    if config.store_backend == StoreBackend.MEMORY:
        return InMemoryWorkbook()
    return SqlWorkbook(config.store_db_url, echo=config.db_echo)


@lru_cache(maxsize=1)
def get_table_store() -> TableStoreAdapter:
    """Process-wide table store adapter built from settings"""
    return TableStoreAdapter(build_workbook())


def get_ingredient_repository(store: TableStoreAdapter = None) -> IngredientRepository:
    """Get ingredient repository instance"""
    return IngredientRepository(store or get_table_store())


def get_recipe_repository(store: TableStoreAdapter = None) -> RecipeRepository:
    """Get recipe repository instance"""
    store = store or get_table_store()
    return RecipeRepository(store, IngredientRepository(store))


def get_supplier_repository(store: TableStoreAdapter = None) -> SupplierRepository:
    """Get supplier repository instance"""
    return SupplierRepository(store or get_table_store())


def get_inventory_repository(store: TableStoreAdapter = None) -> InventoryRepository:
    """Get inventory repository instance"""
    return InventoryRepository(store or get_table_store())
