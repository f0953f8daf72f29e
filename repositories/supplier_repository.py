"""
Supplier and Inventory Repositories - read-only access to the stub tables
"""

from adapters.table_store import TableStoreAdapter
from domain.models.supplier import InventoryItem, Supplier
from domain.tables import INVENTORY, SUPPLIERS
from repositories.base import TableRepository


class SupplierRepository(TableRepository[Supplier]):
    """Repository for supplier rows (list_all / get_by_id only)"""

    def __init__(self, store: TableStoreAdapter):
        super().__init__(store, SUPPLIERS, Supplier)


class InventoryRepository(TableRepository[InventoryItem]):
    """Repository for inventory rows (list_all / get_by_id only)"""

    def __init__(self, store: TableStoreAdapter):
        super().__init__(store, INVENTORY, InventoryItem)
