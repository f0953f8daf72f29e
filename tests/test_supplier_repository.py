"""
Tests for workbook initialization and the read-only Suppliers/Inventory repositories.
"""

from datetime import datetime

from test_fixtures import workbook, store
from adapters import InMemoryWorkbook, TableStoreAdapter
from core.dependencies import get_inventory_repository, get_supplier_repository
from domain.models import InventoryItem, Supplier
from domain.tables import ALL_TABLES, INGREDIENTS, INVENTORY, SUPPLIERS
from repositories import initialize_all_tables
from scripts.init_workbook import main as init_workbook_main


def test_initialize_all_tables(workbook: InMemoryWorkbook):
    """
    Test initialize_all_tables() on an empty workbook.

    Verifies:
    - All five tables are created in order
    - Each holds only its header row
    """
    adapter = TableStoreAdapter(workbook)

    names = initialize_all_tables(adapter)

    assert names == [schema.name for schema in ALL_TABLES]
    assert workbook.sheet_names() == names
    for schema in ALL_TABLES:
        assert adapter.read_all(schema.name) == (schema.headers, [])


def test_initialize_all_tables_resets_data(store: TableStoreAdapter):
    """
    Test re-running initialization.

    Verifies:
    - Existing rows are discarded
    """
    store.append_row(INGREDIENTS.name, INGREDIENTS.build_row({"ingredient_id": "ING_1_1", "name": "Old"}))

    initialize_all_tables(store)

    assert store.read_all(INGREDIENTS.name)[1] == []


def test_supplier_repository_reads_rows(store: TableStoreAdapter):
    """
    Test SupplierRepository.

    Verifies:
    - Rows parse into Supplier models
    - Numeric text cells become floats, blank ones None
    - get_by_id() returns None for unknown suppliers
    """
    store.append_row(
        SUPPLIERS.name,
        SUPPLIERS.build_row(
            {
                "supplier_id": "SUP_1",
                "company_name": "Harbor Beverage Co.",
                "city": "Portland",
                "zip_code": 97201,
                "minimum_order": "250",
                "rating": "",
                "created_date": datetime(2024, 2, 1),
            }
        ),
    )
    repo = get_supplier_repository(store)

    suppliers = repo.list_all()
    assert len(suppliers) == 1
    supplier = repo.get_by_id("SUP_1")
    assert isinstance(supplier, Supplier)
    assert supplier.company_name == "Harbor Beverage Co."
    assert supplier.zip_code == "97201"
    assert supplier.minimum_order == 250.0
    assert supplier.rating is None
    assert repo.get_by_id("SUP_2") is None


def test_inventory_repository_reads_rows(store: TableStoreAdapter):
    """
    Test InventoryRepository.

    Verifies:
    - Rows parse into InventoryItem models
    - Current stock defaults to 0 when written blank
    """
    store.append_row(
        INVENTORY.name,
        INVENTORY.build_row(
            {
                "inventory_id": "INV_1",
                "ingredient_id": "ING_1",
                "supplier_id": "SUP_1",
                "unit": "bottle",
                "reorder_point": 6,
                "location": "Back bar",
            }
        ),
    )
    repo = get_inventory_repository(store)

    item = repo.get_by_id("INV_1")
    assert isinstance(item, InventoryItem)
    assert item.current_stock == 0
    assert item.reorder_point == 6
    assert item.reorder_quantity is None
    assert item.location == "Back bar"
    assert repo.exists("INV_2") is False


def test_init_workbook_script(workbook: InMemoryWorkbook):
    """
    Test the init_workbook script entry point.

    Verifies:
    - main() returns 0 and leaves every table initialized
    """
    adapter = TableStoreAdapter(workbook)

    assert init_workbook_main(adapter) == 0
    assert workbook.sheet_names() == [schema.name for schema in ALL_TABLES]
