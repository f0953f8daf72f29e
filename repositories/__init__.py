"""
Repositories package - Data access layer.
"""

from repositories.base import TableRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.recipe_repository import RecipeRepository
from repositories.supplier_repository import SupplierRepository, InventoryRepository
from repositories.schema_setup import initialize_all_tables

__all__ = [
    "TableRepository",
    "IngredientRepository",
    "RecipeRepository",
    "SupplierRepository",
    "InventoryRepository",
    "initialize_all_tables",
]
