"""
Domain models package - typed views of workbook rows.
"""

from domain.models.base import SheetModel, parse_bool, parse_datetime, parse_number
from domain.models.ingredient import Ingredient
from domain.models.recipe import Recipe, RecipeIngredient, ScaledRecipe
from domain.models.supplier import Supplier, InventoryItem

__all__ = [
    "SheetModel",
    "parse_number",
    "parse_bool",
    "parse_datetime",
    # Ingredient models
    "Ingredient",
    # Recipe models
    "Recipe",
    "RecipeIngredient",
    "ScaledRecipe",
    # Stub tables
    "Supplier",
    "InventoryItem",
]
