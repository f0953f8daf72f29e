"""
Domain schemas package - Pydantic models for input validation.
"""

from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientFilters,
    IngredientSearchFilters,
    AbvRange,
)
from domain.schemas.recipe_schemas import RecipeCreate, RecipeIngredientCreate

__all__ = [
    # Ingredient schemas
    "IngredientCreate",
    "IngredientFilters",
    "IngredientSearchFilters",
    "AbvRange",
    # Recipe schemas
    "RecipeCreate",
    "RecipeIngredientCreate",
]
