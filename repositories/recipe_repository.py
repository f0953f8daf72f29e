"""
Recipe Repository - Data access layer for the Recipes and Recipe_Ingredients tables
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from adapters.table_store import TableStoreAdapter
from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.ids import generate_recipe_id, generate_relationship_id
from domain.models.recipe import Recipe, RecipeIngredient, ScaledRecipe
from domain.schemas.recipe_schemas import RecipeCreate, RecipeIngredientCreate
from domain.row_mapper import rows_to_records
from domain.tables import RECIPES, RECIPE_INGREDIENTS, now
from repositories.base import TableRepository, field_value, validate_input
from repositories.ingredient_repository import IngredientRepository

logger = logging.getLogger("barbook.recipes")


class RecipeRepository(TableRepository[Recipe]):
    """
    Repository for recipes and their ingredient lines.

    Costs are computed from ingredient unit costs when a recipe is created and
    stored with it; reads never recompute them.
    """

    def __init__(
        self,
        store: TableStoreAdapter,
        ingredient_repository: Optional[IngredientRepository] = None,
    ):
        super().__init__(store, RECIPES, Recipe)
        self.ingredients = ingredient_repository or IngredientRepository(store)

    def ingredient_cost(self, ingredient_id: str, quantity: Any) -> float:
        """Cost of using ``quantity`` units of an ingredient

        Unknown ingredients and ingredients without a unit cost cost 0.
        """
        ingredient = self.ingredients.get_by_id(ingredient_id)
        if ingredient is None or not ingredient.cost_per_unit:
            return 0.0
        return ingredient.cost_per_unit * float(quantity)

    def calculate_cost(self, lines: Iterable[Union[RecipeIngredientCreate, Mapping[str, Any]]]) -> float:
        """Total cost of a list of ingredient lines"""
        total = 0.0
        for line in lines:
            total += self.ingredient_cost(
                field_value(line, "ingredient_id") or field_value(line, "ingredientId"),
                field_value(line, "quantity") or 0,
            )
        return total

    def create(self, data: Union[RecipeCreate, Mapping[str, Any]]) -> str:
        """Create a recipe and one Recipe_Ingredients row per ingredient line

        Args:
            data: Recipe fields; name and category are required. ``ingredients``
                is an optional list of {ingredientId, quantity, unit, ...}

        Returns:
            Generated recipe id

        Raises:
            NotFoundError: If the Recipes or Recipe_Ingredients table is missing
            ServiceValidationError: If name or category is missing, or a value is invalid
        """
        if not (self.store.has_table(RECIPES.name) and self.store.has_table(RECIPE_INGREDIENTS.name)):
            logger.error("Recipe tables not found")
            raise NotFoundError(
                "Required sheets not found",
                details={"tables": [RECIPES.name, RECIPE_INGREDIENTS.name]},
                code="table_not_found",
            )

        if not field_value(data, "name") or not field_value(data, "category"):
            logger.error("Rejected recipe without name or category")
            raise ServiceValidationError(
                "Recipe name and category are required",
                details={"required": ["name", "category"]},
                code="missing_required_fields",
            )
        payload = validate_input(RecipeCreate, data)

        recipe_id = generate_recipe_id()
        timestamp = now()
        total_cost = self.calculate_cost(payload.ingredients)

        recipe_values = payload.model_dump(exclude={"ingredients"})
        recipe_values.update(
            recipe_id=recipe_id,
            total_cost=total_cost,
            created_date=timestamp,
            updated_date=timestamp,
            version="1.0",
            active=True,
        )
        self.store.append_row(RECIPES.name, RECIPES.build_row(recipe_values))

        if payload.ingredients:
            self._create_ingredient_lines(recipe_id, payload.ingredients)

        logger.info(f"Recipe {payload.name} created with ID: {recipe_id}")
        return recipe_id

    def _create_ingredient_lines(self, recipe_id: str, lines: List[RecipeIngredientCreate]) -> None:
        """Append Recipe_Ingredients rows numbered 1..N in list order"""
        for order_sequence, line in enumerate(lines, start=1):
            values = line.model_dump()
            values.update(
                relationship_id=generate_relationship_id(),
                recipe_id=recipe_id,
                cost_contribution=self.ingredient_cost(line.ingredient_id, line.quantity),
                order_sequence=order_sequence,
            )
            self.store.append_row(RECIPE_INGREDIENTS.name, RECIPE_INGREDIENTS.build_row(values))
        logger.debug(f"Added {len(lines)} ingredient lines to recipe {recipe_id}")

    def get_ingredients(self, recipe_id: str) -> List[RecipeIngredient]:
        """Get the ingredient lines of a recipe; empty when it has none"""
        headers, rows = self.store.read_all(RECIPE_INGREDIENTS.name)
        return [
            RecipeIngredient.model_validate(record)
            for record in rows_to_records(rows, headers)
            if record.get("recipeId") == recipe_id
        ]

    def scale(self, recipe_id: str, multiplier: float) -> ScaledRecipe:
        """Project a recipe multiplied by ``multiplier``

        Quantities, cost contributions and serving size are multiplied and the
        total cost is re-summed from the scaled lines. Nothing is written back.

        Raises:
            NotFoundError: If the recipe does not exist
            ServiceValidationError: If multiplier is not a positive number
        """
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)) or multiplier <= 0:
            logger.error(f"Rejected multiplier {multiplier!r} for recipe {recipe_id}")
            raise ServiceValidationError(
                "Multiplier must be a positive number",
                details={"multiplier": multiplier},
                code="invalid_multiplier",
            )

        recipe = self.get_by_id(recipe_id)
        if recipe is None:
            logger.error(f"Recipe with ID {recipe_id} not found")
            raise NotFoundError(
                f"Recipe with ID {recipe_id} not found",
                details={"recipe_id": recipe_id},
                code="recipe_not_found",
            )

        scaled_lines = [
            line.model_copy(
                update={
                    "quantity": line.quantity * multiplier,
                    "cost_contribution": line.cost_contribution * multiplier,
                }
            )
            for line in self.get_ingredients(recipe_id)
        ]

        values = recipe.model_dump()
        values.update(
            serving_size=recipe.serving_size * multiplier,
            total_cost=sum(line.cost_contribution for line in scaled_lines),
            multiplier=multiplier,
            ingredients=scaled_lines,
        )
        return ScaledRecipe.model_validate(values)
