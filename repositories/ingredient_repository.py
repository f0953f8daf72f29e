"""
Ingredient Repository - Data access layer for the Enhanced_Ingredients table
"""

import enum
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from adapters.table_store import TableStoreAdapter
from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.ids import generate_ingredient_id
from domain.models.ingredient import Ingredient
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientFilters,
    IngredientSearchFilters,
)
from domain.tables import INGREDIENTS, ingredient_header_for_field, now
from repositories.base import TableRepository, field_value, validate_input

logger = logging.getLogger("barbook.ingredients")

FiltersInput = Union[IngredientFilters, Mapping[str, Any], None]
SearchFiltersInput = Union[IngredientSearchFilters, Mapping[str, Any], None]


class IngredientRepository(TableRepository[Ingredient]):
    """Repository for ingredient rows: category listing, text search, add and update"""

    def __init__(self, store: TableStoreAdapter):
        super().__init__(store, INGREDIENTS, Ingredient)

    def get_by_category(self, category: Optional[str] = None, filters: FiltersInput = None) -> List[Ingredient]:
        """Get ingredients in a category, optionally narrowed by ABV bounds and country

        Args:
            category: Exact category name; empty or None lists every ingredient
            filters: abvMin / abvMax (inclusive) and country (exact match)

        Returns:
            Matching ingredients in table order
        """
        criteria = validate_input(IngredientFilters, filters or {})
        results = []
        for ingredient in self.list_all():
            if category and ingredient.category != category:
                continue
            # Rows whose ABV cell is not a number are not excluded by the bounds
            if (
                criteria.abv_min is not None
                and ingredient.abv is not None
                and ingredient.abv < criteria.abv_min
            ):
                continue
            if (
                criteria.abv_max is not None
                and ingredient.abv is not None
                and ingredient.abv > criteria.abv_max
            ):
                continue
            if criteria.country and ingredient.country_of_origin != criteria.country:
                continue
            results.append(ingredient)

        logger.debug(f"Found {len(results)} ingredients for category '{category}'")
        return results

    def search(self, term: Optional[str], filters: SearchFiltersInput = None) -> List[Ingredient]:
        """Case-insensitive text search over name, brand, taste profile,
        description, category and subcategory.

        Args:
            term: Substring to look for
            filters: categories (any of), abvRange {min, max} (inclusive),
                suppliers (any of, by supplier id)

        Returns:
            Matching ingredients in table order
        """
        criteria = validate_input(IngredientSearchFilters, filters or {})
        needle = (term or "").lower()
        results = []
        for ingredient in self.list_all():
            haystack = (
                ingredient.name,
                ingredient.brand,
                ingredient.taste_profile,
                ingredient.description,
                ingredient.category,
                ingredient.subcategory,
            )
            if not any(value and needle in value.lower() for value in haystack):
                continue

            if criteria.categories and ingredient.category not in criteria.categories:
                continue

            if criteria.abv_range is not None:
                # Unknown ABV never falls inside a range
                if ingredient.abv is None:
                    continue
                if ingredient.abv < criteria.abv_range.min or ingredient.abv > criteria.abv_range.max:
                    continue

            if criteria.suppliers and ingredient.supplier_id not in criteria.suppliers:
                continue

            results.append(ingredient)

        logger.debug(f"Found {len(results)} ingredients matching '{term}'")
        return results

    def add(self, data: Union[IngredientCreate, Mapping[str, Any]]) -> str:
        """Add a new ingredient

        Args:
            data: Ingredient fields; name and category are required

        Returns:
            Generated ingredient id

        Raises:
            ServiceValidationError: If name or category is missing, or a value is out of range
        """
        if not field_value(data, "name") or not field_value(data, "category"):
            logger.error("Rejected ingredient without name or category")
            raise ServiceValidationError(
                "Name and category are required fields",
                details={"required": ["name", "category"]},
                code="missing_required_fields",
            )
        payload = validate_input(IngredientCreate, data)

        ingredient_id = generate_ingredient_id()
        timestamp = now()
        values: Dict[str, Any] = payload.model_dump()
        values.update(
            ingredient_id=ingredient_id,
            created_date=timestamp,
            updated_date=timestamp,
        )

        self.store.append_row(self.schema.name, self.schema.build_row(values))
        logger.info(f"Ingredient {payload.name} added with ID: {ingredient_id}")
        return ingredient_id

    def update(self, ingredient_id: str, updates: Mapping[str, Any]) -> bool:
        """Overwrite selected fields of an ingredient and refresh Updated_Date

        Keys may be camelCase record keys or snake_case attribute names.
        Keys that resolve to no column are skipped; the id column is never
        written.

        Raises:
            NotFoundError: If no row carries the id
        """
        key_header = self.schema.key_column.header
        row_index = self.store.find_row_index_by_key(self.schema.name, key_header, ingredient_id)
        if row_index is None:
            logger.error(f"Ingredient with ID {ingredient_id} not found")
            raise NotFoundError(
                f"Ingredient with ID {ingredient_id} not found",
                details={"ingredient_id": ingredient_id},
                code="ingredient_not_found",
            )

        headers, _ = self.store.read_all(self.schema.name)
        for field_name, value in (updates or {}).items():
            header = ingredient_header_for_field(field_name)
            if header == key_header:
                logger.warning(f"Ignoring attempt to change the id of ingredient {ingredient_id}")
                continue
            if header not in headers:
                logger.debug(f"No column for update field '{field_name}', skipped")
                continue
            # Written as given: "" clears a cell, no column default is substituted
            cell = value.value if isinstance(value, enum.Enum) else value
            self.store.set_cell(self.schema.name, row_index, headers.index(header), cell)

        if "Updated_Date" in headers:
            self.store.set_cell(self.schema.name, row_index, headers.index("Updated_Date"), now())

        logger.info(f"Ingredient {ingredient_id} updated")
        return True
