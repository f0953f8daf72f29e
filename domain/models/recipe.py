"""
Recipe models - rows of the Recipes and Recipe_Ingredients tables, plus the
scaled projection returned by recipe scaling.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from domain.models.base import SheetModel, parse_bool, parse_datetime, parse_number
from domain.tables import TAG_SEPARATOR


class Recipe(SheetModel):
    """Drink recipe header row"""

    recipe_id: str = ""
    name: str = Field(default="", alias="recipeName")
    description: str = ""
    category: str = ""
    difficulty: str = Field(default="Beginner", alias="difficultyLevel")
    serving_size: float = 1
    prep_time_minutes: int = 0
    # Stored under Cost_Per_Serving; holds the summed ingredient cost
    total_cost: float = Field(default=0.0, alias="costPerServing")
    alcoholic: bool = False
    dietary_tags: List[str] = Field(default_factory=list)
    instructions: str = ""
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    version: str = "1.0"
    active: bool = True

    @field_validator("dietary_tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [str(tag) for tag in value]
        text = str(value)
        return [tag.strip() for tag in text.split(TAG_SEPARATOR.strip()) if tag.strip()]

    @field_validator("serving_size", "total_cost", mode="before")
    @classmethod
    def lenient_number(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_number(value)
        return cls.field_default(info.field_name) if parsed is None else parsed

    @field_validator("prep_time_minutes", mode="before")
    @classmethod
    def lenient_minutes(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_number(value)
        return cls.field_default(info.field_name) if parsed is None else int(parsed)

    @field_validator("alcoholic", "active", mode="before")
    @classmethod
    def lenient_flag(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_bool(value)
        return cls.field_default(info.field_name) if parsed is None else parsed

    @field_validator("created_date", "updated_date", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> Optional[datetime]:
        return parse_datetime(value)

    def __repr__(self):
        return f"<Recipe(id={self.recipe_id}, name='{self.name}')>"


class RecipeIngredient(SheetModel):
    """One ingredient line of a recipe (Recipe_Ingredients join row)"""

    relationship_id: str = ""
    recipe_id: str = ""
    ingredient_id: str = ""
    quantity: float = 0
    unit: str = ""
    preparation_method: str = ""
    substitution_allowed: bool = False
    garnish_flag: bool = False
    critical_ingredient: bool = False
    cost_contribution: float = 0
    order_sequence: int = 0

    @field_validator("quantity", "cost_contribution", mode="before")
    @classmethod
    def lenient_number(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_number(value)
        return cls.field_default(info.field_name) if parsed is None else parsed

    @field_validator("order_sequence", mode="before")
    @classmethod
    def lenient_sequence(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_number(value)
        return cls.field_default(info.field_name) if parsed is None else int(parsed)

    @field_validator("substitution_allowed", "garnish_flag", "critical_ingredient", mode="before")
    @classmethod
    def lenient_flag(cls, value: Any, info: ValidationInfo) -> Any:
        parsed = parse_bool(value)
        return cls.field_default(info.field_name) if parsed is None else parsed


class ScaledRecipe(Recipe):
    """
    Read-time projection of a recipe multiplied by a factor.

    Never persisted: the stored recipe keeps its original quantities and cost.
    """

    multiplier: float = 1
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
