"""Pydantic schemas for recipe input."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.enums import Difficulty, RecipeCategory, Unit


class RecipeIngredientCreate(BaseModel):
    """One ingredient line supplied when creating a recipe"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ingredient_id: str
    quantity: float = Field(..., gt=0)
    unit: Optional[Unit] = None
    preparation_method: Optional[str] = None
    substitution_allowed: bool = False
    garnish_flag: bool = False
    critical_ingredient: bool = False


class RecipeCreate(BaseModel):
    """Schema for creating a recipe together with its ingredient lines"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    category: RecipeCategory
    description: Optional[str] = None
    difficulty: Difficulty = Difficulty.BEGINNER
    serving_size: float = Field(1, gt=0)
    prep_time_minutes: int = Field(0, ge=0, alias="prepTime")
    alcoholic: bool = False
    dietary_tags: List[str] = []
    instructions: Optional[str] = None
    ingredients: List[RecipeIngredientCreate] = []
