"""Pydantic schemas for ingredient input and query filters."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.enums import IngredientCategory


class IngredientCreate(BaseModel):
    """Schema for adding a new ingredient"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    category: IngredientCategory
    subcategory: Optional[str] = None
    brand: Optional[str] = None
    country_of_origin: Optional[str] = None
    spirits_type: Optional[str] = None
    spirits_style: Optional[str] = None
    abv: Optional[float] = Field(None, ge=0, le=100, description="Alcohol by volume, percent")
    taste_profile: Optional[str] = None
    body_style: Optional[str] = None
    sku: Optional[str] = None
    size_volume: Optional[str] = None
    description: Optional[str] = None
    storage_requirements: Optional[str] = None
    shelf_life_days: Optional[int] = Field(None, ge=0)
    cost_per_unit: Optional[float] = Field(None, gt=0)
    supplier_id: Optional[str] = None


class IngredientFilters(BaseModel):
    """Optional filters for listing ingredients by category"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    abv_min: Optional[float] = None
    abv_max: Optional[float] = None
    country: Optional[str] = None


class AbvRange(BaseModel):
    """Inclusive ABV bounds"""

    min: float
    max: float


class IngredientSearchFilters(BaseModel):
    """Optional filters narrowing a text search"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    categories: Optional[List[str]] = None
    abv_range: Optional[AbvRange] = None
    suppliers: Optional[List[str]] = None
