"""
Ingredient model - one row of the Enhanced_Ingredients table.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from domain.models.base import SheetModel, parse_datetime, parse_number


class Ingredient(SheetModel):
    """
    Bar ingredient (spirit, mixer, garnish, ...).

    ``abv`` and ``cost_per_unit`` are None when the stored cell is blank or not
    a number, so callers can tell "unknown" apart from zero.
    """

    ingredient_id: str = ""
    name: str = ""
    category: str = ""
    subcategory: str = ""
    brand: str = ""
    country_of_origin: str = ""
    spirits_type: str = ""
    spirits_style: str = ""
    abv: Optional[float] = None
    taste_profile: str = ""
    body_style: str = ""
    sku: str = ""
    size_volume: str = ""
    description: str = ""
    storage_requirements: str = ""
    shelf_life_days: Optional[int] = None
    cost_per_unit: Optional[float] = None
    supplier_id: str = ""
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    @field_validator("abv", "cost_per_unit", mode="before")
    @classmethod
    def lenient_number(cls, value: Any) -> Optional[float]:
        return parse_number(value)

    @field_validator("created_date", "updated_date", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> Optional[datetime]:
        return parse_datetime(value)

    @field_validator("shelf_life_days", mode="before")
    @classmethod
    def lenient_days(cls, value: Any) -> Optional[int]:
        parsed = parse_number(value)
        return None if parsed is None else int(parsed)

    def __repr__(self):
        return f"<Ingredient(id={self.ingredient_id}, name='{self.name}')>"
