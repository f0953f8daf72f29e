"""
Supplier and inventory models - rows of the Suppliers and Inventory tables.
These tables are read-only from this package.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from domain.models.base import SheetModel, parse_datetime, parse_number


class Supplier(SheetModel):
    """Ingredient supplier"""

    supplier_id: str = ""
    company_name: str = ""
    contact_person: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    payment_terms: str = ""
    delivery_schedule: str = ""
    minimum_order: Optional[float] = None
    preferred_status: str = ""
    rating: Optional[float] = None
    created_date: Optional[datetime] = None
    last_contact_date: Optional[datetime] = None

    @field_validator("minimum_order", "rating", mode="before")
    @classmethod
    def lenient_number(cls, value: Any) -> Optional[float]:
        return parse_number(value)

    @field_validator("created_date", "last_contact_date", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> Optional[datetime]:
        return parse_datetime(value)


class InventoryItem(SheetModel):
    """Stock line for one ingredient from one supplier"""

    inventory_id: str = ""
    ingredient_id: str = ""
    supplier_id: str = ""
    current_stock: Optional[float] = None
    unit: str = ""
    reorder_point: Optional[float] = None
    reorder_quantity: Optional[float] = None
    last_order_date: Optional[datetime] = None
    cost_per_unit: Optional[float] = None
    expiration_date: Optional[datetime] = None
    location: str = ""
    status: str = ""
    last_updated: Optional[datetime] = None

    @field_validator(
        "current_stock", "reorder_point", "reorder_quantity", "cost_per_unit", mode="before"
    )
    @classmethod
    def lenient_number(cls, value: Any) -> Optional[float]:
        return parse_number(value)

    @field_validator("last_order_date", "expiration_date", "last_updated", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> Optional[datetime]:
        return parse_datetime(value)
