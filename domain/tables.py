"""
Schema registry for the five workbook tables.

Each table is declared once as an ordered list of columns. The header names
and their order are the persisted layout of the workbook and must not change.
Both the read path (row -> record -> model) and the write path (values -> row)
consult the same declarations.
"""

import enum
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def header_to_field_name(header: str) -> str:
    """Convert a column header to its camelCase record key.

    ``Country_of_Origin`` -> ``countryOfOrigin``, ``ABV`` -> ``abv``.
    """
    words = _NON_ALNUM.sub(" ", str(header).lower()).strip().split(" ")
    if not words or words == [""]:
        return ""
    return words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])


class ColumnKind(str, enum.Enum):
    """How a column's cells are written and parsed"""

    TEXT = "text"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    TAGS = "tags"


TAG_SEPARATOR = ", "


@dataclass(frozen=True)
class Column:
    """One column of a table: persisted header plus the model attribute it feeds"""

    header: str
    attr: str
    kind: ColumnKind = ColumnKind.TEXT
    default: Any = ""

    @property
    def field(self) -> str:
        """Record key produced by the row mapper for this column"""
        return header_to_field_name(self.header)

    def to_cell(self, value: Any) -> Any:
        """Convert a Python value into the cell value written to the store.

        Missing values (None or "") fall back to the column default.
        """
        if value is None or value == "":
            return self.default
        if isinstance(value, enum.Enum):
            return value.value
        if self.kind == ColumnKind.TAGS and not isinstance(value, str):
            return TAG_SEPARATOR.join(str(tag) for tag in value)
        return value


@dataclass(frozen=True)
class TableSchema:
    """Ordered column layout of one workbook table"""

    name: str
    columns: Tuple[Column, ...]

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]

    @property
    def key_column(self) -> Column:
        """The identity column (always the first one)"""
        return self.columns[0]

    def column_for_attr(self, attr: str) -> Optional[Column]:
        for column in self.columns:
            if column.attr == attr:
                return column
        return None

    def column_for_header(self, header: str) -> Optional[Column]:
        for column in self.columns:
            if column.header == header:
                return column
        return None

    def build_row(self, values: Mapping[str, Any]) -> List[Any]:
        """Build a positional row from a mapping of model attribute -> value.

        Columns absent from ``values`` receive their default.
        """
        return [column.to_cell(values.get(column.attr)) for column in self.columns]


INGREDIENTS_TABLE = "Enhanced_Ingredients"
RECIPES_TABLE = "Recipes"
RECIPE_INGREDIENTS_TABLE = "Recipe_Ingredients"
SUPPLIERS_TABLE = "Suppliers"
INVENTORY_TABLE = "Inventory"


INGREDIENTS = TableSchema(
    name=INGREDIENTS_TABLE,
    columns=(
        Column("Ingredient_ID", "ingredient_id"),
        Column("Name", "name"),
        Column("Category", "category"),
        Column("Subcategory", "subcategory"),
        Column("Brand", "brand"),
        Column("Country_of_Origin", "country_of_origin"),
        Column("Spirits_Type", "spirits_type"),
        Column("Spirits_Style", "spirits_style"),
        Column("ABV", "abv", ColumnKind.NUMBER, 0),
        Column("Taste_Profile", "taste_profile"),
        Column("Body_Style", "body_style"),
        Column("SKU", "sku"),
        Column("Size_Volume", "size_volume"),
        Column("Description", "description"),
        Column("Storage_Requirements", "storage_requirements"),
        Column("Shelf_Life_Days", "shelf_life_days", ColumnKind.INTEGER, ""),
        Column("Cost_Per_Unit", "cost_per_unit", ColumnKind.NUMBER, 0),
        Column("Supplier_ID", "supplier_id"),
        Column("Created_Date", "created_date", ColumnKind.DATETIME),
        Column("Updated_Date", "updated_date", ColumnKind.DATETIME),
    ),
)

RECIPES = TableSchema(
    name=RECIPES_TABLE,
    columns=(
        Column("Recipe_ID", "recipe_id"),
        Column("Recipe_Name", "name"),
        Column("Description", "description"),
        Column("Category", "category"),
        Column("Difficulty_Level", "difficulty", default="Beginner"),
        Column("Serving_Size", "serving_size", ColumnKind.NUMBER, 1),
        Column("Prep_Time_Minutes", "prep_time_minutes", ColumnKind.INTEGER, 0),
        Column("Cost_Per_Serving", "total_cost", ColumnKind.NUMBER, 0),
        Column("Alcoholic", "alcoholic", ColumnKind.BOOLEAN, False),
        Column("Dietary_Tags", "dietary_tags", ColumnKind.TAGS),
        Column("Instructions", "instructions"),
        Column("Created_Date", "created_date", ColumnKind.DATETIME),
        Column("Updated_Date", "updated_date", ColumnKind.DATETIME),
        Column("Version", "version", default="1.0"),
        Column("Active", "active", ColumnKind.BOOLEAN, True),
    ),
)

RECIPE_INGREDIENTS = TableSchema(
    name=RECIPE_INGREDIENTS_TABLE,
    columns=(
        Column("Relationship_ID", "relationship_id"),
        Column("Recipe_ID", "recipe_id"),
        Column("Ingredient_ID", "ingredient_id"),
        Column("Quantity", "quantity", ColumnKind.NUMBER, 0),
        Column("Unit", "unit"),
        Column("Preparation_Method", "preparation_method"),
        Column("Substitution_Allowed", "substitution_allowed", ColumnKind.BOOLEAN, False),
        Column("Garnish_Flag", "garnish_flag", ColumnKind.BOOLEAN, False),
        Column("Critical_Ingredient", "critical_ingredient", ColumnKind.BOOLEAN, False),
        Column("Cost_Contribution", "cost_contribution", ColumnKind.NUMBER, 0),
        Column("Order_Sequence", "order_sequence", ColumnKind.INTEGER, 0),
    ),
)

SUPPLIERS = TableSchema(
    name=SUPPLIERS_TABLE,
    columns=(
        Column("Supplier_ID", "supplier_id"),
        Column("Company_Name", "company_name"),
        Column("Contact_Person", "contact_person"),
        Column("Phone", "phone"),
        Column("Email", "email"),
        Column("Address", "address"),
        Column("City", "city"),
        Column("State", "state"),
        Column("Zip_Code", "zip_code"),
        Column("Payment_Terms", "payment_terms"),
        Column("Delivery_Schedule", "delivery_schedule"),
        Column("Minimum_Order", "minimum_order", ColumnKind.NUMBER, ""),
        Column("Preferred_Status", "preferred_status"),
        Column("Rating", "rating", ColumnKind.NUMBER, ""),
        Column("Created_Date", "created_date", ColumnKind.DATETIME),
        Column("Last_Contact_Date", "last_contact_date", ColumnKind.DATETIME),
    ),
)

INVENTORY = TableSchema(
    name=INVENTORY_TABLE,
    columns=(
        Column("Inventory_ID", "inventory_id"),
        Column("Ingredient_ID", "ingredient_id"),
        Column("Supplier_ID", "supplier_id"),
        Column("Current_Stock", "current_stock", ColumnKind.NUMBER, 0),
        Column("Unit", "unit"),
        Column("Reorder_Point", "reorder_point", ColumnKind.NUMBER, ""),
        Column("Reorder_Quantity", "reorder_quantity", ColumnKind.NUMBER, ""),
        Column("Last_Order_Date", "last_order_date", ColumnKind.DATETIME),
        Column("Cost_Per_Unit", "cost_per_unit", ColumnKind.NUMBER, ""),
        Column("Expiration_Date", "expiration_date", ColumnKind.DATETIME),
        Column("Location", "location"),
        Column("Status", "status"),
        Column("Last_Updated", "last_updated", ColumnKind.DATETIME),
    ),
)

ALL_TABLES: Tuple[TableSchema, ...] = (
    INGREDIENTS,
    RECIPES,
    RECIPE_INGREDIENTS,
    SUPPLIERS,
    INVENTORY,
)

# Explicit field -> header table for ingredient updates. Written out by hand
# rather than derived: header_to_field_name is not invertible.
INGREDIENT_FIELD_TO_HEADER: Dict[str, str] = {
    "name": "Name",
    "category": "Category",
    "subcategory": "Subcategory",
    "brand": "Brand",
    "countryOfOrigin": "Country_of_Origin",
    "spiritsType": "Spirits_Type",
    "spiritsStyle": "Spirits_Style",
    "abv": "ABV",
    "tasteProfile": "Taste_Profile",
    "bodyStyle": "Body_Style",
    "sku": "SKU",
    "sizeVolume": "Size_Volume",
    "description": "Description",
    "storageRequirements": "Storage_Requirements",
    "shelfLifeDays": "Shelf_Life_Days",
    "costPerUnit": "Cost_Per_Unit",
    "supplierId": "Supplier_ID",
}


def ingredient_header_for_field(field_name: str) -> str:
    """Resolve an update key to an Ingredients header.

    Accepts the camelCase record key or the snake_case model attribute.
    Unknown names are returned unchanged and treated as literal headers.
    """
    if field_name in INGREDIENT_FIELD_TO_HEADER:
        return INGREDIENT_FIELD_TO_HEADER[field_name]
    column = INGREDIENTS.column_for_attr(field_name)
    if column is not None and column.field in INGREDIENT_FIELD_TO_HEADER:
        return INGREDIENT_FIELD_TO_HEADER[column.field]
    return field_name


def now() -> datetime:
    """Timestamp written to Created/Updated cells"""
    return datetime.now(timezone.utc)
