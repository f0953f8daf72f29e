"""
Tests for the table layouts and the header <-> field conversions.

Verifies the persisted header order of every table, the camelCase record keys
derived from headers, and that every typed model reads the keys its table
produces.
"""

import pytest

from domain.enums import Difficulty
from domain.models import Ingredient, InventoryItem, Recipe, RecipeIngredient, Supplier
from domain.tables import (
    ALL_TABLES,
    INGREDIENT_FIELD_TO_HEADER,
    INGREDIENTS,
    INVENTORY,
    RECIPE_INGREDIENTS,
    RECIPES,
    SUPPLIERS,
    TAG_SEPARATOR,
    header_to_field_name,
    ingredient_header_for_field,
)


@pytest.mark.parametrize(
    "header,field",
    [
        ("Country_of_Origin", "countryOfOrigin"),
        ("ABV", "abv"),
        ("SKU", "sku"),
        ("Ingredient_ID", "ingredientId"),
        ("Recipe_Name", "recipeName"),
        ("Cost_Per_Serving", "costPerServing"),
        ("Zip_Code", "zipCode"),
        ("  Spaced -- Out  ", "spacedOut"),
        ("", ""),
    ],
)
def test_header_to_field_name(header, field):
    """
    Test the header -> record key rule.

    Verifies:
    - Runs of non-alphanumerics split words
    - First word is lower-cased, later words are capitalized
    """
    assert header_to_field_name(header) == field


def test_table_layouts():
    """
    Test table names, column counts and key columns.

    Verifies:
    - Five tables in creation order
    - Column counts 20 / 15 / 11 / 16 / 13
    - The first column is the identity column
    """
    assert [schema.name for schema in ALL_TABLES] == [
        "Enhanced_Ingredients",
        "Recipes",
        "Recipe_Ingredients",
        "Suppliers",
        "Inventory",
    ]
    assert [len(schema.headers) for schema in ALL_TABLES] == [20, 15, 11, 16, 13]
    assert [schema.key_column.header for schema in ALL_TABLES] == [
        "Ingredient_ID",
        "Recipe_ID",
        "Relationship_ID",
        "Supplier_ID",
        "Inventory_ID",
    ]


def test_ingredient_header_order():
    """
    Test the persisted Enhanced_Ingredients header row.

    Verifies:
    - Headers match the workbook layout exactly
    """
    assert INGREDIENTS.headers == [
        "Ingredient_ID", "Name", "Category", "Subcategory", "Brand",
        "Country_of_Origin", "Spirits_Type", "Spirits_Style", "ABV",
        "Taste_Profile", "Body_Style", "SKU", "Size_Volume", "Description",
        "Storage_Requirements", "Shelf_Life_Days", "Cost_Per_Unit",
        "Supplier_ID", "Created_Date", "Updated_Date",
    ]


def test_recipe_header_order():
    """
    Test the persisted Recipes and Recipe_Ingredients header rows.
    """
    assert RECIPES.headers == [
        "Recipe_ID", "Recipe_Name", "Description", "Category",
        "Difficulty_Level", "Serving_Size", "Prep_Time_Minutes",
        "Cost_Per_Serving", "Alcoholic", "Dietary_Tags", "Instructions",
        "Created_Date", "Updated_Date", "Version", "Active",
    ]
    assert RECIPE_INGREDIENTS.headers == [
        "Relationship_ID", "Recipe_ID", "Ingredient_ID", "Quantity", "Unit",
        "Preparation_Method", "Substitution_Allowed", "Garnish_Flag",
        "Critical_Ingredient", "Cost_Contribution", "Order_Sequence",
    ]


@pytest.mark.parametrize(
    "schema,model",
    [
        (INGREDIENTS, Ingredient),
        (RECIPES, Recipe),
        (RECIPE_INGREDIENTS, RecipeIngredient),
        (SUPPLIERS, Supplier),
        (INVENTORY, InventoryItem),
    ],
)
def test_models_read_every_column(schema, model):
    """
    Test that each model declares one field per column.

    Verifies:
    - The column attribute is a model field
    - The model alias for it is the record key the row mapper produces
    """
    for column in schema.columns:
        assert column.attr in model.model_fields, column.header
        assert model.model_fields[column.attr].alias == column.field, column.header


def test_reverse_table_covers_mutable_ingredient_columns():
    """
    Test the explicit field -> header table.

    Verifies:
    - Every Ingredients column except id and timestamps is listed
    - Each entry points back at the header it was derived from
    """
    expected = set(INGREDIENTS.headers) - {"Ingredient_ID", "Created_Date", "Updated_Date"}
    assert set(INGREDIENT_FIELD_TO_HEADER.values()) == expected
    for field, header in INGREDIENT_FIELD_TO_HEADER.items():
        assert header_to_field_name(header) == field


def test_ingredient_header_for_field():
    """
    Test update key resolution.

    Verifies:
    - camelCase keys and snake_case attributes resolve to headers
    - Unknown names pass through unchanged
    """
    assert ingredient_header_for_field("countryOfOrigin") == "Country_of_Origin"
    assert ingredient_header_for_field("country_of_origin") == "Country_of_Origin"
    assert ingredient_header_for_field("abv") == "ABV"
    assert ingredient_header_for_field("Brand") == "Brand"
    assert ingredient_header_for_field("notAField") == "notAField"


def test_build_row_defaults_and_conversions():
    """
    Test TableSchema.build_row().

    Verifies:
    - Missing values take the column default
    - Enum members are written as their value
    - Tag lists are joined with ", "
    """
    row = RECIPES.build_row(
        {
            "recipe_id": "RCP_1_1",
            "name": "Paloma",
            "difficulty": Difficulty.INTERMEDIATE,
            "dietary_tags": ["Vegan", "Dairy-Free"],
            "description": None,
        }
    )
    values = dict(zip(RECIPES.headers, row))

    assert values["Recipe_Name"] == "Paloma"
    assert values["Difficulty_Level"] == "Intermediate"
    assert values["Dietary_Tags"] == TAG_SEPARATOR.join(["Vegan", "Dairy-Free"])
    assert values["Description"] == ""
    assert values["Serving_Size"] == 1
    assert values["Version"] == "1.0"
    assert values["Active"] is True
    assert values["Alcoholic"] is False


def test_recipe_model_parses_sheet_text():
    """
    Test parsing cells that arrive as text.

    Verifies:
    - "TRUE"/"FALSE" become booleans
    - Numeric strings become numbers, blanks take defaults
    - Dumping by alias gives the record keys back
    """
    recipe = Recipe.model_validate(
        {
            "recipeId": "RCP_1_1",
            "recipeName": "Old Fashioned",
            "servingSize": "2",
            "prepTimeMinutes": "5",
            "costPerServing": "",
            "alcoholic": "TRUE",
            "active": "FALSE",
            "dietaryTags": "Vegan, Gluten-Free",
        }
    )

    assert recipe.alcoholic is True
    assert recipe.active is False
    assert recipe.serving_size == 2
    assert recipe.prep_time_minutes == 5
    assert recipe.total_cost == 0
    assert recipe.dietary_tags == ["Vegan", "Gluten-Free"]

    dumped = recipe.model_dump(by_alias=True)
    assert dumped["recipeName"] == "Old Fashioned"
    assert dumped["costPerServing"] == 0
