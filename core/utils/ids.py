"""
Identifier generation for workbook rows.

Ids look like ``ING_1718000000000_42``: an entity prefix, the current epoch
time in milliseconds and a random number in 0..999. Two calls in the same
millisecond that draw the same number collide; nothing checks generated ids
against the table.
"""

import random
import time

INGREDIENT_PREFIX = "ING"
RECIPE_PREFIX = "RCP"
RELATIONSHIP_PREFIX = "REL"
SUPPLIER_PREFIX = "SUP"
INVENTORY_PREFIX = "INV"


def generate_id(prefix: str) -> str:
    timestamp = int(time.time() * 1000)
    return f"{prefix}_{timestamp}_{random.randint(0, 999)}"


def generate_ingredient_id() -> str:
    return generate_id(INGREDIENT_PREFIX)


def generate_recipe_id() -> str:
    return generate_id(RECIPE_PREFIX)


def generate_relationship_id() -> str:
    return generate_id(RELATIONSHIP_PREFIX)


def generate_supplier_id() -> str:
    return generate_id(SUPPLIER_PREFIX)


def generate_inventory_id() -> str:
    return generate_id(INVENTORY_PREFIX)
