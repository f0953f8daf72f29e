"""
Tests for id generation.
"""

import re
from types import SimpleNamespace

import pytest

from core.utils import ids


@pytest.mark.parametrize(
    "generator,prefix",
    [
        (ids.generate_ingredient_id, "ING"),
        (ids.generate_recipe_id, "RCP"),
        (ids.generate_relationship_id, "REL"),
        (ids.generate_supplier_id, "SUP"),
        (ids.generate_inventory_id, "INV"),
    ],
)
def test_prefixed_generators(generator, prefix):
    """
    Test the per-table generators.

    Verifies:
    - Ids are <prefix>_<epoch millis>_<0..999>
    """
    assert re.fullmatch(rf"{prefix}_\d{{13}}_\d{{1,3}}", generator())


def test_generate_id_parts(monkeypatch):
    """
    Test generate_id() with a fixed clock and random draw.

    Verifies:
    - The timestamp is the clock in whole milliseconds
    - The random part is the draw from 0..999
    """
    monkeypatch.setattr(ids, "time", SimpleNamespace(time=lambda: 1718000000.1234))
    monkeypatch.setattr(ids.random, "randint", lambda low, high: 42)

    assert ids.generate_id("TST") == "TST_1718000000123_42"
