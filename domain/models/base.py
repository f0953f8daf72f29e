"""
Base class for models parsed from workbook records.

Cells arrive as whatever the store holds: text typed by hand, numbers,
booleans or datetimes. Parsing never fails on a bad cell; an unreadable
value becomes the field default, so one malformed row cannot make a whole
table unreadable.
"""

import math
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

_TRUE_TEXT = {"true", "t", "yes", "y", "1", "on"}
_FALSE_TEXT = {"false", "f", "no", "n", "0", "off"}


def parse_number(value: Any) -> Optional[float]:
    """Parse a cell into a float, returning None for blank or non-numeric cells"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return None
    return None if math.isnan(parsed) else parsed


def parse_bool(value: Any) -> Optional[bool]:
    """Parse a TRUE/FALSE style cell, returning None when it is neither"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_TEXT:
            return True
        if text in _FALSE_TEXT:
            return False
    return None


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 cell into a datetime, returning None for anything else

    Locale-formatted dates such as ``17/10/2026`` read as None.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


class SheetModel(BaseModel):
    """
    Typed view of one workbook row.

    Aliases are the camelCase record keys produced by the row mapper, so a
    record validates directly and ``model_dump(by_alias=True)`` gives the
    record back.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @classmethod
    def field_default(cls, field_name: str) -> Any:
        return cls.model_fields[field_name].get_default(call_default_factory=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_cell_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Empty cells take the field default; text fields take any cell as text"""
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return cls.field_default(info.field_name)
        if cls.model_fields[info.field_name].annotation is str and not isinstance(value, str):
            return value.isoformat() if isinstance(value, (date, datetime)) else str(value)
        return value
