"""Conversion between raw workbook rows and keyed records."""

from typing import Any, Dict, List, Sequence

from domain.tables import header_to_field_name

Record = Dict[str, Any]


def row_to_record(row: Sequence[Any], headers: Sequence[Any]) -> Record:
    """Zip a row with the header row into a record keyed by camelCase field name.

    Cell values are passed through untouched; a row shorter than the header
    row yields "" for the trailing fields.
    """
    record: Record = {}
    for index, header in enumerate(headers):
        record[header_to_field_name(header)] = row[index] if index < len(row) else ""
    return record


def rows_to_records(rows: Sequence[Sequence[Any]], headers: Sequence[Any]) -> List[Record]:
    return [row_to_record(row, headers) for row in rows]
