"""
Base repository for workbook tables.
This follows the Repository pattern to separate callers from the tabular store.
"""

import logging
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar
from abc import ABC

from pydantic import BaseModel, ValidationError

from adapters.table_store import TableStoreAdapter
from app.exceptions import ServiceValidationError
from domain.models.base import SheetModel
from domain.row_mapper import Record, rows_to_records
from domain.tables import TableSchema

ModelType = TypeVar("ModelType", bound=SheetModel)
SchemaType = TypeVar("SchemaType", bound=BaseModel)

logger = logging.getLogger("barbook.repositories")


class TableRepository(Generic[ModelType], ABC):
    """
    Base repository providing the read operations shared by every table.
    Every call re-reads the table through the adapter.
    """

    def __init__(self, store: TableStoreAdapter, schema: TableSchema, model: Type[ModelType]):
        self.store = store
        self.schema = schema
        self.model = model

    def _records(self) -> List[Record]:
        headers, rows = self.store.read_all(self.schema.name)
        return rows_to_records(rows, headers)

    def _to_model(self, record: Mapping[str, Any]) -> ModelType:
        return self.model.model_validate(record)

    def list_all(self) -> List[ModelType]:
        """Get every row of the table"""
        return [self._to_model(record) for record in self._records()]

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """
        Get entity by its identity column.

        Args:
            entity_id: Value of the table's first column

        Returns:
            Entity or None if no row carries that id
        """
        key_field = self.schema.key_column.field
        for record in self._records():
            if record.get(key_field) == entity_id:
                return self._to_model(record)
        logger.debug(f"No {self.schema.name} row with ID {entity_id}")
        return None

    def exists(self, entity_id: str) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None


def validate_input(schema: Type[SchemaType], data: Any) -> SchemaType:
    """Parse caller input into a schema, raising ServiceValidationError on failure"""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        errors = {
            ".".join(str(part) for part in error["loc"]): error["msg"]
            for error in exc.errors()
        }
        logger.error(f"Invalid {schema.__name__} data: {errors}")
        raise ServiceValidationError(
            f"Invalid {schema.__name__} data",
            details=errors,
            code="invalid_input",
        ) from exc


def field_value(data: Any, name: str) -> Any:
    """Read a field from either a mapping or a schema instance"""
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)
