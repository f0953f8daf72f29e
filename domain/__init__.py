"""
Domain layer - table schemas, row mapping, models, input schemas and enums.
"""

from domain import enums, models, schemas, tables

__all__ = ["enums", "models", "schemas", "tables"]
