"""
App package - Application configuration and core error types.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import BarBookError, ServiceValidationError, NotFoundError

__all__ = [
    "settings",
    "BarBookError",
    "ServiceValidationError",
    "NotFoundError",
]
