"""Logging setup shared by scripts and embedding applications."""

import logging

from app.config import settings


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Configure root logging with the configured level and format"""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=fmt or settings.log_format,
    )
