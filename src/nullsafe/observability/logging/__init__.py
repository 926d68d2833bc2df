"""Observability – structured logging setup and helpers."""
from nullsafe.observability.logging.factory import JsonLoggerFactory, configure_logging
from nullsafe.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
