"""Structured logging infrastructure for geocoding operations."""

from .structured_logger import StructuredLogger, get_logger, variant_context, operation_context
from .context import LoggingContext
from .setup import setup_logging, setup_simple_logging, get_log_stats

__all__ = [
    'StructuredLogger',
    'get_logger',
    'LoggingContext',
    'variant_context',
    'operation_context',
    'setup_logging',
    'setup_simple_logging',
    'get_log_stats'
]
