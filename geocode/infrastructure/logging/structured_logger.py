"""Structured logging with context propagation for geocoding operations."""

import logging
import sys
import traceback
from typing import Dict, Optional
from contextvars import ContextVar
from datetime import datetime, timezone

# Context variables for correlation across threads and tasks
variant_context: ContextVar[Optional[str]] = ContextVar('variant', default=None)
operation_context: ContextVar[Optional[str]] = ContextVar('operation', default=None)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + 'Z'


class StructuredLogger(logging.Logger):
    """Enhanced logger with structured output and context propagation.

    Features:
    - Automatic context injection (variant, operation)
    - Performance metrics logging
    - Full traceback capture for errors
    """

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        """Override to add context and structure.

        Enhances log records with:
        - Context from ContextVars
        - Traceback capture
        - Performance metrics
        """
        context = {
            'variant': variant_context.get(),
            'operation': operation_context.get(),
            'logger_name': self.name,
            'timestamp': _utc_timestamp(),
        }

        # Remove None values
        context = {k: v for k, v in context.items() if v is not None}

        # Caller's extra dict is not ours to mutate
        extra = dict(extra) if isinstance(extra, dict) else {}
        performance = extra.pop('performance', None)
        context.update(extra.pop('context', None) or {})
        traceback_str = extra.pop('traceback', None)

        if not traceback_str and exc_info:
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            elif not isinstance(exc_info, tuple):
                exc_info = sys.exc_info()
            if exc_info[0] is not None:
                traceback_str = ''.join(traceback.format_exception(*exc_info))

        extra.update({
            'context': context,
            'performance': performance,
            'traceback': traceback_str
        })

        super()._log(level, msg, args, exc_info=None, extra=extra,
                     stack_info=stack_info, **kwargs)

    def log_performance(self, operation: str, duration: float, **metrics):
        """Log performance metrics for an operation.

        Args:
            operation: Operation name
            duration: Duration in seconds
            **metrics: Additional metrics (items_processed, precision, etc.)

        Example:
            logger.log_performance('encode_many', 0.012, items_processed=1000)
        """
        performance_data = {
            'operation': operation,
            'duration_seconds': round(duration, 6),
            'timestamp': _utc_timestamp(),
            **metrics
        }

        if 'items_processed' in metrics and duration > 0:
            performance_data['items_per_second'] = round(
                metrics['items_processed'] / duration, 2
            )

        self.info(
            f"Performance: {operation} completed in {duration:.3f}s",
            extra={'performance': performance_data}
        )

    def log_error_with_context(self, error: Exception, operation: Optional[str] = None, **context):
        """Log an error with full context and traceback.

        Args:
            error: The exception that occurred
            operation: Optional operation name for context
            **context: Additional context fields
        """
        error_context = {
            'error_type': type(error).__name__,
            'error_module': type(error).__module__,
            **context
        }

        if operation:
            error_context['operation'] = operation

        self.error(
            f"{type(error).__name__}: {error}",
            exc_info=error,
            extra={'context': error_context}
        )


# Global logger cache
_logger_cache: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance

    Example:
        from geocode.infrastructure.logging import get_logger
        logger = get_logger(__name__)
    """
    if name in _logger_cache:
        return _logger_cache[name]

    # Temporarily set logger class
    original_class = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)

    try:
        logger = logging.getLogger(name)
        _logger_cache[name] = logger
        return logger
    finally:
        logging.setLoggerClass(original_class)
