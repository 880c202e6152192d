"""Logging context management for geocoding operations."""

from contextlib import contextmanager
from typing import Optional, Dict, Any, List
import time

from .structured_logger import variant_context, operation_context, get_logger


class LoggingContext:
    """Scopes variant and operation context for log messages.

    Context is automatically propagated to all log messages within scope
    and restored on exit, so nested scopes unwind cleanly.
    """

    def __init__(self, variant: Optional[str] = None):
        """Initialize logging context.

        Args:
            variant: Geocode variant name applied to every scope
        """
        self.variant = variant
        self.operation_stack: List[str] = []
        self.timings: Dict[str, Dict[str, Any]] = {}
        self.logger = get_logger(self.__class__.__name__)

    @contextmanager
    def operation(self, name: str, **metadata):
        """Context for a single operation.

        Args:
            name: Operation name
            **metadata: Additional metadata logged with the timing

        Example:
            with ctx.operation('encode_many', precision=8):
                ...
        """
        variant_token = variant_context.set(self.variant) if self.variant else None
        operation_token = operation_context.set(name)
        self.operation_stack.append(name)

        start_time = time.perf_counter()
        self.logger.debug(f"Operation started: {name}", extra={'context': metadata})

        status = 'failed'
        try:
            yield self
            status = 'success'
        except Exception as e:
            self.logger.log_error_with_context(e, operation=name, **metadata)
            raise
        finally:
            duration = time.perf_counter() - start_time
            self.timings[name] = {'duration': duration, 'status': status}
            self.logger.log_performance(name, duration, status=status, **metadata)

            self.operation_stack.pop()
            operation_context.reset(operation_token)
            if variant_token is not None:
                variant_context.reset(variant_token)
