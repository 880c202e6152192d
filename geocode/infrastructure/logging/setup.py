"""Setup and configuration for the structured logging system."""

import logging
from typing import Optional, Dict, Any

from .structured_logger import get_logger
from .handlers import ConsoleHandler, FileHandler


def _clear_root_handlers(root_logger: logging.Logger):
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


def setup_logging(config=None,
                  log_file: Optional[str] = None,
                  console: Optional[bool] = None,
                  log_level: Optional[str] = None):
    """Configure the structured logging system.

    Explicit arguments win over the ``logging`` section of the configuration.

    Args:
        config: Config instance (defaults to the global geocode config)
        log_file: Optional log file path (uses config default if not provided)
        console: Whether to enable console logging
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if config is None:
        from ...config import config

    log_level = log_level or config.get('logging.level', 'INFO')
    if console is None:
        console = config.get('logging.console', True)
    if log_file is None:
        log_file = config.get('logging.file')

    root_logger = logging.getLogger()
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    _clear_root_handlers(root_logger)

    if console:
        console_handler = ConsoleHandler(
            use_colors=config.get('logging.use_colors'),
            show_context=True
        )
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if log_file:
        file_handler = FileHandler(
            filename=str(log_file),
            max_bytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
            backup_count=config.get('logging.backup_count', 5)
        )
        root_logger.addHandler(file_handler)

    logger = get_logger(__name__)
    logger.info(
        "Structured logging system initialized",
        extra={
            'context': {
                'log_level': log_level,
                'handlers': {
                    'console': bool(console),
                    'file': str(log_file) if log_file else None
                }
            }
        }
    )


def setup_simple_logging(log_level: str = 'INFO'):
    """Setup console-only logging for testing/debugging.

    Args:
        log_level: Minimum log level
    """
    root_logger = logging.getLogger()
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    _clear_root_handlers(root_logger)

    console_handler = ConsoleHandler(show_context=True)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)


def get_log_stats() -> Dict[str, Any]:
    """Get statistics from the root log handlers."""
    stats: Dict[str, Any] = {}

    for handler in logging.getLogger().handlers:
        if isinstance(handler, FileHandler):
            stats['file'] = {
                'filename': handler.baseFilename,
                'max_bytes': handler.maxBytes,
                'backup_count': handler.backupCount
            }
        elif isinstance(handler, ConsoleHandler):
            stats['console'] = {'level': logging.getLevelName(handler.level)}

    return stats
