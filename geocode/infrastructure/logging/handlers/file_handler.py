"""File handler with rotation support."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..formatters import JsonFormatter


class FileHandler(RotatingFileHandler):
    """Rotating file handler writing one JSON record per line."""

    def __init__(self,
                 filename: str,
                 max_bytes: int = 10 * 1024 * 1024,  # 10MB default
                 backup_count: int = 5,
                 encoding: str = 'utf-8'):
        """Initialize file handler.

        Args:
            filename: Log file path, parent directories are created
            max_bytes: Maximum file size before rotation
            backup_count: Number of backup files to keep
            encoding: File encoding
        """
        log_path = Path(filename)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(
            filename=str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding
        )

        self.setFormatter(JsonFormatter())
        self.setLevel(logging.DEBUG)
