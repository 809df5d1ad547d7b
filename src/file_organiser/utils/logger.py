"""
Structured Logging Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module provides centralized structured logging for the File Organiser.
It uses Python's logging module with rotating file handlers and structured
JSON-like output for better observability and debugging.

Module loggers created with ``logging.getLogger(__name__)`` inside the
package propagate into the ``file_organiser`` logger configured here.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import logging
import logging.handlers
import json
import os
from pathlib import Path
from datetime import datetime
from typing import Optional


LOG_DIR_ENV = "FILE_ORGANISER_LOG_DIR"


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that outputs structured log records.

    Each log record is formatted as JSON-like structured data for easy parsing.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as structured JSON.

        Args:
            record: Log record to format

        Returns:
            str: Formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add any extra fields from the record
        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def default_log_dir() -> Path:
    """Log directory from the environment, else ~/.file_organiser/logs."""
    configured = os.environ.get(LOG_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".file_organiser" / "logs"


class OrganiserLogger:
    """
    Wrapper class for organiser logging with structured output.

    Provides convenience methods for the events the engine reports:
    folder creation, file moves, backups, pruning and path rejections.
    """

    def __init__(self, name: str = 'file_organiser', log_dir: Optional[Path] = None):
        """
        Initialize the logger.

        Args:
            name: Logger name (default: 'file_organiser')
            log_dir: Directory for the rotating log file
        """
        self.logger = logging.getLogger(name)

        # Only configure if not already configured
        if not self.logger.handlers:
            self._configure_logger(Path(log_dir) if log_dir else default_log_dir())

    def _configure_logger(self, log_dir: Path):
        """Configure the logger with rotating file handler and console output."""
        self.logger.setLevel(logging.INFO)

        log_dir.mkdir(parents=True, exist_ok=True)

        # Rotating file handler (10MB max, 5 backups)
        log_file = log_dir / "organiser.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(StructuredFormatter())

        # Console handler for warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter('%(levelname)s: %(message)s')
        )

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def info(self, message: str, **kwargs):
        """Log info message with optional extra data."""
        self.logger.info(message, extra={'extra_data': kwargs})

    def warning(self, message: str, **kwargs):
        """Log warning message with optional extra data."""
        self.logger.warning(message, extra={'extra_data': kwargs})

    def error(self, message: str, **kwargs):
        """Log error message with optional extra data."""
        self.logger.error(message, extra={'extra_data': kwargs})

    def debug(self, message: str, **kwargs):
        """Log debug message with optional extra data."""
        self.logger.debug(message, extra={'extra_data': kwargs})

    def path_rejected(self, path: str, reason: str):
        """Log a target path refused by the path guard."""
        self.warning(
            f"Path rejected: {reason}",
            path=path,
            reason=reason,
            event_type='path_rejected'
        )

    def folder_failed(self, folder: str, error: str):
        """Log a category folder that could not be created."""
        self.error(
            f"Could not create folder {folder}: {error}",
            folder=folder,
            error=error,
            event_type='folder_failed'
        )

    def file_moved(self, source: str, destination: str, category: str):
        """Log a file moved into its category folder."""
        self.info(
            f"Moved {source} -> {destination}",
            source=source,
            destination=destination,
            category=category,
            event_type='file_moved'
        )

    def move_failed(self, file_name: str, category: str, error: str):
        """Log a file that could not be moved."""
        self.error(
            f"Could not move file {file_name} to folder {category}: {error}",
            file_name=file_name,
            category=category,
            error=error,
            event_type='move_failed'
        )

    def backup_created(self, archive_path: str, file_count: int):
        """Log a finished backup archive."""
        self.info(
            f"Backup created: {archive_path}",
            archive_path=archive_path,
            file_count=file_count,
            event_type='backup_created'
        )

    def folder_pruned(self, folder: str):
        """Log an empty folder removed by the pruner."""
        self.info(
            f"Removed empty folder {folder}",
            folder=folder,
            event_type='folder_pruned'
        )


# Global logger instance
_logger_instance: Optional[OrganiserLogger] = None


def get_logger(name: str = 'file_organiser', log_dir: Optional[Path] = None) -> OrganiserLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        log_dir: Log directory, only used by the first call

    Returns:
        OrganiserLogger: Logger instance
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = OrganiserLogger(name, log_dir)
    return _logger_instance


if __name__ == "__main__":
    # Test logging
    logger = get_logger()
    logger.info("Test info message", test_field="test_value")
    logger.warning("Test warning")
    logger.file_moved("/tmp/a.jpg", "/tmp/Images/a.jpg", "Images")
    logger.move_failed("b.pdf", "Docs", "destination exists")
    print(f"Logging test complete - check {default_log_dir()}")
