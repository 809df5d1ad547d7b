"""
Error Types Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

Exception hierarchy shared by the organiser engine. Callers distinguish
three outcomes: a path rejected before anything happened, a fatal
configuration problem, and file operation failures.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""


class OrganiserError(Exception):
    """Base class for all organiser errors."""


class PathRejected(OrganiserError):
    """
    Raised when a target path fails validation.

    Attributes:
        path (str): The rejected path
        reason (str): Human-readable rejection reason
    """

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class ConfigError(OrganiserError, ValueError):
    """Raised when the file map or the application settings cannot be used."""


class FileOperationError(OrganiserError, OSError):
    """Raised when a filesystem operation fails and the step cannot continue."""


class ArchiveError(FileOperationError):
    """Raised when the backup archive cannot be created or finalized."""


class PruneError(FileOperationError):
    """Raised when an empty folder cannot be listed or removed."""
