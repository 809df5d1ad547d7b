"""
File Organiser Facade

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module orchestrates one organize run: validate the path, optionally
back the folder up, load the file map, reorganize, prune empty folders and
summarize. It also opens the file map in the system's default editor.

NOTICE: This software is proprietary and confidential. Unauthorized copying,
modification, distribution, or use is strictly prohibited.
See LICENSE.txt for full terms and conditions.

Version: 1.0.0
Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import ntpath
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Config, get_config
from .core.archiver import BackupArchiver
from .core.actions import Reorganizer
from .core.errors import ArchiveError, ConfigError, PathRejected, PruneError
from .core.guard import PathGuard, REASON_INVALID_PATH
from .core.pruner import prune_empty
from .core.rules import RuleTable, load_rules_file
from .utils.logger import get_logger


ERROR_PREFIX = "Error: "
DRY_RUN_PREFIX = "[DRY RUN] "


def success_message(files_seen: int, dry_run: bool = False) -> str:
    message = f"Organized {files_seen} files successfully!"
    return DRY_RUN_PREFIX + message if dry_run else message


def expand_path(path: str) -> str:
    """
    Expand ``~`` and make a relative path absolute against the working directory.

    Drive-style Windows paths (``C:\\...``) are kept as typed on every host.

    Example:
        >>> expand_path("C:\\\\Windows")
        'C:\\\\Windows'
    """
    if not path or not path.strip():
        return path
    path = os.path.expanduser(path)
    if os.path.isabs(path) or ntpath.isabs(path):
        return path
    return os.path.abspath(path)


class OrganizeReport:
    """
    Structured result of an organize run.

    The ``message`` is the plain string shown to users. Folder and move
    failures never change it; inspect ``failures`` and ``prune_error``.

    Attributes:
        success (bool): False when the run was rejected or aborted
        message (str): Summary or "Error: ..." string
        files_seen (int): Top-level files classified
        files_moved (int): Files actually relocated
        failures (List[Dict]): Failed folder creations and moves
        archive_path (str or None): Backup archive, if one was made
        pruned (List[str]): Empty folders removed
        prune_error (str or None): Why pruning stopped, if it did
        dry_run (bool): Whether the run only simulated changes
    """

    def __init__(self, success: bool, message: str, dry_run: bool = False):
        self.success = success
        self.message = message
        self.files_seen = 0
        self.files_moved = 0
        self.failures: List[Dict[str, Any]] = []
        self.archive_path: Optional[str] = None
        self.pruned: List[str] = []
        self.prune_error: Optional[str] = None
        self.dry_run = dry_run

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'message': self.message,
            'files_seen': self.files_seen,
            'files_moved': self.files_moved,
            'failures': self.failures,
            'archive_path': self.archive_path,
            'pruned': self.pruned,
            'prune_error': self.prune_error,
            'dry_run': self.dry_run,
        }


class FileOrganiser:
    """
    Main application orchestrator.

    Attributes:
        config (Config): Application settings
        guard (PathGuard): Path validation
        archiver (BackupArchiver): Backup creation
    """

    def __init__(self, config: Optional[Config] = None, guard: Optional[PathGuard] = None,
                 archiver: Optional[BackupArchiver] = None):
        self.config = config if config is not None else get_config()
        self.guard = guard if guard is not None else PathGuard(self.config.path_blacklist)
        self.archiver = archiver if archiver is not None else BackupArchiver()
        self.logger = get_logger(log_dir=self.config.log_dir)

    def load_rules(self) -> RuleTable:
        """Load the file map fresh from disk."""
        return load_rules_file(self.config.file_map_path)

    def check_path(self, path: str) -> None:
        """
        Run the path guard and make sure the folder exists.

        Raises:
            PathRejected: If the path must not or cannot be organized
        """
        decision = self.guard.validate(path)
        if not decision.allowed:
            raise PathRejected(path, decision.reason)
        if not Path(path).is_dir():
            raise PathRejected(path, REASON_INVALID_PATH)

    def organize(self, path: str, make_backup: Optional[bool] = None,
                 dry_run: Optional[bool] = None) -> OrganizeReport:
        """
        Organize a folder and report what happened.

        Args:
            path (str): Folder to organize
            make_backup (bool, optional): Override the enable_backup setting
            dry_run (bool, optional): Override the dry_run setting

        Returns:
            OrganizeReport: Summary message plus structured details
        """
        if make_backup is None:
            make_backup = self.config.enable_backup
        if dry_run is None:
            dry_run = self.config.dry_run

        try:
            self.check_path(path)
        except PathRejected as e:
            self.logger.path_rejected(path, e.reason)
            return OrganizeReport(False, ERROR_PREFIX + e.reason, dry_run)

        archive_path = None
        if make_backup and not dry_run:
            try:
                archive_path = self.archiver.backup(path)
            except ArchiveError as e:
                self.logger.error(f"Backup failed, nothing was moved: {e}", path=path)
                return OrganizeReport(False, f"{ERROR_PREFIX}Backup failed: {e}", dry_run)

        try:
            rule_table = self.load_rules()
        except ConfigError as e:
            self.logger.error(f"Could not load file map: {e}", path=path)
            report = OrganizeReport(False, f"{ERROR_PREFIX}Could not load file map config: {e}", dry_run)
            report.archive_path = str(archive_path) if archive_path else None
            return report

        try:
            result = Reorganizer(rule_table, dry_run=dry_run).reorganize(path)
        except OSError as e:
            self.logger.error(f"Could not read folder: {e}", path=path)
            return OrganizeReport(False, ERROR_PREFIX + REASON_INVALID_PATH, dry_run)

        report = OrganizeReport(True, success_message(result.files_seen, dry_run), dry_run)
        report.files_seen = result.files_seen
        report.files_moved = result.moved
        report.failures = result.failures
        report.archive_path = str(archive_path) if archive_path else None

        if not dry_run:
            try:
                report.pruned = prune_empty(path)
            except PruneError as e:
                self.logger.error(f"Pruning stopped: {e}", path=path)
                report.prune_error = str(e)

        return report

    def organize_files(self, path: str, make_backup: bool) -> str:
        """
        Organize a folder and return the user-facing summary string.

        Args:
            path (str): Folder to organize
            make_backup (bool): Create a backup archive first

        Returns:
            str: "Organized N files successfully!" or "Error: ..."
        """
        return self.organize(path, make_backup).message

    def open_config_file(self) -> str:
        """
        Open the file map with the operating system's default handler.

        Returns:
            str: "Success:Opened config file" or "Error: Could not open config file"
        """
        config_path = str(self.config.file_map_path)

        try:
            if sys.platform == "win32":
                os.startfile(config_path)
            elif sys.platform == "darwin":
                subprocess.run(["open", config_path], check=True)
            else:
                subprocess.run(["xdg-open", config_path], check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            self.logger.error(f"Could not open config file: {e}", config_path=config_path)
            return f"{ERROR_PREFIX}Could not open config file"

        return "Success:Opened config file"
