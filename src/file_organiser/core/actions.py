"""
Reorganizer Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module performs the reorganization of a folder: it creates one
subfolder per category, classifies every top-level file and moves it into
its category folder. It is a best-effort bulk operation: a folder or file
that fails is logged and recorded, and the rest of the batch carries on.
It supports dry-run mode.

NOTICE: This software is proprietary and confidential. Unauthorized copying,
modification, distribution, or use is strictly prohibited.
See LICENSE.txt for full terms and conditions.

Version: 1.0.0
Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import os
from pathlib import Path
from typing import Dict, Any, List, Union

from .classifier import FileClassifier, UNCATEGORIZED
from .rules import RuleTable
from ..utils.logger import get_logger


class ReorganizeResult:
    """
    Outcome of one reorganization.

    Attributes:
        files_seen (int): Top-level files classified, moved or not
        inventory (Dict[str, List[str]]): Category -> file names found
        folder_outcomes (List[Dict]): One record per category folder
        move_outcomes (List[Dict]): One record per planned move
    """

    def __init__(self):
        self.files_seen = 0
        self.inventory: Dict[str, List[str]] = {}
        self.folder_outcomes: List[Dict[str, Any]] = []
        self.move_outcomes: List[Dict[str, Any]] = []

    @property
    def moved(self) -> int:
        return sum(1 for o in self.move_outcomes if o['success'] and o['action'] == 'move')

    @property
    def failures(self) -> List[Dict[str, Any]]:
        """Every failed folder creation or move."""
        return [o for o in self.folder_outcomes + self.move_outcomes if not o['success']]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'files_seen': self.files_seen,
            'files_moved': self.moved,
            'inventory': self.inventory,
            'folder_outcomes': self.folder_outcomes,
            'move_outcomes': self.move_outcomes,
        }


class Reorganizer:
    """
    Sorts a folder's top-level files into category subfolders.

    Attributes:
        rule_table (RuleTable): Rules driving classification
        classifier (FileClassifier): Classifier built on the rule table
        dry_run (bool): If True, plan moves without touching the disk
    """

    def __init__(self, rule_table: RuleTable, dry_run: bool = False):
        """
        Initialize the reorganizer.

        Args:
            rule_table (RuleTable): Loaded rule table
            dry_run (bool): Simulate folder creation and moves
        """
        self.rule_table = rule_table
        self.classifier = FileClassifier(rule_table)
        self.dry_run = dry_run
        self.logger = get_logger()

    def category_folders(self) -> List[str]:
        """Folder names to create: every category, then the fallback."""
        folders = list(self.rule_table.categories)
        if UNCATEGORIZED not in folders:
            folders.append(UNCATEGORIZED)
        return folders

    def reorganize(self, path: Union[str, Path]) -> ReorganizeResult:
        """
        Create category folders, classify top-level files and move them.

        Args:
            path: Folder to organize (already validated)

        Returns:
            ReorganizeResult: Count of files seen plus per-item outcomes.
                ``files_seen`` counts files classified, not files moved.

        Raises:
            OSError: If the folder itself cannot be listed
        """
        path = Path(path)
        result = ReorganizeResult()

        self.logger.info(
            f"Starting reorganization of {path} (dry_run={self.dry_run})",
            path=str(path),
            dry_run=self.dry_run,
            categories=len(self.rule_table)
        )

        result.folder_outcomes = self.create_folders(path)
        result.inventory = self.build_inventory(path)
        result.files_seen = sum(len(names) for names in result.inventory.values())
        result.move_outcomes = self.move_files(path, result.inventory)

        self.logger.info(
            f"Reorganization finished: {result.files_seen} seen, {result.moved} moved",
            path=str(path),
            files_seen=result.files_seen,
            files_moved=result.moved,
            failures=len(result.failures)
        )
        return result

    def create_folders(self, path: Path) -> List[Dict[str, Any]]:
        """
        Ensure a subfolder exists for every category.

        Args:
            path (Path): Folder being organized

        Returns:
            List[Dict]: One outcome per folder; failures do not stop the loop
        """
        outcomes = []

        for folder_name in self.category_folders():
            folder_path = path / folder_name

            if self.dry_run:
                outcomes.append({
                    'success': True,
                    'action': 'mkdir_dry_run',
                    'old_path': None,
                    'new_path': str(folder_path),
                    'message': f'[DRY RUN] Would create folder {folder_path}'
                })
                continue

            try:
                folder_path.mkdir(parents=True, exist_ok=True)
                outcomes.append({
                    'success': True,
                    'action': 'mkdir',
                    'old_path': None,
                    'new_path': str(folder_path),
                    'message': f'Folder ready: {folder_path}'
                })
            except OSError as e:
                self.logger.folder_failed(folder_name, str(e))
                outcomes.append({
                    'success': False,
                    'action': 'mkdir',
                    'old_path': None,
                    'new_path': str(folder_path),
                    'message': f'Could not create folder {folder_name}: {e}'
                })

        return outcomes

    def build_inventory(self, path: Path) -> Dict[str, List[str]]:
        """
        Classify every top-level file of a folder.

        Directories are skipped. Entries are visited in name order.

        Args:
            path (Path): Folder being organized

        Returns:
            Dict[str, List[str]]: Category -> file names, in table order
                with "Uncategorized" last
        """
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries if not entry.is_dir())

        inventory: Dict[str, List[str]] = {}
        for name in names:
            category = self.classifier.classify_file(name)
            inventory.setdefault(category, []).append(name)

        order = {folder: index for index, folder in enumerate(self.category_folders())}
        return dict(sorted(inventory.items(), key=lambda item: order[item[0]]))

    def move_files(self, path: Path, inventory: Dict[str, List[str]]) -> List[Dict[str, Any]]:
        """
        Move each inventoried file into its category folder.

        Args:
            path (Path): Folder being organized
            inventory (Dict[str, List[str]]): Category -> file names

        Returns:
            List[Dict]: One outcome per file; failures do not stop the loop
        """
        outcomes = []

        for category, file_names in inventory.items():
            for file_name in file_names:
                source = path / file_name
                destination = path / category / file_name

                if self.dry_run:
                    outcomes.append(self._dry_run_action(source, destination))
                else:
                    outcomes.append(self._perform_move(source, destination, category))

        return outcomes

    def _perform_move(self, source: Path, destination: Path, category: str) -> Dict[str, Any]:
        """
        Move one file, never overwriting an existing destination.

        Args:
            source (Path): Current file path
            destination (Path): Path inside the category folder
            category (str): Category name, for logging

        Returns:
            Dict: Result information
        """
        try:
            if destination.exists() or destination.is_symlink():
                raise FileExistsError(f"destination exists: {destination}")

            os.rename(source, destination)

        except OSError as e:
            self.logger.move_failed(source.name, category, str(e))
            return {
                'success': False,
                'action': 'move',
                'old_path': str(source),
                'new_path': str(destination),
                'message': f'Could not move file {source.name} to folder {category}: {e}'
            }

        self.logger.file_moved(str(source), str(destination), category)
        return {
            'success': True,
            'action': 'move',
            'old_path': str(source),
            'new_path': str(destination),
            'message': f'Successfully moved file to {destination}'
        }

    def _dry_run_action(self, source: Path, destination: Path) -> Dict[str, Any]:
        """
        Simulate a move without performing it.

        Args:
            source (Path): Source file path
            destination (Path): Destination file path

        Returns:
            Dict: Simulated result
        """
        return {
            'success': True,
            'action': 'move_dry_run',
            'old_path': str(source),
            'new_path': str(destination),
            'message': f'[DRY RUN] Would move file to {destination}'
        }


def reorganize(path: Union[str, Path], rule_table: RuleTable) -> int:
    """
    Convenience function: reorganize a folder and return the files seen.

    Args:
        path: Folder to organize
        rule_table (RuleTable): Rules driving classification

    Returns:
        int: Number of top-level files classified
    """
    return Reorganizer(rule_table).reorganize(path).files_seen
