"""
Empty Folder Pruner Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

Removes folders left empty after a reorganization. The walk is depth-first
and post-order, so a chain of folders that only contained empty folders
collapses completely. The starting folder itself and all files are left
alone. Symbolic links to directories are neither followed nor removed.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import os
from pathlib import Path
from typing import List, Union

from .errors import PruneError
from ..utils.logger import get_logger


def prune_empty(path: Union[str, Path]) -> List[str]:
    """
    Recursively delete empty subfolders of a folder.

    Args:
        path: Folder whose descendants are pruned (never deleted itself)

    Returns:
        List[str]: Removed folders, deepest first

    Raises:
        PruneError: If a folder cannot be listed or removed; the pass stops
    """
    removed: List[str] = []
    _prune_children(Path(path), removed, get_logger())
    return removed


def _prune_children(directory: Path, removed: List[str], logger) -> None:
    for child in _subdirectories(directory):
        _prune_children(child, removed, logger)

        if _is_empty(child):
            try:
                child.rmdir()
            except OSError as e:
                raise PruneError(f"Could not remove empty folder {child}: {e}") from e
            logger.folder_pruned(str(child))
            removed.append(str(child))


def _subdirectories(directory: Path) -> List[Path]:
    try:
        with os.scandir(directory) as entries:
            return sorted(
                Path(entry.path)
                for entry in entries
                if entry.is_dir(follow_symlinks=False)
            )
    except OSError as e:
        raise PruneError(f"Could not list folder {directory}: {e}") from e


def _is_empty(directory: Path) -> bool:
    try:
        with os.scandir(directory) as entries:
            return next(entries, None) is None
    except OSError as e:
        raise PruneError(f"Could not list folder {directory}: {e}") from e
