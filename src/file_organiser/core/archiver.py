"""
Backup Archiver Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

Before files are moved, the organiser can snapshot the top-level files of
the target folder into a timestamped zip archive kept in a "backup"
subfolder. Entries are stored uncompressed under their base names.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import os
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Union

from .errors import ArchiveError
from ..utils.logger import get_logger


BACKUP_FOLDER = "backup"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def archive_name(moment: datetime) -> str:
    """
    Build the archive file name for a moment in local time.

    Example:
        >>> archive_name(datetime(2024, 3, 9, 7, 5, 1))
        'backup-2024-03-09_07-05-01.zip'
    """
    return f"backup-{moment.strftime(TIMESTAMP_FORMAT)}.zip"


def top_level_files(directory: Path) -> List[Path]:
    """Regular files directly inside a directory, sorted by name."""
    with os.scandir(directory) as entries:
        return sorted(Path(entry.path) for entry in entries if entry.is_file())


class BackupArchiver:
    """
    Creates backup archives of a folder's top-level files.

    Attributes:
        clock (Callable): Returns the current local time
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.logger = get_logger()

    def backup(self, directory: Union[str, Path]) -> Path:
        """
        Write every top-level regular file of a directory into a new archive.

        Subdirectories, the backup folder included, are not archived.

        Args:
            directory: Folder to back up

        Returns:
            Path: Location of the created archive

        Raises:
            ArchiveError: If the folder cannot be listed, a file cannot be read,
                or the archive cannot be written
        """
        directory = Path(directory)
        backup_dir = directory / BACKUP_FOLDER

        try:
            backup_dir.mkdir(exist_ok=True)
            files = top_level_files(directory)
        except OSError as e:
            raise ArchiveError(f"Could not prepare backup in {directory}: {e}") from e

        archive_path = backup_dir / archive_name(self.clock())

        try:
            # Exclusive create: an archive from the same second is never overwritten
            archive_file = open(archive_path, 'xb')
        except OSError as e:
            raise ArchiveError(f"Could not create archive {archive_path}: {e}") from e

        try:
            # Modification times before 1980 are clamped to 1980-01-01
            with archive_file, zipfile.ZipFile(archive_file, 'w', zipfile.ZIP_STORED,
                                               strict_timestamps=False) as archive:
                for file_path in files:
                    archive.write(file_path, arcname=file_path.name)
        except (OSError, ValueError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            archive_path.unlink(missing_ok=True)
            raise ArchiveError(f"Could not write archive {archive_path}: {e}") from e

        self.logger.backup_created(str(archive_path), len(files))
        return archive_path


def create_backup(directory: Union[str, Path]) -> Path:
    """
    Convenience function to back up a folder now.

    Args:
        directory: Folder to back up

    Returns:
        Path: Location of the created archive
    """
    return BackupArchiver().backup(directory)
