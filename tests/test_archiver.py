"""
Tests for the backup archiver.
"""

import os
import zipfile
from datetime import datetime
from pathlib import Path

import pytest

from file_organiser.core.archiver import (
    BACKUP_FOLDER,
    BackupArchiver,
    archive_name,
    create_backup,
)
from file_organiser.core.errors import ArchiveError, FileOperationError


FIXED_TIME = datetime(2024, 3, 9, 7, 5, 1)


@pytest.fixture
def archiver() -> BackupArchiver:
    return BackupArchiver(clock=lambda: FIXED_TIME)


class TestArchiveName:
    """Test timestamped archive names."""

    def test_format(self):
        """Names embed a sortable second-resolution timestamp."""
        assert archive_name(FIXED_TIME) == "backup-2024-03-09_07-05-01.zip"

    def test_names_sort_chronologically(self):
        """Lexical order matches time order."""
        earlier = archive_name(datetime(2024, 1, 31, 23, 59, 59))
        later = archive_name(datetime(2024, 2, 1, 0, 0, 0))
        assert sorted([later, earlier]) == [earlier, later]


class TestBackup:
    """Test archive creation."""

    def test_archive_round_trip(self, archiver, target_dir: Path, tmp_path: Path, make_files):
        """Entries are exactly the top-level files with identical bytes."""
        make_files(target_dir, ["a.txt", "b.txt"])

        archive_path = archiver.backup(target_dir)

        assert archive_path == target_dir / BACKUP_FOLDER / "backup-2024-03-09_07-05-01.zip"
        with zipfile.ZipFile(archive_path) as archive:
            assert sorted(archive.namelist()) == ["a.txt", "b.txt"]
            extract_dir = tmp_path / "extracted"
            archive.extractall(extract_dir)

        for name in ["a.txt", "b.txt"]:
            assert (extract_dir / name).read_bytes() == (target_dir / name).read_bytes()

    def test_entries_are_stored_uncompressed(self, archiver, target_dir: Path, make_files):
        """Every entry uses ZIP_STORED."""
        make_files(target_dir, ["notes.md"])

        with zipfile.ZipFile(archiver.backup(target_dir)) as archive:
            assert all(info.compress_type == zipfile.ZIP_STORED for info in archive.infolist())

    def test_subdirectories_are_skipped(self, archiver, target_dir: Path, make_files):
        """Nested files and folders never appear in the archive."""
        make_files(target_dir, ["top.txt"])
        nested = target_dir / "Images"
        nested.mkdir()
        make_files(nested, ["deep.jpg"])

        with zipfile.ZipFile(archiver.backup(target_dir)) as archive:
            assert archive.namelist() == ["top.txt"]

    def test_previous_backups_not_included(self, target_dir: Path, make_files):
        """Archives in the backup folder are not archived again."""
        make_files(target_dir, ["a.txt"])
        first = BackupArchiver(clock=lambda: datetime(2024, 1, 1, 0, 0, 0)).backup(target_dir)
        second = BackupArchiver(clock=lambda: datetime(2024, 1, 1, 0, 0, 1)).backup(target_dir)

        assert first != second
        with zipfile.ZipFile(second) as archive:
            assert archive.namelist() == ["a.txt"]

    def test_existing_backup_folder_is_reused(self, archiver, target_dir: Path, make_files):
        """A pre-existing backup folder is not an error."""
        (target_dir / BACKUP_FOLDER).mkdir()
        make_files(target_dir, ["a.txt"])

        assert archiver.backup(target_dir).parent == target_dir / BACKUP_FOLDER

    def test_empty_folder_gives_empty_archive(self, archiver, target_dir: Path):
        """A folder without files still gets a valid archive."""
        with zipfile.ZipFile(archiver.backup(target_dir)) as archive:
            assert archive.namelist() == []

    def test_same_second_collision_fails(self, archiver, target_dir: Path, make_files):
        """A second archive in the same second is refused, the first survives."""
        make_files(target_dir, ["a.txt"])
        first = archiver.backup(target_dir)
        first_bytes = first.read_bytes()

        with pytest.raises(ArchiveError):
            archiver.backup(target_dir)

        assert first.read_bytes() == first_bytes

    def test_backup_name_taken_by_file_fails(self, archiver, target_dir: Path):
        """A file called "backup" blocks the backup folder."""
        (target_dir / BACKUP_FOLDER).write_text("not a folder")

        with pytest.raises(ArchiveError):
            archiver.backup(target_dir)

    def test_unreadable_file_aborts_and_cleans_up(self, archiver, target_dir: Path, make_files, monkeypatch):
        """A read failure is fatal and leaves no half-written archive."""
        make_files(target_dir, ["a.txt", "b.txt"])

        def failing_write(self, filename, arcname=None, *args, **kwargs):
            raise PermissionError(f"cannot read {filename}")

        monkeypatch.setattr(zipfile.ZipFile, "write", failing_write)

        with pytest.raises(ArchiveError, match="Could not write archive"):
            archiver.backup(target_dir)

        assert list((target_dir / BACKUP_FOLDER).iterdir()) == []

    def test_file_older_than_1980_is_archived(self, archiver, target_dir: Path, make_files):
        """Files with pre-1980 timestamps are stored with a clamped date."""
        make_files(target_dir, ["old.txt"])
        os.utime(target_dir / "old.txt", (0, 0))

        with zipfile.ZipFile(archiver.backup(target_dir)) as archive:
            assert archive.namelist() == ["old.txt"]
            assert archive.getinfo("old.txt").date_time[0] == 1980
            assert archive.read("old.txt") == (target_dir / "old.txt").read_bytes()

    def test_value_error_aborts_and_cleans_up(self, archiver, target_dir: Path, make_files, monkeypatch):
        """Value errors from the zip writer become archive errors."""
        make_files(target_dir, ["a.txt"])

        def failing_write(self, filename, arcname=None, *args, **kwargs):
            raise ValueError("bad entry")

        monkeypatch.setattr(zipfile.ZipFile, "write", failing_write)

        with pytest.raises(ArchiveError, match="Could not write archive"):
            archiver.backup(target_dir)

        assert list((target_dir / BACKUP_FOLDER).iterdir()) == []

    def test_missing_folder_fails(self, archiver, tmp_path: Path):
        """Backing up a folder that does not exist is an archive error."""
        with pytest.raises(FileOperationError):
            archiver.backup(tmp_path / "missing")

    def test_create_backup_helper(self, target_dir: Path, make_files):
        """The convenience function archives with the real clock."""
        make_files(target_dir, ["a.txt"])

        archive_path = create_backup(target_dir)

        assert archive_path.name.startswith("backup-")
        assert archive_path.suffix == ".zip"
        assert archive_path.exists()
