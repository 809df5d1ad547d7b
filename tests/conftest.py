"""
Pytest configuration and fixtures for file_organiser tests.
"""

# Keep log files out of the user's home directory - MUST RUN BEFORE ANY IMPORTS
import os
import tempfile

os.environ["FILE_ORGANISER_LOG_DIR"] = tempfile.mkdtemp(prefix="file-organiser-logs-")

import json  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import Dict, List  # noqa: E402

import pytest  # noqa: E402

from file_organiser.config import Config  # noqa: E402
from file_organiser.core.guard import PathGuard  # noqa: E402
from file_organiser.core.rules import RuleTable, load_rules  # noqa: E402
from file_organiser.organiser import FileOrganiser  # noqa: E402


SAMPLE_FILE_MAP: Dict[str, List[str]] = {
    "Images": [".jpg", ".png"],
    "Docs": [".pdf", ".docx"],
}


def write_files(directory: Path, names: List[str]) -> None:
    """Create small files whose content is their own name."""
    for name in names:
        (directory / name).write_text(f"content of {name}")


@pytest.fixture
def make_files():
    """Helper that creates named files in a folder."""
    return write_files


@pytest.fixture
def rule_table() -> RuleTable:
    """Rule table with Images and Docs categories."""
    return load_rules(SAMPLE_FILE_MAP)


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty folder to organize."""
    target = tmp_path / "target"
    target.mkdir()
    return target


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Folder holding config.json and file_map-config.json."""
    directory = tmp_path / "settings"
    directory.mkdir()
    (directory / "file_map-config.json").write_text(json.dumps(SAMPLE_FILE_MAP))
    (directory / "config.json").write_text(json.dumps({
        "file_map_path": "file_map-config.json",
        "enable_backup": False,
        "dry_run": False,
        "path_blacklist": []
    }))
    return directory


@pytest.fixture
def config(config_dir: Path) -> Config:
    """Settings loaded from the temporary config folder."""
    return Config(str(config_dir / "config.json"))


@pytest.fixture
def organiser(config: Config) -> FileOrganiser:
    """Organiser whose guard accepts any absolute POSIX path."""
    guard = PathGuard(config.path_blacklist, roots_provider=lambda: ["/"])
    return FileOrganiser(config, guard=guard)
