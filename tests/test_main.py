"""
Tests for the command line interface.
"""

import json
from pathlib import Path

import pytest

from file_organiser.main import build_parser, main


@pytest.fixture
def config_arg(config_dir: Path):
    return ["--config", str(config_dir / "config.json")]


class TestParser:
    """Test argument parsing."""

    def test_backup_flags(self):
        """--backup and --no-backup set the override, absence leaves None."""
        parser = build_parser()
        assert parser.parse_args(["organize", "/tmp/x"]).backup is None
        assert parser.parse_args(["organize", "/tmp/x", "--backup"]).backup is True
        assert parser.parse_args(["organize", "/tmp/x", "--no-backup"]).backup is False

    def test_backup_flags_are_exclusive(self):
        """Both backup flags together are a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["organize", "/tmp/x", "--backup", "--no-backup"])

    def test_command_required(self):
        """A subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    """Test command execution."""

    def test_organize(self, config_arg, target_dir: Path, make_files, capsys):
        """organize prints the summary and exits 0."""
        make_files(target_dir, ["x.jpg", "y.pdf", "z.exe"])

        code = main(config_arg + ["organize", str(target_dir), "--no-backup"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "Organized 3 files successfully!"
        assert (target_dir / "Images" / "x.jpg").is_file()

    def test_organize_missing_path(self, config_arg, tmp_path: Path, monkeypatch, capsys):
        """Missing folders print the error and exit 1."""
        monkeypatch.chdir(tmp_path)

        code = main(config_arg + ["organize", "relative/path"])

        assert code == 1
        assert capsys.readouterr().out.strip() == "Error: Invalid path."
        assert not (tmp_path / "relative").exists()

    def test_organize_current_directory(self, config_arg, target_dir: Path, make_files, monkeypatch, capsys):
        """A relative path is resolved against the working directory."""
        make_files(target_dir, ["a.jpg"])
        monkeypatch.chdir(target_dir)

        code = main(config_arg + ["organize", ".", "--no-backup"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "Organized 1 files successfully!"
        assert (target_dir / "Images" / "a.jpg").is_file()

    def test_organize_relative_subfolder(self, config_arg, target_dir: Path, make_files, monkeypatch):
        """Relative subfolder names work too."""
        make_files(target_dir, ["b.pdf"])
        monkeypatch.chdir(target_dir.parent)

        assert main(config_arg + ["organize", target_dir.name, "--no-backup"]) == 0
        assert (target_dir / "Docs" / "b.pdf").is_file()

    def test_organize_dry_run_message(self, config_arg, target_dir: Path, make_files, capsys):
        """Dry runs are labelled in the summary."""
        make_files(target_dir, ["x.jpg"])

        main(config_arg + ["organize", str(target_dir), "--dry-run"])

        assert capsys.readouterr().out.strip() == "[DRY RUN] Organized 1 files successfully!"

    def test_organize_dry_run(self, config_arg, target_dir: Path, make_files, capsys):
        """--dry-run leaves files in place."""
        make_files(target_dir, ["x.jpg"])

        code = main(config_arg + ["organize", str(target_dir), "--dry-run", "--backup"])

        assert code == 0
        assert [p.name for p in target_dir.iterdir()] == ["x.jpg"]

    def test_organize_reports_skips(self, config_arg, target_dir: Path, make_files, capsys):
        """Skipped moves are listed on stderr."""
        (target_dir / "Images").mkdir()
        (target_dir / "Images" / "x.jpg").write_text("existing")
        make_files(target_dir, ["x.jpg"])

        code = main(config_arg + ["organize", str(target_dir), "--no-backup"])

        assert code == 0
        assert "skipped:" in capsys.readouterr().err

    def test_rules(self, config_arg, capsys):
        """rules prints the file map as JSON."""
        assert main(config_arg + ["rules"]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "Images": [".jpg", ".png"],
            "Docs": [".docx", ".pdf"],
        }

    def test_rules_broken_file_map(self, config_arg, config_dir: Path, capsys):
        """A broken file map exits 1."""
        (config_dir / "file_map-config.json").write_text("[]")

        assert main(config_arg + ["rules"]) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_missing_config(self, tmp_path: Path, capsys):
        """A missing settings file exits 1."""
        assert main(["--config", str(tmp_path / "missing.json"), "rules"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_open_config(self, config_arg, monkeypatch, capsys):
        """open-config prints the result string."""
        monkeypatch.setattr(
            "file_organiser.organiser.FileOrganiser.open_config_file",
            lambda self: "Error: Could not open config file"
        )

        assert main(config_arg + ["open-config"]) == 1
        assert capsys.readouterr().out.strip() == "Error: Could not open config file"
