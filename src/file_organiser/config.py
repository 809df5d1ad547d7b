"""
Configuration Management Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module handles loading and validation of application configuration
from config.json. It provides centralized access to all settings used
throughout the File Organiser, including where the file map lives.

NOTICE: This software is proprietary and confidential. Unauthorized copying,
modification, distribution, or use is strictly prohibited.
See LICENSE.txt for full terms and conditions.

Version: 1.0.0
Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, List, Optional

from jsonschema import validate, ValidationError

from .core.errors import ConfigError


SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "file_map_path": {"type": "string", "minLength": 1},
        "enable_backup": {"type": "boolean"},
        "dry_run": {"type": "boolean"},
        "path_blacklist": {"type": "array", "items": {"type": "string"}},
        "log_dir": {"anyOf": [{"type": "string"}, {"type": "null"}]}
    },
    "required": ["file_map_path"]
}


class Config:
    """
    Configuration manager that loads and provides access to application settings.

    Attributes:
        config_path (Path): Path to the config.json file
        _config (Dict[str, Any]): Loaded configuration dictionary
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path (str, optional): Path to config file. Defaults to the
                config.json shipped with the package
        """
        if config_path is None:
            self.config_path = Path(__file__).parent / "config.json"
        else:
            self.config_path = Path(config_path)

        self._config: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """
        Load configuration from JSON file with validation.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config file is malformed or fails validation
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file is not valid JSON ({self.config_path}): {e}") from e

        try:
            validate(instance=self._config, schema=SETTINGS_SCHEMA)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration in {self.config_path}: {e.message}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key (str): Configuration key (supports nested keys with dot notation)
            default (Any, optional): Default value if key not found

        Returns:
            Any: Configuration value or default

        Example:
            >>> config.get("enable_backup")
            True
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def file_map_path(self) -> Path:
        """Location of the file map; relative paths resolve next to config.json."""
        path = Path(os.path.expanduser(self.get("file_map_path", "file_map-config.json")))
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path

    @property
    def enable_backup(self) -> bool:
        """Whether a backup archive is made when the caller doesn't say."""
        return self.get("enable_backup", True)

    @property
    def dry_run(self) -> bool:
        """Check if dry run mode is enabled (no actual file operations)."""
        return self.get("dry_run", False)

    @property
    def path_blacklist(self) -> List[str]:
        """Paths that must never be organized, on top of the system directory."""
        return self.get("path_blacklist", [])

    @property
    def log_dir(self) -> Optional[str]:
        """Directory for log files, if overridden."""
        value = self.get("log_dir")
        return os.path.expanduser(value) if value else None

    def save(self) -> None:
        """
        Save current configuration back to JSON file.
        Useful for updating settings programmatically.
        """
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2)

    def update(self, key: str, value: Any) -> None:
        """
        Update configuration value.

        Args:
            key (str): Configuration key (supports nested keys with dot notation)
            value (Any): New value to set

        Example:
            >>> config.update("enable_backup", False)
        """
        keys = key.split('.')
        target = self._config

        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]

        target[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._config)


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get or create global configuration instance.

    Args:
        config_path (str, optional): Path to config file

    Returns:
        Config: Global configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_path)
    return _config_instance


if __name__ == "__main__":
    # Test configuration loading
    config = get_config()
    print("Configuration loaded successfully!")
    print(f"File map: {config.file_map_path}")
    print(f"Backup enabled: {config.enable_backup}")
