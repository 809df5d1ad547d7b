"""
Rule Table Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module turns the file map (category name -> list of extensions) into
an ordered, read-only lookup used by the classifier. The file map is
validated against a JSON schema before use.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Union

from jsonschema import validate, ValidationError

from .errors import ConfigError


# JSON schema for the file map: {"Images": [".jpg", ".png"], ...}
FILE_MAP_SCHEMA = {
    "type": "object",
    "propertyNames": {
        "type": "string",
        "minLength": 1,
        "pattern": r"^(?!\.{1,2}$)[^/\\]+$"
    },
    "additionalProperties": {
        "type": "array",
        "items": {"type": "string"}
    }
}


class RuleTable:
    """
    Ordered mapping from category name to the extensions it claims.

    Extensions keep their leading dot (".jpg") and are compared exactly.
    Iteration follows the order of the source mapping.

    Attributes:
        categories (List[str]): Category names in source order
    """

    def __init__(self, rules: Mapping[str, Any]):
        self._rules: Dict[str, FrozenSet[str]] = {
            category: frozenset(extensions)
            for category, extensions in rules.items()
        }

    @property
    def categories(self) -> List[str]:
        return list(self._rules)

    def extensions_for(self, category: str) -> FrozenSet[str]:
        """Extensions claimed by a category (empty if unknown)."""
        return self._rules.get(category, frozenset())

    def category_for(self, extension: str) -> Optional[str]:
        """
        Find the first category listing an extension.

        Args:
            extension (str): Extension including its leading dot, or ""

        Returns:
            str or None: Category name, or None when no rule matches
        """
        for category, extensions in self._rules.items():
            if extension in extensions:
                return category
        return None

    def to_dict(self) -> Dict[str, List[str]]:
        """Plain JSON-friendly copy with sorted extension lists."""
        return {category: sorted(extensions) for category, extensions in self._rules.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, category: object) -> bool:
        return category in self._rules

    def __repr__(self) -> str:
        return f"RuleTable({self.to_dict()!r})"


def load_rules(source: Any) -> RuleTable:
    """
    Build a rule table from an already parsed file map.

    Args:
        source: Parsed JSON value, expected to be an object of string arrays

    Returns:
        RuleTable: Validated rule table

    Raises:
        ConfigError: If the source is missing or malformed
    """
    if source is None:
        raise ConfigError("File map is missing")

    try:
        validate(instance=source, schema=FILE_MAP_SCHEMA)
    except ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ConfigError(f"Invalid file map at {location}: {e.message}") from e

    return RuleTable(source)


def load_rules_file(path: Union[str, Path]) -> RuleTable:
    """
    Read a JSON file map from disk and build a rule table.

    Args:
        path: Location of the file map JSON file

    Returns:
        RuleTable: Validated rule table

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or malformed
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigError(f"File map not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"File map is not valid JSON ({path}): {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read file map {path}: {e}") from e

    return load_rules(data)
