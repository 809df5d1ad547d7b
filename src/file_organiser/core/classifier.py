"""
File Classifier Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module resolves files to categories using the rule table. Matching is
rule-based only: the file's final suffix is compared, exactly and
case-sensitively, against each category's extensions in table order.
Anything that matches no rule lands in "Uncategorized".

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

from pathlib import PurePath
from typing import Union

from .rules import RuleTable


UNCATEGORIZED = "Uncategorized"


def file_extension(file_name: Union[str, PurePath]) -> str:
    """
    Get the extension used for classification.

    Args:
        file_name: File name or path

    Returns:
        str: Final suffix with its leading dot (".jpg"), or "" if there is none

    Example:
        >>> file_extension("holiday.tar.gz")
        '.gz'
        >>> file_extension(".bashrc")
        ''
    """
    return PurePath(file_name).suffix


class FileClassifier:
    """
    Rule-based file classifier.

    Attributes:
        rule_table (RuleTable): Loaded category -> extensions mapping
    """

    def __init__(self, rule_table: RuleTable):
        """
        Initialize file classifier.

        Args:
            rule_table (RuleTable): Rules to classify against
        """
        self.rule_table = rule_table

    def classify(self, extension: str) -> str:
        """
        Resolve an extension to a category.

        Case is not normalized: ".JPG" does not match a rule for ".jpg".

        Args:
            extension (str): Extension including its leading dot, or ""

        Returns:
            str: First matching category in table order, else "Uncategorized"
        """
        category = self.rule_table.category_for(extension)
        return category if category is not None else UNCATEGORIZED

    def classify_file(self, file_name: Union[str, PurePath]) -> str:
        """Resolve a file name to a category by its extension."""
        return self.classify(file_extension(file_name))


def classify_file(file_name: Union[str, PurePath], rule_table: RuleTable) -> str:
    """
    Convenience function to classify a single file name.

    Args:
        file_name: File name or path
        rule_table (RuleTable): Rules to classify against

    Returns:
        str: Category name
    """
    return FileClassifier(rule_table).classify_file(file_name)
