"""
Path Guard Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module checks a target folder before anything touches it. It blocks
the operating system directory (and any configured blacklist entries) and
paths that do not start at a filesystem root available on this machine.

This is a heuristic against obvious mistakes, not a security boundary.

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import os
import string
import sys
from typing import Callable, Iterable, List, Optional


WINDOWS_DIRECTORY = r"C:\Windows"

REASON_SYSTEM_ROOT = "Cannot organize files in the Windows directory."
REASON_BLACKLISTED = "Cannot organize files in a protected folder."
REASON_INVALID_PATH = "Invalid path."


def available_roots() -> List[str]:
    """
    List the filesystem roots that exist right now.

    Returns:
        List[str]: Drive roots ("C:\\", "D:\\", ...) on Windows, ["/"] elsewhere
    """
    if sys.platform == "win32":
        return [
            f"{letter}:\\"
            for letter in string.ascii_uppercase
            if os.path.exists(f"{letter}:\\")
        ]
    return [os.sep]


def _normalize(path: str) -> str:
    """Lowercase, unify separators and drop trailing ones (but keep a bare root)."""
    unified = path.replace("\\", "/")
    stripped = unified.rstrip("/")
    if not stripped or stripped.endswith(":"):
        stripped = unified[:len(stripped) + 1]
    return stripped.lower()


class GuardDecision:
    """
    Outcome of a path check.

    Attributes:
        allowed (bool): Whether the path may be organized
        reason (str or None): Why the path was rejected
    """

    def __init__(self, allowed: bool, reason: Optional[str] = None):
        self.allowed = allowed
        self.reason = reason

    def __bool__(self) -> bool:
        return self.allowed

    def __repr__(self) -> str:
        if self.allowed:
            return "GuardDecision(allowed=True)"
        return f"GuardDecision(allowed=False, reason={self.reason!r})"


class PathGuard:
    """
    Validates target paths against protected roots and available drives.

    Attributes:
        system_roots (List[str]): Normalized operating system directories
        blacklist (List[str]): Normalized user-protected folders
        roots_provider (Callable): Returns the roots available at call time
    """

    def __init__(self, blacklist: Optional[Iterable[str]] = None,
                 roots_provider: Callable[[], List[str]] = available_roots):
        """
        Initialize the path guard.

        Args:
            blacklist (Iterable[str], optional): Extra paths to protect
            roots_provider (Callable, optional): Override root discovery
        """
        system_roots = [WINDOWS_DIRECTORY]
        for var in ("SystemRoot", "windir"):
            value = os.environ.get(var)
            if value:
                system_roots.append(value)

        self.system_roots = sorted({_normalize(p) for p in system_roots})
        self.blacklist = sorted({_normalize(os.path.expanduser(p)) for p in blacklist or []})
        self.roots_provider = roots_provider

    def validate(self, path: str) -> GuardDecision:
        """
        Check whether a path may be organized.

        Args:
            path (str): Target folder as typed by the user

        Returns:
            GuardDecision: Allowed, or rejected with a reason
        """
        if not path or not path.strip():
            return GuardDecision(False, REASON_INVALID_PATH)

        normalized = _normalize(path)
        if normalized in self.system_roots:
            return GuardDecision(False, REASON_SYSTEM_ROOT)
        if normalized in self.blacklist:
            return GuardDecision(False, REASON_BLACKLISTED)

        lowered = path.lower()
        if not any(lowered.startswith(root.lower()) for root in self.roots_provider()):
            return GuardDecision(False, REASON_INVALID_PATH)

        return GuardDecision(True)

    def is_allowed(self, path: str) -> bool:
        """Shorthand for ``validate(path).allowed``."""
        return self.validate(path).allowed


def validate_path(path: str, blacklist: Optional[Iterable[str]] = None) -> GuardDecision:
    """Validate a path with the default roots for this machine."""
    return PathGuard(blacklist).validate(path)

