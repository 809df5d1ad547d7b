"""Core modules for file organization."""

from .errors import (
    OrganiserError,
    PathRejected,
    ConfigError,
    FileOperationError,
    ArchiveError,
    PruneError,
)
from .rules import RuleTable, load_rules, load_rules_file
from .classifier import FileClassifier, classify_file, UNCATEGORIZED
from .guard import PathGuard, GuardDecision, validate_path
from .archiver import BackupArchiver, create_backup
from .actions import Reorganizer, ReorganizeResult, reorganize
from .pruner import prune_empty

__all__ = [
    'OrganiserError',
    'PathRejected',
    'ConfigError',
    'FileOperationError',
    'ArchiveError',
    'PruneError',
    'RuleTable',
    'load_rules',
    'load_rules_file',
    'FileClassifier',
    'classify_file',
    'UNCATEGORIZED',
    'PathGuard',
    'GuardDecision',
    'validate_path',
    'BackupArchiver',
    'create_backup',
    'Reorganizer',
    'ReorganizeResult',
    'reorganize',
    'prune_empty',
]
