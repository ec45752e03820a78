"""Filesystem primitives for safe copy, move and classification.

This package provides path containment checks, entry classification with
precise missing/inaccessible semantics, permission-preserving recursive
copies and a rename that falls back to copy-then-delete across devices.
"""

from safefs.fs.copier import copy_dir, copy_file
from safefs.fs.mover import RenameRecovery, classify_rename_error, rename_with_fallback
from safefs.fs.paths import has_prefix, normalize_path
from safefs.fs.probe import (
    Classification,
    classify,
    is_directory,
    is_non_empty_directory,
    is_regular_file,
    is_symlink,
)

__all__ = [
    "Classification",
    "RenameRecovery",
    "classify",
    "classify_rename_error",
    "copy_dir",
    "copy_file",
    "has_prefix",
    "is_directory",
    "is_non_empty_directory",
    "is_regular_file",
    "is_symlink",
    "normalize_path",
    "rename_with_fallback",
]
