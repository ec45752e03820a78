"""Local file-system primitives: containment, classification, copy and move."""

__version__ = "0.1.0"

from safefs.core.errors import DestinationExists, SafeFsError, SourceNotDirectory
from safefs.fs import (
    Classification,
    RenameRecovery,
    classify,
    classify_rename_error,
    copy_dir,
    copy_file,
    has_prefix,
    is_directory,
    is_non_empty_directory,
    is_regular_file,
    is_symlink,
    normalize_path,
    rename_with_fallback,
)

__all__ = [
    "__version__",
    "Classification",
    "DestinationExists",
    "RenameRecovery",
    "SafeFsError",
    "SourceNotDirectory",
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
