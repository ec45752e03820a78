"""Path utilities for filesystem containment checks.

This module provides path normalization and the directory containment test
used before copying or moving one tree relative to another.
"""

from __future__ import annotations

import os
import sys
import unicodedata
from pathlib import Path

__all__ = ["has_prefix", "normalize_path"]


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Normalize a path for containment comparisons.

    The path is made absolute and resolved as far as it exists on disk, so
    symlinked ancestors are followed. Components that do not exist are kept
    lexically with ``.`` and ``..`` collapsed. Nothing is created or changed.

    Args:
        path: Path to normalize

    Returns:
        Absolute path, NFC-folded on macOS only
    """
    resolved = os.path.realpath(os.path.abspath(os.fspath(path)))

    # macOS hands back decomposed names for one on-disk entry; elsewhere
    # composed and decomposed spellings are distinct siblings
    if sys.platform == "darwin":
        resolved = unicodedata.normalize("NFC", resolved)

    return Path(resolved)


def _segments(path: Path) -> tuple[str, list[str]]:
    anchor = path.anchor
    if os.name == "nt":
        anchor = anchor.lower()
    return anchor, [part for part in path.parts[1:] if part]


def has_prefix(path: str | os.PathLike[str], prefix: str | os.PathLike[str]) -> bool:
    """Check whether ``prefix`` is ``path`` itself or one of its ancestors.

    Comparison is per path segment, never by substring: ``/dir/ab`` is not
    under ``/dir/a``. Segments are whole Unicode strings, so a name ending in
    a multi-byte character never matches a shorter ASCII name.

    Args:
        path: Candidate descendant
        prefix: Candidate ancestor directory

    Returns:
        True if ``path`` lies within the tree rooted at ``prefix``
    """
    path_anchor, path_parts = _segments(normalize_path(path))
    prefix_anchor, prefix_parts = _segments(normalize_path(prefix))

    if path_anchor != prefix_anchor:
        return False
    if len(prefix_parts) > len(path_parts):
        return False

    return path_parts[: len(prefix_parts)] == prefix_parts
