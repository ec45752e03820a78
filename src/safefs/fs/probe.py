"""Path classification primitives.

The ``is_*`` helpers intentionally disagree about missing paths:

==========================  =========  ==========  ======  ============
Function                    Missing    Wrong type  Match   Inaccessible
==========================  =========  ==========  ======  ============
is_regular_file             False      False       True    raises
is_directory                raises     False       True    raises
is_symlink                  raises     False       True    raises
is_non_empty_directory      False      raises      True*   raises
==========================  =========  ==========  ======  ============

``*`` True only when the directory has at least one entry.

A missing regular file is an ordinary answer (optional files are probed all
the time), while a missing directory usually means the caller passed a bad
path. Callers rely on this split; do not make it uniform.
"""

from __future__ import annotations

import errno
import os
import stat
from enum import Enum

__all__ = [
    "Classification",
    "classify",
    "is_directory",
    "is_non_empty_directory",
    "is_regular_file",
    "is_symlink",
]


class Classification(str, Enum):
    """Kind of file-system entry found at a path."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    MISSING = "missing"
    INACCESSIBLE = "inaccessible"
    OTHER = "other"


def is_regular_file(path: str | os.PathLike[str]) -> bool:
    """Check whether ``path`` is a regular file, following symlinks.

    Returns:
        True for a regular file, False if missing or of another type

    Raises:
        OSError: If the path exists but cannot be stat'd
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    return stat.S_ISREG(st.st_mode)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Check whether ``path`` is a directory, following symlinks.

    Returns:
        True for a directory, False if it exists with another type

    Raises:
        FileNotFoundError: If nothing exists at ``path``
        OSError: If the path cannot be stat'd
    """
    st = os.stat(path)
    return stat.S_ISDIR(st.st_mode)


def is_symlink(path: str | os.PathLike[str]) -> bool:
    """Check whether ``path`` itself is a symlink. The link is not followed.

    Returns:
        True for a symlink (dangling or not), False for any other entry

    Raises:
        FileNotFoundError: If nothing exists at ``path``
        OSError: If the entry cannot be lstat'd
    """
    st = os.lstat(path)
    return stat.S_ISLNK(st.st_mode)


def is_non_empty_directory(path: str | os.PathLike[str]) -> bool:
    """Check whether ``path`` is a directory holding at least one entry.

    Returns:
        True if the directory has an entry, False if empty or missing

    Raises:
        NotADirectoryError: If ``path`` exists but is not a directory
        OSError: If the directory cannot be stat'd or listed
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryError(
            errno.ENOTDIR, os.strerror(errno.ENOTDIR), os.fspath(path)
        )

    with os.scandir(path) as entries:
        return next(entries, None) is not None


def classify(path: str | os.PathLike[str]) -> Classification:
    """Classify the entry at ``path`` without following a final symlink.

    Unlike the ``is_*`` helpers this never raises for missing or
    unreadable paths; those become MISSING and INACCESSIBLE.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return Classification.MISSING
    except OSError:
        return Classification.INACCESSIBLE

    mode = st.st_mode
    if stat.S_ISLNK(mode):
        return Classification.SYMLINK
    if stat.S_ISDIR(mode):
        return Classification.DIRECTORY
    if stat.S_ISREG(mode):
        return Classification.REGULAR
    return Classification.OTHER
