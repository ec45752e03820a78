"""Rename with a copy-then-delete fallback.

``os.rename`` is atomic but only works within one volume. When the kernel
refuses because source and destination live on different devices, the entry
is copied with the copier and the original removed afterwards. Which rename
errors qualify for that fallback is decided by ``RENAME_RECOVERY`` (errno)
and ``RENAME_RECOVERY_WINERROR`` (Windows error codes).
"""

from __future__ import annotations

import errno
import os
import stat
import uuid
from enum import Enum

from safefs.fs.copier import copy_dir, copy_file, remove_tree
from safefs.utils.debug import debug
from safefs.utils.logging import get_logger

__all__ = [
    "RENAME_RECOVERY",
    "RENAME_RECOVERY_WINERROR",
    "RenameRecovery",
    "classify_rename_error",
    "rename_with_fallback",
]

logger = get_logger(__name__)


class RenameRecovery(str, Enum):
    """What to do after ``os.rename`` fails."""

    COPY = "copy"
    PROPAGATE = "propagate"


#: errno -> recovery for failed renames; anything absent propagates
RENAME_RECOVERY: dict[int, RenameRecovery] = {
    errno.EXDEV: RenameRecovery.COPY,
}

#: Windows winerror -> recovery, consulted before the errno table
RENAME_RECOVERY_WINERROR: dict[int, RenameRecovery] = {
    17: RenameRecovery.COPY,  # ERROR_NOT_SAME_DEVICE
}


def classify_rename_error(exc: OSError) -> RenameRecovery:
    """Map a failed rename to a recovery strategy.

    Args:
        exc: Error raised by ``os.rename``

    Returns:
        RenameRecovery.COPY for cross-device failures, PROPAGATE otherwise
    """
    winerror = getattr(exc, "winerror", None)
    if winerror in RENAME_RECOVERY_WINERROR:
        return RENAME_RECOVERY_WINERROR[winerror]
    if exc.errno is None:
        return RenameRecovery.PROPAGATE
    return RENAME_RECOVERY.get(exc.errno, RenameRecovery.PROPAGATE)


def rename_with_fallback(
    src: str | os.PathLike[str], dst: str | os.PathLike[str]
) -> None:
    """Move ``src`` to ``dst``, copying across devices when needed.

    Args:
        src: Existing file, symlink or directory
        dst: Target path; must not be an existing directory

    Raises:
        FileNotFoundError: If ``src`` does not exist
        IsADirectoryError: If ``dst`` is an existing directory
        OSError: If the rename fails for a non-cross-device reason, or the
            fallback copy or source removal fails
    """
    src = os.fspath(src)
    dst = os.fspath(dst)

    src_st = os.lstat(src)

    try:
        dst_is_dir = stat.S_ISDIR(os.stat(dst).st_mode)
    except FileNotFoundError:
        dst_is_dir = False
    if dst_is_dir:
        raise IsADirectoryError(
            errno.EISDIR, f"cannot rename {src} onto existing directory", dst
        )

    try:
        os.rename(src, dst)
    except OSError as e:
        if classify_rename_error(e) is RenameRecovery.PROPAGATE:
            raise
        logger.info("rename.fallback", src=src, dst=dst, error=str(e))
    else:
        debug("rename.direct", src=src, dst=dst)
        return

    _copy_then_remove(src, dst, stat.S_ISDIR(src_st.st_mode))


def _temp_path_for(dst: str) -> str:
    return f"{dst}.safefs-{uuid.uuid4().hex[:8]}"


def _copy_then_remove(src: str, dst: str, src_is_dir: bool) -> None:
    try:
        if src_is_dir:
            copy_dir(src, dst, remove_partial=True)
        else:
            # Stage next to dst so an existing dst is only replaced when complete
            staged = _temp_path_for(dst)
            try:
                copy_file(src, staged)
                os.replace(staged, dst)
            except OSError:
                if os.path.lexists(staged):
                    os.unlink(staged)
                raise
    except OSError as e:
        logger.warning("rename.fallback_failed", src=src, dst=dst, error=str(e))
        raise

    if src_is_dir:
        remove_tree(src)
    else:
        os.unlink(src)
    debug("rename.copied", src=src, dst=dst)
