"""Permission-preserving file and directory copies.

``copy_file`` streams one file (or recreates one symlink) and
``copy_dir`` rebuilds a whole tree under a fresh destination, keeping every
entry's mode bits and never following symlinks.
"""

from __future__ import annotations

import os
import shutil
import stat
from typing import Any

from safefs.core.config import FsSettings, load_settings
from safefs.core.errors import DestinationExists, SourceNotDirectory
from safefs.fs.probe import is_symlink
from safefs.utils.debug import debug
from safefs.utils.logging import get_logger

__all__ = ["copy_dir", "copy_file"]

logger = get_logger(__name__)


def copy_file(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    *,
    settings: FsSettings | None = None,
) -> None:
    """Copy a single file or symlink from ``src`` to ``dst``.

    A symlink is recreated with the same target string; its referent is
    never read. A regular file is streamed into ``dst`` (created or
    truncated) and then given the permission bits of ``src``. A symlink
    already at ``dst`` is replaced, never written through.

    Args:
        src: Source file or symlink
        dst: Destination path
        settings: Optional override for buffer size and fsync

    Raises:
        OSError: If the source cannot be read or the destination written
    """
    if is_symlink(src):
        _clone_symlink(src, dst)
        return

    settings = settings or load_settings()

    # Replace a link at dst rather than writing through it
    if os.path.islink(dst):
        os.unlink(dst)

    with open(src, "rb") as reader, open(dst, "wb") as writer:
        shutil.copyfileobj(reader, writer, settings.copy_buffer_size)
        if settings.fsync:
            writer.flush()
            os.fsync(writer.fileno())

    os.chmod(dst, stat.S_IMODE(os.stat(src).st_mode))
    debug("copy_file.done", src=src, dst=dst)


def _clone_symlink(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    target = os.readlink(src)
    # Windows needs to know the link kind up front
    target_is_directory = os.name == "nt" and os.path.isdir(src)
    os.symlink(target, dst, target_is_directory=target_is_directory)
    debug("copy_file.symlink", src=src, dst=dst, target=target)


def copy_dir(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    *,
    remove_partial: bool = False,
    settings: FsSettings | None = None,
) -> None:
    """Recursively copy the directory ``src`` to the new path ``dst``.

    The destination must not exist. Directories, regular files and symlinks
    are reproduced with identical relative paths and mode bits. FIFOs,
    sockets and device nodes are skipped.

    Args:
        src: Source directory
        dst: Destination path, created by this call
        remove_partial: Remove whatever was written to ``dst`` if the copy
            fails. By default a partial tree is left for inspection.
        settings: Optional override for buffer size and fsync

    Raises:
        SourceNotDirectory: If ``src`` is not a directory
        DestinationExists: If anything exists at ``dst``
        OSError: If stat'ing, reading or writing any entry fails
    """
    src = os.path.normpath(os.fspath(src))
    dst = os.path.normpath(os.fspath(dst))

    if not stat.S_ISDIR(os.stat(src).st_mode):
        raise SourceNotDirectory(src)

    try:
        os.lstat(dst)
    except FileNotFoundError:
        pass
    else:
        raise DestinationExists(dst)

    settings = settings or load_settings()
    log = logger.bind(src=src, dst=dst)
    debug("copy_dir.start", src=src, dst=dst)

    try:
        _copy_tree(src, dst, settings, log)
    except OSError as e:
        log.warning("copy_dir.failed", error=str(e), remove_partial=remove_partial)
        if remove_partial and os.path.lexists(dst):
            remove_tree(dst)
        raise

    debug("copy_dir.done", src=src, dst=dst)


def _copy_tree(src: str, dst: str, settings: FsSettings, log: Any) -> None:
    mode = stat.S_IMODE(os.stat(src).st_mode)
    # Owner needs write access while the children are created
    os.mkdir(dst, mode | stat.S_IRWXU)

    with os.scandir(src) as entries:
        for entry in entries:
            src_path = os.path.join(src, entry.name)
            dst_path = os.path.join(dst, entry.name)

            if entry.is_dir(follow_symlinks=False):
                _copy_tree(src_path, dst_path, settings, log)
            elif entry.is_symlink() or entry.is_file(follow_symlinks=False):
                copy_file(src_path, dst_path, settings=settings)
            else:
                log.warning("copy_dir.skip_special", path=src_path)

    os.chmod(dst, mode)


def remove_tree(path: str) -> None:
    """Delete a file, symlink or directory tree, including read-only dirs."""
    if not os.path.isdir(path) or os.path.islink(path):
        os.unlink(path)
        return

    # Copied directories may carry read-only modes
    os.chmod(path, stat.S_IMODE(os.stat(path).st_mode) | stat.S_IRWXU)
    for root, dirs, _files in os.walk(path):
        for name in dirs:
            full = os.path.join(root, name)
            if not os.path.islink(full):
                os.chmod(full, stat.S_IMODE(os.stat(full).st_mode) | stat.S_IRWXU)
    shutil.rmtree(path)
