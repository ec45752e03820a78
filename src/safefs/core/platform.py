"""Platform capability checks.

Permission-dependent behaviour differs between platforms: Windows has no
POSIX mode bits and the superuser bypasses them everywhere. Callers and
tests ask these questions instead of testing ``os.name`` inline.
"""

from __future__ import annotations

import functools
import os
import tempfile

__all__ = ["enforces_permissions", "has_posix_permissions", "supports_symlinks"]


def has_posix_permissions() -> bool:
    """Check whether mode bits are meaningful on this platform.

    Returns:
        True on POSIX systems
    """
    return os.name == "posix"


def enforces_permissions() -> bool:
    """Check whether mode bits actually deny access to the current process.

    Returns:
        True if an unreadable/untraversable entry will raise PermissionError
    """
    if not has_posix_permissions():
        return False
    geteuid = getattr(os, "geteuid", None)
    return geteuid is None or geteuid() != 0


@functools.cache
def supports_symlinks() -> bool:
    """Check whether the current process may create symlinks.

    Windows requires a privilege or developer mode, so this probes once
    in a scratch directory and caches the answer.

    Returns:
        True if ``os.symlink`` succeeds
    """
    with tempfile.TemporaryDirectory(prefix="safefs-probe-") as scratch:
        target = os.path.join(scratch, "target")
        link = os.path.join(scratch, "link")
        with open(target, "wb"):
            pass
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError):
            return False
    return True
