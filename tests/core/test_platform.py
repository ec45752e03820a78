"""Tests for platform capability checks."""

import os
from unittest.mock import patch

from safefs.core import platform


def test_posix_permissions_follow_os_name() -> None:
    """Test that mode bits are reported for POSIX only."""
    assert platform.has_posix_permissions() is (os.name == "posix")


def test_root_does_not_enforce_permissions() -> None:
    """Test that the superuser is treated as bypassing mode bits."""
    with (
        patch.object(platform, "has_posix_permissions", return_value=True),
        patch.object(platform.os, "geteuid", return_value=0, create=True),
    ):
        assert platform.enforces_permissions() is False


def test_regular_user_enforces_permissions() -> None:
    """Test that a normal POSIX user is subject to mode bits."""
    with (
        patch.object(platform, "has_posix_permissions", return_value=True),
        patch.object(platform.os, "geteuid", return_value=1000, create=True),
    ):
        assert platform.enforces_permissions() is True


def test_no_posix_means_no_enforcement() -> None:
    """Test that platforms without mode bits never enforce them."""
    with patch.object(platform, "has_posix_permissions", return_value=False):
        assert platform.enforces_permissions() is False


def test_supports_symlinks_returns_bool() -> None:
    """Test that the symlink probe answers and cleans up."""
    assert isinstance(platform.supports_symlinks(), bool)
