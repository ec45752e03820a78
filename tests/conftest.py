"""Pytest configuration and fixtures for safefs tests."""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def inaccessible_dir(tmp_path: Path) -> Iterator[Callable[[Callable[[Path], None]], Path]]:
    """Build a directory whose contents cannot be reached.

    The returned factory creates ``<tmp>/locked/dir``, lets the callback
    populate it, then drops the execute bit so nothing beneath it can be
    stat'd. Modes are restored on teardown so ``tmp_path`` can be removed.
    """
    locked: list[Path] = []

    def _make(populate: Callable[[Path], None]) -> Path:
        subdir = tmp_path / "locked" / "dir"
        subdir.mkdir(parents=True)
        populate(subdir)
        os.chmod(subdir, 0o666)
        locked.append(subdir)
        return subdir

    yield _make

    for subdir in locked:
        os.chmod(subdir, 0o777)
