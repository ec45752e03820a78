"""Custom exceptions for safefs.

This module defines the named precondition errors raised by the copy and
move primitives. I/O failures are not wrapped: they surface as the builtin
``OSError`` hierarchy so callers keep ``errno`` and ``filename``.
"""

import os
from typing import Any


class SafeFsError(Exception):
    """Base exception for all safefs precondition violations.

    Catch this to handle every named condition at once. It is deliberately
    not an ``OSError`` subclass, so ``except OSError`` keeps meaning
    "the file system refused".
    """

    pass


class SourceNotDirectory(SafeFsError):
    """Raised when a directory copy is asked to copy something else.

    Attributes:
        path: The source path that is not a directory
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize SourceNotDirectory exception.

        Args:
            path: Offending source path
        """
        self.path = os.fspath(path)
        super().__init__(f"source is not a directory: {self.path}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary representation of the condition
        """
        return {"error": "source_not_directory", "path": self.path}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"SourceNotDirectory(path={self.path!r})"


class DestinationExists(SafeFsError):
    """Raised when a directory copy would write into an existing path.

    Attributes:
        path: The destination path that already exists
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize DestinationExists exception.

        Args:
            path: Offending destination path
        """
        self.path = os.fspath(path)
        super().__init__(f"destination already exists: {self.path}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary representation of the condition
        """
        return {"error": "destination_exists", "path": self.path}

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"DestinationExists(path={self.path!r})"
