"""Runtime settings for safefs.

Settings are read from the environment on every call to ``load_settings``,
so tests can monkeypatch variables without reloading modules.

Environment:
    SAFEFS_COPY_BUFFER_SIZE: Chunk size in bytes for streamed file copies.
    SAFEFS_FSYNC: Set to '0', 'false' or 'no' to skip fsync after a copy.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_COPY_BUFFER_SIZE", "FsSettings", "load_settings"]

#: Default chunk size for streamed copies (1 MiB)
DEFAULT_COPY_BUFFER_SIZE = 1024 * 1024


class FsSettings(BaseModel):
    """Tunables for the copy primitives."""

    model_config = ConfigDict(frozen=True)

    copy_buffer_size: int = Field(default=DEFAULT_COPY_BUFFER_SIZE, gt=0)
    fsync: bool = True


def load_settings() -> FsSettings:
    """Build settings from ``SAFEFS_*`` environment variables.

    Returns:
        Validated FsSettings instance

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    values: dict[str, str] = {}

    buffer_size = os.getenv("SAFEFS_COPY_BUFFER_SIZE")
    if buffer_size:
        values["copy_buffer_size"] = buffer_size

    fsync = os.getenv("SAFEFS_FSYNC")
    if fsync:
        values["fsync"] = fsync

    return FsSettings.model_validate(values)
