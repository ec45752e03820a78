"""Structured logger access for safefs modules."""

from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the calling module.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Lazily configured structlog logger
    """
    return structlog.get_logger(name).bind(component=name.rsplit(".", 1)[-1])
