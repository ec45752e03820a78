"""Opt-in trace output for safefs operations.

Successful copies and renames are routine, so they are not sent through
structlog where every library caller would see them. They go to ``debug()``
instead, which stays silent unless SAFEFS_DEBUG is set.

Usage:
    from safefs.utils.debug import debug

    debug("copy_dir.start", src=src, dst=dst)

Environment:
    SAFEFS_DEBUG: Set to '1', 'true', 'yes' (case-insensitive) to enable
                  debug output. Any other value or unset disables it.
"""

import os
import sys
from typing import Any

_TRUTHY = ("1", "true", "yes")

# Read once at import time
_DEBUG_ENABLED = os.environ.get("SAFEFS_DEBUG", "").lower() in _TRUTHY


def debug(event: str, **context: Any) -> None:
    """Print an event line with ``key=value`` context if SAFEFS_DEBUG is on.

    Args:
        event: Event name, using the same dotted names as the structlog events
        **context: Fields appended in call order

    Note:
        The environment variable is read at import time. Changing it
        afterwards has no effect unless the module is reloaded.
    """
    if not _DEBUG_ENABLED:
        return
    fields = " ".join(f"{key}={value}" for key, value in context.items())
    print(f"[DEBUG] {event} {fields}".rstrip(), file=sys.stdout)
