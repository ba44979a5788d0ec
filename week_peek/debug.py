"""
Debug output switch.

Messages go to stderr with a DEBUG: prefix and are only emitted after the
launcher (or a test) calls set_debug(True).
"""

import sys

_debug_enabled: bool = False


def set_debug(enabled: bool):
    """Turn debug output on or off for the whole package."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug() -> bool:
    return _debug_enabled


def debug(message: str):
    if _debug_enabled:
        print(f"DEBUG: {message}", file=sys.stderr)
