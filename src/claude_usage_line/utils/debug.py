"""Debug logging utilities."""

import os
import sys
import time

DEBUG_ENV_VAR = "CLAUDE_USAGE_LINE_DEBUG"

_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off for this process (the --debug flag)."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug_enabled() -> bool:
    """Check whether --debug was given or the debug env var is set."""
    return _debug_enabled or bool(os.getenv(DEBUG_ENV_VAR))


def debug_log(message: str) -> None:
    """Write a timestamped debug message to stderr if debug mode is enabled.

    Stdout is reserved for the status line itself, so diagnostics never
    go there.

    Args:
        message: Debug message to log
    """
    if not is_debug_enabled():
        return

    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] claude-usage-line: {message}", file=sys.stderr)
