"""ANSI color codes and utilities."""

from typing import Optional

# Basic ANSI 16 colors
COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_white": "\033[97m",
    "reset": "\033[0m",
}

RESET = COLORS["reset"]

# Colors for labels, separators and reset times
TEXT_COLORS = {
    "default": COLORS["reset"],
    "white": COLORS["bright_white"],
    "light-grey": COLORS["white"],
    "mid-grey": COLORS["bright_black"],
    "dark-grey": COLORS["bright_black"],  # alias for mid-grey
}

DEFAULT_TEXT_COLOR = "light-grey"

# Utilization at or above these percentages switches color
YELLOW_THRESHOLD = 70
RED_THRESHOLD = 90


def get_color_code(color_name: Optional[str]) -> str:
    """Get ANSI color code by name.

    Args:
        color_name: Color name (e.g., "green", "red") or None

    Returns:
        ANSI color code or empty string if not found
    """
    if not color_name:
        return ""
    return COLORS.get(color_name.lower(), "")


def get_text_color_code(name: Optional[str]) -> str:
    """Get the ANSI code for a text color name, falling back to light grey."""
    if name and name.lower() in TEXT_COLORS:
        return TEXT_COLORS[name.lower()]
    return TEXT_COLORS[DEFAULT_TEXT_COLOR]


def get_usage_color(utilization: Optional[float]) -> str:
    """Get color based on utilization percentage.

    Args:
        utilization: Utilization percentage (0-100), or None if unknown

    Returns:
        Color name ("green", "yellow", or "red")
    """
    if utilization is None:
        return "green"
    if utilization >= RED_THRESHOLD:
        return "red"
    elif utilization >= YELLOW_THRESHOLD:
        return "yellow"
    else:
        return "green"
