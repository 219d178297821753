"""Formatting utilities for percentages, progress bars and reset times."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..types import ResetStyle

_DATETIME_ADAPTER = TypeAdapter(datetime)


def render_progress_bar(
    percentage: float, segments: int = 10, filled_char: str = "●", empty_char: str = "○"
) -> str:
    """Render a progress bar with filled/empty circles.

    Values outside 0-100 are not clamped, so the bar can over- or under-fill.

    Args:
        percentage: Progress percentage (0-100)
        segments: Number of segments in progress bar
        filled_char: Character for filled segments
        empty_char: Character for empty segments

    Returns:
        Progress bar string (e.g., "●●●●●●○○○○")
    """
    filled = round((percentage / 100) * segments)
    empty = segments - filled
    return filled_char * filled + empty_char * empty


def format_percentage(percentage: Optional[float], decimals: int = 1) -> str:
    """Format a utilization value with fixed decimals, "N/A" when absent.

    The trailing "%" is left to the caller so the color code can sit
    between the number and the label.
    """
    if percentage is None:
        return "N/A"
    return f"{percentage:.{decimals}f}"


def parse_reset_time(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 reset timestamp into an aware datetime.

    Naive timestamps are taken to be UTC. Returns None for missing or
    unparseable values.
    """
    if not value:
        return None
    try:
        parsed = _DATETIME_ADAPTER.validate_python(value)
    except ValidationError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_remaining(seconds: float) -> str:
    """Format a positive duration as "Xd Yh" (over 24 hours) or "Xh Ym"."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)

    if hours > 24:
        return f"{hours // 24}d {hours % 24}h"

    return f"{hours}h {minutes}m"


def format_clock(
    moment: datetime, use_24h: bool = False, include_weekday: bool = False
) -> str:
    """Format an instant as local wall-clock time.

    Args:
        moment: Aware datetime to render
        use_24h: "14:05" instead of "2:05pm"
        include_weekday: Prefix the abbreviated weekday ("Mon 14:05")

    Returns:
        Clock string in the local timezone
    """
    local = moment.astimezone()

    if use_24h:
        clock = f"{local.hour:02d}:{local.minute:02d}"
    else:
        hour = local.hour % 12 or 12
        suffix = "am" if local.hour < 12 else "pm"
        clock = f"{hour}:{local.minute:02d}{suffix}"

    if include_weekday:
        return f"{local.strftime('%a')} {clock}"
    return clock


def format_reset_time(
    resets_at: Optional[str],
    style: ResetStyle = ResetStyle.REMAINING,
    use_24h: bool = False,
    include_weekday: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """Format when a usage window resets.

    Args:
        resets_at: ISO-8601 reset timestamp from the API, or None
        style: Remaining duration or wall-clock time
        use_24h: 24-hour clock (clock style only)
        include_weekday: Prefix weekday (clock style only)
        now: Current time, defaults to the system clock

    Returns:
        "N/A" if unknown, "soon" if already due, otherwise the rendered time
    """
    reset = parse_reset_time(resets_at)
    if reset is None:
        return "N/A"

    if now is None:
        now = datetime.now(timezone.utc)

    remaining = (reset - now).total_seconds()
    if remaining <= 0:
        return "soon"

    if style == ResetStyle.CLOCK:
        return format_clock(reset, use_24h=use_24h, include_weekday=include_weekday)

    return format_remaining(remaining)
