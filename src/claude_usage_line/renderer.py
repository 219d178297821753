"""Rendering pipeline for the usage line."""

from datetime import datetime
from typing import Optional

from .types import DisplayMode, DisplayOptions, UsageSnapshot, UsageWindow
from .utils.colors import RESET, get_color_code, get_text_color_code, get_usage_color
from .utils.formatting import format_percentage, format_reset_time, render_progress_bar

SEPARATOR = " | "


def render_window(
    label: str,
    window: UsageWindow,
    options: DisplayOptions,
    include_weekday: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """Render one usage window.

    Layout: "{text}{label}: {bar}{color}{value}%{text} ({reset})"

    Args:
        label: Window label (e.g., "Session")
        window: Utilization and reset time from the API
        options: Display options
        include_weekday: Prefix clock-style reset times with the weekday
        now: Current time, defaults to the system clock

    Returns:
        Colorized window segment, without a trailing reset code
    """
    text_color = get_text_color_code(options.text_color)
    usage_color = get_color_code(get_usage_color(window.utilization))

    bar = ""
    if options.show_bars:
        progress = render_progress_bar(window.utilization or 0, options.bar_length)
        bar = f"{usage_color}{progress} "

    value = format_percentage(window.utilization)
    reset = format_reset_time(
        window.resets_at,
        style=options.reset_style,
        use_24h=options.use_24h,
        include_weekday=include_weekday,
        now=now,
    )

    return f"{text_color}{label}: {bar}{usage_color}{value}%{text_color} ({reset})"


def render_usage_line(
    snapshot: UsageSnapshot, options: DisplayOptions, now: Optional[datetime] = None
) -> str:
    """Render the complete usage line.

    Args:
        snapshot: Parsed usage response
        options: Display options
        now: Current time, defaults to the system clock

    Returns:
        Single line with ANSI colors, terminated by a reset code
    """
    segments = []

    if options.mode in (DisplayMode.SESSION, DisplayMode.BOTH):
        segments.append(
            render_window(options.session_label, snapshot.five_hour, options, now=now)
        )

    if options.mode in (DisplayMode.WEEK, DisplayMode.BOTH):
        # Weekly resets can be days away, so the clock time needs a weekday
        segments.append(
            render_window(
                options.week_label,
                snapshot.seven_day,
                options,
                include_weekday=True,
                now=now,
            )
        )

    return SEPARATOR.join(segments) + RESET
