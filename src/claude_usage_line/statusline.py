#!/usr/bin/env python3

import argparse
import sys

from typing import NoReturn, Optional, Sequence

from .config.loader import load_config
from .config.schema import UsageLineConfig
from .errors import CredentialUnavailable, InvalidArgumentsError, UsageLineError
from .renderer import render_usage_line
from .types import DisplayMode, DisplayOptions, ResetStyle
from .utils.credentials import get_token
from .utils.debug import debug_log, set_debug
from .utils.usage_api import fetch_usage

PLACEHOLDER = "N/A"
MAX_LABELS = 2


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = _ArgumentParser(
        prog="claude-usage-line",
        description="Claude subscription usage (session and week) as one colored line",
        epilog=(
            "Text colors: default, white, light-grey, mid-grey, dark-grey. "
            "Prints N/A when credentials or usage data are unavailable."
        ),
    )
    parser.add_argument(
        "labels",
        nargs="*",
        metavar="LABEL",
        help="custom labels for the shown windows, in order (default: Session, Week)",
    )

    mode = parser.add_argument_group("display mode")
    for flag, value, help_text in (
        ("--session", DisplayMode.SESSION, "show only the five-hour session window"),
        ("--week", DisplayMode.WEEK, "show only the seven-day window"),
        ("--both", DisplayMode.BOTH, "show both windows (default)"),
    ):
        mode.add_argument(
            flag, dest="mode", action="store_const", const=value, help=help_text
        )

    parser.add_argument(
        "--text-color",
        metavar="NAME",
        help="color for labels and reset times (default: light-grey)",
    )
    parser.add_argument(
        "--no-bars",
        dest="show_bars",
        action="store_false",
        default=None,
        help="hide progress bars",
    )
    parser.add_argument(
        "--24h",
        dest="use_24h",
        action="store_true",
        default=None,
        help="show reset times as 24-hour clock times",
    )
    parser.add_argument(
        "--clock",
        action="store_true",
        help="show reset times as clock times instead of time remaining",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="write diagnostics to stderr",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, ignoring unknown flags.

    Raises:
        InvalidArgumentsError: If a known option is malformed
    """
    if argv is None:
        argv = sys.argv[1:]
    # Enable early so argument errors are reported too
    if "--debug" in argv:
        set_debug(True)

    parser = create_argument_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)
    if args.debug:
        set_debug(True)
    if unknown:
        debug_log(f"Ignoring unknown arguments: {unknown}")
    return args


def build_display_options(
    args: argparse.Namespace, config: UsageLineConfig
) -> DisplayOptions:
    """Merge parsed flags over config file defaults.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration

    Returns:
        Resolved display options
    """
    mode = args.mode or DisplayMode.BOTH

    session_label = config.labels.session
    week_label = config.labels.week
    labels = (args.labels or [])[:MAX_LABELS]
    if mode == DisplayMode.WEEK:
        if labels:
            week_label = labels[0]
    else:
        if len(labels) > 0:
            session_label = labels[0]
        if len(labels) > 1:
            week_label = labels[1]

    use_24h = config.use_24h if args.use_24h is None else args.use_24h
    reset_style = config.reset_style
    if args.clock or args.use_24h:
        reset_style = ResetStyle.CLOCK

    return DisplayOptions(
        mode=mode,
        session_label=session_label,
        week_label=week_label,
        text_color=args.text_color or config.text_color,
        show_bars=config.show_bars if args.show_bars is None else args.show_bars,
        bar_length=config.bar_length,
        use_24h=use_24h,
        reset_style=reset_style,
        timeout=config.timeout,
        debug=args.debug,
    )


def run(argv: Optional[Sequence[str]] = None) -> str:
    """Produce the usage line.

    Raises:
        UsageLineError: On any failure; main() turns it into the placeholder
    """
    args = parse_arguments(argv)
    options = build_display_options(args, load_config())
    debug_log(f"Display options: {options}")

    token = get_token()
    if not token:
        raise CredentialUnavailable("No Claude OAuth access token found")

    snapshot = fetch_usage(token, timeout=options.timeout)
    debug_log(f"Usage snapshot: {snapshot}")

    return render_usage_line(snapshot, options)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point. Always exits 0 so the host status line never breaks."""
    try:
        output = run(argv)
    except UsageLineError as e:
        debug_log(f"{type(e).__name__}: {e}")
        output = PLACEHOLDER

    print(output)


if __name__ == "__main__":
    main()
