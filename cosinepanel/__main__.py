"""
cosinepanel entry point.

Usage:
    python -m cosinepanel
    python -m cosinepanel --amplitude 2 --period 4 --length 3 --delay 1
    python -m cosinepanel --theme cyberpunk --loglevel DEBUG
"""

import sys
import argparse

from .logging import DEFAULT_LOG_FILE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="cosinepanel - interactive control panel for a finite cosine signal"
    )
    parser.add_argument("--name", default="x", help="Signal name shown on the x axis (default: x)")
    parser.add_argument("--amplitude", type=float, default=1.0, help="Amplitude (default: 1)")
    parser.add_argument("--period", type=float, default=1.0, help="Period, must be positive (default: 1)")
    parser.add_argument("--phase", type=float, default=0.0, help="Phase in radians (default: 0)")
    parser.add_argument("--length", type=int, default=1, help="Number of periods, >= 1 (default: 1)")
    parser.add_argument("--delay", type=float, default=0.0, help="Start time of the signal (default: 0)")
    parser.add_argument(
        "--theme",
        default=None,
        help="Theme id (classic, cyberpunk). Defaults to the saved setting"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING). DEBUG writes to /tmp/cosinepanel_debug.log"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )
    return parser


def main(argv=None):
    """Main entry point for cosinepanel."""
    parser = build_parser()
    args = parser.parse_args(argv)

    from .logging import setup_logging
    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    from .core.signal_model import CosineParameters
    try:
        params = CosineParameters(
            name=args.name,
            amplitude=args.amplitude,
            period=args.period,
            phase=args.phase,
            length=args.length,
            delay=args.delay,
        )
    except ValueError as exc:
        parser.error(str(exc))

    # Import here to avoid slow startup for --help
    from .gui.app import run_app

    sys.exit(run_app(params=params, theme_id=args.theme))


if __name__ == "__main__":
    main()
