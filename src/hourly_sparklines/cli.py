"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import requests

from hourly_sparklines import __version__
from hourly_sparklines.analysis import ForecastView, build_forecast, validate_windows
from hourly_sparklines.config import Settings, get_settings
from hourly_sparklines.datasources.weather import ForecastError, fetch_hourly_forecast
from hourly_sparklines.renderers.html import build_forecast_html
from hourly_sparklines.renderers.text import format_rows

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="hourly-sparklines",
        description="Today's hourly forecast as sparklines, with highlighted time windows",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Shared location / clock options for commands that fetch
    fetch_opts = argparse.ArgumentParser(add_help=False)
    fetch_opts.add_argument("--lat", type=float, default=None, help="Latitude override")
    fetch_opts.add_argument("--lon", type=float, default=None, help="Longitude override")
    fetch_opts.add_argument(
        "--hour",
        type=int,
        choices=range(24),
        metavar="HOUR",
        default=None,
        help="Hour to mark as now, 0-23 (default: current local hour)",
    )

    forecast_parser = subparsers.add_parser(
        "forecast", parents=[fetch_opts], help="Print today's forecast rows"
    )
    forecast_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors",
    )

    html_parser = subparsers.add_parser(
        "html", parents=[fetch_opts], help="Render today's forecast as an HTML table"
    )
    html_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout",
    )

    subparsers.add_parser("check", help="Validate the configured time windows")
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(settings: Settings, debug: bool = False) -> None:
    """Set up root logging from settings (``--debug`` wins)."""
    level = logging.DEBUG if debug or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_forecast(args: argparse.Namespace, settings: Settings) -> ForecastView | None:
    """Fetch and build the forecast; print a failure message and return None on error."""
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    current_hour = args.hour if args.hour is not None else datetime.now().hour

    try:
        samples = fetch_hourly_forecast(
            lat,
            lon,
            timezone=settings.timezone,
            temperature_unit=settings.temperature_unit,
        )
    except (ForecastError, ValueError, requests.RequestException) as e:
        logger.debug("Forecast fetch failed", exc_info=True)
        print(f"Error: could not load forecast: {e}", file=sys.stderr)
        return None

    return build_forecast(
        samples,
        current_hour,
        settings.windows,
        temperature_unit=settings.temperature_unit,
    )


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    view = _load_forecast(args, settings)
    if view is None:
        return 1

    if not view.rows:
        print("No forecast data available.")
        return 0

    color = settings.color and not args.no_color
    print(format_rows(view.rows, color=color))
    return 0


def cmd_html(args: argparse.Namespace) -> int:
    """Handle the 'html' command."""
    settings = get_settings()
    view = _load_forecast(args, settings)
    if view is None:
        return 1

    html = build_forecast_html(view.rows)
    if args.output is None:
        print(html)
    else:
        args.output.write_text(html, encoding="utf-8")
        print(f"Wrote {args.output}")
    return 0


def cmd_check(_args: argparse.Namespace) -> int:
    """Handle the 'check' command: report window problems without failing."""
    settings = get_settings()
    report = validate_windows(settings.windows)

    for window in report.windows:
        print(f"{window.name}: {window.start_hour}:00-{window.end_hour}:00 ({window.style})")

    if report.ok:
        print("All time windows are valid.")
        return 0

    for invalid in report.invalid:
        print(f"Warning: invalid window {invalid}")
    for overlap in report.overlaps:
        print(f"Warning: {overlap}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"Time windows: {len(settings.windows)}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings(), debug=args.debug)

    commands = {
        "forecast": cmd_forecast,
        "html": cmd_html,
        "check": cmd_check,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
