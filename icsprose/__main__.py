"""Command-line entry for icsprose.

Reads an ICS file (or stdin) and prints the readable document, or the
structured event list as JSON with ``--json``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import NoReturn

from . import _init_logging
from .config_loader import Config, load_config
from .converter import convert_ics_to_readable_text, parse_ics
from .exceptions import ICSConfigError
from .ics_logging import configure_logging

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the icsprose CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="icsprose",
        description="Convert an iCalendar (.ics) file into readable text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  icsprose meeting.ics                      # Print Markdown summary
  icsprose --json meeting.ics               # Print structured events
  cat meeting.ics | icsprose -              # Read from stdin
        """,
    )

    parser.add_argument("path", metavar="ICS_FILE", help="Path to an .ics file, or - for stdin")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed events as JSON instead of formatted text",
    )
    parser.add_argument(
        "--timezone",
        metavar="TZ",
        help="IANA timezone for floating date-times (default: UTC or from config)",
    )
    parser.add_argument("--config", metavar="PATH", help="Path to a YAML config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> NoReturn:
    """Run the icsprose CLI."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        if args.timezone:
            cfg = Config.from_dict({"display_timezone": args.timezone, "log_level": cfg.log_level})
    except ICSConfigError as exc:
        parser.error(exc.message)

    _init_logging(cfg.log_level)
    configure_logging(force_debug=True if args.debug else None, level_name=cfg.log_level)

    display_timezone = cfg.display_timezone

    try:
        content = _read_input(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", args.path, exc)
        sys.exit(1)

    if args.json:
        events = parse_ics(content, display_timezone)
        payload = [event.model_dump(by_alias=True, exclude_none=True) for event in events]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(convert_ics_to_readable_text(content, display_timezone))

    sys.exit(0)


if __name__ == "__main__":
    main()
