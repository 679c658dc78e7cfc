"""Command-line interface for Event Type Validator.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from event_type_validator import __version__
from event_type_validator.config import Settings, get_settings
from event_type_validator.exceptions import ConfigurationError, EventPayloadError
from event_type_validator.payloads import parse_create_request, parse_update_request
from event_type_validator.validation import get_valid_event_types, validate_event_type

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="event-types", description="Event Type Validator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the valid event types in order")

    check_parser = subparsers.add_parser("check", help="Check one or more event type labels")
    check_parser.add_argument("candidates", nargs="+", help="Event type labels to check")

    payload_parser = subparsers.add_parser(
        "payload",
        help="Validate an admin event request body stored as JSON",
    )
    payload_parser.add_argument(
        "file",
        help="Path to a JSON file containing the request body, or - for stdin",
    )
    payload_parser.add_argument(
        "--update",
        action="store_true",
        help="Validate as a partial update instead of a new event",
    )

    return parser


def _configure_logging(settings: Settings) -> None:
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {settings.log_level}")

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Keep stdout for command output.
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _cmd_list(args: argparse.Namespace) -> int:
    for event_type in get_valid_event_types():
        print(event_type)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    invalid = 0
    for candidate in args.candidates:
        error = validate_event_type(candidate)
        if error is None:
            print(f"ok\t{candidate}")
            continue

        invalid += 1
        logger.debug("event_type_rejected", candidate=candidate)
        print(f"invalid\t{candidate}\t{error}")

    return 1 if invalid else 0


def _load_body(file: str) -> Any:
    if file == "-":
        return json.load(sys.stdin)
    with Path(file).open(encoding="utf-8") as fh:
        return json.load(fh)


def _cmd_payload(args: argparse.Namespace) -> int:
    try:
        body = _load_body(args.file)
    except (OSError, ValueError) as e:
        logger.error("event_payload_unreadable", file=args.file, error=str(e))
        print(f"Could not read JSON from {args.file}: {e}", file=sys.stderr)
        return 2

    if not isinstance(body, dict):
        print("Request body must be a JSON object", file=sys.stderr)
        return 2

    try:
        if args.update:
            result = parse_update_request(body).model_dump(mode="json", exclude_unset=True)
        else:
            result = parse_create_request(body).model_dump(mode="json")
    except EventPayloadError as e:
        logger.info("event_payload_rejected", file=args.file, update=args.update, reason=str(e))
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Event Type Validator CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    try:
        _configure_logging(settings)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 2

    logger.debug("event_types_cli_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    if parsed.command == "list":
        return _cmd_list(parsed)
    if parsed.command == "check":
        return _cmd_check(parsed)
    if parsed.command == "payload":
        return _cmd_payload(parsed)

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
