"""
Command-line entry point for vpnsettings.

Layers a settings file over the defaults, optionally applies an override
file, validates the result and prints the summary and warnings.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from vpnsettings.config.errors import SettingsValidationError
from vpnsettings.config.loader import build_settings_from_raw, load_raw_settings
from vpnsettings.config.models import Settings
from vpnsettings.config.storage import ServersFileStorage, Storage
from vpnsettings.logging import (
    apply_settings_level,
    configure_logging_from_args,
    exception_exc_info,
    format_exception_summary,
    get_logger,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="vpnsettings",
        description="Validate and summarize VPN client settings",
        epilog="Use 'vpnsettings <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        required=True,
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a settings file and print its summary",
    )
    check_parser.add_argument(
        "settings",
        type=Path,
        help="Settings file (.json, .yaml, or .yml)",
    )
    check_parser.add_argument(
        "--override",
        type=Path,
        help="Settings file applied on top, only if the result is valid",
    )
    check_parser.add_argument(
        "--servers",
        type=Path,
        help="Servers file used to validate server selection filters",
    )
    check_parser.add_argument(
        "--ipv6",
        action="store_true",
        help="Treat the host network stack as IPv6 capable",
    )

    return parser


def run_check(args: argparse.Namespace) -> int:
    storage: Storage = ServersFileStorage.from_file(args.servers) if args.servers else ServersFileStorage({})

    settings = Settings()
    settings.merge_with(build_settings_from_raw(load_raw_settings(args.settings)))
    settings.set_defaults()

    try:
        settings.validate(storage, args.ipv6)
        if args.override:
            override = build_settings_from_raw(load_raw_settings(args.override))
            settings.override_with(override, storage, args.ipv6)
    except SettingsValidationError as exc:
        logger.debug("Settings check failed", exc_info=exception_exc_info(exc))
        print(f"Invalid settings: {format_exception_summary(exc)}", file=sys.stderr)
        return 1

    if not args.log_level and not args.verbose:
        apply_settings_level(settings.log.level)

    print(settings)
    for warning in settings.warnings():
        logger.warning(warning)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    if args.command == "check":
        try:
            return run_check(args)
        except (FileNotFoundError, ValueError) as exc:
            print(f"Error: {format_exception_summary(exc)}", file=sys.stderr)
            return 2

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
