"""
Flagline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape

from flagline.config import FLATTENERS, loader
from flagline.console import console, error_console
from flagline.exceptions import ConfigError, ParseError
from flagline.utils import setup_logging


def get_root_parser(prog: str | None = "flagline") -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the Flagline tool.

    Includes the following arguments:
        config                : YAML or TOML file describing the options.
        tokens                : Command-line tokens to parse.
        --flattener           : Override the configured flattener.
        --stop-at-non-option  : Drain everything after the first non-option.
        -v / --verbose        : Enable debug logging.
    """
    parser = ArgumentParser(
        prog=prog,
        description="Flagline - Parse command-line tokens against an option registry.",
        epilog=(
            "Options for flagline itself (--flattener, --stop-at-non-option, -v) "
            "must come before CONFIG; everything after CONFIG is parsed as tokens. "
            "Example: flagline --flattener posix parser.yaml -f in.txt -o out.txt"
        ),
    )
    parser.add_argument("config", help="Path to a YAML or TOML parser configuration.")
    parser.add_argument(
        "tokens",
        nargs=REMAINDER,
        help="Command-line tokens to parse. Everything after CONFIG is taken as-is.",
    )
    parser.add_argument(
        "--flattener",
        choices=sorted(FLATTENERS),
        default=None,
        help="Flattener used to expand tokens before parsing.",
    )
    parser.add_argument(
        "--stop-at-non-option",
        action="store_true",
        default=None,
        help="Treat every token from the first non-option onwards as positional.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(args: Namespace) -> int:
    try:
        config = loader(args.config)
    except (ConfigError, FileNotFoundError) as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    if args.flattener:
        config.flattener = args.flattener
    if args.stop_at_non_option is not None:
        config.stop_at_non_option = args.stop_at_non_option

    try:
        command_line = config.parse(args.tokens)
    except ParseError as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 1

    console.print_json(data=command_line.to_dict())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode="cli",
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
