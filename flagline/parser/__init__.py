"""
Flagline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arity import Arity
from .classifier import TokenKind, classify_token
from .command_line import CommandLine
from .engine import CommandLineParser, parse
from .flatteners import basic_flatten, gnu_flatten, posix_flatten
from .option import Option
from .option_group import OptionGroup
from .options import Options
from .parse_state import ParseMode, ParseState
from .properties import merge_properties

__all__ = [
    "Arity",
    "CommandLine",
    "CommandLineParser",
    "Option",
    "OptionGroup",
    "Options",
    "ParseMode",
    "ParseState",
    "TokenKind",
    "basic_flatten",
    "classify_token",
    "gnu_flatten",
    "merge_properties",
    "parse",
    "posix_flatten",
]
