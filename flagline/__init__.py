"""
Flagline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import (
    Arity,
    CommandLine,
    CommandLineParser,
    Option,
    OptionGroup,
    Options,
    parse,
)

logger = logging.getLogger("flagline")


__all__ = [
    "Arity",
    "CommandLine",
    "CommandLineParser",
    "Option",
    "OptionGroup",
    "Options",
    "parse",
]
