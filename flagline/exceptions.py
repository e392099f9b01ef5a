# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagline.

Registration problems are reported as `OptionDefinitionError` when an option
registry is being built. Problems found while consuming tokens are reported as
subclasses of `ParseError`, each carrying the context needed to describe it.

All exceptions inherit from `FlaglineError`, the base exception for the package.

Exception Hierarchy:
- FlaglineError
    ├── OptionDefinitionError
    ├── ConfigError
    └── ParseError
        ├── UnrecognizedOptionError
        ├── MissingArgumentError
        ├── AlreadySelectedError
        ├── MissingRequiredOptionsError
        └── UnknownDefaultKeyError

Only the first `ParseError` of a parse is ever raised. Callers decide how to
present it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from flagline.parser.option import Option
    from flagline.parser.option_group import OptionGroup


class FlaglineError(Exception):
    """Base exception for Flagline."""


class OptionDefinitionError(FlaglineError):
    """Exception raised when an option or group is registered incorrectly."""


class ConfigError(FlaglineError):
    """Exception raised when a parser configuration file cannot be loaded."""


class ParseError(FlaglineError):
    """Base exception for failures while parsing command-line tokens."""


class UnrecognizedOptionError(ParseError):
    """Exception raised when a dashed token matches no registered option."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized option: {token}")


class MissingArgumentError(ParseError):
    """Exception raised when an option that needs a value received none."""

    def __init__(self, option_key: str):
        self.option_key = option_key
        super().__init__(f"Missing argument for option: {option_key}")


class AlreadySelectedError(ParseError):
    """Exception raised when two options of the same group are both given."""

    def __init__(self, group: OptionGroup, previous: Option, attempted: Option):
        self.group = group
        self.previous = previous
        self.attempted = attempted
        super().__init__(
            f"The option '{attempted.key}' was specified but an option from "
            f"group {group.label} has already been selected: '{previous.key}'"
        )


class MissingRequiredOptionsError(ParseError):
    """Exception raised when required options or groups were never satisfied."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        plural = "s" if len(self.missing) > 1 else ""
        super().__init__(f"Missing required option{plural}: {', '.join(self.missing)}")


class UnknownDefaultKeyError(ParseError):
    """Exception raised when a default value names an unknown option."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Default value given for unknown option: {key}")
