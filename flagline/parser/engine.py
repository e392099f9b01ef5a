# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the Flagline parse engine: a single left-to-right pass
over flattened command-line tokens that validates them against an `Options`
registry and builds a `CommandLine`.

Pipeline:
1. The configured flattener expands raw tokens (`-abc`, `--opt=value`, ...).
2. Each token is classified and handled according to the current `ParseMode`.
3. Defaults are merged into options the tokens did not resolve.
4. Required options and groups that are still outstanding are reported.

Token handling:
- While consuming values for an option, a token naming a known option ends
  consumption and is handled as an option. Any other token is recorded as a
  value (one pair of wrapping quotes removed) until the option is full, at
  which point the token is handled normally.
- `--` switches to draining: every later token is a positional argument,
  except further `--` tokens, which are dropped.
- `-` is a positional argument, or starts draining when stopping at the first
  non-option.
- An unknown dashed token is an error, or starts draining (and is kept) when
  stopping at the first non-option.
- A known option is resolved and, if it takes values, starts consuming.
- Anything else is a positional argument, and starts draining when stopping at
  the first non-option.

The first error ends the parse. Effects applied before the error are not
rolled back.

Example Usage:
    options = Options()
    options.add_option("-f", "--file", arity="one")
    options.add_option("-v")
    options.add_option("-o", arity="one", required=True)

    cmd = parse(options, ["-f", "in.txt", "-v", "-o", "out.txt"])
    cmd.get_option_value("file")  # "in.txt"
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from flagline.exceptions import MissingRequiredOptionsError, UnrecognizedOptionError
from flagline.logger import logger
from flagline.parser.classifier import TERMINATOR, TokenKind, classify_token
from flagline.parser.command_line import CommandLine
from flagline.parser.flatteners import basic_flatten
from flagline.parser.options import Options
from flagline.parser.parse_state import ParseMode, ParseState
from flagline.parser.properties import merge_properties
from flagline.protocols import FlattenerProtocol
from flagline.utils import strip_matching_quotes


class CommandLineParser:
    """
    Parses command-line tokens against an `Options` registry.

    The parser holds no per-parse state; each call to `parse()` works on its own
    `ParseState`, so one parser and one registry can be reused freely.

    Args:
        flattener (FlattenerProtocol): Callable expanding raw tokens before the
            pass. Defaults to `basic_flatten`, which leaves tokens untouched.
    """

    def __init__(self, flattener: FlattenerProtocol = basic_flatten) -> None:
        self.flattener: FlattenerProtocol = flattener

    def parse(
        self,
        options: Options,
        arguments: Sequence[str] | None = None,
        defaults: Mapping[str, Any] | None = None,
        stop_at_non_option: bool = False,
        break_on_false_flag: bool = True,
    ) -> CommandLine:
        """
        Parse `arguments` against `options`.

        Args:
            options (Options): Registry of known options.
            arguments (Sequence[str] | None): Raw tokens. None is treated as empty.
            defaults (Mapping[str, Any] | None): Default values for options the
                tokens do not resolve.
            stop_at_non_option (bool): Treat every token from the first
                non-option onwards as a positional argument.
            break_on_false_flag (bool): Stop merging defaults at the first flag
                default that is not truthy.

        Returns:
            CommandLine: The parsed command line.

        Raises:
            UnrecognizedOptionError: If a dashed token matches no option.
            MissingArgumentError: If an option received no required value.
            AlreadySelectedError: If two options of one group are given.
            UnknownDefaultKeyError: If a default names an unknown option.
            MissingRequiredOptionsError: If required options or groups are absent.
        """
        tokens = self.flattener(options, list(arguments or []), stop_at_non_option)
        logger.debug(
            "Parsing tokens %s (stop_at_non_option=%s)", tokens, stop_at_non_option
        )

        state = ParseState.start(options)
        for token in tokens:
            self._handle_token(token, state, stop_at_non_option)

        if state.mode is ParseMode.CONSUMING:
            state.finish_consuming()

        if defaults:
            merge_properties(state, defaults, break_on_false_flag=break_on_false_flag)

        if state.pending_required:
            missing = [str(entry) for entry in state.pending_required]
            raise MissingRequiredOptionsError(missing)

        return state.to_command_line()

    def _handle_token(
        self, token: str, state: ParseState, stop_at_non_option: bool
    ) -> None:
        if state.mode is ParseMode.CONSUMING:
            assert state.consuming is not None, "consuming mode without an option"
            if classify_token(token, state.options) is TokenKind.KNOWN_OPTION:
                state.finish_consuming()
            elif state.add_value(state.consuming, strip_matching_quotes(token)):
                return
            else:
                state.finish_consuming()

        if state.mode is ParseMode.DRAINING:
            if token != TERMINATOR:
                state.add_arg(token)
            return

        kind = classify_token(token, state.options)
        if kind is TokenKind.TERMINATOR:
            state.start_draining()
        elif kind is TokenKind.LONE_DASH:
            if stop_at_non_option:
                state.start_draining()
            else:
                state.add_arg(token)
        elif kind is TokenKind.UNKNOWN_DASHED:
            if not stop_at_non_option:
                raise UnrecognizedOptionError(token)
            state.add_arg(token)
            state.start_draining()
        elif kind is TokenKind.KNOWN_OPTION:
            option = state.options.get_option(token)
            assert option is not None, "known option must resolve"
            logger.debug("Resolving option '%s' from token '%s'", option.key, token)
            state.resolve(option)
            if option.takes_value:
                state.start_consuming(option)
        else:
            state.add_arg(token)
            if stop_at_non_option:
                state.start_draining()


def parse(
    options: Options,
    arguments: Sequence[str] | None = None,
    defaults: Mapping[str, Any] | None = None,
    stop_at_non_option: bool = False,
    flattener: FlattenerProtocol = basic_flatten,
    break_on_false_flag: bool = True,
) -> CommandLine:
    """Parse `arguments` against `options` with a one-off `CommandLineParser`."""
    return CommandLineParser(flattener=flattener).parse(
        options,
        arguments,
        defaults=defaults,
        stop_at_non_option=stop_at_non_option,
        break_on_false_flag=break_on_false_flag,
    )
