# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Merges default values into a parse after the token pass.

Defaults are an ordered mapping of option name to value, typically read from a
configuration file. An entry only applies to an option that the command line
did not already resolve:

- An option that takes a value receives the default as its sole value, unless
  values were already recorded for it.
- A flag option is switched on only when the default is `yes`, `true` or `1`
  (case-insensitive).

The first flag default that is not truthy ends the merge: later entries are
not applied. Pass `break_on_false_flag=False` to skip just that entry instead.
"""
from __future__ import annotations

from typing import Any, Mapping

from flagline.exceptions import UnknownDefaultKeyError
from flagline.logger import logger
from flagline.parser.parse_state import ParseState
from flagline.utils import is_truthy_flag, stringify_default


def merge_properties(
    state: ParseState,
    defaults: Mapping[str, Any],
    break_on_false_flag: bool = True,
) -> None:
    """
    Apply `defaults` to the options `state` has not resolved yet.

    Args:
        state (ParseState): State left by a successful token pass.
        defaults (Mapping[str, Any]): Option name to default value, in order.
        break_on_false_flag (bool): Stop at the first flag default that is not
            truthy instead of skipping only that entry.

    Raises:
        UnknownDefaultKeyError: If a name does not match a registered option.
        AlreadySelectedError: If a default selects a second option of a group.
    """
    for name, raw_value in defaults.items():
        option = state.options.get_option(name)
        if option is None:
            raise UnknownDefaultKeyError(name)
        if state.has_option(option):
            continue

        value = stringify_default(raw_value)
        if option.takes_value:
            if not state.has_values(option):
                state.add_value(option, value)
        elif not is_truthy_flag(value):
            if break_on_false_flag:
                logger.debug(
                    "Default '%s=%s' is not truthy, ignoring remaining defaults",
                    name,
                    value,
                )
                break
            logger.debug("Default '%s=%s' is not truthy, skipping", name, value)
            continue

        logger.debug("Resolved '%s' from defaults", option.key)
        state.resolve(option)
