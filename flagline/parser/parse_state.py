# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-parse state for the Flagline parse engine.

`ParseState` owns everything a single parse mutates: the current `ParseMode`,
the option waiting for values, the values recorded for each option, the
selection made in each option group, the required options still outstanding,
and the positional arguments collected so far.

The option registry is only read. A fresh `ParseState` is created for every
parse, so parses never observe each other's values or group selections.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from flagline.exceptions import AlreadySelectedError, MissingArgumentError
from flagline.logger import logger
from flagline.parser.command_line import CommandLine
from flagline.parser.option import Option
from flagline.parser.option_group import OptionGroup
from flagline.parser.options import Options


class ParseMode(Enum):
    """Engine state while walking the token sequence."""

    SCANNING = "scanning"
    CONSUMING = "consuming"
    DRAINING = "draining"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseState:
    """Tracks the progress of a single parse."""

    options: Options
    mode: ParseMode = ParseMode.SCANNING
    consuming: Option | None = None
    values: dict[str, list[str]] = field(default_factory=dict)
    present: dict[str, Option] = field(default_factory=dict)
    selected: dict[OptionGroup, str] = field(default_factory=dict)
    pending_required: list[str | OptionGroup] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    @classmethod
    def start(cls, options: Options) -> ParseState:
        """Create the state for a new parse against `options`."""
        return cls(options=options, pending_required=options.get_required_options())

    def has_option(self, option: Option) -> bool:
        return option.key in self.present

    def has_values(self, option: Option) -> bool:
        return bool(self.values.get(option.key))

    def add_value(self, option: Option, value: str) -> bool:
        """
        Record `value` for `option`.

        Returns False, without recording anything, when the option takes no
        value or already holds as many values as its arity allows.
        """
        if not option.takes_value:
            return False
        current = self.values.setdefault(option.key, [])
        capacity = option.arity.capacity
        if capacity is not None and len(current) >= capacity:
            return False
        current.append(value)
        return True

    def resolve(self, option: Option) -> None:
        """
        Mark `option` as present.

        Satisfies its required entry, selects it in its group (satisfying the
        group's required entry) and registers it for the result.

        Raises:
            AlreadySelectedError: If another option of its group was already selected.
        """
        if option.required and option.key in self.pending_required:
            self.pending_required.remove(option.key)

        group = self.options.get_option_group(option)
        if group is not None:
            previous_key = self.selected.get(group)
            if previous_key is not None and previous_key != option.key:
                previous = self.options.get_option(previous_key)
                assert previous is not None, "selected option must be registered"
                raise AlreadySelectedError(group, previous, option)
            self.selected[group] = option.key
            if group.required and group in self.pending_required:
                self.pending_required.remove(group)

        self.present.setdefault(option.key, option)

    def start_consuming(self, option: Option) -> None:
        self.mode = ParseMode.CONSUMING
        self.consuming = option
        self.values.setdefault(option.key, [])

    def finish_consuming(self) -> None:
        """
        Leave consuming mode.

        Raises:
            MissingArgumentError: If the option received no value and its value
                is not optional.
        """
        option = self.consuming
        assert option is not None, "finish_consuming called while not consuming"
        self.mode = ParseMode.SCANNING
        self.consuming = None
        if not self.has_values(option) and not option.value_optional:
            raise MissingArgumentError(option.key)

    def start_draining(self) -> None:
        logger.debug("Draining remaining tokens as positional arguments")
        self.mode = ParseMode.DRAINING

    def add_arg(self, token: str) -> None:
        self.args.append(token)

    def to_command_line(self) -> CommandLine:
        """Build the `CommandLine` result from the collected state."""
        return CommandLine(
            args=list(self.args),
            options=list(self.present.values()),
            values={
                key: list(values)
                for key, values in self.values.items()
                if key in self.present
            },
            selected={group.label: key for group, key in self.selected.items()},
        )
