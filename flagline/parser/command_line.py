# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandLine`, the result of a successful parse.

A `CommandLine` holds the options that were resolved (from tokens or from
defaults), the values recorded for each of them, the option chosen in each
option group, and the leftover positional arguments in arrival order.

Options can be looked up by any of their names, with or without hyphens:

    cmd = parse(options, ["-f", "in.txt", "-v", "-o", "out.txt"])
    cmd.has_option("file")           # True
    cmd.get_option_value("-f")       # "in.txt"
    cmd.get_option_values("o")       # ["out.txt"]
    cmd.get_args()                   # []
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from flagline.parser.option import Option


@dataclass
class CommandLine:
    """
    Parsed command line.

    Attributes:
        args (list[str]): Positional arguments, in arrival order.
        options (list[Option]): Resolved options, in resolution order.
        values (dict[str, list[str]]): Values recorded per option key. Options
            that take no value have no entry.
        selected (dict[str, str]): Selected option key per option group label.
    """

    args: list[str] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    values: dict[str, list[str]] = field(default_factory=dict)
    selected: dict[str, str] = field(default_factory=dict)

    def get_option(self, name: str) -> Option | None:
        """Return the resolved option answering to `name`, if any."""
        return next((option for option in self.options if option.matches(name)), None)

    def has_option(self, name: str) -> bool:
        """Check if the option answering to `name` was resolved."""
        return self.get_option(name) is not None

    def get_option_values(self, name: str) -> list[str] | None:
        """
        Return the values recorded for `name`.

        Returns None if the option was not resolved or takes no value. An empty
        list means the option was resolved but its optional value was omitted.
        """
        option = self.get_option(name)
        if option is None or option.key not in self.values:
            return None
        return list(self.values[option.key])

    def get_option_value(self, name: str, default: str | None = None) -> str | None:
        """Return the first value recorded for `name`, or `default`."""
        values = self.get_option_values(name)
        if not values:
            return default
        return values[0]

    def get_args(self) -> list[str]:
        """Return a copy of the positional arguments."""
        return list(self.args)

    def get_selected(self, group_label: str) -> str | None:
        """Return the key of the option selected in the group, if any."""
        return self.selected.get(group_label)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the parse result."""
        return {
            "options": {
                option.key: self.values.get(option.key, True)
                for option in self.options
            },
            "args": list(self.args),
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_option(name)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    def __str__(self) -> str:
        return (
            f"CommandLine(options={[option.key for option in self.options]}, "
            f"args={self.args})"
        )
