# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionGroup`, a set of mutually exclusive options.

At most one option of a group may be selected per parse. The selection itself
is per-parse state held by `ParseState`; the group only records membership.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OptionGroup:
    """
    Represents a set of mutually exclusive options.

    Attributes:
        option_keys (list[str]): Keys of the member options, in registration order.
        required (bool): True if one of the options must be supplied.
        name (str | None): Optional name used when reporting the group.
    """

    option_keys: list[str] = field(default_factory=list)
    required: bool = False
    name: str | None = None

    @property
    def label(self) -> str:
        """Name used for the group in error messages."""
        if self.name:
            return self.name
        return f"[{' | '.join(self.option_keys)}]"

    def __contains__(self, option_key: object) -> bool:
        return option_key in self.option_keys

    def __hash__(self) -> int:
        return id(self)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __str__(self) -> str:
        return self.label
