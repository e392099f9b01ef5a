# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `Options` to describe a single
command-line option.

An `Option` is a pure definition: it never stores the values seen during a
parse. Values live in the per-parse `ParseState` and are handed to the caller
through `CommandLine`, so one registry can serve any number of parses.

Key Attributes:
- `opt`: Short name without hyphens (e.g. `f` for `-f`)
- `long_opt`: Long name without hyphens (e.g. `file` for `--file`)
- `arity`: `Arity` describing how many values the option consumes
- `required`: Whether the option must appear in every parse
- `help`: Description of the option
"""
from __future__ import annotations

from dataclasses import dataclass

from flagline.parser.arity import Arity
from flagline.utils import strip_leading_hyphens


@dataclass(frozen=True)
class Option:
    """
    Represents a command-line option.

    Attributes:
        opt (str | None): Short name of the option, without leading hyphens.
        long_opt (str | None): Long name of the option, without leading hyphens.
        arity (Arity): Number of values the option consumes.
        required (bool): True if the option must be supplied.
        help (str): Help text for the option.
    """

    opt: str | None = None
    long_opt: str | None = None
    arity: Arity = Arity.NONE
    required: bool = False
    help: str = ""

    @property
    def key(self) -> str:
        """Identifier of the option: the short name, or the long name if absent."""
        key = self.opt or self.long_opt
        assert key is not None, "option must have a name"
        return key

    @property
    def names(self) -> tuple[str, ...]:
        """All names the option answers to, without hyphens."""
        return tuple(name for name in (self.opt, self.long_opt) if name)

    @property
    def flags(self) -> tuple[str, ...]:
        """All names the option answers to, in `-x` / `--long` form."""
        flags = []
        if self.opt:
            flags.append(f"-{self.opt}")
        if self.long_opt:
            flags.append(f"--{self.long_opt}")
        return tuple(flags)

    @property
    def takes_value(self) -> bool:
        return self.arity.takes_value

    @property
    def value_optional(self) -> bool:
        return self.arity.value_optional

    def matches(self, name: str) -> bool:
        """Check if `name` (with or without hyphens) refers to this option."""
        return strip_leading_hyphens(name) in self.names

    def __str__(self) -> str:
        return (
            f"Option(flags={', '.join(self.flags)}, arity={self.arity}, "
            f"required={self.required})"
        )
