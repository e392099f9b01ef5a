# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, an enum describing how many values an option consumes.

Supports alias coercion for shorthand or config-friendly values, so option
definitions loaded from YAML or TOML can use familiar notation.

Example:
    Arity("one")  → Arity.ONE
    Arity("?")    → Arity.OPTIONAL (via alias)
    Arity("flag") → Arity.NONE (via alias)
"""
from __future__ import annotations

from enum import Enum


class Arity(Enum):
    """
    Number of values an option accepts.

    Members:
        NONE: The option is a flag and takes no value.
        ONE: The option takes exactly one value.
        UNBOUNDED: The option takes one or more values.
        OPTIONAL: The option takes at most one value, and may take none.

    Aliases:
        - "flag", "0" → "none"
        - "1" → "one"
        - "*", "+", "many" → "unbounded"
        - "?" → "optional"
    """

    NONE = "none"
    ONE = "one"
    UNBOUNDED = "unbounded"
    OPTIONAL = "optional"

    @classmethod
    def choices(cls) -> list[Arity]:
        """Return a list of all arities."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "none",
            "0": "none",
            "1": "one",
            "*": "unbounded",
            "+": "unbounded",
            "many": "unbounded",
            "?": "optional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """True if the option consumes values after its flag."""
        return self is not Arity.NONE

    @property
    def value_optional(self) -> bool:
        """True if the option may legitimately end up with no value."""
        return self is Arity.OPTIONAL

    @property
    def capacity(self) -> int | None:
        """Maximum number of values, or None when unbounded."""
        if self is Arity.NONE:
            return 0
        if self is Arity.UNBOUNDED:
            return None
        return 1

    def __str__(self) -> str:
        """Return the string representation of the arity."""
        return self.value
