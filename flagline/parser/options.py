# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Options`, the registry of known options consulted by the
parse engine.

The registry answers three questions for the engine:
- does a token name a known option (`has_option`, `get_option`)?
- which group, if any, does an option belong to (`get_option_group`)?
- which options and groups must be present (`get_required_options`)?

It is never mutated by a parse. All per-parse state lives in `ParseState`, so a
single registry can be shared between any number of parses.

Example Usage:
    options = Options()
    options.add_option("-f", "--file", arity="one", help="Input file")
    options.add_option("-v", help="Verbose output")
    options.add_option("-o", arity="one", required=True)
    options.add_option("--json")
    options.add_option("--yaml")
    options.add_group("--json", "--yaml", required=True)
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from flagline.exceptions import OptionDefinitionError
from flagline.logger import logger
from flagline.parser.arity import Arity
from flagline.parser.option import Option
from flagline.parser.option_group import OptionGroup
from flagline.utils import strip_leading_hyphens

NAME_EXTRA_CHARS = frozenset("-_?@")


class Options:
    """
    Registry of the options and option groups a command line may contain.

    Options are keyed by their short name, or by their long name when they have
    no short name. Lookups accept any registered name with or without leading
    hyphens, so `-f`, `--file`, `f` and `file` all resolve the same option.
    """

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}
        self._name_map: dict[str, Option] = {}
        self._groups: list[OptionGroup] = []
        self._group_map: dict[str, OptionGroup] = {}
        self._required: list[str | OptionGroup] = []

    def _validate_name(self, name: str, flag: str) -> None:
        if not name:
            raise OptionDefinitionError(f"Flag '{flag}' has no name")
        if name[0] == "-":
            raise OptionDefinitionError(
                f"Flag '{flag}' must start with '-' or '--' followed by a name"
            )
        if any(not char.isalnum() and char not in NAME_EXTRA_CHARS for char in name):
            raise OptionDefinitionError(
                f"Flag '{flag}' contains illegal characters "
                "(letters, digits, '-', '_', '?' and '@' only)"
            )
        if name in self._name_map:
            raise OptionDefinitionError(f"Flag '{flag}' is already registered")

    def _split_flags(self, flags: tuple[str, ...]) -> tuple[str | None, str | None]:
        """Convert `-x` / `--long` flags to (short name, long name)."""
        if not flags:
            raise OptionDefinitionError("No flags provided")
        opt: str | None = None
        long_opt: str | None = None
        for flag in flags:
            if not isinstance(flag, str):
                raise OptionDefinitionError(f"Flag '{flag}' must be a string")
            if flag.startswith("--"):
                if long_opt is not None:
                    raise OptionDefinitionError(
                        f"Option cannot have more than one long flag: {flags}"
                    )
                long_opt = flag[2:]
                self._validate_name(long_opt, flag)
            elif flag.startswith("-"):
                if opt is not None:
                    raise OptionDefinitionError(
                        f"Option cannot have more than one short flag: {flags}"
                    )
                opt = flag[1:]
                self._validate_name(opt, flag)
            else:
                raise OptionDefinitionError(
                    f"Flag '{flag}' must start with '-' or '--'"
                )
        if opt is not None and opt == long_opt:
            raise OptionDefinitionError(f"Short and long flags must differ: {flags}")
        return opt, long_opt

    def add_option(
        self,
        *flags: str,
        arity: Arity | str = Arity.NONE,
        required: bool = False,
        help: str = "",
    ) -> Option:
        """
        Create and register a new option.

        Args:
            *flags (str): One short (`-f`) and/or one long (`--file`) flag.
            arity (Arity | str): Number of values the option consumes.
            required (bool): True if the option must be supplied.
            help (str): Help text for the option.

        Returns:
            Option: The registered option.

        Raises:
            OptionDefinitionError: If the flags are malformed or already registered.
        """
        if not isinstance(arity, Arity):
            try:
                arity = Arity(arity)
            except ValueError as error:
                raise OptionDefinitionError(str(error)) from error
        if not isinstance(required, bool):
            raise OptionDefinitionError("required must be a boolean")
        opt, long_opt = self._split_flags(flags)
        return self.register(
            Option(
                opt=opt,
                long_opt=long_opt,
                arity=arity,
                required=required,
                help=help,
            )
        )

    def register(self, option: Option) -> Option:
        """Register an already built `Option`."""
        if not isinstance(option, Option):
            raise OptionDefinitionError("option must be an instance of Option")
        if not option.names:
            raise OptionDefinitionError("Option must have a short or long name")
        for name in option.names:
            self._validate_name(name, name)
        self._options[option.key] = option
        for name in option.names:
            self._name_map[name] = option
        if option.required:
            self._required.append(option.key)
        logger.debug("Registered %s", option)
        return option

    def add_group(
        self,
        *members: str | Option,
        required: bool = False,
        name: str | None = None,
    ) -> OptionGroup:
        """
        Create a group of mutually exclusive options.

        Members must already be registered and may belong to one group only.
        Grouped options lose their individual `required` flag; use the group's
        `required` flag instead.

        Args:
            *members (str | Option): Names or options to place in the group.
            required (bool): True if one option of the group must be supplied.
            name (str | None): Optional name used in error messages.

        Returns:
            OptionGroup: The registered group.

        Raises:
            OptionDefinitionError: If a member is unknown or already grouped.
        """
        if not members:
            raise OptionDefinitionError("Option group must contain at least one option")
        keys: list[str] = []
        for member in members:
            lookup = member.key if isinstance(member, Option) else member
            option = self.get_option(lookup)
            if option is None:
                raise OptionDefinitionError(f"Unknown option in group: {lookup}")
            if option.key in self._group_map:
                raise OptionDefinitionError(
                    f"Option '{option.key}' already belongs to group "
                    f"{self._group_map[option.key].label}"
                )
            if option.key in keys:
                raise OptionDefinitionError(
                    f"Option '{option.key}' listed twice in group"
                )
            keys.append(option.key)

        group = OptionGroup(option_keys=keys, required=required, name=name)
        for key in keys:
            option = self._options[key]
            if option.required:
                self._replace(replace(option, required=False))
                self._required.remove(key)
            self._group_map[key] = group
        self._groups.append(group)
        if required:
            self._required.append(group)
        logger.debug("Registered group %s (required=%s)", group.label, required)
        return group

    def _replace(self, option: Option) -> None:
        self._options[option.key] = option
        for name in option.names:
            self._name_map[name] = option

    def has_option(self, name: str) -> bool:
        """Check if `name` (with or without hyphens) is a registered option."""
        return strip_leading_hyphens(name) in self._name_map

    def get_option(self, name: str) -> Option | None:
        """Return the option registered under `name`, if any."""
        return self._name_map.get(strip_leading_hyphens(name))

    def get_option_group(self, option: Option) -> OptionGroup | None:
        """Return the group `option` belongs to, if any."""
        return self._group_map.get(option.key)

    def get_group(self, label: str) -> OptionGroup | None:
        """Return the group with the given label, if any."""
        return next((group for group in self._groups if group.label == label), None)

    def get_required_options(self) -> list[str | OptionGroup]:
        """
        Return the keys of required options and the required groups, in
        declaration order. The returned list is a fresh copy.
        """
        return list(self._required)

    @property
    def options(self) -> list[Option]:
        return list(self._options.values())

    @property
    def groups(self) -> list[OptionGroup]:
        return list(self._groups)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_option(name)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return (
            f"Options(options={len(self._options)}, names={len(self._name_map)}, "
            f"groups={len(self._groups)}, required={len(self._required)})"
        )

    def __repr__(self) -> str:
        return str(self)
