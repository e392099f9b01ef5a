# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Flagline option registries and defaults."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from flagline.exceptions import ConfigError, OptionDefinitionError
from flagline.logger import logger
from flagline.parser.arity import Arity
from flagline.parser.command_line import CommandLine
from flagline.parser.engine import CommandLineParser
from flagline.parser.flatteners import basic_flatten, gnu_flatten, posix_flatten
from flagline.parser.options import Options
from flagline.protocols import FlattenerProtocol
from flagline.utils import strip_leading_hyphens

FLATTENERS: dict[str, FlattenerProtocol] = {
    "basic": basic_flatten,
    "gnu": gnu_flatten,
    "posix": posix_flatten,
}


class RawOption(BaseModel):
    """Raw option model for Flagline configuration."""

    opt: str | None = None
    long_opt: str | None = None
    arity: Arity = Arity.NONE
    required: bool = False
    help: str = ""

    @field_validator("opt", "long_opt")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return strip_leading_hyphens(str(value))

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> Arity:
        if isinstance(value, Arity):
            return value
        return Arity(value)

    @model_validator(mode="after")
    def validate_names(self) -> RawOption:
        if not self.opt and not self.long_opt:
            raise ValueError("Option must define 'opt' or 'long_opt'")
        return self

    def flags(self) -> list[str]:
        flags = []
        if self.opt:
            flags.append(f"-{self.opt}")
        if self.long_opt:
            flags.append(f"--{self.long_opt}")
        return flags


class RawGroup(BaseModel):
    """Raw option group model for Flagline configuration."""

    options: list[str]
    required: bool = False
    name: str | None = None


class ParserConfig(BaseModel):
    """Flagline parser configuration model."""

    stop_at_non_option: bool = False
    flattener: str = "basic"
    break_on_false_flag: bool = True
    options: list[RawOption] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)
    defaults: dict[str, Any] = Field(default_factory=dict)

    @field_validator("flattener")
    @classmethod
    def validate_flattener(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in FLATTENERS:
            valid = ", ".join(FLATTENERS)
            raise ValueError(f"Invalid flattener '{value}'. Must be one of: {valid}")
        return normalized

    def to_options(self) -> Options:
        """Build the option registry described by this configuration."""
        options = Options()
        for raw_option in self.options:
            options.add_option(
                *raw_option.flags(),
                arity=raw_option.arity,
                required=raw_option.required,
                help=raw_option.help,
            )
        for raw_group in self.groups:
            options.add_group(
                *raw_group.options, required=raw_group.required, name=raw_group.name
            )
        return options

    def parser(self) -> CommandLineParser:
        return CommandLineParser(flattener=FLATTENERS[self.flattener])

    def parse(
        self, arguments: Sequence[str] | None, options: Options | None = None
    ) -> CommandLine:
        """Parse `arguments` with the registry, defaults and policy of this config."""
        return self.parser().parse(
            options if options is not None else self.to_options(),
            arguments,
            defaults=self.defaults,
            stop_at_non_option=self.stop_at_non_option,
            break_on_false_flag=self.break_on_false_flag,
        )


def loader(file_path: Path | str) -> ParserConfig:
    """
    Load a Flagline parser configuration from a YAML or TOML file.

    The file should contain a dictionary with a list of options, and optionally
    groups, defaults and parsing policy:

        flattener: posix
        stop_at_non_option: false
        options:
          - opt: f
            long_opt: file
            arity: one
        groups:
          - options: [a, b]
            required: true
        defaults:
          f: input.txt

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        ParserConfig: The validated configuration. Its registry is built eagerly
        so definition errors surface here.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not read {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "options:\n"
            "  - opt: 'f'\n"
            "    long_opt: 'file'\n"
            "    arity: 'one'"
        )

    try:
        config = ParserConfig.model_validate(raw_config)
        config.to_options()
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}: {error}") from error
    except OptionDefinitionError as error:
        raise ConfigError(f"Invalid option definition in {path}: {error}") from error

    logger.debug(
        "Loaded %d options and %d groups from %s",
        len(config.options),
        len(config.groups),
        path,
    )
    return config
