# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flatteners turn raw command-line tokens into the discrete tokens consumed by the
parse engine. Each one satisfies `FlattenerProtocol`.

- `basic_flatten`: no expansion at all.
- `gnu_flatten`: `--name=value` / `-n=value` and `-Dvalue` (a known
  single-character option glued to its value).
- `posix_flatten`: `--name=value` and bundled short options (`-abc` becomes
  `-a -b -c`; `-fvalue` becomes `-f value` when `-f` takes a value).

With `stop_at_non_option`, flattening stops at the first token that is not an
option or an option value: it and every later token pass through untouched.
"""
from __future__ import annotations

from flagline.parser.classifier import LONE_DASH, TERMINATOR
from flagline.parser.options import Options


def basic_flatten(
    options: Options, arguments: list[str], stop_at_non_option: bool
) -> list[str]:
    """Return the tokens unchanged."""
    return list(arguments)


def gnu_flatten(
    options: Options, arguments: list[str], stop_at_non_option: bool
) -> list[str]:
    """Split `--name=value` and `-Dvalue` forms for known options."""
    tokens: list[str] = []
    for index, arg in enumerate(arguments):
        eat_the_rest = False
        if arg == TERMINATOR:
            eat_the_rest = True
            tokens.append(arg)
        elif arg == LONE_DASH:
            tokens.append(arg)
        elif arg.startswith("-"):
            if options.has_option(arg):
                tokens.append(arg)
            elif "=" in arg and options.has_option(arg.split("=", 1)[0]):
                flag, value = arg.split("=", 1)
                tokens.extend([flag, value])
            elif _takes_glued_value(options, arg):
                tokens.extend([arg[:2], arg[2:]])
            else:
                eat_the_rest = stop_at_non_option
                tokens.append(arg)
        else:
            tokens.append(arg)

        if eat_the_rest:
            tokens.extend(arguments[index + 1 :])
            break
    return tokens


def _takes_glued_value(options: Options, arg: str) -> bool:
    option = options.get_option(arg[:2])
    return option is not None and option.takes_value and len(arg) > 2


def posix_flatten(
    options: Options, arguments: list[str], stop_at_non_option: bool
) -> list[str]:
    """Split `--name=value` and burst bundled short options."""
    tokens: list[str] = []
    expecting_value = False
    for index, arg in enumerate(arguments):
        if arg == TERMINATOR:
            tokens.extend(arguments[index:])
            break
        if arg == LONE_DASH:
            if stop_at_non_option:
                tokens.extend(arguments[index:])
                break
            tokens.append(arg)
            expecting_value = False
            continue

        if arg.startswith("--"):
            flag, sep, value = arg.partition("=")
            option = options.get_option(flag)
            if option is None:
                if stop_at_non_option:
                    tokens.extend(arguments[index:])
                    break
                tokens.append(arg)
                expecting_value = False
                continue
            tokens.append(flag)
            if sep:
                tokens.append(value)
                expecting_value = False
            else:
                expecting_value = option.takes_value
        elif arg.startswith("-"):
            if options.has_option(arg):
                tokens.append(arg)
                option = options.get_option(arg)
                expecting_value = option is not None and option.takes_value
                continue
            burst, complete, expecting_value = _burst_token(options, arg)
            tokens.extend(burst)
            if not complete and stop_at_non_option:
                tokens.extend(arguments[index + 1 :])
                break
        else:
            tokens.append(arg)
            if stop_at_non_option and not expecting_value:
                tokens.extend(arguments[index + 1 :])
                break
            expecting_value = False
    return tokens


def _burst_token(options: Options, token: str) -> tuple[list[str], bool, bool]:
    """
    Expand a bundled token such as `-abc`.

    Returns the expanded tokens, whether every character was a known option,
    and whether the last option still expects a value.
    """
    burst: list[str] = []
    for position in range(1, len(token)):
        option = options.get_option(token[position])
        if option is None:
            burst.append(f"-{token[position:]}")
            return burst, False, False
        burst.append(f"-{token[position]}")
        if option.takes_value:
            rest = token[position + 1 :]
            if rest:
                burst.append(rest)
                return burst, True, False
            return burst, True, True
    return burst, True, False
