# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for the parse engine.

`classify_token` maps one flattened token to a `TokenKind`. It only consults the
static option registry, so the result never depends on how far a parse has
progressed. How each kind is handled (for example whether an unknown dashed
token is an error or starts draining) is decided by the engine.
"""
from __future__ import annotations

from enum import Enum

from flagline.parser.options import Options

TERMINATOR = "--"
LONE_DASH = "-"


class TokenKind(Enum):
    """Classification of a single command-line token."""

    TERMINATOR = "terminator"
    LONE_DASH = "lone_dash"
    UNKNOWN_DASHED = "unknown_dashed"
    KNOWN_OPTION = "known_option"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


def classify_token(token: str, options: Options) -> TokenKind:
    """Classify `token` against the option registry."""
    if token == TERMINATOR:
        return TokenKind.TERMINATOR
    if token == LONE_DASH:
        return TokenKind.LONE_DASH
    if token.startswith("-"):
        if options.has_option(token):
            return TokenKind.KNOWN_OPTION
        return TokenKind.UNKNOWN_DASHED
    return TokenKind.POSITIONAL
