# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for pluggable Flagline collaborators.

Protocols:
- FlattenerProtocol: Callable expanding raw command-line tokens into the
  discrete tokens the parse engine consumes.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flagline.parser.options import Options


@runtime_checkable
class FlattenerProtocol(Protocol):
    def __call__(
        self, options: Options, arguments: list[str], stop_at_non_option: bool
    ) -> list[str]: ...
