import os
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from typing import Any

ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None


def _debug_from_env() -> bool:
    return "FLEXJSON_DEBUG" in os.environ


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures tolerant parsing and streaming decoding with immutable settings.

    Numeric hooks receive the literal text once the int-first policy has
    classified it, so they never change which literals count as integers.
    """

    debug: bool = field(default_factory=_debug_from_env)
    parse_int: ParseIntHook = None
    parse_float: ParseFloatHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.debug, bool):
            raise TypeError("debug must be a boolean")
        if self.parse_int is not None and not callable(self.parse_int):
            raise TypeError("parse_int must be callable")
        if self.parse_float is not None and not callable(self.parse_float):
            raise TypeError("parse_float must be callable")
