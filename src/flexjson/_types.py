"""
Value model shared by the batch parser and the streaming decoder.

Values are plain Python objects. Containers are dicts and lists, which are
reference objects: appending to a list never changes its identity, so a
parent always sees the live, fully populated child.
"""

import math
import re

from ._config import ParseConfig

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
JsonObject = dict[str, JsonValue]
JsonArray = list[JsonValue]
Container = JsonObject | JsonArray

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ASCII only: str.isdigit() and int() accept other Unicode digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

NUMBER_CHARS = frozenset("0123456789-+.eE")


def _parse_int64(literal: str) -> int | None:
    if not _INTEGER_RE.fullmatch(literal):
        return None
    value = int(literal)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def _parse_float64(literal: str) -> float | None:
    if not _FLOAT_RE.fullmatch(literal):
        return None
    value = float(literal)
    if math.isinf(value):
        # Out of range for a 64-bit float
        return None
    return value


def parse_number(literal: str, config: ParseConfig | None = None) -> JsonValue:
    """
    Parses a numeric literal, trying a 64-bit integer before a 64-bit float.

    Raises ValueError when the literal is neither.
    """
    as_int = _parse_int64(literal)
    if as_int is not None:
        if config and config.parse_int:
            return config.parse_int(literal)  # type: ignore[no-any-return]
        return as_int

    as_float = _parse_float64(literal)
    if as_float is not None:
        if config and config.parse_float:
            return config.parse_float(literal)  # type: ignore[no-any-return]
        return as_float

    raise ValueError(f"invalid number: {literal}")


def is_numeric_prefix(buffer: str) -> bool:
    """Returns True if every buffered character may belong to a number."""
    return all(c in NUMBER_CHARS for c in buffer)


def commit_value(
    container: Container, key: str | None, value: JsonValue
) -> None:
    """
    Places a recognized value into its owning container.

    Mappings store under key (last write wins, nothing stored without a
    key); sequences append.
    """
    if isinstance(container, dict):
        if key is not None:
            container[key] = value
    else:
        container.append(value)
