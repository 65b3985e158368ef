"""
Best-effort JSON extraction from incomplete or streamed text.

Two independent front-ends share one value model:

- StreamingDecoder consumes characters one at a time and keeps a
  caller-owned dict up to date after every character.
- parse_value() and parse_object() tokenize a whole snapshot and return
  the largest well-formed value it contains, filling in None for a key
  whose value was cut off.

Neither rejects truncated input; only genuinely malformed input raises.
"""

import logging
from typing import Any

from ._config import ParseConfig
from ._errors import DecodeError
from ._errors import FlexJSONError
from ._errors import GrammarError
from ._errors import LiteralError
from ._errors import NumberFormatError
from ._errors import ParseError
from ._errors import StructuralError
from ._lexer import Token
from ._lexer import TokenKind
from ._lexer import TolerantLexer
from ._lexer import tokenize
from ._parser import TolerantParser
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._stream import StreamingDecoder
from ._types import INT64_MAX
from ._types import INT64_MIN
from ._types import JsonArray
from ._types import JsonObject
from ._types import JsonValue
from ._types import parse_number

__version__ = "0.1.0"

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "DecodeError",
    "FlexJSONError",
    "GrammarError",
    "HotPathStats",
    "JsonArray",
    "JsonObject",
    "JsonValue",
    "LiteralError",
    "NumberFormatError",
    "ParseConfig",
    "ParseError",
    "StreamingDecoder",
    "StructuralError",
    "Token",
    "TokenKind",
    "TolerantLexer",
    "TolerantParser",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "parse_number",
    "parse_object",
    "parse_value",
    "tokenize",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse_value(text: str, **kwargs: Any) -> JsonValue:
    """
    Parses a possibly truncated JSON snapshot into the best value it holds.

    Raises ParseError (or a subclass) for empty or malformed input.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    tokens = TolerantLexer(text).tokenize()
    return TolerantParser(tokens, config, text).parse()


def parse_object(text: str, **kwargs: Any) -> JsonObject:
    """
    Parses a possibly truncated snapshot whose top-level value is an object.
    """
    result = parse_value(text, **kwargs)
    if not isinstance(result, dict):
        raise ParseError("input is not a JSON object", text, 0)
    return result
