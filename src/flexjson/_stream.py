"""
Character-at-a-time JSON decoder that updates a caller-owned dict in place.

The output mapping is valid to read between any two characters: strings,
literals and containers appear as soon as they are recognized, numbers as
soon as the structural character ending them arrives.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ._config import ParseConfig
from ._errors import LiteralError
from ._errors import StructuralError
from ._profile import ProfileContext
from ._types import Container
from ._types import JsonObject
from ._types import JsonValue
from ._types import commit_value
from ._types import is_numeric_prefix
from ._types import parse_number

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\r\n"
_NUMBER_CHARS = "0123456789-.+E"

# (buffered prefix, next character) -> extended prefix or completed literal
_LITERAL_STEPS: dict[tuple[str, str], str] = {
    ("", "t"): "t",
    ("t", "r"): "tr",
    ("tr", "u"): "tru",
    ("tru", "e"): "true",
    ("", "f"): "f",
    ("f", "a"): "fa",
    ("fa", "l"): "fal",
    ("fal", "s"): "fals",
    ("fals", "e"): "false",
    ("", "n"): "n",
    ("n", "u"): "nu",
    ("nu", "l"): "nul",
    ("nul", "l"): "null",
}
_LITERAL_CHARS = frozenset(char for _, char in _LITERAL_STEPS)
_LITERAL_VALUES: dict[str, JsonValue] = {
    "true": True,
    "false": False,
    "null": None,
}


@dataclass
class _Frame:
    """An open container and, for mappings, the key awaiting its value."""

    container: Container
    key: str | None = None


class StreamingDecoder:
    """
    Decodes a JSON object incrementally into an externally owned dict.

    Feed characters with process_char() or process_chunk(); read the dict
    (or current_output()) at any point in between. The first "{" of a
    session is the output dict itself; nested containers are created and
    committed as soon as they open.

    Not thread-safe: the decoder mutates the output dict without locking,
    so concurrent feeding, or a read racing a write, needs external
    synchronization.
    """

    def __init__(
        self,
        output: JsonObject | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        if output is None:
            output = {}
        if not isinstance(output, dict):
            raise TypeError(
                f"output must be a dict, not {type(output).__name__}"
            )

        self.config = config or ParseConfig()
        self.debug = self.config.debug
        self._output = output
        self.reset()

    def reset(self) -> None:
        """Clears the output dict in place and returns to the initial state."""
        self._output.clear()
        self._frames = [_Frame(self._output)]
        self._root_open = False
        self._buffer = ""
        self._in_string = False
        self._is_escaping = False
        self._expecting_key = True
        self._expect_colon = False
        self._position = 0
        self._last_char = ""

    @property
    def output(self) -> JsonObject:
        return self._output

    def current_output(self) -> Mapping[str, JsonValue]:
        """Returns a read-only live view of the output dict."""
        return MappingProxyType(self._output)

    @property
    def position(self) -> int:
        """Number of characters processed successfully."""
        return self._position

    @property
    def last_char(self) -> str:
        return self._last_char

    @property
    def container_stack(self) -> tuple[Container, ...]:
        return tuple(frame.container for frame in self._frames)

    @property
    def key_stack(self) -> tuple[str, ...]:
        return tuple(
            frame.key for frame in self._frames if frame.key is not None
        )

    @property
    def in_string(self) -> bool:
        return self._in_string

    @property
    def expecting_key(self) -> bool:
        return self._expecting_key

    @property
    def expect_colon(self) -> bool:
        return self._expect_colon

    def process_chunk(self, text: str) -> None:
        """
        Processes text one character at a time.

        Stops at the first rejected character; everything before it stays
        applied.
        """
        with ProfileContext("process_chunk", len(text)):
            for char in text:
                self.process_char(char)

    def process_char(self, char: str) -> None:
        """
        Processes exactly one character.

        Raises StructuralError or LiteralError, leaving the state untouched,
        if the character is illegal in the current state.
        """
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError("process_char() expects a single character")

        if self.debug:
            logger.debug(
                "%r expecting_key=%s expect_colon=%s escaping=%s "
                "in_string=%s buffer=%r",
                char,
                self._expecting_key,
                self._expect_colon,
                self._is_escaping,
                self._in_string,
                self._buffer,
            )

        if self._in_string:
            self._process_string_char(char)
        else:
            self._process_structural_char(char)

        self._position += 1
        self._last_char = char

    def _process_string_char(self, char: str) -> None:
        if self._is_escaping:
            # Escapes are kept raw: backslash plus the escaped character
            self._buffer += "\\" + char
            self._is_escaping = False
        elif char == "\\":
            self._is_escaping = True
        elif char == '"':
            self._close_string()
        else:
            self._buffer += char

    def _close_string(self) -> None:
        self._in_string = False
        text, self._buffer = self._buffer, ""

        if self._expecting_key:
            if self.debug:
                logger.debug("\tstoring key %r", text)
            self._frames[-1].key = text
            self._expecting_key = False
            self._expect_colon = True
        else:
            self._commit(text)

    def _process_structural_char(self, char: str) -> None:
        # Validate first so that a rejected character changes nothing
        if char == ":":
            if not self._expect_colon:
                raise StructuralError("unexpected ':'", char, self._position)
            self._expect_colon = False
            return
        if char in _LITERAL_CHARS:
            self._process_literal_char(char)
            return

        if char in ",}]" and self._buffer:
            self._finalize_number()

        if char in _WHITESPACE:
            return
        elif char == "{":
            self._open_object()
        elif char == "}" or char == "]":
            self._close_container()
        elif char == "[":
            arr: list[JsonValue] = []
            self._commit(arr)
            self._frames.append(_Frame(arr))
            self._expecting_key = False
        elif char == '"':
            self._in_string = True
            self._buffer = ""
        elif char == ",":
            self._expecting_key = isinstance(self._frames[-1].container, dict)
        elif char in _NUMBER_CHARS:
            self._extend_number(char)
        else:
            raise StructuralError(
                f"unexpected character: {char!r}", char, self._position
            )

    def _process_literal_char(self, char: str) -> None:
        step = _LITERAL_STEPS.get((self._buffer, char))
        if step is None:
            if char == "e" and self._buffer:
                self._extend_number(char)
                return
            raise LiteralError(f"unexpected {char!r}", char, self._position)

        if step in _LITERAL_VALUES:
            self._buffer = ""
            self._commit(_LITERAL_VALUES[step])
        else:
            self._buffer = step

    def _extend_number(self, char: str) -> None:
        if not is_numeric_prefix(self._buffer):
            raise LiteralError(f"unexpected {char!r}", char, self._position)
        self._buffer += char

    def _finalize_number(self) -> None:
        literal, self._buffer = self._buffer, ""
        try:
            value = parse_number(literal, self.config)
        except ValueError:
            logger.debug("dropping unparseable value %r", literal)
            return
        if self.debug:
            logger.debug("\tadding number value %r", value)
        self._commit(value)

    def _open_object(self) -> None:
        if len(self._frames) == 1 and not self._root_open:
            # The root object already exists: it is the output dict
            self._root_open = True
            self._expecting_key = True
            return

        obj: JsonObject = {}
        self._commit(obj)
        self._frames.append(_Frame(obj))
        self._expecting_key = True

    def _close_container(self) -> None:
        if len(self._frames) > 1:
            self._frames.pop()
        else:
            self._frames[0].key = None
            self._root_open = False
        self._expecting_key = False
        self._expect_colon = False

    def _commit(self, value: JsonValue) -> None:
        frame = self._frames[-1]
        commit_value(frame.container, frame.key, value)
