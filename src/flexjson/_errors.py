"""
Exception hierarchy shared by the batch parser and the streaming decoder.

Input running out is never an error: only the failures below reach the
caller.
"""

from typing import TypeAlias

Position: TypeAlias = int


class FlexJSONError(ValueError):
    """Base class for every error raised by flexjson."""

    def __init__(self, msg: str, pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos
        super().__init__(msg)


class ParseError(FlexJSONError):
    """
    Reports a batch parse failure with line and column information.

    The whole call is aborted; no partial value accompanies the error.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        super().__init__(msg, pos)
        self.doc = doc

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        self.args = (f"{msg} at line {self.lineno}, column {self.colno}",)


class GrammarError(ParseError):
    """A token appeared where the grammar does not allow it."""


class NumberFormatError(ParseError):
    """A numeric literal is neither a 64-bit integer nor a 64-bit float."""


class DecodeError(FlexJSONError):
    """
    Reports a character the streaming decoder cannot accept.

    The decoder state is left exactly as it was before the failing
    character; callers should reset() before decoding another document.
    """

    def __init__(self, msg: str, char: str = "", pos: Position = 0) -> None:
        super().__init__(msg, pos)
        self.char = char
        self.args = (f"{msg} at position {pos}",)


class StructuralError(DecodeError):
    """Unexpected structural or unrecognized character."""


class LiteralError(DecodeError):
    """Character does not extend a true/false/null prefix."""
