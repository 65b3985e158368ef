"""
Tolerant tokenizer for possibly truncated JSON snapshots.

The lexer never fails. Unknown characters and identifiers are skipped, and
scanning simply stops where truncation makes the next token impossible.
"""

from dataclasses import dataclass
from enum import Enum

from ._errors import Position
from ._profile import ProfileContext

_WHITESPACE = " \t\r\n"
_DIGITS = "0123456789"
_LITERALS = {"true", "false", "null"}


class TokenKind(Enum):
    """Kinds of token produced by the tolerant lexer."""

    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    END_OF_INPUT = "end of input"


_STRUCTURAL = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

_KEYWORDS = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}


@dataclass(frozen=True)
class Token:
    """
    A lexical token with its literal text and position in the snapshot.

    String literals are the raw text between the quotes, escapes included.
    """

    kind: TokenKind
    literal: str
    start: Position
    end: Position


def _is_identifier_start(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_identifier_char(char: str) -> bool:
    return _is_identifier_start(char) or char in _DIGITS


class TolerantLexer:
    """
    Tokenizes a JSON snapshot that may end anywhere.

    A string cut off by the end of the buffer is discarded, unless it sits
    in key position, where it still names the key whose value is pending.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.tokens: list[Token] = []
        # Innermost-last stack of open "{" / "[" seen so far
        self._brackets: list[str] = []

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def skip_whitespace(self) -> None:
        while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def _in_key_position(self) -> bool:
        if not self._brackets or self._brackets[-1] != "{":
            return False
        if not self.tokens:
            return False
        return self.tokens[-1].kind in (
            TokenKind.LEFT_BRACE,
            TokenKind.COMMA,
        )

    def _add(self, kind: TokenKind, start: Position) -> None:
        literal = self.text[start : self.pos]
        self.tokens.append(Token(kind, literal, start, self.pos))

    def scan_structural(self) -> None:
        start = self.pos
        char = self.text[self.pos]
        self.pos += 1

        if char in "{[":
            self._brackets.append(char)
        elif char in "}]" and self._brackets:
            self._brackets.pop()

        self._add(_STRUCTURAL[char], start)

    def scan_string(self) -> bool:
        """
        Scans a string token; returns False when the buffer ends inside it.
        """
        start = self.pos
        key_position = self._in_key_position()
        self.pos += 1  # opening quote

        while self.pos < self.length:
            char = self.text[self.pos]
            if char == '"':
                literal = self.text[start + 1 : self.pos]
                self.pos += 1
                self.tokens.append(
                    Token(TokenKind.STRING, literal, start, self.pos)
                )
                return True
            if char == "\\" and self.pos + 1 < self.length:
                # Skip escaped character
                self.pos += 1
            self.pos += 1

        if key_position:
            literal = self.text[start + 1 :]
            self.tokens.append(
                Token(TokenKind.STRING, literal, start, self.pos)
            )
        return False

    def _scan_digits(self) -> None:
        while self.pos < self.length and self.text[self.pos] in _DIGITS:
            self.pos += 1

    def scan_number(self) -> None:
        """Greedily scans sign, digits, fraction and exponent characters."""
        start = self.pos

        if self.peek() == "-":
            self.pos += 1
        self._scan_digits()

        if self.peek() == ".":
            self.pos += 1
            self._scan_digits()

        if self.peek() in ("e", "E"):
            self.pos += 1
            if self.peek() in ("+", "-"):
                self.pos += 1
            self._scan_digits()

        self._add(TokenKind.NUMBER, start)

    def scan_identifier(self) -> None:
        """Scans an identifier run, keeping it only if it is a JSON literal."""
        start = self.pos
        while self.pos < self.length and _is_identifier_char(
            self.text[self.pos]
        ):
            self.pos += 1

        word = self.text[start : self.pos]
        if word in _LITERALS:
            self._add(_KEYWORDS[word], start)

    def tokenize(self) -> list[Token]:
        """Returns every token of the snapshot followed by END_OF_INPUT."""
        with ProfileContext("tokenize", self.length):
            while True:
                self.skip_whitespace()
                if self.pos >= self.length:
                    break

                char = self.text[self.pos]
                if char in _STRUCTURAL:
                    self.scan_structural()
                elif char == '"':
                    if not self.scan_string():
                        break
                elif char in _DIGITS or char == "-":
                    self.scan_number()
                elif _is_identifier_start(char):
                    self.scan_identifier()
                else:
                    # Unknown characters are dropped
                    self.pos += 1

            self.tokens.append(
                Token(TokenKind.END_OF_INPUT, "", self.length, self.length)
            )
            return self.tokens


def tokenize(text: str) -> list[Token]:
    """Tokenizes a snapshot with the tolerant lexer."""
    return TolerantLexer(text).tokenize()
