"""
Recursive-descent parser that turns a truncated token stream into a value.

Every container production treats running out of tokens as successful
completion: the container is returned with whatever it holds, and a key
whose value never arrived is set to None.
"""

from ._config import ParseConfig
from ._errors import GrammarError
from ._errors import NumberFormatError
from ._errors import ParseError
from ._lexer import Token
from ._lexer import TokenKind
from ._profile import ProfileContext
from ._types import JsonArray
from ._types import JsonObject
from ._types import JsonValue
from ._types import parse_number


class _InputExhausted(Exception):  # noqa: N818
    """
    Signals that the token stream ended while a value was expected.

    Carries the error to report instead when no container absorbs it.
    """

    def __init__(self, cause: ParseError | None = None) -> None:
        super().__init__()
        self.cause = cause


class TolerantParser:
    """
    Parses a token stream produced by TolerantLexer, one token of lookahead.

    Structural errors abort the whole parse; exhaustion never does.
    """

    def __init__(
        self, tokens: list[Token], config: ParseConfig, text: str = ""
    ):
        self.tokens = tokens
        self.config = config
        self.text = text
        self.current = 0

    @property
    def current_token(self) -> Token:
        return self.tokens[self.current]

    def at_end(self) -> bool:
        return (
            self.current >= len(self.tokens)
            or self.tokens[self.current].kind == TokenKind.END_OF_INPUT
        )

    def check(self, kind: TokenKind) -> bool:
        if self.at_end():
            return kind == TokenKind.END_OF_INPUT
        return self.current_token.kind == kind

    def advance(self) -> Token:
        token = self.current_token
        if not self.at_end():
            self.current += 1
        return token

    def _position(self) -> int:
        if self.current < len(self.tokens):
            return self.current_token.start
        return len(self.text)

    def _grammar_error(self, msg: str) -> GrammarError:
        return GrammarError(msg, self.text, self._position())

    def parse(self) -> JsonValue:
        """Parses the first value; tokens after it are ignored."""
        if self.at_end():
            raise ParseError("no tokens to parse", self.text, 0)

        try:
            return self.parse_value()
        except _InputExhausted as exhausted:
            if exhausted.cause is not None:
                raise exhausted.cause from None
            raise ParseError(
                "unexpected end of input", self.text, self._position()
            ) from None

    def parse_value(self) -> JsonValue:
        """Parses any value based on the current token."""
        if self.at_end():
            raise _InputExhausted()

        token = self.current_token
        kind = token.kind

        if kind == TokenKind.LEFT_BRACE:
            return self.parse_object()
        elif kind == TokenKind.LEFT_BRACKET:
            return self.parse_array()
        elif kind == TokenKind.STRING:
            self.advance()
            return token.literal
        elif kind == TokenKind.NUMBER:
            self.advance()
            return self._parse_number(token)
        elif kind == TokenKind.TRUE:
            self.advance()
            return True
        elif kind == TokenKind.FALSE:
            self.advance()
            return False
        elif kind == TokenKind.NULL:
            self.advance()
            return None
        else:
            raise self._grammar_error(f"unexpected token: {token.literal}")

    def _parse_number(self, token: Token) -> JsonValue:
        try:
            return parse_number(token.literal, self.config)
        except ValueError as e:
            error = NumberFormatError(
                f"invalid number: {token.literal}", self.text, token.start
            )
            if self.at_end():
                # A number cut off by truncation, e.g. "1e" or "-"
                raise _InputExhausted(error) from e
            raise error from e

    def parse_object(self) -> JsonObject:
        """Parses an object, returning it as built if the tokens run out."""
        with ProfileContext("parse_object"):
            obj: JsonObject = {}
            self.advance()  # {

            if self.check(TokenKind.RIGHT_BRACE):
                self.advance()
                return obj

            while True:
                if self.at_end():
                    return obj

                if not self.check(TokenKind.STRING):
                    raise self._grammar_error("expected string key in object")
                key = self.advance().literal

                if not self.check(TokenKind.COLON):
                    if self.at_end():
                        obj[key] = None
                        return obj
                    raise self._grammar_error(
                        "expected ':' after key in object"
                    )
                self.advance()

                try:
                    obj[key] = self.parse_value()
                except _InputExhausted:
                    obj[key] = None
                    return obj

                if self.at_end():
                    return obj
                if self.check(TokenKind.RIGHT_BRACE):
                    self.advance()
                    return obj
                if not self.check(TokenKind.COMMA):
                    raise self._grammar_error(
                        "expected ',' or '}' after object value"
                    )
                self.advance()

    def parse_array(self) -> JsonArray:
        """Parses an array, returning it as built if the tokens run out."""
        with ProfileContext("parse_array"):
            arr: JsonArray = []
            self.advance()  # [

            if self.check(TokenKind.RIGHT_BRACKET):
                self.advance()
                return arr

            while True:
                if self.at_end():
                    return arr

                try:
                    arr.append(self.parse_value())
                except _InputExhausted:
                    return arr

                if self.at_end():
                    return arr
                if self.check(TokenKind.RIGHT_BRACKET):
                    self.advance()
                    return arr
                if not self.check(TokenKind.COMMA):
                    raise self._grammar_error(
                        "expected ',' or ']' after array value"
                    )
                self.advance()
