"""lexi lexical analyzer."""

from __future__ import annotations

from typing import Final, Iterator

import regex

from lexi.tokens import SINGLE_CHAR_TOKENS, LiteralKind, Token, TokenKind


# Unicode Alphabetic and White_Space properties.
_LETTER: Final = regex.compile(r"[\p{Alphabetic}_]")
_WHITESPACE: Final = regex.compile(r"\p{White_Space}")


class Lexer:
    """Converts source text into a token stream, one token per pull.

    The cursor addresses code points. ``ch`` is ``None`` once the cursor has
    moved past the end of input; that sentinel is never placed in a token.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch: str | None = None
        self.read_char()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is exhausted."""
        self.skip_whitespace()

        if self.ch is None:
            return None

        token_kind = SINGLE_CHAR_TOKENS.get(self.ch)
        if token_kind is not None:
            return Token(kind=token_kind, literal=self.consume_char())

        if self.is_letter():
            return Token(kind=TokenKind.IDENT, literal=self.read_ident())

        if self.is_digit():
            return Token(
                kind=TokenKind.LITERAL,
                literal=self.read_number(),
                literal_kind=LiteralKind.INT,
            )

        return Token(kind=TokenKind.UNKNOWN, literal=self.consume_char())

    def tokenize(self) -> list[Token]:
        """Drain the remaining input and return the tokens."""
        return list(self)

    def read_char(self) -> None:
        if self.read_position >= len(self.source):
            self.ch = None
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def consume_char(self) -> str:
        """Return the current character and advance past it."""
        ch = self.source[self.position]
        self.read_char()
        return ch

    def read_ident(self) -> str:
        # Digits never continue an identifier: "a1" is IDENT "a" then "1".
        start = self.position
        while self.is_letter():
            self.read_char()
        return self.source[start:self.position]

    def read_number(self) -> str:
        start = self.position
        while self.is_digit():
            self.read_char()
        return self.source[start:self.position]

    def skip_whitespace(self) -> None:
        while self.ch is not None and _WHITESPACE.match(self.ch):
            self.read_char()

    def is_letter(self) -> bool:
        return self.ch is not None and _LETTER.match(self.ch) is not None

    def is_digit(self) -> bool:
        return self.ch is not None and "0" <= self.ch <= "9"


def scan(source: str) -> Iterator[Token]:
    """Yield tokens from a fresh lexer over ``source``."""
    lexer = Lexer(source)
    while True:
        token = lexer.next_token()
        if token is None:
            return
        yield token


def tokenize(source: str) -> list[Token]:
    """Tokenize full source and return the token list."""
    return Lexer(source).tokenize()
