"""Token definitions for lexi lexical analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Final


class TokenKind(Enum):
    """Closed set of lexeme classifications."""

    WHITESPACE = auto()

    # Keywords are identifiers at this layer.
    IDENT = auto()

    # See LiteralKind.
    LITERAL = auto()

    SEMI = auto()  # ;
    COMMA = auto()  # ,
    DOT = auto()  # .
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }
    OPEN_BRACKET = auto()  # [
    CLOSE_BRACKET = auto()  # ]
    AT = auto()  # @
    POUND = auto()  # #
    TILDE = auto()  # ~
    QUESTION = auto()  # ?
    COLON = auto()  # :
    DOLLAR = auto()  # $

    EQ = auto()  # =
    BANG = auto()  # !
    LT = auto()  # <
    GT = auto()  # >
    MINUS = auto()  # -
    AND = auto()  # &
    OR = auto()  # |
    PLUS = auto()  # +
    STAR = auto()  # *
    SLASH = auto()  # /
    CARET = auto()  # ^
    PERCENT = auto()  # %

    UNKNOWN = auto()

    EOF = auto()


class LiteralKind(Enum):
    """Literal categories. Only INT is produced by the lexer today."""

    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    CHAR = auto()
    STR = auto()


SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "@": TokenKind.AT,
    "#": TokenKind.POUND,
    "~": TokenKind.TILDE,
    "!": TokenKind.BANG,
    "=": TokenKind.EQ,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "^": TokenKind.CARET,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
    "$": TokenKind.DOLLAR,
    "%": TokenKind.PERCENT,
}


@dataclass(frozen=True)
class Token:
    """A single lexeme paired with its classification."""

    kind: TokenKind
    literal: str
    literal_kind: LiteralKind | None = None

    @property
    def label(self) -> str:
        """Kind name, qualified with the literal kind for literal tokens."""
        if self.literal_kind is None:
            return self.kind.name
        return f"{self.kind.name}[{self.literal_kind.name}]"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the token to a JSON-compatible mapping."""
        payload: dict[str, Any] = {
            "kind": self.kind.name,
            "literal": self.literal,
        }
        if self.literal_kind is not None:
            payload["literal_kind"] = self.literal_kind.name
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        """Rebuild a token from its to_dict() mapping."""
        literal_kind = data.get("literal_kind")
        return cls(
            kind=TokenKind[str(data["kind"])],
            literal=str(data["literal"]),
            literal_kind=LiteralKind[str(literal_kind)] if literal_kind is not None else None,
        )

    def __str__(self) -> str:
        return f"{self.label}({self.literal!r})"
