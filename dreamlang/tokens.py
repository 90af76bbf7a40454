"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # Keywords
    VAR = auto()
    VAL = auto()

    # Types
    NULL_TYPE = auto()
    INT_TYPE = auto()
    FLOAT_TYPE = auto()
    BOOL_TYPE = auto()
    STRING_TYPE = auto()

    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()

    IDENTIFIER = auto()

    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SLASH = auto()
    STAR = auto()
    POWER = auto()
    MODULO = auto()
    COLON = auto()
    EQUAL = auto()

    WHITESPACE = auto()
    COMMENT = auto()
    DOCUMENTATION = auto()
    EOF_TOKEN = auto()

    @property
    def display_name(self) -> str:
        """The name used when a token is shown to a reader."""
        return "EOF" if self is TokenType.EOF_TOKEN else self.name


@dataclass(frozen=True)
class Token:
    """A lexeme together with its kind and its 1-based source position."""

    type: TokenType
    lexeme: str
    line: int
    column: int

    def describe(self) -> str:
        """Return a one-line human readable description of the token."""
        return (
            f"{self.type.display_name} '{self.lexeme}' "
            f"at line {self.line}, column {self.column}"
        )

    def __str__(self) -> str:
        return self.describe()