"""Turns source text into a list of tokens."""

from __future__ import annotations

import string
from collections.abc import Iterator

from .tokens import Token, TokenType

_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_OCTAL_DIGITS = frozenset(string.octdigits)
_BINARY_DIGITS = frozenset("01")
_LETTERS = frozenset(string.ascii_letters)
_IDENT_CHARS = _LETTERS | _DIGITS | {"_"}
_INLINE_SPACE = frozenset(" \t\v\f\r")
_WHITESPACE_START = frozenset(" \t\r")

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "^": TokenType.POWER,
    "%": TokenType.MODULO,
    ":": TokenType.COLON,
    "=": TokenType.EQUAL,
}

_KEYWORDS = {
    "var": TokenType.VAR,
    "val": TokenType.VAL,
    "int": TokenType.INT_TYPE,
    "float": TokenType.FLOAT_TYPE,
    "bool": TokenType.BOOL_TYPE,
}

_SKIPPED = frozenset(
    {TokenType.WHITESPACE, TokenType.COMMENT, TokenType.DOCUMENTATION}
)

# Radix prefixes: prefix letters -> (allowed digits, error message)
_RADIX_PREFIXES = {
    "xX": (
        _HEX_DIGITS,
        "Invalid hexadecimal number: expected at least one hex digit after '0x'",
    ),
    "bB": (
        _BINARY_DIGITS,
        "Invalid binary number: expected binary digit after '0b'",
    ),
    "oO": (
        _OCTAL_DIGITS,
        "Invalid octal number: expected octal digit after '0o'",
    ),
}


class LexerError(ValueError):
    """Raised when the source text contains something that cannot be tokenized."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class Lexer:
    """Scans source text into tokens, dropping whitespace and comments."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0
        self._start = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> list[Token]:
        """Return all significant tokens, ending with an EOF token."""
        self._pos = self._start = 0
        self._line = self._column = 1
        tokens = [token for token in self._scan() if token.type not in _SKIPPED]
        tokens.append(Token(TokenType.EOF_TOKEN, "", self._line, self._column))
        return tokens

    def _scan(self) -> Iterator[Token]:
        while not self._at_end():
            self._start = self._pos
            yield self._next_token()

    def _next_token(self) -> Token:
        c = self._advance()

        if c in _WHITESPACE_START:
            return self._skip_whitespace()
        if c == "\n":
            self._line += 1
            self._column = 1
            return Token(TokenType.WHITESPACE, "\n", self._line - 1, self._column)
        if c in _SINGLE_CHAR:
            return self._make(_SINGLE_CHAR[c])
        if c == "/":
            if self._match("/"):
                if self._match("/"):
                    return self._scan_documentation()
                return self._scan_comment()
            return self._make(TokenType.SLASH)
        if c in _DIGITS:
            self._pos -= 1
            self._column -= 1
            return self._scan_number()
        if c in _LETTERS or c == "_":
            return self._scan_identifier()
        raise LexerError(f"Unexpected character: {c}", self._line, self._column - 1)

    def _skip_whitespace(self) -> Token:
        while self._peek() in _INLINE_SPACE:
            self._advance()
        return self._make(TokenType.WHITESPACE)

    def _scan_comment(self) -> Token:
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        return self._make(TokenType.COMMENT)

    def _scan_documentation(self) -> Token:
        parts = ["///"]
        while not self._at_end():
            while not self._at_end() and self._peek() != "\n":
                parts.append(self._advance())
            if self._peek() != "\n":
                break
            parts.append(self._advance())
            self._line += 1
            self._column = 1
            if self._peek() == "/" and self._peek(1) == "/" and self._peek(2) == "/":
                for _ in range(3):
                    self._advance()
                parts.append("///")
            else:
                break
        return self._make(TokenType.DOCUMENTATION, "".join(parts))

    def _scan_number(self) -> Token:
        self._start = self._pos
        first = self._advance()

        if first == "0":
            prefix = self._peek()
            for letters, (digits, message) in _RADIX_PREFIXES.items():
                if prefix and prefix in letters:
                    self._advance()
                    if self._peek() not in digits:
                        raise LexerError(message, self._line, self._column)
                    self._consume_while(digits)
                    return self._make(TokenType.INT_LITERAL)

        self._consume_while(_DIGITS)
        if self._peek() == "." and self._peek(1) in _DIGITS:
            self._advance()
            self._consume_while(_DIGITS)
            return self._make(TokenType.FLOAT_LITERAL)
        return self._make(TokenType.INT_LITERAL)

    def _scan_identifier(self) -> Token:
        self._consume_while(_IDENT_CHARS)
        text = self.source[self._start:self._pos]
        return self._make(_KEYWORDS.get(text, TokenType.IDENTIFIER), text)

    def _consume_while(self, allowed: frozenset[str]) -> None:
        while self._peek() in allowed:
            self._advance()

    def _advance(self) -> str:
        self._pos += 1
        self._column += 1
        return self.source[self._pos - 1]

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._pos] != expected:
            return False
        self._pos += 1
        self._column += 1
        return True

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self.source[index] if index < len(self.source) else ""

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _make(self, token_type: TokenType, lexeme: str | None = None) -> Token:
        length = self._pos - self._start
        if lexeme is None:
            lexeme = self.source[self._start:self._pos]
        return Token(token_type, lexeme, self._line, self._column - length)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` and return its significant tokens plus EOF."""
    return Lexer(source).tokenize()