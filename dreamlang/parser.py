"""Builds a syntax tree from a token list."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .syntax_tree import (
    BinaryExpression,
    Expression,
    ExpressionStatement,
    LiteralExpression,
    Operator,
    Program,
    Statement,
    VarDeclaration,
    VariableExpression,
    VarStatement,
)
from .tokens import Token, TokenType

_TYPE_TOKENS = (
    TokenType.INT_TYPE,
    TokenType.FLOAT_TYPE,
    TokenType.BOOL_TYPE,
    TokenType.STRING_TYPE,
)

_ADDITIVE = {TokenType.PLUS: Operator.ADD, TokenType.MINUS: Operator.SUBTRACT}

_MULTIPLICATIVE = {
    TokenType.STAR: Operator.MULTIPLY,
    TokenType.SLASH: Operator.DIVIDE,
    TokenType.MODULO: Operator.MODULO,
}

_RADIX = {"x": 16, "b": 2, "o": 8}

_INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the tokens do not form a valid program."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} at line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column


def _int_value(lexeme: str) -> int:
    if len(lexeme) > 2 and lexeme[0] == "0" and lexeme[1].lower() in _RADIX:
        value = int(lexeme[2:], _RADIX[lexeme[1].lower()])
    else:
        value = int(lexeme)
    if value > _INT_MAX:
        raise OverflowError(f"Integer literal out of range: {lexeme}")
    return value


class Parser:
    """Recursive-descent parser over a token list ending with EOF."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF_TOKEN:
            last = self._tokens[-1] if self._tokens else None
            line = last.line if last else 1
            column = last.column + len(last.lexeme) if last else 1
            self._tokens.append(Token(TokenType.EOF_TOKEN, "", line, column))
        self._current = 0

    def parse(self) -> Program:
        """Parse statements until EOF or the first error.

        A parse error is reported on standard error; the statements read
        before it are still returned.
        """
        statements: list[Statement] = []
        try:
            while not self._at_end():
                statements.append(self._statement())
        except ParseError as error:
            print(f"Parse error: {error}", file=sys.stderr)
            self._synchronize()
        return Program(statements)

    def _statement(self) -> Statement:
        if self._match(TokenType.VAR, TokenType.VAL):
            return self._var_statement()
        return ExpressionStatement(self._expression())

    def _var_statement(self) -> VarStatement:
        var_type = self._previous().type
        declarations = [self._declaration("Expected variable name")]
        while self._peek().type is TokenType.COMMA:
            self._advance()
            declarations.append(
                self._declaration("Expected variable name after comma")
            )

        initializers: list[Expression] = []
        if self._match(TokenType.EQUAL):
            initializers.append(self._expression())
            while self._peek().type is TokenType.COMMA:
                self._advance()
                expr = self._expression()
                if len(initializers) < len(declarations):
                    initializers.append(expr)
        return VarStatement(declarations, var_type, initializers)

    def _declaration(self, missing_name: str) -> VarDeclaration:
        name = self._consume(TokenType.IDENTIFIER, missing_name)
        data_type = None
        if self._match(TokenType.COLON):
            type_token = self._match(*_TYPE_TOKENS)
            if type_token is None:
                raise self._error(self._peek(), "Expected type after colon")
            data_type = type_token.type
        return VarDeclaration(name.lexeme, data_type)

    def _expression(self) -> Expression:
        left = self._term()
        while (token := self._match(*_ADDITIVE)) is not None:
            left = BinaryExpression(left, _ADDITIVE[token.type], self._term())
        return left

    def _term(self) -> Expression:
        left = self._factor()
        while (token := self._match(*_MULTIPLICATIVE)) is not None:
            left = BinaryExpression(left, _MULTIPLICATIVE[token.type], self._factor())
        return left

    def _factor(self) -> Expression:
        left = self._primary()
        while self._match(TokenType.POWER):
            left = BinaryExpression(left, Operator.POWER, self._primary())
        return left

    def _primary(self) -> Expression:
        if token := self._match(TokenType.INT_LITERAL):
            return LiteralExpression(_int_value(token.lexeme))
        if token := self._match(TokenType.FLOAT_LITERAL):
            return LiteralExpression(float(token.lexeme))
        if token := self._match(TokenType.IDENTIFIER):
            return VariableExpression(token.lexeme)
        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expected ')' after expression")
            return expr
        raise self._error(self._peek(), "Expected expression")

    def _match(self, *types: TokenType) -> Token | None:
        if not self._at_end() and self._peek().type in types:
            return self._advance()
        return None

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.EOF_TOKEN

    def _consume(self, token_type: TokenType, message: str) -> Token:
        token = self._match(token_type)
        if token is None:
            raise self._error(self._peek(), message)
        return token

    @staticmethod
    def _error(token: Token, message: str) -> ParseError:
        return ParseError(message, token.line, token.column)

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            if self._previous().type is TokenType.EOF_TOKEN:
                return
            if self._peek().type in (TokenType.VAR, TokenType.VAL):
                return
            self._advance()


def parse(tokens: Iterable[Token]) -> Program:
    """Parse ``tokens`` into a :class:`Program`."""
    return Parser(tokens).parse()