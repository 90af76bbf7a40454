"""Syntax tree nodes built by the parser, with an indented text rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO, Union

from .tokens import TokenType

_INDENT = "  "

_TYPE_NAMES = {
    TokenType.INT_TYPE: "int",
    TokenType.FLOAT_TYPE: "float",
    TokenType.BOOL_TYPE: "bool",
    TokenType.STRING_TYPE: "string",
}

LiteralValue = Union[int, float, bool, str]


def _pad(level: int) -> str:
    return _INDENT * level


class Node(ABC):
    """Base of every syntax tree node."""

    @abstractmethod
    def render(self, indent: int = 0) -> str:
        """Return the node as indented text, one line per element."""

    def write(self, stream: TextIO, indent: int = 0) -> None:
        """Write the rendered node to ``stream``."""
        stream.write(self.render(indent))

    def __str__(self) -> str:
        return self.render()


class Statement(Node, ABC):
    """A top-level statement."""


class Expression(Node, ABC):
    """An expression that yields a value."""


@dataclass
class Program(Node):
    """A whole parsed source: a sequence of statements."""

    statements: list[Statement] = field(default_factory=list)

    def render(self, indent: int = 0) -> str:
        head = f"{_pad(indent)}Program:\n"
        return head + "".join(s.render(indent + 1) for s in self.statements)


@dataclass
class LiteralExpression(Expression):
    """A constant value written in the source."""

    value: LiteralValue

    def render(self, indent: int = 0) -> str:
        return f"{_pad(indent)}Literal: {self._describe_value()}\n"

    def _describe_value(self) -> str:
        value = self.value
        if isinstance(value, bool):
            return f"BOOL({'true' if value else 'false'})"
        if isinstance(value, int):
            return f"INT({value})"
        if isinstance(value, float):
            return f"FLOAT({value:g})"
        return f'STRING("{value}")'


@dataclass
class VariableExpression(Expression):
    """A reference to a named variable."""

    name: str

    def render(self, indent: int = 0) -> str:
        return f"{_pad(indent)}Variable: {self.name}\n"


class Operator(Enum):
    """Binary operators, valued by the symbol that prints them."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    MODULO = "%"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass
class BinaryExpression(Expression):
    """Two operands joined by an operator."""

    left: Expression
    op: Operator
    right: Expression

    def render(self, indent: int = 0) -> str:
        return (
            f"{_pad(indent)}BinaryExpression: {self.op.symbol}\n"
            + self.left.render(indent + 1)
            + self.right.render(indent + 1)
        )


@dataclass(frozen=True)
class VarDeclaration:
    """One declared name with its optional type annotation."""

    name: str
    data_type: TokenType | None = None


@dataclass
class VarStatement(Statement):
    """A ``var`` or ``val`` declaration of one or more names."""

    declarations: list[VarDeclaration]
    var_type: TokenType = TokenType.VAR
    initializers: list[Expression] = field(default_factory=list)

    @classmethod
    def single(
        cls,
        name: str,
        var_type: TokenType = TokenType.VAR,
        data_type: TokenType | None = None,
        initializer: Expression | None = None,
    ) -> VarStatement:
        """Build a statement declaring just one name."""
        initializers = [initializer] if initializer is not None else []
        return cls([VarDeclaration(name, data_type)], var_type, initializers)

    @property
    def name(self) -> str:
        return self.declarations[0].name

    @property
    def data_type(self) -> TokenType | None:
        return self.declarations[0].data_type

    @property
    def initializer(self) -> Expression | None:
        return self.initializers[0] if self.initializers else None

    def is_multi_var(self) -> bool:
        """True when more than one name or initializer is present."""
        return len(self.declarations) > 1 or len(self.initializers) > 1

    def render(self, indent: int = 0) -> str:
        keyword = "var" if self.var_type is TokenType.VAR else "val"
        parts = [
            f"{_pad(indent)}VarStatement: {keyword}\n",
            f"{_pad(indent + 1)}Declarations:\n",
        ]
        for declaration in self.declarations:
            type_name = _TYPE_NAMES.get(declaration.data_type)
            suffix = f": {type_name}" if type_name else ""
            parts.append(f"{_pad(indent + 2)}{declaration.name}{suffix}\n")
        if self.initializers:
            parts.append(f"{_pad(indent + 1)}Initializers:\n")
            parts.extend(init.render(indent + 2) for init in self.initializers)
        return "".join(parts)


@dataclass
class ExpressionStatement(Statement):
    """An expression used on its own as a statement."""

    expression: Expression

    def render(self, indent: int = 0) -> str:
        return f"{_pad(indent)}ExpressionStatement:\n" + self.expression.render(
            indent + 1
        )