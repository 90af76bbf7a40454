"""Command line entry point: tokenize and parse a source file, then show both."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .lexer import tokenize
from .parser import Parser
from .tokens import Token, TokenType

DEFAULT_PATH = "./DreamLang/src/calc.zv"

_RULE = "===================="

# Token kinds that the listing names; anything else is shown as UNKNOWN.
_LISTED_TYPES = frozenset(
    {
        TokenType.VAR,
        TokenType.VAL,
        TokenType.INT_TYPE,
        TokenType.FLOAT_TYPE,
        TokenType.BOOL_TYPE,
        TokenType.INT_LITERAL,
        TokenType.FLOAT_LITERAL,
        TokenType.IDENTIFIER,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SLASH,
        TokenType.STAR,
        TokenType.POWER,
        TokenType.MODULO,
        TokenType.COLON,
        TokenType.EQUAL,
        TokenType.EOF_TOKEN,
    }
)


def read_file(path: str) -> str:
    """Return the whole text of ``path``; raise OSError if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as error:
        raise OSError(f"Could not open file: {path}") from error


def format_token(token: Token) -> str:
    """Return the listing line shown for ``token``."""
    type_name = (
        token.type.display_name if token.type in _LISTED_TYPES else "UNKNOWN"
    )
    return f"Line {token.line}, Col {token.column}: {type_name} '{token.lexeme}'"


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="dreamlang",
        description="Tokenize and parse a source file, printing tokens and the syntax tree.",
    )
    arg_parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PATH,
        help=f"source file to read (default: {DEFAULT_PATH})",
    )
    return arg_parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _build_arg_parser().parse_args(argv)
    out = sys.stdout
    try:
        print(f"Reading file: {args.path}", file=out)
        source = read_file(args.path)
        print(f"File content length: {len(source)} characters", file=out)

        tokens = tokenize(source)

        print("Tokenization result:", file=out)
        print(_RULE, file=out)
        print(f"Total tokens: {len(tokens)}", file=out)
        print(_RULE, file=out)
        for token in tokens:
            print(format_token(token), file=out)

        print("\nParsing and building AST...", file=out)
        print(_RULE, file=out)

        program = Parser(tokens).parse()

        print("AST Structure:", file=out)
        print(_RULE, file=out)
        program.write(out)
        print(_RULE, file=out)
        return 0
    except (OSError, ValueError, ArithmeticError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())