"""Lexer, parser and syntax tree for the Dream language, with a command that prints them."""

__version__ = "0.1.0"