# dreamlang

A small front end for the Dream language: it turns source text into tokens,
parses the tokens into a syntax tree, and prints both in a readable form.

The language covers variable declarations and arithmetic expressions:

```
/// Documentation comments start with three slashes
var radius: float = 2.5
val width, height: int = 0x10, 0b101   // two names, two initializers
(width + height) * radius ^ 2 % 7
```

- keywords `var` and `val`, type names `int`, `float` and `bool`
- integer literals in decimal, hexadecimal (`0x`), binary (`0b`) and octal (`0o`)
- floating-point literals such as `3.14`
- operators `+`, `-`, `*`, `/`, `%` and `^`, with parentheses for grouping;
  `^` binds tighter than `*`, `/` and `%`, which bind tighter than `+` and `-`
- `//` line comments and `///` documentation blocks, which are skipped

In a declaration each name may carry its own `: type` annotation. Initializers
after `=` are separated by commas; any beyond the number of declared names are
parsed but dropped.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
dreamlang path/to/program.zv
```

The same entry point is available as `python -m dreamlang.cli`. If no path is
given, `./DreamLang/src/calc.zv` is read.

The command prints the file's length, lists every token with its line and
column, then parses the tokens and prints the resulting syntax tree. A file
that cannot be opened, an unexpected character, a malformed number or an
integer literal larger than 2147483647 is reported as `Error: ...` on
standard error and the command exits with status 1; otherwise it exits with 0.

## Library use

```python
from dreamlang.lexer import tokenize
from dreamlang.parser import parse

tokens = tokenize("var x: int = 1 + 2 * 3")
for token in tokens:
    print(token.describe())

program = parse(tokens)
print(program.render())
```

- `dreamlang.tokens` defines `TokenType` and the frozen `Token` dataclass
  (`type`, `lexeme`, `line`, `column`); `Token.describe()` gives a one-line
  description.
- `dreamlang.lexer` provides `Lexer` and `tokenize(source)`, which return a
  list of tokens always ending with an end-of-file token. Whitespace and
  comments are dropped. `LexerError` (a `ValueError` with `line` and
  `column`) is raised on characters or number prefixes it does not accept.
- `dreamlang.parser` provides `Parser` and `parse(tokens)`, which build a
  `Program`. Integer literals above 2147483647 raise `OverflowError`.
- `dreamlang.syntax_tree` holds the nodes: `Program`, `VarStatement`
  (with `VarDeclaration` entries), `ExpressionStatement`, `BinaryExpression`
  (with an `Operator`), `LiteralExpression` and `VariableExpression`. Each can
  be inspected directly, rendered as an indented outline with `render()`, or
  written to a stream with `write()`.
- `dreamlang.cli` provides `main(argv=None)`, `read_file(path)` and
  `format_token(token)`.

A parse error stops parsing: it is printed to standard error as
`Parse error: <message> at line L, column C`, and the statements read before
it are kept in the returned program. `ParseError` carries `message`, `line`
and `column`.

## What it does not do

The package stops at the syntax tree. It does not check types, evaluate
expressions, or generate code, and the parser has no syntax for boolean or
string literals, although `LiteralExpression` can hold and render them.