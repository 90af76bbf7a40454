import pytest

from dreamlang.lexer import Lexer, LexerError, tokenize
from dreamlang.tokens import TokenType


def kinds(source):
    return [token.type for token in tokenize(source)]


def lexemes(source):
    return [token.lexeme for token in tokenize(source)]


def test_empty_source_gives_only_eof():
    tokens = tokenize("")
    assert len(tokens) == 1
    assert tokens[0].type is TokenType.EOF_TOKEN
    assert (tokens[0].line, tokens[0].column) == (1, 1)


def test_every_stream_ends_with_single_eof():
    tokens = tokenize("var x = 1 + 2\nx * 3")
    assert tokens[-1].type is TokenType.EOF_TOKEN
    assert sum(t.type is TokenType.EOF_TOKEN for t in tokens) == 1


@pytest.mark.parametrize(
    "word, expected",
    [
        ("var", TokenType.VAR),
        ("val", TokenType.VAL),
        ("int", TokenType.INT_TYPE),
        ("float", TokenType.FLOAT_TYPE),
        ("bool", TokenType.BOOL_TYPE),
        ("string", TokenType.IDENTIFIER),
        ("_x1", TokenType.IDENTIFIER),
        ("var1", TokenType.IDENTIFIER),
    ],
)
def test_keywords_and_identifiers(word, expected):
    tokens = tokenize(word)
    assert tokens[0].type is expected
    assert tokens[0].lexeme == word


def test_single_character_tokens():
    source = "(){},.-+/*^%:="
    assert kinds(source) == [
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
    ]
    assert "".join(lexemes(source)) == source


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("42", TokenType.INT_LITERAL),
        ("007", TokenType.INT_LITERAL),
        ("0xFF", TokenType.INT_LITERAL),
        ("0b1010", TokenType.INT_LITERAL),
        ("0o17", TokenType.INT_LITERAL),
        ("3.14", TokenType.FLOAT_LITERAL),
        ("0.5", TokenType.FLOAT_LITERAL),
    ],
)
def test_number_literals(literal, expected):
    tokens = tokenize(literal)
    assert [t.type for t in tokens] == [expected, TokenType.EOF_TOKEN]
    assert tokens[0].lexeme == literal


def test_trailing_dot_is_not_part_of_number():
    assert kinds("1.") == [TokenType.INT_LITERAL, TokenType.DOT, TokenType.EOF_TOKEN]
    assert lexemes("1.")[:2] == ["1", "."]


def test_radix_digits_stop_at_invalid_digit():
    tokens = tokenize("0b12")
    assert [t.lexeme for t in tokens[:2]] == ["0b1", "2"]
    assert tokens[1].type is TokenType.INT_LITERAL


def test_whitespace_and_comments_are_dropped():
    source = "a // a comment\n  b\t+ c"
    assert lexemes(source) == ["a", "b", "+", "c", ""]


def test_single_slash_is_division():
    assert kinds("a / b") == [
        TokenType.IDENTIFIER,
        TokenType.SLASH,
        TokenType.IDENTIFIER,
        TokenType.EOF_TOKEN,
    ]


def test_documentation_block_is_dropped_and_lines_counted():
    source = "/// first\n/// second\nx"
    tokens = tokenize(source)
    assert [t.lexeme for t in tokens] == ["x", ""]
    x = tokens[0]
    assert x.line == source.count("\n") + 1
    assert x.column == 1


def test_columns_match_offsets_on_one_line():
    source = "var total: int = 0x1F + count * 2.5"
    tokens = tokenize(source)
    search_from = 0
    for token in tokens[:-1]:
        index = source.index(token.lexeme, search_from)
        assert token.line == 1
        assert token.column == index + 1
        search_from = index + len(token.lexeme)
    assert tokens[-1].column == len(source) + 1


def test_lines_and_columns_across_lines():
    lines = ["val a = 1", "  val b = a", "b ^ 2"]
    tokens = tokenize("\n".join(lines))
    for token in tokens[:-1]:
        text = lines[token.line - 1]
        assert text[token.column - 1:].startswith(token.lexeme)
    assert tokens[-1].line == len(lines)
    assert tokens[-1].column == len(lines[-1]) + 1


def test_lexer_instance_can_be_reused():
    lexer = Lexer("var x = 1")
    first = lexer.tokenize()
    second = lexer.tokenize()
    assert first == second
    assert [t.type for t in second] == [
        TokenType.VAR,
        TokenType.IDENTIFIER,
        TokenType.EQUAL,
        TokenType.INT_LITERAL,
        TokenType.EOF_TOKEN,
    ]
    assert [t.lexeme for t in second] == ["var", "x", "=", "1", ""]


def test_unexpected_character():
    with pytest.raises(LexerError, match="Unexpected character: @"):
        tokenize("a @ b")


def test_unexpected_character_reports_position():
    with pytest.raises(LexerError) as info:
        tokenize("ab\n  #")
    assert info.value.line == 2
    assert info.value.column == 3


@pytest.mark.parametrize(
    "source, message",
    [
        ("0x", "Invalid hexadecimal number: expected at least one hex digit after '0x'"),
        ("0xg", "Invalid hexadecimal number: expected at least one hex digit after '0x'"),
        ("0b2", "Invalid binary number: expected binary digit after '0b'"),
        ("0o9", "Invalid octal number: expected octal digit after '0o'"),
    ],
)
def test_invalid_radix_literals(source, message):
    with pytest.raises(LexerError) as info:
        tokenize(source)
    assert str(info.value) == message


def test_lexer_error_is_value_error():
    with pytest.raises(ValueError):
        tokenize("$")