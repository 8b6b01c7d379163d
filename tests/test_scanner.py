import pytest

from minijs import Scanner, Token, TokenKind, tokenize
from minijs.error.scanner_error import ScannerException
from minijs.util import Span


def test_scan():
    tokens = tokenize("var x = 10;")

    expected = [
        Token("var", TokenKind.KEYWORD),
        Token("x", TokenKind.IDENTIFIER),
        Token("=", TokenKind.OPERATOR),
        Token("10", TokenKind.NUMBER),
        Token(";", TokenKind.PUNCTUATOR),
        Token("", TokenKind.EOF),
    ]

    assert tokens == expected


def test_empty():
    tokens = tokenize("")
    assert tokens == [Token("", TokenKind.EOF)]


@pytest.mark.parametrize(
    "program",
    ["", "   \n\t", "x", "var x = 10;", "@#~", "'unterminated", "/* open", "a // b"],
)
def test_single_eof(program: str):
    tokens = tokenize(program)
    kinds = [token.kind for token in tokens]
    assert kinds[-1] == TokenKind.EOF
    assert kinds.count(TokenKind.EOF) == 1


@pytest.mark.parametrize("operator", ["===", "!==", "==", "!=", "<=", ">=", "&&", "||"])
def test_greedy_operator(operator: str):
    tokens = tokenize(operator)
    assert tokens == [Token(operator, TokenKind.OPERATOR), Token("", TokenKind.EOF)]


def test_operator_extension():
    # Only `==` and `!=` grow a third character
    tokens = tokenize("<<= a=-1 ====")
    assert [token.text for token in tokens[:-1]] == [
        "<<",
        "=",
        "a",
        "=",
        "-",
        "1",
        "===",
        "=",
    ]


def test_numbers():
    tokens = tokenize("3.14 10 1.2.3 7.")
    assert [(token.text, token.kind) for token in tokens[:-1]] == [
        ("3.14", TokenKind.NUMBER),
        ("10", TokenKind.NUMBER),
        ("1.2", TokenKind.NUMBER),
        (".", TokenKind.PUNCTUATOR),
        ("3", TokenKind.NUMBER),
        ("7.", TokenKind.NUMBER),
    ]


def test_strings():
    tokens = tokenize("\"double\" 'single' \"it's\" 'no \\n escapes'")
    assert [token for token in tokens[:-1]] == [
        Token("double", TokenKind.STRING),
        Token("single", TokenKind.STRING),
        Token("it's", TokenKind.STRING),
        Token("no \\n escapes", TokenKind.STRING),
    ]


def test_unterminated_string():
    tokens = tokenize('x = "runs to the end')
    assert tokens[-2] == Token("runs to the end", TokenKind.STRING)


def test_keywords_and_identifiers():
    tokens = tokenize("if iffy $el _x null nullable true")
    assert [token.kind for token in tokens[:-1]] == [
        TokenKind.KEYWORD,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.KEYWORD,
        TokenKind.IDENTIFIER,
        TokenKind.KEYWORD,
    ]


def test_punctuators():
    tokens = tokenize("(){}[];,.")
    assert all(token.kind == TokenKind.PUNCTUATOR for token in tokens[:-1])
    assert "".join(token.text for token in tokens) == "(){}[];,."


def test_unknown_characters_skipped():
    assert tokenize("a @ b # c") == tokenize("a b c")


def test_comments():
    tokens = tokenize("a // line comment\n/* block\ncomment */ b")
    assert [token.text for token in tokens] == ["a", "b", ""]


def test_comment_inside_string():
    tokens = tokenize('fetch("http://example.com/*")')
    assert Token("http://example.com/*", TokenKind.STRING) in tokens
    assert len(tokens) == 5


def test_spans():
    tokens = tokenize('var x\n  = "a\nb";')
    assert tokens[0].span == Span(1, (0, 3))
    assert tokens[1].span == Span(1, (4, 5))
    assert tokens[2].span == Span(2, (2, 3))
    # A string containing a newline spans two lines
    assert tokens[3].span == Span((2, 3), (4, 2))
    assert tokens[4].span == Span(3, (2, 3))
    assert tokens[5].span == Span(3, (3, 3))


def test_spans_ignored_in_equality():
    assert Token("x", TokenKind.IDENTIFIER, Span(4, (1, 2))) == Token(
        "x", TokenKind.IDENTIFIER
    )


def test_strict():
    scanner = Scanner("var x = 10;\nvar y @ 2;", strict=True)
    with pytest.raises(ScannerException) as excinfo:
        scanner.scan()

    assert "ScannerError" in str(excinfo.value)
    assert "'@'" in str(excinfo.value)
    assert "-> 2. " in str(excinfo.value)
    assert excinfo.value.error.span == Span(2, (6, 7))


def test_strict_valid(functions_program: str):
    assert Scanner(functions_program, strict=True).scan() == tokenize(
        functions_program
    )


def test_debug(capsys):
    Scanner("x;", debug=True).scan()
    captured = capsys.readouterr()
    assert "scanner| " in captured.err

    Scanner("x;").scan()
    captured = capsys.readouterr()
    assert captured.err == ""
