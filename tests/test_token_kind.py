import pytest

from justcore.token_kind import TokenKind


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (TokenKind.EOF, "end of file"),
        (TokenKind.EOL, "end of line"),
        (TokenKind.TEXT, "command text"),
        (TokenKind.STRING_TOKEN, "string"),
        (TokenKind.INTERPOLATION_START, "'{{'"),
        (TokenKind.BANG_EQUALS, "'!='"),
        (TokenKind.IDENTIFIER, "identifier"),
    ],
)
def test_display(kind, expected):
    assert str(kind) == expected


def test_display_names_are_unique():
    looked_up = [TokenKind(str(kind)) for kind in TokenKind]
    assert looked_up == list(TokenKind)


def test_sorting_follows_declaration_order():
    kinds = [TokenKind("whitespace"), TokenKind("'*'"), TokenKind("':'")]
    assert sorted(kinds) == [TokenKind.ASTERISK, TokenKind.COLON, TokenKind.WHITESPACE]


def test_comparisons():
    assert TokenKind("'*'") < TokenKind("whitespace")
    assert TokenKind("whitespace") > TokenKind("'*'")
    assert TokenKind("':'") <= TokenKind.COLON
    assert TokenKind("':'") >= TokenKind.COLON


def test_lookup_by_display_name():
    assert TokenKind("backtick") is TokenKind.BACKTICK