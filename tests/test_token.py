from justcore.token import Token
from justcore.token_kind import TokenKind
from justcore.unindent import unindent


def _span_at(src, needle, length, line, column, kind=TokenKind.IDENTIFIER):
    return Token(
        offset=src.index(needle),
        length=length,
        line=line,
        column=column,
        src=src,
        kind=kind,
    )


def test_lexeme_is_span_of_source():
    src = "foo := 'bar'"
    span = Token(offset=0, length=3, line=0, column=0, src=src, kind=TokenKind.IDENTIFIER)
    assert span.lexeme() == "foo"


def test_lexeme_of_later_token():
    src = "foo := 'bar'"
    span = _span_at(src, "'bar'", 5, 0, 7, TokenKind.STRING_TOKEN)
    assert span.lexeme() == "'bar'"


def test_context_single_caret():
    src = "a := if b == '' { '' } else { '' }\n\nfoo:\n  echo {{ a }}\n"
    span = _span_at(src, "b ==", 1, 0, 8)
    want = unindent(
        """
          |
        1 | a := if b == '' { '' } else { '' }
          |         ^
        """
    )
    assert span.render_context() + "\n" == want


def test_context_tab_expanded():
    src = "foo a=\t`echo blaaaaaah:\n  echo {{a}}\n"
    span = _span_at(src, "`", 1, 0, 7, TokenKind.BACKTICK)
    want = "  |\n1 | foo a=    `echo blaaaaaah:\n  |           ^"
    assert span.render_context() == want


def test_context_multiple_carets():
    src = "a b= ''':\n"
    span = _span_at(src, "'''", 3, 0, 5, TokenKind.STRING_TOKEN)
    want = "  |\n1 | a b= ''':\n  |      ^^^"
    assert span.render_context() == want


def test_context_on_later_line():
    src = "\nstring := 'hello\n\nwhatever' + 'yo'\n\na:\n  echo '{{foo}}'\n"
    span = _span_at(src, "foo}}", 3, 5, 10)
    want = "  |\n6 |   echo '{{foo}}'\n  |           ^^^"
    assert span.render_context() == want


def test_zero_length_token_gets_one_caret():
    src = "]"
    span = Token(offset=0, length=0, line=0, column=0, src=src, kind=TokenKind.EOF)
    assert span.render_context().splitlines()[-1] == "  | ^"


def test_prefix_and_suffix_wrap_carets():
    src = "abc"
    span = Token(offset=1, length=1, line=0, column=1, src=src, kind=TokenKind.IDENTIFIER)
    assert span.render_context("<", ">").endswith("<^>")


def test_end_of_file_past_last_line_renders_nothing():
    src = "a\n"
    span = Token(offset=len(src), length=0, line=1, column=0, src=src, kind=TokenKind.EOF)
    assert span.render_context() == ""


def test_invalid_line_number_reported():
    src = "a\n"
    span = Token(offset=0, length=1, line=4, column=0, src=src, kind=TokenKind.IDENTIFIER)
    assert span.render_context() == "internal error: Error has invalid line number: 5"