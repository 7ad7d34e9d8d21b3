"""
Source lexer tests

Tests that the Pygments lexer picks out quotes, bullet markers and code.
"""

from pygments.token import Generic, Keyword, String, Text

from stylemark.lib.lexer import StylemarkLexer, source_highlight


def tokens(source):
    return list(StylemarkLexer().get_tokens(source))


class TestLexer:
    """Test token types"""

    def test_quote(self):
        assert (Generic.Emph, "> quote\n") in tokens("> quote\n")

    def test_bullet_and_code(self):
        result = tokens("* item `code`\n")

        assert (Keyword, "* ") in result
        assert (String.Backtick, "`code`") in result

    def test_markers_mid_line_are_text(self):
        result = tokens("a * b > c\n")

        assert all(token is Text for token, _ in result)

    def test_unmatched_tick_is_text(self):
        result = tokens("a `b\n")

        assert String.Backtick not in [token for token, _ in result]

    def test_highlight(self):
        highlighted = source_highlight("> quote\n* item\n")

        assert "quote" in highlighted
        assert "item" in highlighted
