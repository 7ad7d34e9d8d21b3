"""
Custom Pygments lexer for stylemark syntax highlighting

Highlights the three constructs the parser recognizes when a source is shown
in verbose CLI output.

Token types:
- Generic.Emph: Quote paragraphs (marker and text)
- Keyword: Bullet point markers ("* ", "+ ")
- String.Backtick: Inline code including its delimiters
- Text: Everything else, including an unmatched backtick
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer
from pygments.token import Text, Keyword, String, Generic


class StylemarkLexer(RegexLexer):
    """
    Lexer for stylemark text

    Example:
        > A quote
        * bullet with `code`

    Tokens:
        > A quote → Generic.Emph
        * → Keyword
        `code` → String.Backtick
    """

    name = 'Stylemark'
    aliases = ['stylemark']
    filenames = ['*.smk']

    tokens = {
        'root': [
            # Quotes only count at the start of a line
            (r'^> [^\n]*\n?', Generic.Emph),

            # Bullet markers at the start of a line
            (r'^[*+] ', Keyword),

            # Inline code, delimiters included
            (r'`[^`]*`', String.Backtick),

            # Everything else is text
            (r'[^`\n]+', Text),
            (r'\n', Text),
            (r'`', Text),
        ],
    }


def source_highlight(source: str) -> str:
    """
    Highlight stylemark text for a terminal

    Args:
        source: Raw stylemark text

    Returns:
        Text with ANSI color escapes
    """
    return highlight(source, StylemarkLexer(), TerminalFormatter())
