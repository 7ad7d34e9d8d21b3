"""
Parser for stylemark text

Transforms a raw string into a Document of typed elements.

The parser is not a markdown implementation: it only recognizes three
constructs, found by pattern search in two passes.

1. Quote pass (top level only): paragraphs starting with "> " become quotes.
   Quotes cannot contain other elements.
2. Element pass (recursive): paragraphs starting with "* " or "+ " become
   bullet points, whose content is parsed again so they can hold code and
   nested bullets; text enclosed in "`" becomes an inline code block.

A paragraph runs from the end of its marker up to and including the next line
separator, or to the end of the text. Markers count at the start of the text
and right after a line separator.

Malformed markup never raises. An opening "`" without a closing one is kept,
together with everything after it, as literal text.

Example:
    >>> document = Parser().parse("Points\\n* one `two`\\n> quoted")
    >>> [element.kind.name for element in document]
    ['TEXT', 'BULLET_POINT', 'QUOTE']
    >>> [child.kind.name for child in document[1].children]
    ['TEXT', 'CODE_BLOCK', 'TEXT']
"""

import re
from typing import List, Optional

from ..models.element import Document, Element, ElementKind
from .log import LOG


BULLET_PLUS = "+ "
BULLET_STAR = "* "
CODE_MARK = "`"


def lineStart_pattern(line_separator: str) -> str:
    """Regex matching at the start of the text or right after a line separator"""
    return rf"(?:\A|(?<={re.escape(line_separator)}))"


class Parser:
    """
    Parser for quotes, bullet points and inline code

    Parsers hold no state between calls, so one instance can parse any
    number of sources.
    """

    def __init__(self, line_separator: Optional[str] = None):
        """
        Initialize parser

        Args:
            line_separator: Separator ending a quote or bullet point paragraph.
                            Defaults to the configured STYLEMARK_LINE_SEPARATOR.
        """
        if line_separator is None:
            from ..config import appsettings
            line_separator = appsettings.line_separator
        if not line_separator:
            raise ValueError("line_separator must not be empty")
        self.line_separator = line_separator
        line_start = lineStart_pattern(line_separator)
        self.quote_pattern = re.compile(rf"{line_start}> ")
        self.element_pattern = re.compile(rf"{line_start}\* |{line_start}\+ |`")

    def parse(self, source: str) -> Document:
        """
        Parse text into a Document

        Looks for quotes first. Text before, between and after the quotes is
        handed to elements_find() for bullet points and code.

        Args:
            source: Raw text

        Returns:
            Document of top-level elements. Empty for empty text.

        Example:
            >>> Parser().parse("Text\\n> Quote").elements
            (Element(kind=<ElementKind.TEXT: 'text'>, text='Text\\n', children=()),
             Element(kind=<ElementKind.QUOTE: 'quote'>, text='Quote', children=()))
        """
        elements: List[Element] = []
        last_start = 0

        while True:
            match = self.quote_pattern.search(source, last_start)
            if not match:
                break

            if last_start < match.start():
                elements.extend(self.elements_find(source[last_start:match.start()]))

            # a quote is only ever one paragraph long
            end_of_quote = self.paragraph_findEnd(source, match.end())
            quoted = source[match.end():end_of_quote]
            LOG(f"Quote at {match.start()}: {quoted!r}", level=3)
            elements.append(Element(ElementKind.QUOTE, quoted))
            last_start = end_of_quote

        if last_start < len(source):
            elements.extend(self.elements_find(source[last_start:]))

        LOG(f"Parsed {len(elements)} top-level elements", level=3)
        return Document(elements=tuple(elements))

    def paragraph_findEnd(self, source: str, position: int) -> int:
        """
        Find where the paragraph containing position ends

        Args:
            source: Text being scanned
            position: Offset to search from

        Returns:
            Offset just past the next line separator, or len(source) when
            no separator follows
        """
        end = source.find(self.line_separator, position)
        if end == -1:
            return len(source)
        return end + len(self.line_separator)

    def elements_find(self, source: str) -> List[Element]:
        """
        Find bullet points and code blocks in text

        Line starts are relative to ``source``: its first character counts
        as the start of a line, as does every position right after the line
        separator. Bullet point paragraphs are parsed again for
        their children, which is how bullets hold code and other bullets.

        Args:
            source: Text containing no quotes to recognize

        Returns:
            Elements in order of appearance. Empty for empty text.
        """
        elements: List[Element] = []
        last_start = 0

        while last_start < len(source):
            match = self.element_pattern.search(source, last_start)
            if not match:
                break

            if last_start < match.start():
                elements.extend(self.elements_find(source[last_start:match.start()]))

            mark = match.group(0)
            if mark in (BULLET_STAR, BULLET_PLUS):
                end_of_bullet = self.paragraph_findEnd(source, match.end())
                text = source[match.end():end_of_bullet]
                LOG(f"Bullet point at {match.start()}: {text!r}", level=3)
                elements.append(
                    Element(ElementKind.BULLET_POINT, text, tuple(self.elements_find(text)))
                )
                last_start = end_of_bullet
            elif mark == CODE_MARK:
                code_end = source.find(CODE_MARK, match.end())
                if code_end == -1:
                    # no closing mark, so this is not code
                    LOG(f"Unmatched '{CODE_MARK}' at {match.start()}", level=3)
                    elements.append(Element(ElementKind.TEXT, source[match.start():]))
                    last_start = len(source)
                else:
                    elements.append(Element(ElementKind.CODE_BLOCK, source[match.end():code_end]))
                    last_start = code_end + len(CODE_MARK)
            else:
                raise ValueError(f"Unexpected mark {mark!r}")

        if last_start < len(source):
            elements.append(Element(ElementKind.TEXT, source[last_start:]))

        return elements


def parse(source: str) -> Document:
    """
    Parse text into a Document with the configured line separator

    Args:
        source: Raw text

    Returns:
        Document of top-level elements
    """
    return Parser().parse(source)
