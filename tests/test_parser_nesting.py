"""
Parser nesting tests

Tests bullet points, inline code, bullets holding code and other bullets,
and degradation of unmatched code delimiters.
"""

from stylemark.lib.parser import Parser
from stylemark.models.element import Element, ElementKind


def text(value):
    return Element(ElementKind.TEXT, value)


def code(value):
    return Element(ElementKind.CODE_BLOCK, value)


def bullet(value, *children):
    return Element(ElementKind.BULLET_POINT, value, children)


class TestBulletPoints:
    """Test bullet point paragraphs"""

    def test_simple_bullet_points(self):
        """Both '* ' and '+ ' start bullet points"""
        document = Parser().parse("Bullet points:\n* One\n+ Two\n* Three")

        assert document.elements == (
            text("Bullet points:\n"),
            bullet("One\n", text("One\n")),
            bullet("Two\n", text("Two\n")),
            bullet("Three", text("Three")),
        )

    def test_points_example(self):
        """Text then two bullets"""
        document = Parser().parse("Points\n* one\n+ two")

        assert len(document) == 3
        assert document[0] == text("Points\n")
        assert document[1].kind is ElementKind.BULLET_POINT
        assert document[1].text == "one\n"
        assert document[2].kind is ElementKind.BULLET_POINT
        assert document[2].text == "two"

    def test_bullet_marker_mid_line(self):
        """'* ' in the middle of a line is plain text"""
        document = Parser().parse("a * b + c")
        assert document.elements == (text("a * b + c"),)

    def test_bullet_marker_without_space(self):
        """'*' must be followed by a space"""
        document = Parser().parse("*bold*")
        assert document.elements == (text("*bold*"),)

    def test_empty_bullet(self):
        """A marker with nothing after it is an empty bullet point"""
        document = Parser().parse("* ")
        assert document.elements == (bullet(""),)

    def test_nested_bullet(self):
        """A marker right after a marker nests a bullet point"""
        document = Parser().parse("* * inner")

        assert document.elements == (
            bullet("* inner", bullet("inner", text("inner"))),
        )

    def test_no_quotes_inside_bullets(self):
        """Quotes are only recognized at the top level"""
        document = Parser().parse("* > not a quote")

        assert document.elements == (
            bullet("> not a quote", text("> not a quote")),
        )


class TestCode:
    """Test inline code"""

    def test_simple_code(self):
        """Two code spans in text"""
        document = Parser().parse("Styling `Text` in `Kotlin`")

        assert document.elements == (
            text("Styling "),
            code("Text"),
            text(" in "),
            code("Kotlin"),
        )

    def test_code_with_extra_tick(self):
        """An unmatched delimiter and what follows it is literal text"""
        document = Parser().parse("Styling `Text` in `Java")

        assert document.elements == (
            text("Styling "),
            code("Text"),
            text(" in "),
            text("`Java"),
        )

    def test_single_tick(self):
        """A lone delimiter is text"""
        document = Parser().parse("`")
        assert document.elements == (text("`"),)

    def test_empty_code(self):
        """Two adjacent delimiters make an empty code block"""
        document = Parser().parse("``")
        assert document.elements == (code(""),)

    def test_code_spans_lines(self):
        """Code runs to the closing delimiter, even across lines"""
        document = Parser().parse("`a\nb`")
        assert document.elements == (code("a\nb"),)

    def test_no_markup_inside_code(self):
        """Bullet markers inside code stay code"""
        document = Parser().parse("`x\n* y`")
        assert document.elements == (code("x\n* y"),)


class TestBulletsWithCode:
    """Test bullet points containing code"""

    def test_quote_bullet_points_code(self):
        """Complex text with a quote, bullets and code"""
        source = (
            "Complex:\n> Quote\nWith points:\n"
            "+ bullet `one`\n* bullet `two` is `long`"
        )
        document = Parser().parse(source)

        assert len(document) == 5
        assert document[0] == text("Complex:\n")
        assert document[1] == Element(ElementKind.QUOTE, "Quote\n")
        assert document[2] == text("With points:\n")

        first = document[3]
        assert first.kind is ElementKind.BULLET_POINT
        assert first.text == "bullet `one`\n"
        assert first.children == (text("bullet "), code("one"), text("\n"))

        second = document[4]
        assert second.kind is ElementKind.BULLET_POINT
        assert second.text == "bullet `two` is `long`"
        assert second.children == (
            text("bullet "),
            code("two"),
            text(" is "),
            code("long"),
        )

    def test_unmatched_tick_in_bullet(self):
        """An unmatched delimiter only degrades within its bullet paragraph"""
        document = Parser().parse("* one `two\nthree")

        assert document.elements == (
            bullet("one `two\n", text("one "), text("`two\n")),
            text("three"),
        )

    def test_code_cut_by_bullet_paragraph(self):
        """Code can't close beyond the end of a bullet paragraph"""
        document = Parser().parse("* a `b\nc` d")

        assert document.elements == (
            bullet("a `b\n", text("a "), text("`b\n")),
            text("c"),
            text("` d"),
        )

    def test_bullet_after_code_on_same_line(self):
        """Only markers at a line start count, even after code"""
        document = Parser().parse("`x` * y")
        assert document.elements == (code("x"), text(" * y"))

    def test_nested_bullet_with_code(self):
        """Nested bullets keep parsing code"""
        document = Parser().parse("+ * deep `c`")

        inner = bullet("deep `c`", text("deep "), code("c"))
        assert document.elements == (bullet("* deep `c`", inner),)
