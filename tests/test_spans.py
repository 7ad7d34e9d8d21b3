"""
Span primitive tests

Tests bullet margins and drawing, typeface substitution, code background
and the standard quote spans.
"""

from unittest.mock import MagicMock, call

import pytest

from stylemark.lib import spans
from stylemark.lib.spans import (
    BULLET_RADIUS,
    BulletPointSpan,
    CodeBlockSpan,
    FontSpan,
    LeadingMarginSpan,
    PaintStyle,
    RelativeSizeSpan,
    StyleSpan,
    TextPaint,
    Typeface,
)
from stylemark.models.annotations import AnnotationKind, StyleAnnotation, StyledText

GAP_WIDTH = 5
RED = 0xFFFF0000


def attached(span, start=0, end=2):
    """Styled text 'text' with span attached over [start, end)"""
    return StyledText(
        "text", [StyleAnnotation(AnnotationKind.BULLET_MARGIN, start, end, span)]
    )


class TestBulletPointSpan:
    """Test the bullet point leading margin"""

    def test_leading_margin(self):
        span = BulletPointSpan(GAP_WIDTH, 0)

        expected = int(2 * BULLET_RADIUS + 2 * GAP_WIDTH)
        assert span.leadingMargin_get(True) == expected
        assert span.leadingMargin_get(False) == expected

    def test_draw_without_span_on_text(self):
        """Nothing is drawn for text the span isn't attached to"""
        span = BulletPointSpan(GAP_WIDTH, 0)
        canvas = MagicMock()
        paint = TextPaint()

        span.leadingMargin_draw(canvas, paint, 0, 0, 0, 0, 0, StyledText("text", []), 0, 0, True)

        assert canvas.method_calls == []
        assert paint == TextPaint()

    def test_draw_only_on_first_line_of_span(self):
        """Lines not starting at the span start get no bullet"""
        span = BulletPointSpan(GAP_WIDTH, 0)
        canvas = MagicMock()

        span.leadingMargin_draw(canvas, TextPaint(), 0, 0, 0, 0, 0, attached(span), 1, 2, False)

        assert canvas.method_calls == []

    def test_draw_hardware_accelerated(self):
        """Accelerated canvases draw the cached path, translated to the bullet center"""
        x, dir, top, bottom = 10, 15, 5, 7
        span = BulletPointSpan(GAP_WIDTH, RED)
        canvas = MagicMock()
        canvas.is_hardware_accelerated = True
        paint = TextPaint(color=0xFF000000, style=PaintStyle.STROKE)
        seen = []
        canvas.draw_path.side_effect = lambda path, p: seen.append((p.color, p.style))

        span.leadingMargin_draw(canvas, paint, x, dir, top, 0, bottom, attached(span), 0, 0, True)

        cx = GAP_WIDTH + x + dir * BULLET_RADIUS
        assert canvas.method_calls == [
            call.save(),
            call.translate(cx, (top + bottom) / 2.0),
            call.draw_path(spans.bulletPath_get(), paint),
            call.restore(),
        ]
        assert seen == [(RED, PaintStyle.FILL)]
        # paint restored
        assert paint.color == 0xFF000000
        assert paint.style is PaintStyle.STROKE

    def test_draw_not_hardware_accelerated(self):
        """Other canvases draw a circle directly"""
        x, dir, top, bottom = 10, 15, 5, 7
        span = BulletPointSpan(GAP_WIDTH, RED)
        canvas = MagicMock()
        canvas.is_hardware_accelerated = False
        paint = TextPaint()
        seen = []
        canvas.draw_circle.side_effect = lambda cx, cy, r, p: seen.append((p.color, p.style))

        span.leadingMargin_draw(canvas, paint, x, dir, top, 0, bottom, attached(span), 0, 0, True)

        cx = GAP_WIDTH + x + dir * BULLET_RADIUS
        assert canvas.method_calls == [
            call.draw_circle(cx, (top + bottom) / 2.0, BULLET_RADIUS, paint),
        ]
        assert seen == [(RED, PaintStyle.FILL)]
        canvas.save.assert_not_called()
        canvas.translate.assert_not_called()

    def test_bullet_path_shared(self):
        """The bullet path is created once and reused"""
        path = spans.bulletPath_get()
        assert path is spans.bulletPath_get()
        assert path.radius == BULLET_RADIUS
        assert (path.cx, path.cy) == (0.0, 0.0)


class TestFontSpan:
    """Test typeface substitution"""

    @pytest.fixture
    def paint(self):
        return TextPaint(typeface=Typeface.create("serif", Typeface.BOLD))

    def test_measure_state_keeps_style(self, paint):
        FontSpan("monospace").measureState_update(paint)

        assert paint.typeface.family == "monospace"
        assert paint.typeface.style == Typeface.BOLD

    def test_draw_state_keeps_style(self, paint):
        FontSpan("monospace").drawState_update(paint)

        assert paint.typeface.family == "monospace"
        assert paint.typeface.bold

    def test_no_previous_typeface(self):
        paint = TextPaint()
        FontSpan(Typeface.create("monospace", Typeface.ITALIC)).drawState_update(paint)

        assert paint.typeface == Typeface("monospace", Typeface.NORMAL)

    def test_default_family(self):
        paint = TextPaint()
        FontSpan(None).measureState_update(paint)
        assert paint.typeface.family == spans.DEFAULT_FAMILY

    def test_typefaces_cached(self):
        assert Typeface.create("serif", Typeface.ITALIC) is Typeface.create("serif", Typeface.ITALIC)


class TestCodeBlockSpan:
    """Test code block styling"""

    def test_draw_state_sets_background(self):
        paint = TextPaint()
        CodeBlockSpan("monospace", RED).drawState_update(paint)

        assert paint.bg_color == RED
        assert paint.typeface.family == "monospace"

    def test_measure_state_keeps_background(self):
        paint = TextPaint(typeface=Typeface.create("serif", Typeface.BOLD_ITALIC))
        CodeBlockSpan("monospace", RED).measureState_update(paint)

        assert paint.bg_color == 0
        assert paint.typeface == Typeface("monospace", Typeface.BOLD_ITALIC)


class TestQuoteSpans:
    """Test the standard spans used for quotes"""

    def test_italic_added_to_bold(self):
        paint = TextPaint(typeface=Typeface.create("serif", Typeface.BOLD))
        StyleSpan(Typeface.ITALIC).drawState_update(paint)

        assert paint.typeface == Typeface("serif", Typeface.BOLD_ITALIC)

    def test_relative_size(self):
        paint = TextPaint(text_size=14.0)
        RelativeSizeSpan(1.5).measureState_update(paint)
        assert paint.text_size == pytest.approx(21.0)

    def test_leading_margin(self):
        assert LeadingMarginSpan(40).leadingMargin_get(True) == 40
        assert LeadingMarginSpan(40).leadingMargin_get(False) == 40
        assert LeadingMarginSpan(40, 10).leadingMargin_get(False) == 10
