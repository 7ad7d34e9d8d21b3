"""
Span primitives attached by the style builder

Spans carry no parsing logic. They describe how a range of text is measured
and drawn, against a minimal paint/typeface/canvas contract that a display
surface implements:

- FontSpan: swaps the typeface, keeping the bold/italic style already set.
  Affects measuring as well as drawing.
- CodeBlockSpan: FontSpan plus a background color.
- BulletPointSpan: leading margin with a filled circular bullet.
- StyleSpan, LeadingMarginSpan, RelativeSizeSpan: the standard spans used
  to style quotes.
"""

from enum import Enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Protocol, Union


class PaintStyle(Enum):
    FILL = "fill"
    STROKE = "stroke"
    FILL_AND_STROKE = "fill_and_stroke"


@dataclass(frozen=True)
class Typeface:
    """
    A font family together with its style bits

    Style bits combine NORMAL, BOLD and ITALIC (BOLD_ITALIC == BOLD | ITALIC).
    Instances come from Typeface.create(), which caches them.
    """
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3

    family: str
    style: int = 0

    @property
    def bold(self) -> bool:
        return bool(self.style & Typeface.BOLD)

    @property
    def italic(self) -> bool:
        return bool(self.style & Typeface.ITALIC)

    @staticmethod
    def create(family: Union["Typeface", str, None], style: int) -> "Typeface":
        """
        Get the typeface for a family in the given style

        Args:
            family: Family name, an existing typeface whose family is reused,
                    or None for the default family
            style: Style bits

        Returns:
            Cached Typeface instance
        """
        if isinstance(family, Typeface):
            family = family.family
        return _typeface_cached(family or DEFAULT_FAMILY, style & Typeface.BOLD_ITALIC)


DEFAULT_FAMILY = "sans-serif"


@lru_cache(maxsize=None)
def _typeface_cached(family: str, style: int) -> Typeface:
    return Typeface(family, style)


@dataclass
class TextPaint:
    """Mutable paint state handed to spans while measuring and drawing"""
    typeface: Optional[Typeface] = None
    color: int = 0xFF000000
    bg_color: int = 0
    style: PaintStyle = PaintStyle.FILL
    text_size: float = 14.0


@dataclass(frozen=True)
class CirclePath:
    """A circle path, centered on (cx, cy)"""
    cx: float
    cy: float
    radius: float


class Canvas(Protocol):
    """Drawing surface used by leading margin spans"""

    is_hardware_accelerated: bool

    def save(self) -> Any: ...

    def restore(self) -> Any: ...

    def translate(self, dx: float, dy: float) -> Any: ...

    def draw_path(self, path: CirclePath, paint: TextPaint) -> Any: ...

    def draw_circle(self, cx: float, cy: float, radius: float, paint: TextPaint) -> Any: ...


class FontSpan:
    """
    Span that changes the typeface of the text to the one provided

    The style set before (bold, italic) is kept. Applied in both the measure
    and the draw pass, since a typeface change affects layout.
    """

    def __init__(self, typeface: Union[Typeface, str, None]):
        self.typeface = typeface

    def measureState_update(self, paint: TextPaint) -> None:
        self.typeface_update(paint)

    def drawState_update(self, paint: TextPaint) -> None:
        self.typeface_update(paint)

    def typeface_update(self, paint: TextPaint) -> None:
        old = paint.typeface
        old_style = old.style if old is not None else Typeface.NORMAL
        paint.typeface = Typeface.create(self.typeface, old_style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(typeface={self.typeface!r})"


class CodeBlockSpan(FontSpan):
    """
    Code block styling: a typeface and a background color

    The background color does not affect measuring, so only the draw pass
    sets it.
    """

    def __init__(self, typeface: Union[Typeface, str, None], background_color: int):
        super().__init__(typeface)
        self.background_color = background_color

    def drawState_update(self, paint: TextPaint) -> None:
        super().drawState_update(paint)
        paint.bg_color = self.background_color


BULLET_RADIUS = 15.0

# Created on first use by a hardware accelerated draw, lives for the process,
# never mutated.
_bullet_path: Optional[CirclePath] = None


def bulletPath_get() -> CirclePath:
    """Get the shared bullet path, creating it on first use"""
    global _bullet_path
    if _bullet_path is None:
        _bullet_path = CirclePath(0.0, 0.0, BULLET_RADIUS)
    return _bullet_path


class BulletPointSpan:
    """
    Leading margin span drawing a large filled bullet

    The margin is wide enough for the bullet plus a gap on both sides. The
    bullet is drawn once, on the line where the span starts, vertically
    centered on that line.
    """

    def __init__(self, gap_width: int, color: int):
        self.gap_width = gap_width
        self.color = color

    def leadingMargin_get(self, first: bool) -> int:
        return int(2 * BULLET_RADIUS + 2 * self.gap_width)

    def leadingMargin_draw(
        self,
        canvas: Canvas,
        paint: TextPaint,
        x: int,
        dir: int,
        top: int,
        baseline: int,
        bottom: int,
        text: Any,
        start: int,
        end: int,
        first: bool,
        layout: Any = None,
    ) -> None:
        """
        Draw the bullet for the line [start, end) of ``text``

        Args:
            canvas: Surface to draw on
            paint: Paint to draw with; color and style are restored afterwards
            x: Horizontal position of the margin
            dir: Paragraph direction (1 left-to-right, -1 right-to-left)
            top: Top of the line
            baseline: Baseline of the line
            bottom: Bottom of the line
            text: StyledText this span is attached to
            start: Start offset of the line
            end: End offset of the line
            first: Whether this is the first line of the paragraph
            layout: Layout of the text, unused
        """
        if text.spanStart_get(self) != start:
            return

        old_style = paint.style
        old_color = paint.color
        paint.color = self.color
        paint.style = PaintStyle.FILL

        y = (top + bottom) / 2.0
        cx = self.gap_width + x + dir * BULLET_RADIUS

        if canvas.is_hardware_accelerated:
            canvas.save()
            canvas.translate(cx, y)
            canvas.draw_path(bulletPath_get(), paint)
            canvas.restore()
        else:
            canvas.draw_circle(cx, y, BULLET_RADIUS, paint)

        paint.color = old_color
        paint.style = old_style

    def __repr__(self) -> str:
        return f"BulletPointSpan(gap_width={self.gap_width}, color={self.color:#010x})"


class StyleSpan:
    """Adds style bits (e.g. Typeface.ITALIC) to the current typeface"""

    def __init__(self, style: int):
        self.style = style

    def measureState_update(self, paint: TextPaint) -> None:
        self.style_apply(paint)

    def drawState_update(self, paint: TextPaint) -> None:
        self.style_apply(paint)

    def style_apply(self, paint: TextPaint) -> None:
        old = paint.typeface
        old_style = old.style if old is not None else Typeface.NORMAL
        paint.typeface = Typeface.create(old, old_style | self.style)

    def __repr__(self) -> str:
        return f"StyleSpan(style={self.style})"


class LeadingMarginSpan:
    """Plain indent: ``first`` pixels on the first line, ``rest`` on the others"""

    def __init__(self, first: int, rest: Optional[int] = None):
        self.first = first
        self.rest = first if rest is None else rest

    def leadingMargin_get(self, first: bool) -> int:
        return self.first if first else self.rest

    def leadingMargin_draw(self, canvas: Canvas, paint: TextPaint, *args: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"LeadingMarginSpan(first={self.first}, rest={self.rest})"


class RelativeSizeSpan:
    """Scales the text size by ``proportion``"""

    def __init__(self, proportion: float):
        self.proportion = proportion

    def measureState_update(self, paint: TextPaint) -> None:
        paint.text_size *= self.proportion

    def drawState_update(self, paint: TextPaint) -> None:
        paint.text_size *= self.proportion

    def __repr__(self) -> str:
        return f"RelativeSizeSpan(proportion={self.proportion})"
