"""
Style builder for parsed documents

Walks a Document depth-first and flattens it into plain text plus the
ordered style annotations over ranges of that text.

Rendering rules:
- TEXT: text appended as-is, no annotation
- QUOTE: text appended; italic, leading margin and relative size annotations
- CODE_BLOCK: text appended; one code style annotation
- BULLET_POINT: children rendered first, then one bullet margin annotation
  over everything the children appended

Children's annotations always precede their bullet point's annotation. That
order is the order in which a display surface applies overlapping spans.
"""

from typing import Any, List, Optional

from ..models.annotations import AnnotationKind, StyleAnnotation, StyledText
from ..models.element import Document, Element, ElementKind
from ..models.style import StyleParams
from .log import LOG
from .parser import Parser
from .spans import (
    BulletPointSpan,
    CodeBlockSpan,
    LeadingMarginSpan,
    RelativeSizeSpan,
    StyleSpan,
    Typeface,
)


class StyleBuilder:
    """
    Renders documents as flattened text with style annotations

    Holds only the immutable style parameters and a stateless parser, so one
    builder can render any number of documents.
    """

    def __init__(self, params: Optional[StyleParams] = None, parser: Optional[Parser] = None):
        """
        Initialize builder

        Args:
            params: Style parameters; defaults to StyleParams()
            parser: Parser used by markdown_toSpans(); defaults to Parser()
        """
        self.params = params if params is not None else StyleParams()
        self.parser = parser if parser is not None else Parser()

    def markdown_toSpans(self, source: str) -> StyledText:
        """
        Parse and render text in one step

        Args:
            source: Raw text

        Returns:
            StyledText for the parsed document
        """
        return self.render(self.parser.parse(source))

    def render(self, document: Document) -> StyledText:
        """
        Render a document

        Args:
            document: Parsed Document

        Returns:
            StyledText(text, annotations) with annotations in production order
        """
        output: List[str] = []
        annotations: List[StyleAnnotation] = []
        length = 0

        for element in document:
            length = self.element_render(element, output, annotations, length)

        text = "".join(output)
        LOG(f"Rendered {len(text)} characters with {len(annotations)} annotations", level=3)
        return StyledText(text=text, annotations=annotations)

    def element_render(
        self,
        element: Element,
        output: List[str],
        annotations: List[StyleAnnotation],
        length: int,
    ) -> int:
        """
        Append one element's text and annotations

        Args:
            element: Element to render
            output: Text pieces appended so far
            annotations: Annotations produced so far
            length: Total length of ``output``

        Returns:
            Total length of ``output`` after appending this element
        """
        kind = element.kind

        if kind is ElementKind.TEXT:
            output.append(element.text)
            return length + len(element.text)

        if kind is ElementKind.QUOTE:
            start = length
            output.append(element.text)
            end = start + len(element.text)
            # several spans on the same range
            self.annotation_add(annotations, AnnotationKind.ITALIC, start, end,
                                StyleSpan(Typeface.ITALIC))
            self.annotation_add(annotations, AnnotationKind.LEADING_MARGIN, start, end,
                                LeadingMarginSpan(self.params.quote_margin_width))
            self.annotation_add(annotations, AnnotationKind.RELATIVE_SIZE, start, end,
                                RelativeSizeSpan(self.params.quote_size_factor))
            return end

        if kind is ElementKind.CODE_BLOCK:
            start = length
            output.append(element.text)
            end = start + len(element.text)
            self.annotation_add(annotations, AnnotationKind.CODE_STYLE, start, end,
                                CodeBlockSpan(self.params.code_typeface,
                                              self.params.code_background_color))
            return end

        if kind is ElementKind.BULLET_POINT:
            start = length
            for child in element.children:
                length = self.element_render(child, output, annotations, length)
            self.annotation_add(annotations, AnnotationKind.BULLET_MARGIN, start, length,
                                BulletPointSpan(self.params.bullet_gap_width,
                                                self.params.bullet_color))
            return length

        raise ValueError(f"Unknown element kind: {kind!r}")

    def annotation_add(
        self,
        annotations: List[StyleAnnotation],
        kind: AnnotationKind,
        start: int,
        end: int,
        span: Any,
    ) -> None:
        annotations.append(StyleAnnotation(kind=kind, start=start, end=end, span=span))


def render(document: Document, params: Optional[StyleParams] = None) -> StyledText:
    """
    Render a document with the given style parameters

    Args:
        document: Parsed Document
        params: Style parameters; defaults to StyleParams()

    Returns:
        StyledText(text, annotations)
    """
    return StyleBuilder(params).render(document)
