"""
Style annotation models

Types returned by the style builder: the kind of each annotation, the
annotation itself, and the flattened text that carries them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Optional


class AnnotationKind(Enum):
    """
    Kinds of style directives applied over ranges of flattened text

    Used by callers to decide how to apply an annotation to a display surface.
    """
    ITALIC = "italic"                  # quote
    LEADING_MARGIN = "leading_margin"  # quote
    RELATIVE_SIZE = "relative_size"    # quote
    CODE_STYLE = "code_style"          # code block
    BULLET_MARGIN = "bullet_margin"    # bullet point


@dataclass(frozen=True)
class StyleAnnotation:
    """
    A style directive over the half-open range [start, end) of flattened text

    Attributes:
        kind: Which span primitive applies
        start: Offset of the first styled character
        end: Offset one past the last styled character
        span: The concrete span primitive instance to apply. Not part of
              equality, so annotations compare by (kind, start, end).
    """
    kind: AnnotationKind
    start: int
    end: int
    span: Any = field(default=None, compare=False, repr=False)

    def as_tuple(self) -> tuple:
        return (self.kind, self.start, self.end)


class StyledText(NamedTuple):
    """
    Flattened text plus the ordered annotations over it

    Unpacks as ``text, annotations = builder.render(document)``. The order of
    ``annotations`` is the order in which they were produced and is the order
    in which a display surface should apply them.
    """
    text: str
    annotations: List[StyleAnnotation]

    def spans_get(
        self, start: int, end: int, kind: Optional[AnnotationKind] = None
    ) -> List[StyleAnnotation]:
        """
        Get the annotations intersecting [start, end), in production order

        Empty annotations count as intersecting when they sit inside the
        queried range.

        Args:
            start: Start offset of the query range
            end: End offset of the query range
            kind: Only return annotations of this kind

        Returns:
            Matching annotations
        """
        found = []
        for annotation in self.annotations:
            if kind is not None and annotation.kind is not kind:
                continue
            if annotation.start == annotation.end:
                if start <= annotation.start <= end:
                    found.append(annotation)
            elif annotation.start < end and annotation.end > start:
                found.append(annotation)
        return found

    def spanStart_get(self, span: Any) -> int:
        """Start offset of the annotation carrying ``span``, or -1"""
        annotation = self.annotation_find(span)
        return annotation.start if annotation else -1

    def spanEnd_get(self, span: Any) -> int:
        """End offset of the annotation carrying ``span``, or -1"""
        annotation = self.annotation_find(span)
        return annotation.end if annotation else -1

    def annotation_find(self, span: Any) -> Optional[StyleAnnotation]:
        for annotation in self.annotations:
            if annotation.span is span:
                return annotation
        return None

    def __str__(self) -> str:
        return self.text
