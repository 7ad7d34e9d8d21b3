"""
stylemark - Styled text from a tiny markdown subset

Turns text with quotes, bullet points and inline code into flat text plus
style annotations for a text display surface.
"""

__version__ = "1.0.0"

from .lib import Parser, parse, StyleBuilder, render, Theme, ThemeError, LOG, state_connectToLogger
from .models import (
    AnnotationKind,
    ConstructionError,
    Document,
    Element,
    ElementKind,
    StyleAnnotation,
    StyledText,
    StyleParams,
)

__all__ = [
    "Parser",
    "parse",
    "StyleBuilder",
    "render",
    "Theme",
    "ThemeError",
    "LOG",
    "state_connectToLogger",
    "AnnotationKind",
    "ConstructionError",
    "Document",
    "Element",
    "ElementKind",
    "StyleAnnotation",
    "StyledText",
    "StyleParams",
    "__version__",
]
