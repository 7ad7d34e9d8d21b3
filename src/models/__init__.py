"""
Models package for stylemark

Contains data structures and type definitions for parsing and rendering.
"""

from .state import ProgramState, pipeline
from .element import ConstructionError, Document, Element, ElementKind
from .annotations import AnnotationKind, StyleAnnotation, StyledText
from .style import StyleParams, color_parse

__all__ = [
    "ProgramState",
    "pipeline",
    "ConstructionError",
    "Document",
    "Element",
    "ElementKind",
    "AnnotationKind",
    "StyleAnnotation",
    "StyledText",
    "StyleParams",
    "color_parse",
]
