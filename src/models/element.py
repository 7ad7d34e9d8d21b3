"""
Element tree models

Defines the typed, immutable nodes produced by the parser and the Document
that holds the top-level sequence of them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Iterator, Tuple


class ConstructionError(ValueError):
    """Raised when an Element is built in violation of the children invariant"""
    pass


class ElementKind(Enum):
    """
    Kinds of markup elements

    Only BULLET_POINT elements may own children; the others are leaves.
    """
    TEXT = "text"                  # literal text
    QUOTE = "quote"                # "> " paragraph
    BULLET_POINT = "bullet_point"  # "* " or "+ " paragraph
    CODE_BLOCK = "code_block"      # `inline code`


@dataclass(frozen=True)
class Element:
    """
    A node in the parsed document tree

    Attributes:
        kind: Which markup construct this node represents
        text: Raw substring owned by this node. For bullet points this is the
              paragraph text before it was re-parsed into children.
        children: Ordered sub-elements (bullet points only)

    Raises:
        ConstructionError: If a non bullet point element is given children

    Example:
        >>> Element(ElementKind.BULLET_POINT, "one\\n", [Element(ElementKind.TEXT, "one\\n")])
    """
    kind: ElementKind
    text: str
    children: Tuple["Element", ...] = field(default=())

    def __post_init__(self) -> None:
        children = tuple(self.children)
        if children and self.kind is not ElementKind.BULLET_POINT:
            raise ConstructionError(
                f"{self.kind.name} elements cannot have children (got {len(children)})"
            )
        object.__setattr__(self, "children", children)

    @property
    def flat_text(self) -> str:
        """Text this element contributes to the flattened output"""
        if self.kind is ElementKind.BULLET_POINT:
            return "".join(child.flat_text for child in self.children)
        return self.text

    def __str__(self) -> str:
        return f"{self.kind.name} {self.text}"


@dataclass(frozen=True)
class Document:
    """
    Ordered sequence of top-level elements produced by one parse

    Behaves as a read-only sequence of Element.
    """
    elements: Tuple[Element, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Element:
        return self.elements[index]

    @property
    def flat_text(self) -> str:
        return "".join(element.flat_text for element in self.elements)
