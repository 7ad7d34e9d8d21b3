"""
stylemark - Styled text from a tiny markdown subset

Parses quotes, bullet points and inline code into an element tree and
renders it as flat text with style annotations.
"""

__version__ = "1.0.0"

from .parser import Parser, parse
from .renderer import StyleBuilder, render
from .theme import Theme, ThemeError
from .log import LOG, state_connectToLogger

__all__ = [
    "Parser",
    "parse",
    "StyleBuilder",
    "render",
    "Theme",
    "ThemeError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
