"""
Rendering parameter models

StyleParams gathers the colors, widths and typeface the style builder
attaches to the spans it creates.
"""

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..config.settings import AppSettings


def color_parse(value: Union[str, int]) -> int:
    """
    Convert a color value to a packed 0xAARRGGBB integer

    Accepts integers as-is and strings in #RRGGBB or #AARRGGBB form.
    Colors without an alpha channel are fully opaque.

    Args:
        value: Color as integer or hex string

    Returns:
        Packed ARGB integer

    Raises:
        ValueError: If the string is not a valid hex color

    Example:
        >>> hex(color_parse("#FF4081"))
        '0xffff4081'
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid color: {value!r}")

    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]

    if not re.fullmatch(r"[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8}", digits):
        raise ValueError(f"Invalid color: {value!r} (expected #RRGGBB or #AARRGGBB)")
    color = int(digits, 16)

    if len(digits) == 6:
        color |= 0xFF000000
    return color


@dataclass(frozen=True)
class StyleParams:
    """
    Parameters for building spans

    Attributes:
        bullet_color: ARGB color of bullet point markers
        bullet_gap_width: Gap in pixels on each side of a bullet marker
        code_background_color: ARGB background color of code blocks
        code_typeface: Font family name used for code blocks
        quote_italic: Quotes are always set in italics
        quote_margin_width: Left margin in pixels for quotes
        quote_size_factor: Text size of quotes relative to the body text
    """
    bullet_color: int = 0xFFFF4081
    bullet_gap_width: int = 20
    code_background_color: int = 0xFFDDDDDD
    code_typeface: str = "monospace"
    quote_italic: bool = field(default=True, init=False)
    quote_margin_width: int = 40
    quote_size_factor: float = 1.1

    @classmethod
    def styleParams_fromSettings(cls, settings: "AppSettings") -> "StyleParams":
        """
        Build StyleParams from application settings

        Args:
            settings: AppSettings instance (STYLEMARK_* environment)

        Returns:
            StyleParams with colors parsed from their hex form
        """
        return cls(
            bullet_color=color_parse(settings.bullet_color),
            bullet_gap_width=settings.bullet_gap_width,
            code_background_color=color_parse(settings.code_background_color),
            code_typeface=settings.code_typeface,
            quote_margin_width=settings.quote_margin_width,
            quote_size_factor=settings.quote_size_factor,
        )
