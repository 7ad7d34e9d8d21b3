"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use STYLEMARK_ prefix (e.g., STYLEMARK_BULLET_COLOR=#3F51B5).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use STYLEMARK_ prefix.

    Examples:
        STYLEMARK_LINE_SEPARATOR=$'\\r\\n'   (bash ANSI-C quoting for CRLF)
        STYLEMARK_CODE_TYPEFACE=inconsolata
        STYLEMARK_QUOTE_SIZE_FACTOR=1.25
    """

    model_config = SettingsConfigDict(
        env_prefix="STYLEMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parser configuration
    line_separator: str = Field(
        default="\n",
        description="Separator that ends a quote or bullet point paragraph",
    )

    # Bullet point styling
    bullet_color: str = Field(
        default="#FF4081",
        description="Bullet marker color (#RRGGBB or #AARRGGBB)",
    )

    bullet_gap_width: int = Field(
        default=20,
        ge=0,
        description="Gap in pixels on each side of the bullet marker",
    )

    # Code block styling
    code_background_color: str = Field(
        default="#DDDDDD",
        description="Background color of inline code (#RRGGBB or #AARRGGBB)",
    )

    code_typeface: str = Field(
        default="monospace",
        description="Font family used for inline code",
    )

    # Quote styling
    quote_margin_width: int = Field(
        default=40,
        ge=0,
        description="Left margin in pixels for quotes",
    )

    quote_size_factor: float = Field(
        default=1.1,
        gt=0,
        description="Quote text size relative to body text",
    )

    @field_validator("line_separator")
    @classmethod
    def lineSeparator_check(cls, value: str) -> str:
        """Reject an empty separator, which would make every paragraph empty"""
        if not value:
            raise ValueError("line_separator must not be empty")
        return value


# Singleton instance - import this in your code
appsettings = AppSettings()
