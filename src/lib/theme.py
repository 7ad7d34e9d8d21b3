"""
Theme loader for stylemark rendering.

A theme is a YAML file overriding any of the style parameters:

    bullet:
      color: "#3F51B5"
      gap_width: 16
    code:
      background: "#EEEEEE"
      typeface: inconsolata
    quote:
      margin_width: 32
      size_factor: 1.2

Keys left out keep the value of the base StyleParams. Values are checked
against the same limits as the STYLEMARK_* settings.
"""

import dataclasses
import yaml
from pathlib import Path
from typing import Annotated, Dict, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from ..models.style import StyleParams, color_parse


class ThemeError(Exception):
    """Raised when theme loading or validation fails"""
    pass


Color = Annotated[int, BeforeValidator(color_parse)]
Width = Annotated[int, Field(ge=0)]
Factor = Annotated[float, Field(gt=0)]


class BulletTheme(BaseModel):
    color: Optional[Color] = None
    gap_width: Optional[Width] = None


class CodeTheme(BaseModel):
    background: Optional[Color] = None
    typeface: Optional[str] = None


class QuoteTheme(BaseModel):
    margin_width: Optional[Width] = None
    size_factor: Optional[Factor] = None


class ThemeConfig(BaseModel):
    """Validated theme sections; unknown keys are ignored"""

    bullet: BulletTheme = Field(default_factory=BulletTheme)
    code: CodeTheme = Field(default_factory=CodeTheme)
    quote: QuoteTheme = Field(default_factory=QuoteTheme)


# theme key -> StyleParams field
THEME_FIELDS: Dict[str, str] = {
    'bullet.color': 'bullet_color',
    'bullet.gap_width': 'bullet_gap_width',
    'code.background': 'code_background_color',
    'code.typeface': 'code_typeface',
    'quote.margin_width': 'quote_margin_width',
    'quote.size_factor': 'quote_size_factor',
}


class Theme:
    """
    Represents a stylemark theme loaded from a YAML file.
    """

    def __init__(self, theme_file: Union[str, Path]):
        """
        Load a theme file.

        Args:
            theme_file: Path to the theme YAML file

        Raises:
            ThemeError: If the file doesn't exist or isn't a YAML mapping
        """
        self.path = Path(theme_file)
        self.name = self.path.stem

        if not self.path.exists():
            raise ThemeError(f"Theme file not found: {self.path}")

        self.config = self._config_load()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse the theme YAML"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ThemeError(f"Failed to parse {self.path.name}: {e}")
        except OSError as e:
            raise ThemeError(f"Failed to load {self.path.name}: {e}")

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ThemeError(f"{self.path.name} must contain a mapping, not {type(config).__name__}")
        return config

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the theme.

        Supports nested keys with dot notation:
          theme.config_get('bullet.color', '#FF4081')

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        keys: list[str] = key.split('.')
        value: Any = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def styleParams_apply(self, base: Optional[StyleParams] = None) -> StyleParams:
        """
        Override style parameters with the values set in this theme.

        Args:
            base: Parameters to start from (default: StyleParams())

        Returns:
            New StyleParams

        Raises:
            ThemeError: If a theme value can't be converted or is out of range
        """
        params = base if base is not None else StyleParams()

        try:
            theme = ThemeConfig.model_validate(self.config)
        except ValidationError as e:
            problems = "; ".join(
                f"'{'.'.join(str(part) for part in error['loc'])}': {error['msg']}"
                for error in e.errors()
            )
            raise ThemeError(f"Invalid value for {problems} in {self.path.name}")

        changes: Dict[str, Any] = {}
        for section, values in theme.model_dump(exclude_none=True).items():
            for key, value in values.items():
                changes[THEME_FIELDS[f'{section}.{key}']] = value

        return dataclasses.replace(params, **changes)

    def __repr__(self) -> str:
        return f"Theme(name='{self.name}', path='{self.path}')"
