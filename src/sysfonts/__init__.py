"""System Font Fallback
====================

Locates platform-installed fonts for a script, region and style, loads them
and merges them into the ordered font fallback chains of a rendering context,
so GUI applications get glyph coverage for non-Latin scripts without bundling
font files.
"""

__version__ = "0.1.0"

from .core.config import AppConfig, FontConfig
from .core.exceptions import SysFontsError
from .fonts import (
    FontDefinitions,
    FontFamily,
    FontManager,
    FontPreset,
    FontRegion,
    FontStyle,
    FoundFont,
    InMemoryContext,
    extend_auto,
    extend_with_presets,
    extend_with_region,
    set_auto,
    set_with_presets,
    set_with_region,
)

__all__ = [
    "AppConfig",
    "FontConfig",
    "FontDefinitions",
    "FontFamily",
    "FontManager",
    "FontPreset",
    "FontRegion",
    "FontStyle",
    "FoundFont",
    "InMemoryContext",
    "SysFontsError",
    "extend_auto",
    "extend_with_presets",
    "extend_with_region",
    "set_auto",
    "set_with_presets",
    "set_with_region",
]
