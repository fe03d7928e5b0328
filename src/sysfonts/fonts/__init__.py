"""Font Management Module
======================

Resolves installed system fonts for a script and merges them into the
fallback chains of a rendering context.
"""

from .context import InMemoryContext, RenderingContext
from .loader import FontLoader, read_font_bytes
from .manager import (
    FontManager,
    extend_auto,
    extend_with_presets,
    extend_with_region,
    set_auto,
    set_with_presets,
    set_with_region,
)
from .merge import insert_back, insert_front, install_extending, install_replacing
from .models import (
    ByteSource,
    BytesSource,
    FontDefinitions,
    FontFamily,
    FontPreset,
    FontRegion,
    FontStyle,
    FoundFont,
    PathSource,
)
from .presets import detect_system_locale, presets_for_region, region_from_locale
from .resolver import CandidateResolver, SystemFontResolver
from .system import SystemFontProvider

__all__ = [
    "ByteSource",
    "BytesSource",
    "CandidateResolver",
    "FontDefinitions",
    "FontFamily",
    "FontLoader",
    "FontManager",
    "FontPreset",
    "FontRegion",
    "FontStyle",
    "FoundFont",
    "InMemoryContext",
    "PathSource",
    "RenderingContext",
    "SystemFontProvider",
    "SystemFontResolver",
    "detect_system_locale",
    "extend_auto",
    "extend_with_presets",
    "extend_with_region",
    "insert_back",
    "insert_front",
    "install_extending",
    "install_replacing",
    "presets_for_region",
    "read_font_bytes",
    "region_from_locale",
    "set_auto",
    "set_with_presets",
    "set_with_region",
]
