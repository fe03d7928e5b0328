"""
Font Data Models
================

Data structures shared by the resolver, loader, merge engine and facade.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FontStyle(Enum):
    """Visual style of the fonts a resolver should consider."""

    SANS = "sans"
    SERIF = "serif"


class FontRegion(Enum):
    """Writing-system region; expands to an ordered preset chain."""

    KOREAN = "korean"
    JAPANESE = "japanese"
    SIMPLIFIED_CHINESE = "simplified_chinese"
    TRADITIONAL_CHINESE = "traditional_chinese"
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    GREEK = "greek"


class FontPreset(Enum):
    """Single-script unit of font selection."""

    KOREAN = "korean"
    JAPANESE = "japanese"
    SIMPLIFIED_CHINESE = "simplified_chinese"
    TRADITIONAL_CHINESE = "traditional_chinese"
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    GREEK = "greek"


class FontFamily(Enum):
    """Family roles of a rendering context, each with its own fallback chain."""

    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


@dataclass(frozen=True)
class PathSource:
    """Font bytes that live in a file on disk."""

    path: Path

    def __post_init__(self):
        # Accept plain strings and other path-likes
        object.__setattr__(self, "path", Path(self.path))

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class BytesSource:
    """Font bytes already held in memory."""

    data: bytes = field(repr=False)

    def __str__(self) -> str:
        return f"<{len(self.data)} bytes>"


ByteSource = PathSource | BytesSource


@dataclass(frozen=True)
class FoundFont:
    """A font candidate proposed by a resolver, not yet loaded."""

    key: str
    family: str
    source: ByteSource

    def __str__(self) -> str:
        return f"{self.family} ({self.key})"


@dataclass
class FontDefinitions:
    """
    Font data and per-role fallback chains handed to a rendering context.

    ``font_data`` maps a font key to its bytes. ``families`` maps a family role
    to an ordered list of keys; index 0 is tried first. Every key listed in a
    role must exist in ``font_data`` and appears at most once per role.
    """

    font_data: dict[str, bytes] = field(default_factory=dict)
    families: dict[FontFamily, list[str]] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "FontDefinitions":
        """Built-in defaults: no font data and empty proportional/monospace chains."""
        return cls(
            font_data={},
            families={FontFamily.PROPORTIONAL: [], FontFamily.MONOSPACE: []},
        )

    def copy(self) -> "FontDefinitions":
        """Return a copy whose dicts and lists are independent of this one."""
        return FontDefinitions(
            font_data=dict(self.font_data),
            families={role: list(keys) for role, keys in self.families.items()},
        )

    def keys_for(self, role: FontFamily) -> list[str]:
        """Fallback chain for ``role`` (empty if the role is absent)."""
        return list(self.families.get(role, []))
