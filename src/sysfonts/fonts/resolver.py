"""
Candidate Resolvers
===================

A resolver turns a style and a preset chain (or the system locale) into an
ordered list of font candidates. The facade only depends on the
``CandidateResolver`` protocol; ``SystemFontResolver`` is the default
implementation backed by the local font directories.
"""

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..core.config import FontConfig
from .models import FontPreset, FontRegion, FontStyle, FoundFont, PathSource
from .presets import (
    detect_system_locale,
    family_candidates,
    presets_for_region,
    region_from_locale,
)
from .system import SystemFontProvider

logger = logging.getLogger(__name__)


@runtime_checkable
class CandidateResolver(Protocol):
    """Produces font candidates in priority order (most preferred first)."""

    def find_from_presets(
        self, presets: Iterable[FontPreset], style: FontStyle
    ) -> list[FoundFont]: ...

    def find_for_system_locale(
        self, style: FontStyle
    ) -> tuple[str | None, FontRegion, list[FoundFont]]: ...


class SystemFontResolver:
    """Resolves presets to font files installed on this machine."""

    def __init__(self, provider: SystemFontProvider | None = None):
        self.provider = provider or SystemFontProvider()

    @classmethod
    def from_config(cls, config: FontConfig) -> "SystemFontResolver":
        """Build a resolver whose provider follows ``config``."""
        provider = SystemFontProvider(
            extra_dirs=config.extra_font_dirs,
            use_fontconfig=config.use_fontconfig,
            fontconfig_timeout=config.fontconfig_timeout,
        )
        return cls(provider)

    def find_from_presets(self, presets: Iterable[FontPreset], style: FontStyle) -> list[FoundFont]:
        """
        Find installed fonts for each preset in order.

        Each file is offered once, under the first family that claims it, so a
        collection covering several scripts does not repeat.

        Args:
            presets: Presets in priority order
            style: Sans or serif

        Returns:
            Candidates keyed by file name, in priority order
        """
        found: list[FoundFont] = []
        seen: set[str] = set()

        for preset in presets:
            for candidate in family_candidates(preset, style):
                path = self.provider.find_file(candidate.files)
                if path is None:
                    path = self.provider.find_family(candidate.family)
                if path is None:
                    continue

                key = path.name
                if key in seen:
                    continue
                seen.add(key)

                logger.debug(f"Resolved {candidate.family} for {preset.value}: {path}")
                found.append(FoundFont(key=key, family=candidate.family, source=PathSource(path)))

        return found

    def find_for_region(self, region: FontRegion, style: FontStyle) -> list[FoundFont]:
        """Find installed fonts for the preset chain of ``region``."""
        return self.find_from_presets(presets_for_region(region), style)

    def find_for_system_locale(
        self, style: FontStyle
    ) -> tuple[str | None, FontRegion, list[FoundFont]]:
        """
        Find installed fonts for the region derived from the system locale.

        Returns:
            Tuple of (detected locale, derived region, candidates)
        """
        locale_name = detect_system_locale()
        region = region_from_locale(locale_name)
        return locale_name, region, self.find_for_region(region, style)
