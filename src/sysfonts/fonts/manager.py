"""
Font Manager
============

Applies system fonts to a rendering context.

Two policies are offered for each way of choosing fonts (system locale, region
or an explicit preset list):

* ``set_*`` replaces the context's fonts; the found fonts come first in every
  fallback chain.
* ``extend_*`` appends the found fonts to caller-owned definitions as
  lower-priority fallbacks.

Both commit to the context only when at least one font was installed, and
return the installed family names in priority order.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from .context import RenderingContext
from .loader import FontLoader
from .merge import DEFAULT_ROLES, LoadFn, install_extending, install_replacing
from .models import FontDefinitions, FontFamily, FontPreset, FontRegion, FontStyle, FoundFont
from .presets import presets_for_region
from .resolver import CandidateResolver, SystemFontResolver

logger = logging.getLogger(__name__)


class FontManager:
    """
    Facade over resolver, loader and merge engine for one rendering context.

    The resolver, loader and the factory for default definitions are
    injectable so tests can run without touching the file system.
    """

    def __init__(
        self,
        ctx: RenderingContext,
        resolver: CandidateResolver | None = None,
        loader: LoadFn | None = None,
        defaults: Callable[[], FontDefinitions] = FontDefinitions.default,
        roles: Sequence[FontFamily] = DEFAULT_ROLES,
    ):
        """
        Initialize font manager.

        Args:
            ctx: Context receiving committed definitions
            resolver: Candidate resolver; a ``SystemFontResolver`` when omitted
            loader: Callable returning font bytes or None; a ``FontLoader`` when omitted
            defaults: Factory for the toolkit's built-in definitions
            roles: Family roles that receive installed fonts
        """
        self.ctx = ctx
        self.resolver = resolver or SystemFontResolver()
        self.loader = loader or FontLoader()
        self.defaults = defaults
        self.roles = tuple(roles)

    # Replace policy

    def set_auto(self, style: FontStyle) -> list[str]:
        """Replace the context's fonts with fonts for the system locale."""
        fonts = self._resolve_auto(style)
        return self._set_found_fonts(fonts)

    def set_with_region(self, region: FontRegion, style: FontStyle) -> list[str]:
        """Replace the context's fonts with fonts for ``region``."""
        return self.set_with_presets(presets_for_region(region), style)

    def set_with_presets(self, presets: Iterable[FontPreset], style: FontStyle) -> list[str]:
        """Replace the context's fonts with fonts for ``presets``, in priority order."""
        fonts = self.resolver.find_from_presets(list(presets), style)
        return self._set_found_fonts(fonts)

    # Extend policy

    def extend_auto(self, definitions: FontDefinitions, style: FontStyle) -> list[str]:
        """Append fonts for the system locale to ``definitions`` as fallbacks."""
        fonts = self._resolve_auto(style)
        return self._extend_found_fonts(definitions, fonts)

    def extend_with_region(
        self, definitions: FontDefinitions, region: FontRegion, style: FontStyle
    ) -> list[str]:
        """Append fonts for ``region`` to ``definitions`` as fallbacks."""
        return self.extend_with_presets(definitions, presets_for_region(region), style)

    def extend_with_presets(
        self, definitions: FontDefinitions, presets: Iterable[FontPreset], style: FontStyle
    ) -> list[str]:
        """Append fonts for ``presets`` to ``definitions`` as fallbacks."""
        fonts = self.resolver.find_from_presets(list(presets), style)
        return self._extend_found_fonts(definitions, fonts)

    # Reset policy

    def reset(self) -> None:
        """Restore the toolkit's built-in font definitions."""
        self.ctx.set_fonts(self.defaults())
        logger.info("Reset fonts to defaults")

    def _resolve_auto(self, style: FontStyle) -> list[FoundFont]:
        locale_name, region, fonts = self.resolver.find_for_system_locale(style)
        logger.info(
            f"Detected locale: {locale_name!r}, region: {region.name}, "
            f"style: {style.name}, candidates: {len(fonts)}"
        )
        return fonts

    def _set_found_fonts(self, fonts: list[FoundFont]) -> list[str]:
        definitions, installed_names = install_replacing(
            fonts, load=self.loader, base=self.defaults(), roles=self.roles
        )

        if not installed_names:
            logger.warning("No matching system fonts found.")
            return []

        self.ctx.set_fonts(definitions)
        logger.info(f"Set fonts (family names): {installed_names}")
        return installed_names

    def _extend_found_fonts(
        self, definitions: FontDefinitions, fonts: list[FoundFont]
    ) -> list[str]:
        installed_names = install_extending(definitions, fonts, load=self.loader, roles=self.roles)

        if not installed_names:
            logger.info("No new system fonts to add.")
            return []

        self.ctx.set_fonts(definitions.copy())
        logger.info(f"Extended fonts (family names): {installed_names}")
        return installed_names


def set_auto(
    ctx: RenderingContext, style: FontStyle, resolver: CandidateResolver | None = None
) -> list[str]:
    """Replace ``ctx`` fonts with system fonts for the current locale."""
    return FontManager(ctx, resolver=resolver).set_auto(style)


def set_with_region(
    ctx: RenderingContext,
    region: FontRegion,
    style: FontStyle,
    resolver: CandidateResolver | None = None,
) -> list[str]:
    """Replace ``ctx`` fonts with system fonts for ``region``."""
    return FontManager(ctx, resolver=resolver).set_with_region(region, style)


def set_with_presets(
    ctx: RenderingContext,
    presets: Iterable[FontPreset],
    style: FontStyle,
    resolver: CandidateResolver | None = None,
) -> list[str]:
    """Replace ``ctx`` fonts with system fonts for ``presets``."""
    return FontManager(ctx, resolver=resolver).set_with_presets(presets, style)


def extend_auto(
    ctx: RenderingContext,
    definitions: FontDefinitions,
    style: FontStyle,
    resolver: CandidateResolver | None = None,
) -> list[str]:
    """Append system fonts for the current locale to ``definitions`` and apply them."""
    return FontManager(ctx, resolver=resolver).extend_auto(definitions, style)


def extend_with_region(
    ctx: RenderingContext,
    definitions: FontDefinitions,
    region: FontRegion,
    style: FontStyle,
    resolver: CandidateResolver | None = None,
) -> list[str]:
    """Append system fonts for ``region`` to ``definitions`` and apply them."""
    return FontManager(ctx, resolver=resolver).extend_with_region(definitions, region, style)


def extend_with_presets(
    ctx: RenderingContext,
    definitions: FontDefinitions,
    presets: Iterable[FontPreset],
    style: FontStyle,
    resolver: CandidateResolver | None = None,
) -> list[str]:
    """Append system fonts for ``presets`` to ``definitions`` and apply them."""
    return FontManager(ctx, resolver=resolver).extend_with_presets(definitions, presets, style)
