"""
Rendering Contexts
==================

The facade commits font definitions to anything with a ``set_fonts`` method.
``InMemoryContext`` keeps the committed definitions around, for the CLI and
for tests.
"""

import logging
from typing import Protocol, runtime_checkable

from .models import FontDefinitions, FontFamily

logger = logging.getLogger(__name__)


@runtime_checkable
class RenderingContext(Protocol):
    """Receives whole font definitions in a single call."""

    def set_fonts(self, definitions: FontDefinitions) -> None: ...


class InMemoryContext:
    """Rendering context that stores the last committed definitions."""

    def __init__(self, definitions: FontDefinitions | None = None):
        self.fonts = definitions if definitions is not None else FontDefinitions.default()
        self.commits = 0

    def set_fonts(self, definitions: FontDefinitions) -> None:
        # Single assignment: readers see either the old or the new structure
        self.fonts = definitions
        self.commits += 1
        logger.debug(f"Committed {len(definitions.font_data)} fonts (commit #{self.commits})")

    def fallback_chain(self, role: FontFamily) -> list[str]:
        """Committed fallback chain for ``role``."""
        return self.fonts.keys_for(role)
