"""
Font Loader
===========

Turns a candidate's byte source into raw font bytes. A missing or unreadable
file is expected on real systems and only skips that one candidate.
"""

import logging
from .models import ByteSource, BytesSource, PathSource

logger = logging.getLogger(__name__)


def read_font_bytes(source: ByteSource) -> bytes | None:
    """
    Read the bytes behind a font source.

    Args:
        source: Path or in-memory source

    Returns:
        The font bytes, or None if the file could not be read
    """
    if isinstance(source, PathSource):
        try:
            return source.path.read_bytes()
        except OSError as e:
            logger.debug(f"Failed to read font file {source.path}: {e}")
            return None
    if isinstance(source, BytesSource):
        return bytes(source.data)
    raise TypeError(f"Unsupported font source: {type(source).__name__}")


class FontLoader:
    """Loads candidate fonts and counts how many loaded or were skipped."""

    def __init__(self):
        self.loaded = 0
        self.skipped = 0

    def load(self, source: ByteSource) -> bytes | None:
        """Load a single source, counting successes and skips."""
        data = read_font_bytes(source)
        if data is None:
            self.skipped += 1
        else:
            self.loaded += 1
        return data

    def __call__(self, source: ByteSource) -> bytes | None:
        return self.load(source)
