"""
Font Utilities
==============

Diagnostic helpers. Nothing here influences which fonts get resolved.
"""

import logging
import os
from collections.abc import Iterable

from .models import FontDefinitions

logger = logging.getLogger(__name__)

NOT_SET = "<not set>"


def locale_environment(names: Iterable[str] = ("LANG", "LC_ALL", "LC_CTYPE")) -> dict[str, str]:
    """Read locale environment variables verbatim, marking missing ones as not set."""
    return {name: os.environ.get(name, NOT_SET) for name in names}


def log_locale_environment(names: Iterable[str] = ("LANG", "LC_ALL", "LC_CTYPE")) -> list[str]:
    """
    Log locale environment variables at INFO.

    Returns:
        The logged ``NAME=value`` lines
    """
    lines = [f"{name}={value}" for name, value in locale_environment(names).items()]
    for line in lines:
        logger.info(line)
    return lines


def format_size(size_bytes: int) -> str:
    """Human readable byte count."""
    if size_bytes < 1024:
        return f"{size_bytes}B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024}KB"
    return f"{size_bytes / (1024 * 1024):.1f}MB"


def summarize_definitions(definitions: FontDefinitions) -> list[str]:
    """One line per family role listing its fallback chain, then the font data sizes."""
    lines = []
    for role, keys in definitions.families.items():
        chain = " -> ".join(keys) if keys else "(empty)"
        lines.append(f"{role.value}: {chain}")
    for key, data in definitions.font_data.items():
        lines.append(f"  {key} ({format_size(len(data))})")
    return lines
