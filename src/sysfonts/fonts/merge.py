"""
Family Merge Engine
===================

Merges loaded candidates into the per-role fallback chains of a
``FontDefinitions``.

Replace installs build a new structure whose chains start with the new fonts
in resolver order. Extend installs mutate an existing structure and append the
new fonts after whatever is already configured.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from .loader import read_font_bytes
from .models import ByteSource, FontDefinitions, FontFamily, FoundFont

logger = logging.getLogger(__name__)

LoadFn = Callable[[ByteSource], bytes | None]

DEFAULT_ROLES: tuple[FontFamily, ...] = (FontFamily.PROPORTIONAL, FontFamily.MONOSPACE)


def insert_front(families: dict[FontFamily, list[str]], role: FontFamily, key: str) -> None:
    """Put ``key`` first in the chain for ``role`` unless it is already there."""
    keys = families.setdefault(role, [])
    if key in keys:
        return
    keys.insert(0, key)


def insert_back(families: dict[FontFamily, list[str]], role: FontFamily, key: str) -> None:
    """Put ``key`` last in the chain for ``role`` unless it is already there."""
    keys = families.setdefault(role, [])
    if key in keys:
        return
    keys.append(key)


def install_replacing(
    candidates: Iterable[FoundFont],
    load: LoadFn = read_font_bytes,
    base: FontDefinitions | None = None,
    roles: Sequence[FontFamily] = DEFAULT_ROLES,
) -> tuple[FontDefinitions, list[str]]:
    """
    Build definitions whose fallback chains start with the given candidates.

    Args:
        candidates: Fonts in priority order (most preferred first)
        load: Callable returning the bytes of a source, or None on failure
        base: Starting definitions; a fresh default when omitted
        roles: Family roles that receive the new fonts

    Returns:
        Tuple of (definitions, installed family names). When no candidate
        loads, the names list is empty and the definitions must not be
        committed.
    """
    definitions = base if base is not None else FontDefinitions.default()

    installed_names: list[str] = []
    keys_in_priority: list[str] = []

    for candidate in candidates:
        # First occurrence of a key keeps its position
        if candidate.key in keys_in_priority:
            continue

        data = load(candidate.source)
        if data is None:
            continue

        definitions.font_data[candidate.key] = data
        keys_in_priority.append(candidate.key)
        installed_names.append(candidate.family)

    if not installed_names:
        return definitions, []

    for key in reversed(keys_in_priority):
        for role in roles:
            insert_front(definitions.families, role, key)

    return definitions, installed_names


def install_extending(
    definitions: FontDefinitions,
    candidates: Iterable[FoundFont],
    load: LoadFn = read_font_bytes,
    roles: Sequence[FontFamily] = DEFAULT_ROLES,
) -> list[str]:
    """
    Append candidates not yet installed as lower-priority fallbacks.

    Candidates whose key is already in ``definitions.font_data`` are skipped
    without being loaded. Existing chain entries keep their priority.

    Returns:
        Installed family names in priority order; empty when nothing new was
        added, in which case ``definitions`` is unchanged.
    """
    installed_names: list[str] = []
    keys_in_priority: list[str] = []

    for candidate in candidates:
        if candidate.key in definitions.font_data:
            logger.debug(f"Font already installed, skipping: {candidate}")
            continue

        data = load(candidate.source)
        if data is None:
            continue

        definitions.font_data[candidate.key] = data
        keys_in_priority.append(candidate.key)
        installed_names.append(candidate.family)

    if not installed_names:
        return []

    for key in keys_in_priority:
        for role in roles:
            insert_back(definitions.families, role, key)

    return installed_names
