"""
Pytest configuration and fixtures for system font fallback tests.
"""

from pathlib import Path

import pytest

from sysfonts.fonts.context import InMemoryContext
from sysfonts.fonts.models import (
    BytesSource,
    FontDefinitions,
    FontFamily,
    FontRegion,
    FoundFont,
    PathSource,
)
from sysfonts.fonts.presets import presets_for_region


class StubResolver:
    """Resolver returning fixed candidates and recording what it was asked."""

    def __init__(self, fonts=None, locale_name="ko_KR.UTF-8", region=FontRegion.KOREAN):
        self.fonts = list(fonts or [])
        self.locale_name = locale_name
        self.region = region
        self.preset_calls = []
        self.locale_calls = []

    def find_from_presets(self, presets, style):
        self.preset_calls.append((list(presets), style))
        return list(self.fonts)

    def find_for_region(self, region, style):
        return self.find_from_presets(presets_for_region(region), style)

    def find_for_system_locale(self, style):
        self.locale_calls.append(style)
        return self.locale_name, self.region, list(self.fonts)


@pytest.fixture
def font_dir(tmp_path) -> Path:
    """Directory holding a few fake font files."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    for name in ("NotoSansKR-Regular.otf", "NotoSansJP-Regular.otf", "DejaVuSans.ttf"):
        (directory / name).write_bytes(f"font:{name}".encode())
    return directory


@pytest.fixture
def noto_kr(font_dir) -> FoundFont:
    return FoundFont(
        key="noto-kr",
        family="Noto Sans KR",
        source=PathSource(font_dir / "NotoSansKR-Regular.otf"),
    )


@pytest.fixture
def noto_jp_missing(tmp_path) -> FoundFont:
    return FoundFont(
        key="noto-jp",
        family="Noto Sans JP",
        source=PathSource(tmp_path / "missing" / "NotoSansJP-Regular.otf"),
    )


@pytest.fixture
def memory_fonts() -> list[FoundFont]:
    """Three in-memory candidates A, B, C in priority order."""
    return [
        FoundFont(key=key, family=f"Family {key}", source=BytesSource(f"data-{key}".encode()))
        for key in ("A", "B", "C")
    ]


@pytest.fixture
def existing_definitions() -> FontDefinitions:
    """Definitions that already contain font X in both roles."""
    return FontDefinitions(
        font_data={"X": b"data-X"},
        families={FontFamily.PROPORTIONAL: ["X"], FontFamily.MONOSPACE: ["X"]},
    )


@pytest.fixture
def context() -> InMemoryContext:
    return InMemoryContext()


@pytest.fixture
def stub_resolver_factory():
    return StubResolver


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale variables so tests control them explicitly."""
    for name in ("LANG", "LC_ALL", "LC_CTYPE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
