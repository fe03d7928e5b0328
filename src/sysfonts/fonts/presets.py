"""
Font Presets
============

Fixed tables mapping regions to preset chains and presets to the well-known
font families (and the file names they ship under) on Windows, macOS and
Linux. Also derives a region from the system locale.
"""

import locale
import logging
import os
from dataclasses import dataclass

from ..core.exceptions import UnknownPresetError, UnknownRegionError, UnknownStyleError
from .models import FontPreset, FontRegion, FontStyle

logger = logging.getLogger(__name__)

LOCALE_ENV_VARS = ("LC_ALL", "LC_CTYPE", "LANG")


@dataclass(frozen=True)
class FamilyCandidate:
    """A font family and the file names it is installed under."""

    family: str
    files: tuple[str, ...]


_REGION_PRESETS: dict[FontRegion, tuple[FontPreset, ...]] = {
    FontRegion.KOREAN: (FontPreset.KOREAN, FontPreset.LATIN),
    FontRegion.JAPANESE: (FontPreset.JAPANESE, FontPreset.LATIN),
    FontRegion.SIMPLIFIED_CHINESE: (FontPreset.SIMPLIFIED_CHINESE, FontPreset.LATIN),
    FontRegion.TRADITIONAL_CHINESE: (FontPreset.TRADITIONAL_CHINESE, FontPreset.LATIN),
    FontRegion.LATIN: (FontPreset.LATIN,),
    FontRegion.CYRILLIC: (FontPreset.CYRILLIC, FontPreset.LATIN),
    FontRegion.GREEK: (FontPreset.GREEK, FontPreset.LATIN),
}

# Families with wide European coverage, shared by the Latin, Cyrillic and Greek presets
_EUROPEAN_SANS = (
    FamilyCandidate("Segoe UI", ("segoeui.ttf",)),
    FamilyCandidate("Helvetica Neue", ("HelveticaNeue.ttc",)),
    FamilyCandidate("Noto Sans", ("NotoSans-Regular.ttf",)),
    FamilyCandidate("DejaVu Sans", ("DejaVuSans.ttf",)),
    FamilyCandidate("Liberation Sans", ("LiberationSans-Regular.ttf",)),
    FamilyCandidate("Arial", ("arial.ttf", "Arial.ttf")),
)

_EUROPEAN_SERIF = (
    FamilyCandidate("Times New Roman", ("times.ttf", "Times New Roman.ttf")),
    FamilyCandidate("Times", ("Times.ttc",)),
    FamilyCandidate("Noto Serif", ("NotoSerif-Regular.ttf",)),
    FamilyCandidate("DejaVu Serif", ("DejaVuSerif.ttf",)),
    FamilyCandidate("Liberation Serif", ("LiberationSerif-Regular.ttf",)),
    FamilyCandidate("Georgia", ("georgia.ttf", "Georgia.ttf")),
)

_NOTO_CJK_SANS = ("NotoSansCJK-Regular.ttc", "NotoSansCJK-VF.ttc")
_NOTO_CJK_SERIF = ("NotoSerifCJK-Regular.ttc", "NotoSerifCJK-VF.ttc")

_PRESET_FAMILIES: dict[tuple[FontPreset, FontStyle], tuple[FamilyCandidate, ...]] = {
    (FontPreset.KOREAN, FontStyle.SANS): (
        FamilyCandidate("Malgun Gothic", ("malgun.ttf",)),
        FamilyCandidate("Apple SD Gothic Neo", ("AppleSDGothicNeo.ttc",)),
        FamilyCandidate(
            "Noto Sans CJK KR",
            (*_NOTO_CJK_SANS, "NotoSansCJKkr-Regular.otf", "NotoSansKR-Regular.otf"),
        ),
        FamilyCandidate("NanumGothic", ("NanumGothic.ttf",)),
    ),
    (FontPreset.KOREAN, FontStyle.SERIF): (
        FamilyCandidate("Batang", ("batang.ttc",)),
        FamilyCandidate("AppleMyungjo", ("AppleMyungjo.ttf",)),
        FamilyCandidate(
            "Noto Serif CJK KR",
            (*_NOTO_CJK_SERIF, "NotoSerifCJKkr-Regular.otf", "NotoSerifKR-Regular.otf"),
        ),
        FamilyCandidate("NanumMyeongjo", ("NanumMyeongjo.ttf",)),
    ),
    (FontPreset.JAPANESE, FontStyle.SANS): (
        FamilyCandidate("Yu Gothic", ("YuGothR.ttc",)),
        FamilyCandidate("Meiryo", ("meiryo.ttc",)),
        FamilyCandidate("Hiragino Sans", ("ヒラギノ角ゴシック W3.ttc",)),
        FamilyCandidate(
            "Noto Sans CJK JP",
            (*_NOTO_CJK_SANS, "NotoSansCJKjp-Regular.otf", "NotoSansJP-Regular.otf"),
        ),
        FamilyCandidate("IPAGothic", ("ipag.ttf",)),
        FamilyCandidate("TakaoGothic", ("TakaoGothic.ttf",)),
    ),
    (FontPreset.JAPANESE, FontStyle.SERIF): (
        FamilyCandidate("Yu Mincho", ("yumin.ttf",)),
        FamilyCandidate("MS Mincho", ("msmincho.ttc",)),
        FamilyCandidate("Hiragino Mincho ProN", ("ヒラギノ明朝 ProN.ttc",)),
        FamilyCandidate(
            "Noto Serif CJK JP",
            (*_NOTO_CJK_SERIF, "NotoSerifCJKjp-Regular.otf", "NotoSerifJP-Regular.otf"),
        ),
        FamilyCandidate("IPAMincho", ("ipam.ttf",)),
    ),
    (FontPreset.SIMPLIFIED_CHINESE, FontStyle.SANS): (
        FamilyCandidate("Microsoft YaHei", ("msyh.ttc",)),
        FamilyCandidate("PingFang SC", ("PingFang.ttc",)),
        FamilyCandidate("Hiragino Sans GB", ("Hiragino Sans GB.ttc",)),
        FamilyCandidate(
            "Noto Sans CJK SC",
            (*_NOTO_CJK_SANS, "NotoSansCJKsc-Regular.otf", "NotoSansSC-Regular.otf"),
        ),
        FamilyCandidate("WenQuanYi Micro Hei", ("wqy-microhei.ttc",)),
    ),
    (FontPreset.SIMPLIFIED_CHINESE, FontStyle.SERIF): (
        FamilyCandidate("SimSun", ("simsun.ttc",)),
        FamilyCandidate("Songti SC", ("Songti.ttc",)),
        FamilyCandidate(
            "Noto Serif CJK SC",
            (*_NOTO_CJK_SERIF, "NotoSerifCJKsc-Regular.otf", "NotoSerifSC-Regular.otf"),
        ),
        FamilyCandidate("AR PL UMing CN", ("uming.ttc",)),
    ),
    (FontPreset.TRADITIONAL_CHINESE, FontStyle.SANS): (
        FamilyCandidate("Microsoft JhengHei", ("msjh.ttc",)),
        FamilyCandidate("PingFang TC", ("PingFang.ttc",)),
        FamilyCandidate(
            "Noto Sans CJK TC",
            (*_NOTO_CJK_SANS, "NotoSansCJKtc-Regular.otf", "NotoSansTC-Regular.otf"),
        ),
        FamilyCandidate("WenQuanYi Zen Hei", ("wqy-zenhei.ttc",)),
    ),
    (FontPreset.TRADITIONAL_CHINESE, FontStyle.SERIF): (
        FamilyCandidate("MingLiU", ("mingliu.ttc",)),
        FamilyCandidate("Songti TC", ("Songti.ttc",)),
        FamilyCandidate(
            "Noto Serif CJK TC",
            (*_NOTO_CJK_SERIF, "NotoSerifCJKtc-Regular.otf", "NotoSerifTC-Regular.otf"),
        ),
        FamilyCandidate("AR PL UMing TW", ("uming.ttc",)),
    ),
    (FontPreset.LATIN, FontStyle.SANS): _EUROPEAN_SANS,
    (FontPreset.LATIN, FontStyle.SERIF): _EUROPEAN_SERIF,
    (FontPreset.CYRILLIC, FontStyle.SANS): (
        FamilyCandidate("PT Sans", ("PTSans.ttc", "PTSans-Regular.ttf")),
        *_EUROPEAN_SANS,
    ),
    (FontPreset.CYRILLIC, FontStyle.SERIF): (
        FamilyCandidate("PT Serif", ("PTSerif.ttc", "PTSerif-Regular.ttf")),
        *_EUROPEAN_SERIF,
    ),
    (FontPreset.GREEK, FontStyle.SANS): _EUROPEAN_SANS,
    (FontPreset.GREEK, FontStyle.SERIF): _EUROPEAN_SERIF,
}

# Locale language prefixes (before "_" or "-") mapped to regions
_LANGUAGE_REGIONS: dict[str, FontRegion] = {
    "ko": FontRegion.KOREAN,
    "ja": FontRegion.JAPANESE,
    "ru": FontRegion.CYRILLIC,
    "uk": FontRegion.CYRILLIC,
    "be": FontRegion.CYRILLIC,
    "bg": FontRegion.CYRILLIC,
    "sr": FontRegion.CYRILLIC,
    "mk": FontRegion.CYRILLIC,
    "kk": FontRegion.CYRILLIC,
    "el": FontRegion.GREEK,
}

_TRADITIONAL_CHINESE_MARKERS = ("tw", "hk", "mo", "hant")


def presets_for_region(region: FontRegion) -> list[FontPreset]:
    """Expand a region into its ordered preset chain (script first, then Latin)."""
    try:
        return list(_REGION_PRESETS[region])
    except KeyError:
        raise UnknownRegionError(region) from None


def family_candidates(preset: FontPreset, style: FontStyle) -> list[FamilyCandidate]:
    """Well-known families for a preset and style, most preferred first."""
    try:
        return list(_PRESET_FAMILIES[(preset, style)])
    except KeyError:
        raise UnknownPresetError(preset) from None


def detect_system_locale() -> str | None:
    """
    Detect the process locale.

    Checks ``LC_ALL``, ``LC_CTYPE`` and ``LANG`` in that order, then falls back
    to :func:`locale.getlocale`. ``C`` and ``POSIX`` count as unset.
    """
    for name in LOCALE_ENV_VARS:
        value = os.environ.get(name)
        if value and value not in ("C", "POSIX"):
            return value

    try:
        language, _encoding = locale.getlocale()
    except ValueError as e:
        logger.debug(f"Could not query locale: {e}")
        return None

    if language and language not in ("C", "POSIX"):
        return language
    return None


def region_from_locale(locale_name: str | None) -> FontRegion:
    """
    Derive a region from a locale string such as ``ko_KR.UTF-8`` or ``zh-Hant-TW``.

    Unknown or missing locales map to Latin.
    """
    if not locale_name:
        return FontRegion.LATIN

    normalized = locale_name.split(".", 1)[0].split("@", 1)[0].replace("-", "_").lower()
    language, _, rest = normalized.partition("_")

    if language == "zh":
        parts = rest.split("_")
        if any(marker in parts for marker in _TRADITIONAL_CHINESE_MARKERS):
            return FontRegion.TRADITIONAL_CHINESE
        return FontRegion.SIMPLIFIED_CHINESE

    return _LANGUAGE_REGIONS.get(language, FontRegion.LATIN)


def _parse_enum(enum_cls, value, error_cls):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        for member in enum_cls:
            if normalized in (member.value, member.name.lower()):
                return member
    raise error_cls(value)


def parse_region(value: str | FontRegion) -> FontRegion:
    """Parse a region from its value or name, case-insensitively."""
    return _parse_enum(FontRegion, value, UnknownRegionError)


def parse_preset(value: str | FontPreset) -> FontPreset:
    """Parse a preset from its value or name, case-insensitively."""
    return _parse_enum(FontPreset, value, UnknownPresetError)


def parse_style(value: str | FontStyle) -> FontStyle:
    """Parse a style (``sans`` or ``serif``), case-insensitively."""
    return _parse_enum(FontStyle, value, UnknownStyleError)
