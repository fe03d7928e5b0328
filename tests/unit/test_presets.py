"""Tests for preset tables and locale handling."""

from unittest.mock import patch

import pytest

from sysfonts.core.exceptions import (
    UnknownPresetError,
    UnknownRegionError,
    UnknownStyleError,
    ValidationError,
)
from sysfonts.fonts.models import FontPreset, FontRegion, FontStyle
from sysfonts.fonts.presets import (
    detect_system_locale,
    family_candidates,
    parse_preset,
    parse_region,
    parse_style,
    presets_for_region,
    region_from_locale,
)


class TestPresetsForRegion:
    """Test region expansion."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [
            (FontRegion.KOREAN, [FontPreset.KOREAN, FontPreset.LATIN]),
            (FontRegion.TRADITIONAL_CHINESE, [FontPreset.TRADITIONAL_CHINESE, FontPreset.LATIN]),
            (FontRegion.LATIN, [FontPreset.LATIN]),
            (FontRegion.CYRILLIC, [FontPreset.CYRILLIC, FontPreset.LATIN]),
        ],
    )
    def test_expansion(self, region, expected):
        assert presets_for_region(region) == expected

    def test_every_region_has_a_chain(self):
        for region in FontRegion:
            assert presets_for_region(region)

    def test_returns_fresh_list(self):
        chain = presets_for_region(FontRegion.KOREAN)
        chain.clear()
        assert presets_for_region(FontRegion.KOREAN)

    def test_unknown_region(self):
        with pytest.raises(UnknownRegionError):
            presets_for_region("martian")


class TestFamilyCandidates:
    """Test the preset family tables."""

    def test_every_preset_and_style_has_candidates(self):
        for preset in FontPreset:
            for style in FontStyle:
                candidates = family_candidates(preset, style)
                assert candidates
                assert all(candidate.files for candidate in candidates)

    def test_korean_sans_includes_noto_cjk(self):
        families = [c.family for c in family_candidates(FontPreset.KOREAN, FontStyle.SANS)]
        assert "Noto Sans CJK KR" in families
        assert families.index("Malgun Gothic") < families.index("NanumGothic")

    def test_serif_differs_from_sans(self):
        sans = family_candidates(FontPreset.JAPANESE, FontStyle.SANS)
        serif = family_candidates(FontPreset.JAPANESE, FontStyle.SERIF)
        assert {c.family for c in sans}.isdisjoint({c.family for c in serif})


class TestLocale:
    """Test locale detection and region derivation."""

    @pytest.mark.parametrize(
        ("locale_name", "region"),
        [
            ("ko_KR.UTF-8", FontRegion.KOREAN),
            ("ja_JP", FontRegion.JAPANESE),
            ("zh_CN.UTF-8", FontRegion.SIMPLIFIED_CHINESE),
            ("zh_SG", FontRegion.SIMPLIFIED_CHINESE),
            ("zh_TW.UTF-8", FontRegion.TRADITIONAL_CHINESE),
            ("zh_HK", FontRegion.TRADITIONAL_CHINESE),
            ("zh-Hant-TW", FontRegion.TRADITIONAL_CHINESE),
            ("ru_RU.UTF-8", FontRegion.CYRILLIC),
            ("uk_UA", FontRegion.CYRILLIC),
            ("el_GR", FontRegion.GREEK),
            ("en_US.UTF-8", FontRegion.LATIN),
            ("de_DE@euro", FontRegion.LATIN),
            (None, FontRegion.LATIN),
            ("", FontRegion.LATIN),
        ],
    )
    def test_region_from_locale(self, locale_name, region):
        assert region_from_locale(locale_name) == region

    def test_lc_all_takes_precedence(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "en_US.UTF-8")
        clean_locale_env.setenv("LC_ALL", "ja_JP.UTF-8")
        assert detect_system_locale() == "ja_JP.UTF-8"

    def test_c_locale_is_ignored(self, clean_locale_env):
        clean_locale_env.setenv("LC_ALL", "C")
        clean_locale_env.setenv("LANG", "ko_KR.UTF-8")
        assert detect_system_locale() == "ko_KR.UTF-8"

    def test_falls_back_to_locale_module(self, clean_locale_env):
        with patch("sysfonts.fonts.presets.locale.getlocale", return_value=("zh_TW", "UTF-8")):
            assert detect_system_locale() == "zh_TW"

    def test_nothing_detected(self, clean_locale_env):
        with patch("sysfonts.fonts.presets.locale.getlocale", return_value=(None, None)):
            assert detect_system_locale() is None


class TestParsing:
    """Test parsing of names given on the command line or in config."""

    def test_parse_region_by_value_and_name(self):
        assert parse_region("simplified_chinese") is FontRegion.SIMPLIFIED_CHINESE
        assert parse_region("Simplified-Chinese") is FontRegion.SIMPLIFIED_CHINESE
        assert parse_region("KOREAN") is FontRegion.KOREAN
        assert parse_region(FontRegion.GREEK) is FontRegion.GREEK

    def test_parse_preset(self):
        assert parse_preset("cyrillic") is FontPreset.CYRILLIC

    def test_parse_style(self):
        assert parse_style("Serif") is FontStyle.SERIF

    def test_unknown_names(self):
        with pytest.raises(UnknownRegionError):
            parse_region("atlantis")
        with pytest.raises(UnknownPresetError):
            parse_preset(42)
        with pytest.raises(UnknownStyleError) as exc_info:
            parse_style("mono")
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.details == {"style": "mono"}
