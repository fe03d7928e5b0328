"""Tests for diagnostic font utilities."""

import logging

from sysfonts.fonts.models import FontDefinitions, FontFamily
from sysfonts.fonts.utils import (
    NOT_SET,
    format_size,
    locale_environment,
    log_locale_environment,
    summarize_definitions,
)


class TestLocaleEnvironment:
    """Test locale environment reporting."""

    def test_values_are_verbatim(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "ko_KR.UTF-8")

        env = locale_environment()

        assert env == {"LANG": "ko_KR.UTF-8", "LC_ALL": NOT_SET, "LC_CTYPE": NOT_SET}

    def test_logs_every_variable(self, clean_locale_env, caplog):
        clean_locale_env.setenv("LC_CTYPE", "C.UTF-8")

        with caplog.at_level(logging.INFO, logger="sysfonts.fonts.utils"):
            lines = log_locale_environment()

        assert lines == ["LANG=<not set>", "LC_ALL=<not set>", "LC_CTYPE=C.UTF-8"]
        assert [record.getMessage() for record in caplog.records] == lines


class TestFormatting:
    """Test human readable output helpers."""

    def test_format_size(self):
        assert format_size(512) == "512B"
        assert format_size(4096) == "4KB"
        assert format_size(3 * 1024 * 1024) == "3.0MB"

    def test_summarize_definitions(self):
        definitions = FontDefinitions(
            font_data={"a": b"x" * 2048},
            families={FontFamily.PROPORTIONAL: ["a"], FontFamily.MONOSPACE: []},
        )

        assert summarize_definitions(definitions) == [
            "proportional: a",
            "monospace: (empty)",
            "  a (2KB)",
        ]
