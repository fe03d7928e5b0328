"""Tests for the family merge engine."""

from unittest.mock import Mock

from sysfonts.fonts.loader import read_font_bytes
from sysfonts.fonts.merge import (
    insert_back,
    insert_front,
    install_extending,
    install_replacing,
)
from sysfonts.fonts.models import BytesSource, FontDefinitions, FontFamily, FoundFont

P = FontFamily.PROPORTIONAL
M = FontFamily.MONOSPACE


def _font(key: str) -> FoundFont:
    return FoundFont(key=key, family=f"Family {key}", source=BytesSource(key.encode()))


def _failing_load(_source):
    return None


class TestInsertHelpers:
    """Test the priority list insertion helpers."""

    def test_insert_front_creates_missing_role(self):
        families = {}
        insert_front(families, P, "a")
        assert families == {P: ["a"]}

    def test_insert_front_prepends(self):
        families = {P: ["b"]}
        insert_front(families, P, "a")
        assert families[P] == ["a", "b"]

    def test_insert_front_skips_present_key(self):
        families = {P: ["b", "a"]}
        insert_front(families, P, "a")
        assert families[P] == ["b", "a"]

    def test_insert_back_appends_and_dedups(self):
        families = {}
        insert_back(families, M, "a")
        insert_back(families, M, "b")
        insert_back(families, M, "a")
        assert families[M] == ["a", "b"]


class TestInstallReplacing:
    """Test replace-mode installation."""

    def test_order_matches_resolver_order(self, memory_fonts):
        """Test that front insertion in reverse keeps resolver priority."""
        definitions, names = install_replacing(memory_fonts)

        assert names == ["Family A", "Family B", "Family C"]
        assert definitions.families[P] == ["A", "B", "C"]
        assert definitions.families[M] == ["A", "B", "C"]
        assert set(definitions.font_data) == {"A", "B", "C"}

    def test_new_fonts_go_before_base_entries(self, memory_fonts, existing_definitions):
        """Test that a non-empty base keeps its entries after the new fonts."""
        definitions, _ = install_replacing(memory_fonts, base=existing_definitions)

        assert definitions.families[P] == ["A", "B", "C", "X"]
        assert definitions.font_data["X"] == b"data-X"

    def test_idempotent(self, memory_fonts):
        """Test that installing twice equals installing once."""
        once, _ = install_replacing(memory_fonts)
        twice, _ = install_replacing(memory_fonts, base=once.copy())

        assert twice == once
        for keys in twice.families.values():
            assert len(keys) == len(set(keys))

    def test_duplicate_key_first_occurrence_wins(self):
        """Test that a key offered twice is installed once, at its first position."""
        fonts = [_font("A"), _font("B"), FoundFont("A", "Other A", BytesSource(b"other"))]

        definitions, names = install_replacing(fonts)

        assert definitions.families[P] == ["A", "B"]
        assert names == ["Family A", "Family B"]
        assert definitions.font_data["A"] == b"A"

    def test_total_failure_returns_empty(self, memory_fonts):
        """Test that no names are returned and no role is touched when nothing loads."""
        definitions, names = install_replacing(memory_fonts, load=_failing_load)

        assert names == []
        assert definitions == FontDefinitions.default()

    def test_missing_file_scenario(self, noto_kr, noto_jp_missing):
        """Test a valid Korean font alongside a missing Japanese font."""
        definitions, names = install_replacing([noto_kr, noto_jp_missing], load=read_font_bytes)

        assert names == ["Noto Sans KR"]
        assert definitions.families[P][0] == "noto-kr"
        assert set(definitions.font_data) == {"noto-kr"}

    def test_roles_can_be_restricted(self, memory_fonts):
        """Test installing into the proportional role only."""
        definitions, _ = install_replacing(memory_fonts, roles=(P,))

        assert definitions.families[P] == ["A", "B", "C"]
        assert definitions.families[M] == []

    def test_every_listed_key_has_data(self, memory_fonts, noto_jp_missing):
        definitions, _ = install_replacing([*memory_fonts, noto_jp_missing])

        for keys in definitions.families.values():
            assert all(key in definitions.font_data for key in keys)


class TestInstallExtending:
    """Test extend-mode installation."""

    def test_appends_after_existing(self, existing_definitions):
        """Test that [X] extended with [A, B] becomes [X, A, B]."""
        names = install_extending(existing_definitions, [_font("A"), _font("B")])

        assert names == ["Family A", "Family B"]
        assert existing_definitions.families[P] == ["X", "A", "B"]
        assert existing_definitions.families[M] == ["X", "A", "B"]

    def test_skips_existing_keys_without_loading(self, existing_definitions):
        """Test that a key already in font_data is neither re-read nor re-appended."""
        load = Mock(side_effect=lambda source: bytes(source.data))
        fonts = [FoundFont("X", "Family X", BytesSource(b"new-X")), _font("A")]

        names = install_extending(existing_definitions, fonts, load=load)

        assert names == ["Family A"]
        assert load.call_count == 1
        assert existing_definitions.font_data["X"] == b"data-X"
        assert existing_definitions.families[P] == ["X", "A"]

    def test_duplicate_in_batch_installed_once(self):
        definitions = FontDefinitions.default()

        names = install_extending(definitions, [_font("A"), _font("A")])

        assert names == ["Family A"]
        assert definitions.families[P] == ["A"]

    def test_nothing_new_leaves_definitions_unchanged(self, existing_definitions):
        """Test the no-op on total failure with deep equality."""
        before = existing_definitions.copy()

        names = install_extending(existing_definitions, [_font("A")], load=_failing_load)

        assert names == []
        assert existing_definitions == before

    def test_creates_missing_roles(self):
        definitions = FontDefinitions()

        install_extending(definitions, [_font("A")])

        assert definitions.families == {P: ["A"], M: ["A"]}

    def test_key_in_role_but_data_reinstalled_is_not_duplicated(self):
        """Test that a chain already listing a key is not extended with it twice."""
        definitions = FontDefinitions(font_data={}, families={P: ["A"]})

        install_extending(definitions, [_font("A")])

        assert definitions.families[P] == ["A"]
        assert definitions.font_data["A"] == b"A"
