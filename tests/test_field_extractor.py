"""Tests for potency extraction from flattened description text."""

import re

import pytest
from action_lut.models.action_record import ActionRecord
from action_lut.models.text_nodes import ParameterNode, TagType, TextNode
from action_lut.parsing.field_extractor import (
    FieldExtractor, FIELD_PATTERNS, flatten, parse_uint
)
from tests.helpers import create_text


@pytest.fixture
def extractor():
    return FieldExtractor()


class TestParseUint:
    """Tests for numeral parsing."""

    def test_plain_digits(self):
        assert parse_uint("150") == 150

    def test_thousands_separator(self):
        assert parse_uint("1,234") == 1234
        assert parse_uint("12,345,678") == 12345678

    def test_percent_sign(self):
        assert parse_uint("10%") == 10

    def test_unparseable_is_zero(self):
        assert parse_uint("") == 0
        assert parse_uint(",") == 0
        assert parse_uint("abc") == 0
        assert parse_uint("-5") == 0

    def test_non_ascii_digits_are_zero(self):
        """Test that only ASCII digits are accepted."""
        assert parse_uint("١٢٣") == 0

    def test_overflow_is_zero(self):
        assert parse_uint("4294967295") == 4294967295
        assert parse_uint("4294967296") == 0


class TestExtract:
    """Tests for pattern extraction."""

    def test_no_trigger_phrases_gives_all_zero(self, extractor):
        """Test that text without trigger phrases yields zero everywhere."""
        values = extractor.extract("Increases movement speed. Duration: 10s")

        assert set(values) == set(ActionRecord.value_fields())
        assert all(v == 0 for v in values.values())

    def test_potency(self, extractor):
        values = extractor.extract("Delivers an attack with a potency of 200.")

        assert values['potency'] == 200

    def test_potency_with_thousands_separator(self, extractor):
        values = extractor.extract("with a potency of 1,234")

        assert values['potency'] == 1234

    def test_potency_and_rear_together(self, extractor):
        """Test that independent fields match in the same text."""
        values = extractor.extract("with a potency of 150 when executed from a target's rear 250")

        assert values['potency'] == 150
        assert values['rear_potency'] == 250
        assert values['flank_potency'] == 0
        assert values['front_potency'] == 0
        assert values['combo_potency'] == 0
        assert values['cure_potency'] == 0
        assert values['restore_percentage'] == 0

    def test_positional_potencies(self, extractor):
        text = (
            "Delivers an attack with a potency of 100. "
            "320 when executed from a target's rear. "
            "280 when executed from a target's flank. "
            "260 when executed in front of target."
        )
        values = extractor.extract(text)

        assert values['potency'] == 100
        assert values['rear_potency'] == 320
        assert values['flank_potency'] == 280
        assert values['front_potency'] == 260

    def test_positional_numeral_after_phrase(self, extractor):
        """Test that a numeral directly after the phrase takes precedence."""
        values = extractor.extract("Potency: 100. when executed from a target's flank 180.")

        assert values['flank_potency'] == 180

    def test_combo_and_cure_independent(self, extractor):
        """Test that combo and cure potency are extracted simultaneously."""
        values = extractor.extract("Combo Potency: 100\nCure Potency: 400")

        assert values['combo_potency'] == 100
        assert values['cure_potency'] == 400

    def test_restore_percentage_is_bare_integer(self, extractor):
        values = extractor.extract("Restores 10% of maximum MP.")

        assert values['restore_percentage'] == 10

    def test_first_match_wins(self, extractor):
        """Test that later occurrences of the same phrase are ignored."""
        values = extractor.extract("with a potency of 100. Additional effect: with a potency of 900.")

        assert values['potency'] == 100

    def test_matching_is_case_sensitive(self, extractor):
        values = extractor.extract("WITH A POTENCY OF 100. combo potency: 200")

        assert values['potency'] == 0
        assert values['combo_potency'] == 0

    def test_custom_patterns(self):
        """Test that a subset of patterns can be supplied."""
        extractor = FieldExtractor({'cure_potency': re.compile(r"Heals ([\d,]+)")})
        values = extractor.extract("Heals 500 with a potency of 100")

        assert values['cure_potency'] == 500
        assert values['potency'] == 0

    def test_unknown_pattern_field_rejected(self):
        with pytest.raises(ValueError, match="unknown fields"):
            FieldExtractor({'damage': re.compile(r"(\d+)")})

    def test_all_fields_have_patterns(self):
        assert set(FIELD_PATTERNS) == set(ActionRecord.value_fields())


class TestExtractRecord:
    """Tests for building records from filtered nodes."""

    def test_flatten_renders_parameters_as_digits(self):
        nodes = [create_text("with a potency of "), ParameterNode(1500)]

        assert flatten(nodes) == "with a potency of 1500"

    def test_flatten_renders_new_lines(self):
        nodes = [create_text("a"), TextNode(TagType.NEW_LINE), create_text("b")]

        assert flatten(nodes) == "a\nb"

    def test_extract_record(self, extractor):
        nodes = [
            create_text("Delivers an attack with a potency of "), ParameterNode(150),
            create_text("."), TextNode(TagType.NEW_LINE),
            create_text("Combo Potency: "), ParameterNode(300),
        ]
        record = extractor.extract_record(9, "Fast Blade", nodes)

        assert record == ActionRecord(id=9, name="Fast Blade", potency=150, combo_potency=300)
        assert record.is_empty is False

    def test_extract_record_is_repeatable(self, extractor):
        nodes = [create_text("Cure Potency: 450")]

        assert extractor.extract_record(120, "Cure", nodes) == extractor.extract_record(120, "Cure", nodes)

    def test_extract_record_without_matches_is_empty(self, extractor):
        record = extractor.extract_record(7, "Attack", [create_text("Delivers an auto-attack.")])

        assert record.is_empty is True
