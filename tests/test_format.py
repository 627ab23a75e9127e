"""
Tests for Arma format string parsing and comparison.
"""

import pytest

from arma_xgettext.core.errors import InvalidFormatError
from arma_xgettext.core.format import (
    MAX_ARGUMENT_INDEX,
    check_format,
    check_format_strings,
    is_valid_format,
    parse_format,
)


class TestParseFormat:
    """Test parsing %n directives."""

    def test_directives(self):
        spec = parse_format("%1 of %2")
        assert spec.directives == 2
        assert spec.args_used == frozenset({1, 2})
        assert spec.arg_count == 3

    def test_multi_digit_argument(self):
        spec = parse_format("%10 left")
        assert spec.args_used == frozenset({10})
        assert spec.arg_count == 11

    def test_repeated_argument(self):
        spec = parse_format("%1 and %1")
        assert spec.directives == 2
        assert spec.args_used == frozenset({1})

    def test_no_directives(self):
        spec = parse_format("nothing to see")
        assert spec.directives == 0
        assert spec.arg_count == 0

    def test_percent_at_end(self):
        with pytest.raises(InvalidFormatError) as excinfo:
            parse_format("100%")
        assert excinfo.value.reason == "The string ends in the middle of a directive."

    def test_invalid_conversion(self):
        with pytest.raises(InvalidFormatError) as excinfo:
            parse_format("%d items")
        assert excinfo.value.reason == (
            "In the directive number 1, the character 'd' is not a valid conversion specifier."
        )

    def test_invalid_conversion_counts_previous_directives(self):
        with pytest.raises(InvalidFormatError, match="directive number 2"):
            parse_format("%1 %%")

    def test_argument_bound(self):
        assert parse_format(f"%{MAX_ARGUMENT_INDEX - 1}").arg_count == MAX_ARGUMENT_INDEX
        with pytest.raises(InvalidFormatError, match="exceeds the limit"):
            parse_format(f"%{MAX_ARGUMENT_INDEX}")

    def test_invalid_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_format("%")

    def test_is_valid_format(self):
        assert is_valid_format("%1%2")
        assert not is_valid_format("50% off")


class TestCheckFormat:
    """Test comparing a template with its translation."""

    def test_reordered_arguments_are_valid(self):
        assert not check_format_strings("%1 killed %2", "%2 wurde von %1 getötet")

    def test_repeated_argument_is_valid(self):
        assert not check_format_strings("%1 %1", "%1")

    def test_missing_argument_in_translation(self):
        problems = []
        assert check_format(parse_format("%1 %2"), parse_format("%1"), problems.append)
        assert problems == ["a format specification for argument 2 doesn't exist in 'msgstr'"]

    def test_extra_argument_in_translation(self):
        problems = []
        assert check_format(parse_format("%1"), parse_format("%1 %2"), problems.append)
        assert problems == [
            "a format specification for argument 2, as in 'msgstr', doesn't exist in 'msgid'"
        ]

    def test_only_first_mismatch_is_reported(self):
        problems = []
        assert check_format_strings("%1 %2 %3", "none", problems.append)
        assert len(problems) == 1
        assert "argument 1" in problems[0]

    def test_custom_names(self):
        problems = []
        check_format(
            parse_format("%1"),
            parse_format(""),
            problems.append,
            pretty_msgid="template",
            pretty_msgstr="translation",
        )
        assert problems == ["a format specification for argument 1 doesn't exist in 'translation'"]

    def test_invalid_translation_is_invalid_pair(self):
        problems = []
        assert check_format_strings("%1", "%x", problems.append)
        assert problems[0].startswith("'msgstr' is not a valid Arma format string")

    def test_without_error_logger(self):
        assert check_format_strings("%1", "")
