"""
Tests for directive handling and literal concatenation.
"""

from arma_xgettext.core.models import Position


def msgids(catalog):
    return [message.msgid for message in catalog]


class TestLineDirectives:
    """Test #line style directives."""

    def test_line_directive_sets_position(self, extract):
        catalog = extract('#line 10 "foo.sqf"\nlocalize "x"')
        assert catalog.get("x").references == [Position("foo.sqf", 10)]

    def test_short_line_directive(self, extract):
        catalog = extract('# 42 "bar.hpp"\nlocalize "y"')
        assert catalog.get("y").references == [Position("bar.hpp", 42)]

    def test_indented_directive(self, extract):
        catalog = extract('   #line 5 "a.sqf"\nlocalize "q"')
        assert catalog.get("q").references == [Position("a.sqf", 5)]

    def test_lines_count_on_from_directive(self, extract):
        catalog = extract('#line 10 "foo.sqf"\n\n\nlocalize "x"')
        assert catalog.get("x").references == [Position("foo.sqf", 12)]


class TestOtherDirectives:
    """Test directives that are not line markers."""

    def test_include_is_skipped(self, extract):
        catalog = extract('#include "script_component.hpp"\nlocalize "y"', extract_all=True)
        assert msgids(catalog) == ["y"]

    def test_define_body_is_scanned(self, extract):
        catalog = extract('#define MSG localize "z"\n')
        assert msgids(catalog) == ["z"]
        assert catalog.get("z").references == [Position("test.sqf", 1)]

    def test_hash_in_middle_of_line_is_not_a_directive(self, extract):
        catalog = extract('_x = _a # 2; localize "w"')
        assert msgids(catalog) == ["w"]

    def test_directive_breaks_comment_adjacency(self, extract):
        catalog = extract('// note\n#include "x.hpp"\nlocalize "m"', comment_tag="")
        assert catalog.get("m").comments == []


class TestLiteralConcatenation:
    """Test joining adjacent string literals."""

    def test_adjacent_strings_are_joined(self, extract):
        catalog = extract('localize "a" "b"')
        assert msgids(catalog) == ["ab"]

    def test_explicit_newline_joins(self, extract):
        catalog = extract('localize "first" \\n "second"')
        assert msgids(catalog) == ["first\nsecond"]

    def test_strings_across_lines_are_joined(self, extract):
        catalog = extract('localize "a"\n    "b"')
        assert msgids(catalog) == ["ab"]

    def test_first_literal_of_an_argument_wins(self, extract):
        catalog = extract('localize ("a" + "b")')
        assert msgids(catalog) == ["a"]
