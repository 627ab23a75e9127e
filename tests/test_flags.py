"""
Tests for flag contexts.
"""

import pytest

from arma_xgettext.core.errors import FlagSpecError
from arma_xgettext.core.flags import (
    DEFAULT_FLAGS,
    NULL_CONTEXT,
    PASSTHROUGH_CONTEXT,
    FlagContext,
    FlagContextTable,
    FormatDecision,
    inherited_context,
    passthrough_iterator,
)


class TestFlagContextTable:
    """Test recording name:argnum:flag specs."""

    def test_default_flags(self):
        table = FlagContextTable(DEFAULT_FLAGS)
        assert "format" in table
        assert "formatText" in table
        assert table.lookup("format").advance().is_format == FormatDecision.YES

    def test_argument_positions(self):
        table = FlagContextTable(("f:2:arma-format",))
        it = table.lookup("f")
        assert it.advance() == NULL_CONTEXT
        assert it.advance().is_format == FormatDecision.YES
        assert it.advance() == NULL_CONTEXT

    @pytest.mark.parametrize(
        "flag, expected",
        [
            ("arma-format", FlagContext(FormatDecision.YES)),
            ("no-arma-format", FlagContext(FormatDecision.NO)),
            ("possible-arma-format", FlagContext(FormatDecision.POSSIBLE)),
            ("impossible-arma-format", FlagContext(FormatDecision.IMPOSSIBLE)),
            ("pass-arma-format", PASSTHROUGH_CONTEXT),
        ],
    )
    def test_flag_names(self, flag, expected):
        table = FlagContextTable((f"f:1:{flag}",))
        assert table.lookup("f").advance() == expected

    def test_unknown_name_gives_null_contexts(self):
        it = FlagContextTable().lookup("hint")
        assert it.advance() == NULL_CONTEXT

    @pytest.mark.parametrize("spec", ["f:1", "f:0:arma-format", ":1:arma-format", "f:1:c-format"])
    def test_invalid_specs(self, spec):
        with pytest.raises(FlagSpecError):
            FlagContextTable((spec,))


class TestInheritance:
    """Test passing decisions into nested calls."""

    def test_passthrough_takes_outer_decision(self):
        outer = FlagContext(FormatDecision.YES)
        assert inherited_context(outer, PASSTHROUGH_CONTEXT) == outer

    def test_modifier_wins(self):
        outer = FlagContext(FormatDecision.YES)
        assert inherited_context(outer, NULL_CONTEXT) == NULL_CONTEXT

    def test_passthrough_iterator(self):
        it = passthrough_iterator()
        assert it.advance() == PASSTHROUGH_CONTEXT
        assert it.advance() == PASSTHROUGH_CONTEXT
