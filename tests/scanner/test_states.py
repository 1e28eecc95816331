"""Tests for the Idle/InBlock scanner states."""

import pytest

from pemblocks.scanner.states import IDLE, Idle, InBlock


class TestIdle:
    def test_singleton_equality(self) -> None:
        assert IDLE == Idle()


class TestInBlock:
    def test_new_block_has_no_content(self) -> None:
        state = InBlock(block_type="CERTIFICATE", begin_lineno=1)
        assert state.content_start is None
        assert state.content_end is None
        assert state.has_content is False

    def test_first_content_line_sets_both_ends(self) -> None:
        state = InBlock("X", 1).with_content_line(10, 20)
        assert (state.content_start, state.content_end) == (10, 20)
        assert state.has_content is True

    def test_later_lines_move_only_the_end(self) -> None:
        state = InBlock("X", 1).with_content_line(10, 20).with_content_line(21, 31)
        assert (state.content_start, state.content_end) == (10, 31)

    def test_transitions_do_not_mutate(self) -> None:
        state = InBlock("X", 1)
        state.with_content_line(10, 20)
        assert state.has_content is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            InBlock("X", 1).block_type = "Y"  # type: ignore[misc]
