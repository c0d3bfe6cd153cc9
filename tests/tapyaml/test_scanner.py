"""Tests for the line scanner state machine."""

import pytest

from tapyaml.loaders.config_loader import TapYamlConfig
from tapyaml.parser.scanner import (
    SCANNING,
    InBlock,
    LineScanner,
    Scanning,
    leading_whitespace,
    parse_lines,
)


class TestScalarLines:
    """key: value lines."""

    def test_bool(self):
        assert parse_lines(["a: true"]) == {"a": True}

    def test_number(self):
        assert parse_lines(["a: 42"]) == {"a": 42}

    def test_quoted(self):
        assert parse_lines(["a: 'x'"]) == {"a": "x"}

    def test_empty_value(self):
        """Trailing whitespace only yields empty text."""
        assert parse_lines(["a: "]) == {"a": ""}

    def test_indented_key(self):
        """Leading whitespace before the key is allowed."""
        assert parse_lines(["  duration_ms: 0.5"]) == {"duration_ms": 0.5}

    def test_extra_separator_whitespace(self):
        """All whitespace after the colon is part of the separator."""
        assert parse_lines(["a:    hello world"]) == {"a": "hello world"}

    def test_value_with_colon(self):
        """Only the first colon separates key from value."""
        assert parse_lines(["location: '/tmp/t.js:3:1'"]) == {
            "location": "/tmp/t.js:3:1"
        }

    def test_later_key_overwrites(self):
        assert parse_lines(["a: 1", "a: 2"]) == {"a": 2}


class TestSkippedLines:
    """Lines outside the grammar are skipped, not fatal."""

    def test_prose_skipped(self):
        """A line without a colon contributes nothing."""
        assert parse_lines(["just some prose", "a: 1"]) == {"a": 1}

    def test_non_word_key_skipped(self):
        """Keys must be word characters only."""
        assert parse_lines(["key-with-dash: 1", "b: 2"]) == {"b": 2}

    def test_missing_separator_whitespace_skipped(self):
        """A colon with no whitespace after it is not a key line."""
        assert parse_lines(["a:1", "b: 2"]) == {"b": 2}

    def test_only_skipped_lines(self):
        """Non-empty input of unmatched lines gives an empty mapping."""
        assert parse_lines(["---", "..."]) == {}


class TestBlockScalars:
    """Multi-line values opened by > or |."""

    def test_literal_block(self):
        lines = ["msg: |", "  line one", "  line two", "other: 1"]
        assert parse_lines(lines) == {"msg": "line one\nline two", "other": 1}

    @pytest.mark.parametrize("indicator", [">", "|", ">-", "|-", ">+", "|+"])
    def test_all_indicators(self, indicator):
        """Chomping indicators are accepted and ignored."""
        lines = [f"msg: {indicator}", "  a", "  b"]
        assert parse_lines(lines) == {"msg": "a\nb"}

    def test_block_closed_at_end_of_input(self):
        """An open block is joined when the input runs out."""
        assert parse_lines(["msg: |", "  a", "  b"]) == {"msg": "a\nb"}

    def test_extra_indentation_kept(self):
        """Only the block indent is removed from continuation lines."""
        lines = ["msg: |", "    deep", "  shallow"]
        assert parse_lines(lines) == {"msg": "  deep\nshallow"}

    def test_key_lines_inside_block_are_text(self):
        """Blocks do not nest; key-looking lines are content."""
        lines = ["error: |-", "  code: 1", "name: x"]
        assert parse_lines(lines) == {"error": "code: 1", "name": "x"}

    def test_indented_block_key(self):
        """Threshold is the key line's indentation plus two."""
        lines = ["  msg: >", "    x", "  y: 1"]
        assert parse_lines(lines) == {"msg": "x", "y": 1}

    def test_empty_line_ends_block(self):
        """A line shorter than the indent closes the block."""
        lines = ["msg: |", "  a", "", "  b"]
        assert parse_lines(lines) == {"msg": "a"}

    def test_whitespace_line_continues_block(self):
        """A blank line padded to the indent stays in the block."""
        lines = ["msg: |", "  a", "  ", "  b"]
        assert parse_lines(lines) == {"msg": "a\n\nb"}

    def test_empty_block(self):
        lines = ["msg: |", "b: 1"]
        assert parse_lines(lines) == {"msg": "", "b": 1}

    def test_stack_stays_list(self):
        """The stack block is not joined before reconstruction."""
        lines = ["stack: |-", "  fn (a.js:1:1)", "  other (b.js:2:2)"]
        assert parse_lines(lines) == {"stack": ["fn (a.js:1:1)", "other (b.js:2:2)"]}

    def test_custom_block_indent(self):
        """The indent step comes from config."""
        config = TapYamlConfig(block_indent=4)
        lines = ["msg: |", "    a", "  b: 1"]
        assert parse_lines(lines, config) == {"msg": "a"}


class TestAbsentInput:
    """None and empty input give None."""

    def test_none(self):
        assert parse_lines(None) is None

    def test_empty_list(self):
        assert parse_lines([]) is None

    def test_generator(self):
        """Any iterable of lines is accepted."""
        assert parse_lines(line for line in ["a: 1"]) == {"a": 1}


class TestStateTransitions:
    """LineScanner exposes its state after every line."""

    def test_starts_scanning(self):
        scanner = LineScanner()
        assert scanner.state is SCANNING

    def test_scalar_line_keeps_scanning(self):
        scanner = LineScanner()
        assert isinstance(scanner.feed("a: 1"), Scanning)

    def test_block_line_enters_block(self):
        scanner = LineScanner()
        state = scanner.feed("  msg: |")
        assert state == InBlock(key="msg", indent=4)

    def test_indent_fixed_at_open(self):
        """Deeper continuation lines do not move the threshold."""
        scanner = LineScanner()
        scanner.feed("msg: |")
        state = scanner.feed("      deeper")
        assert state.indent == 2
        assert state.buffer == ["    deeper"]

    def test_dedent_returns_to_scanning(self):
        scanner = LineScanner()
        scanner.feed("msg: |")
        scanner.feed("  a")
        assert isinstance(scanner.feed("b: 2"), Scanning)
        assert scanner.result == {"msg": "a", "b": 2}

    def test_dedent_can_open_next_block(self):
        """The closing line is matched as a key line."""
        scanner = LineScanner()
        scanner.feed("a: |")
        scanner.feed("  x")
        state = scanner.feed("b: >")
        assert state == InBlock(key="b", indent=2)
        assert scanner.result["a"] == "x"

    def test_open_block_registered_empty(self):
        """The key exists as an empty list as soon as the block opens."""
        scanner = LineScanner()
        scanner.feed("msg: |")
        assert scanner.result == {"msg": []}

    def test_finish_closes_block(self):
        scanner = LineScanner()
        scanner.feed("msg: |")
        scanner.feed("  a")
        assert scanner.finish() == {"msg": "a"}
        assert scanner.state is SCANNING


class TestLeadingWhitespace:
    def test_counts_spaces(self):
        assert leading_whitespace("   x") == 3

    def test_blank_line(self):
        assert leading_whitespace("") == 0
