"""Tests for help_parser module.

Covers the "Commands:" block heuristic: block boundaries, the second-token
rule and the lowercase-initial filter.
"""

from command_docs.help_parser import extract_subcommands
from tests.utils import help_text


class TestExtractSubcommands:
    """Test extract_subcommands."""

    def test_no_commands_marker_returns_empty(self):
        """Help without a Commands: line has no subcommands."""
        assert extract_subcommands("Usage: x [OPTIONS]\n\nOptions:\n  -h, --help\n") == []

    def test_empty_text_returns_empty(self):
        assert extract_subcommands("") == []

    def test_uppercase_token_excluded(self):
        """Uppercase-initial rows are not commands."""
        text = "Commands:\n  foo   Does foo\n  Bar   Not a command\n\nOptions:"
        assert extract_subcommands(text) == ["foo"]

    def test_preserves_source_order(self):
        text = help_text(
            "Usage: x <COMMAND>",
            [("list-remote", "List"), ("install", "Install"), ("env", "Env")],
        )
        assert extract_subcommands(text) == ["list-remote", "install", "env"]

    def test_does_not_deduplicate(self):
        text = "Commands:\n  use  one\n  use  two\n\n"
        assert extract_subcommands(text) == ["use", "use"]

    def test_stops_at_first_blank_line(self):
        """Rows after the terminating blank line are ignored."""
        text = "Commands:\n  foo  Foo\n\n  bar  Bar\n"
        assert extract_subcommands(text) == ["foo"]

    def test_whitespace_only_line_terminates_block(self):
        text = "Commands:\n  foo  Foo\n   \n  -h, --help  Print help\n"
        assert extract_subcommands(text) == ["foo"]

    def test_block_without_terminator_runs_to_end(self):
        assert extract_subcommands("Commands:\n  foo  Foo\n  bar  Bar") == ["foo", "bar"]

    def test_takes_second_whitespace_token(self):
        """An unindented row contributes its second word, not its first."""
        assert extract_subcommands("Commands:\nfoo bar baz\n\n") == ["bar"]

    def test_marker_found_mid_line(self):
        text = "Available Commands:\n  sync   Sync things\n\n"
        assert extract_subcommands(text) == ["sync"]

    def test_only_first_marker_is_used(self):
        text = "Commands:\n  foo  Foo\n\nMore Commands:\n  bar  Bar\n\n"
        assert extract_subcommands(text) == ["foo"]

    def test_row_with_single_token_skipped(self):
        text = "Commands:\nfoo\n  bar  Bar\n\n"
        assert extract_subcommands(text) == ["bar"]

    def test_tab_indented_row(self):
        assert extract_subcommands("Commands:\n\tfoo\tFoo\n\n") == ["foo"]

    def test_non_letter_initial_accepted(self):
        """Only uppercase letters are rejected."""
        assert extract_subcommands("Commands:\n  3d  Render\n\n") == ["3d"]

    def test_marker_on_last_line(self):
        assert extract_subcommands("Usage: x\nCommands:") == []
