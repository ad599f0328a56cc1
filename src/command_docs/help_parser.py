"""Subcommand discovery from free-form help text.

Help output has no declared schema, so discovery is a textual heuristic:
rows of the "Commands:" block whose second whitespace-delimited token starts
with a lowercase character are subcommands. The heuristic lives here and
nowhere else.
"""

import re

COMMANDS_MARKER = "Commands:"

_WHITESPACE = re.compile(r"\s+")


def extract_subcommands(help_text: str) -> list[str]:
    """Extract subcommand names from a "Commands:" block.

    Scans the lines after the first line containing "Commands:" up to the
    first blank (empty or whitespace-only) line. Each row contributes its
    second whitespace-delimited token when that token starts with a
    lowercase character; uppercase tokens (section labels) are skipped.

    Args:
        help_text: Raw help output of a command

    Returns:
        Subcommand names in order of appearance. Empty when the text has
        no "Commands:" line.

    Example:
        >>> extract_subcommands("Commands:\\n  foo   Does foo\\n  Bar   No\\n\\n")
        ['foo']
    """
    rows = help_text.split("\n")
    header_index = next(
        (index for index, row in enumerate(rows) if COMMANDS_MARKER in row), None
    )
    if header_index is None:
        return []

    subcommands: list[str] = []
    for row in rows[header_index + 1 :]:
        if not row.strip():
            break
        tokens = _WHITESPACE.split(row)
        if len(tokens) < 2:
            continue
        word = tokens[1]
        if word and _is_lowercase_initial(word):
            subcommands.append(word)

    return subcommands


def _is_lowercase_initial(word: str) -> bool:
    """Digits and punctuation pass; only uppercase letters are rejected."""
    return word[0].lower() == word[0]


__all__ = ["COMMANDS_MARKER", "extract_subcommands"]
