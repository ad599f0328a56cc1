"""Markdown rendering of harvested help entries.

Each entry becomes a level-one heading with the command label in inline code,
followed by a fenced code block holding the help text verbatim.

Philosophy:
- Simple string formatting (no templates)
- Deterministic output
"""

import re
from collections.abc import Iterable

from command_docs.models import CommandHelpEntry, RenderedDocument

MIN_FENCE_LENGTH = 3

_BACKTICK_RUN = re.compile(r"`+")


def fence_for(text: str) -> str:
    """Return a backtick fence longer than any backtick run in text."""
    longest = max((len(match) for match in _BACKTICK_RUN.findall(text)), default=0)
    return "`" * max(MIN_FENCE_LENGTH, longest + 1)


def render_section(entry: CommandHelpEntry) -> str:
    """Render a single entry as heading plus code block.

    Example:
        >>> render_section(CommandHelpEntry("x", "Usage: x"))
        '# `x`\\n```\\nUsage: x\\n```'
    """
    fence = fence_for(entry.help_text)
    return f"# `{entry.label}`\n{fence}\n{entry.help_text}\n{fence}"


def render(entries: Iterable[CommandHelpEntry]) -> RenderedDocument:
    """Render entries into a document, preserving their order."""
    return RenderedDocument(sections=tuple(render_section(entry) for entry in entries))


__all__ = ["MIN_FENCE_LENGTH", "fence_for", "render", "render_section"]
