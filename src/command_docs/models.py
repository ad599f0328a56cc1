"""Data models for the command-docs pipeline.

This module defines the structures passed between pipeline stages: the
harvested help entries, the rendered document, and the drift report.

Philosophy:
- Ruthlessly simple dataclasses
- Standard library only
- Derived values are properties, never stored twice
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class CommandHelpEntry:
    """Help text harvested for one command.

    Attributes:
        label: Command label (e.g., "mytool" or "mytool install")
        help_text: Verbatim stdout of the command's help invocation
    """

    label: str
    help_text: str


@dataclass(frozen=True)
class RenderedDocument:
    """Markdown sections in document order, root first.

    Attributes:
        sections: One heading + code block section per command
    """

    sections: tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Full document, sections separated by one blank line."""
        if not self.sections:
            return ""
        return "\n\n".join(self.sections) + "\n"


class DriftState(Enum):
    """Comparison outcome against version control."""

    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class DriftReport:
    """Result of comparing the target file against its committed copy.

    Attributes:
        state: Clean or dirty
        diff: Diff text, only present when dirty
    """

    state: DriftState
    diff: str | None = None

    @property
    def is_dirty(self) -> bool:
        """Whether the working copy differs from the committed copy."""
        return self.state is DriftState.DIRTY


@dataclass
class GenerationResult:
    """Outcome of a full generate run.

    Attributes:
        target_path: File the document was written to
        entries: Harvested help entries, root first
        drift: Drift report when a check was requested
        formatted: Whether the formatter ran on the output
    """

    target_path: Path
    entries: list[CommandHelpEntry] = field(default_factory=list)
    drift: DriftReport | None = None
    formatted: bool = False

    @property
    def exit_code(self) -> int:
        """Process exit status for this run: 1 on detected drift, else 0."""
        if self.drift is not None and self.drift.is_dirty:
            return 1
        return 0


__all__ = [
    "CommandHelpEntry",
    "DriftReport",
    "DriftState",
    "GenerationResult",
    "RenderedDocument",
]
