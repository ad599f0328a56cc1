"""
Test utilities for command-docs tests.

This module provides a recording fake process runner and help-text
builders shared by the unit tests.
"""

from collections.abc import Sequence
from pathlib import Path

from command_docs.process_runner import InvocationResult


class FakeRunner:
    """Process runner double that records calls and replays canned output.

    Responses are keyed by the space-joined argument list, e.g. "--help" or
    "install --help". Unknown keys return empty stdout with exit status 0.
    """

    def __init__(self, responses: dict[str, InvocationResult | str] | None = None):
        self.responses = responses or {}
        self.calls: list[tuple[str, list[str], Path | str | None]] = []

    def __call__(
        self, binary_path: Path | str, args: Sequence[str] = (), *, cwd: Path | str | None = None
    ) -> InvocationResult:
        self.calls.append((str(binary_path), list(args), cwd))
        response = self.responses.get(" ".join(args), "")
        if isinstance(response, InvocationResult):
            return response
        return InvocationResult(stdout=response, stderr="", exit_code=0)

    @property
    def argvs(self) -> list[list[str]]:
        """Argument lists of every call, in call order."""
        return [args for _, args, _ in self.calls]


def help_text(usage: str, commands: Sequence[tuple[str, str]] = ()) -> str:
    """Build clap-style help output with an optional Commands: block."""
    lines = [usage, ""]
    if commands:
        lines.append("Commands:")
        lines.extend(f"  {name:<12}{description}" for name, description in commands)
        lines.append("")
    lines.extend(["Options:", "  -h, --help  Print help", ""])
    return "\n".join(lines)
