"""External process execution.

Provides run() - a thin wrapper around subprocess.run that captures stdout
and stderr separately and reports the exit status as data instead of raising.

Usage:
    from command_docs.process_runner import run

    result = run("target/debug/mytool", ["--help"])
    if result.exit_code != 0:
        print(result.stderr)

Security:
- No shell=True in subprocess calls
- Arguments are passed as a list, never interpolated
"""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from command_docs.exceptions import ProcessLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandInvocation:
    """A single executable call.

    Attributes:
        binary_path: Executable to run (path or name resolved through PATH)
        args: Arguments passed after the executable
    """

    binary_path: Path | str
    args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [str(self.binary_path), *self.args]


@dataclass(frozen=True)
class InvocationResult:
    """Captured output of a finished process.

    Attributes:
        stdout: Standard output decoded as UTF-8
        stderr: Standard error decoded as UTF-8
        exit_code: Process exit status
    """

    stdout: str
    stderr: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        """Whether the process exited with status 0."""
        return self.exit_code == 0


def run_invocation(
    invocation: CommandInvocation, *, cwd: Path | str | None = None
) -> InvocationResult:
    """Execute an invocation and wait for it to exit.

    Nonzero exit statuses are returned in the result, never raised.

    Args:
        invocation: Executable and arguments to run
        cwd: Working directory for the child process (default: inherited)

    Returns:
        InvocationResult with separate stdout and stderr

    Raises:
        ProcessLaunchError: If the executable could not be started at all
    """
    argv = invocation.argv
    logger.debug(f"Running: {' '.join(argv)}")

    try:
        completed = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            cwd=cwd,
        )
    except OSError as e:
        raise ProcessLaunchError(f"Failed to start {argv[0]}: {e}") from e

    logger.debug(f"Exit status {completed.returncode}: {' '.join(argv)}")
    return InvocationResult(
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        exit_code=completed.returncode,
    )


def run(
    binary_path: Path | str,
    args: Sequence[str] = (),
    *,
    cwd: Path | str | None = None,
) -> InvocationResult:
    """Run an executable with arguments and capture its output.

    Example:
        >>> result = run("git", ["--version"])
        >>> result.succeeded
        True
    """
    return run_invocation(CommandInvocation(binary_path, tuple(args)), cwd=cwd)


__all__ = ["CommandInvocation", "InvocationResult", "run", "run_invocation"]
