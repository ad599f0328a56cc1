"""Staleness check of the generated document against git.

Compares the working copy of the target file with the committed copy using
``git diff --exit-code``. Read-only: nothing is staged, committed or checked
out.

Exit status contract of ``git diff --exit-code``:
- 0: no differences (clean)
- 1: differences found (dirty)
- anything else: git itself failed (not a repository, bad path, ...)
"""

import logging
from collections.abc import Callable
from pathlib import Path

from command_docs.exceptions import DriftCheckError
from command_docs.models import DriftReport, DriftState
from command_docs.process_runner import InvocationResult, run

logger = logging.getLogger(__name__)

DIFF_FOUND_EXIT_CODE = 1


class DriftChecker:
    """Compare a file against its committed version.

    Example:
        >>> report = DriftChecker().check(Path("docs/commands.md"))
        >>> report.state
        <DriftState.CLEAN: 'clean'>
    """

    def __init__(self, git: str = "git", runner: Callable[..., InvocationResult] = run):
        self.git = git
        self.runner = runner

    def check(self, target_path: Path | str) -> DriftReport:
        """Diff the target file against the index.

        Args:
            target_path: Generated file inside a git working tree

        Returns:
            DriftReport, dirty with the diff text when the file changed

        Raises:
            DriftCheckError: If the file is untracked or git fails
        """
        target = Path(target_path).resolve()
        self._ensure_tracked(target)

        result = self._git(target, ["diff", "--no-color", "--exit-code", "--", target.name])

        if result.exit_code == 0:
            logger.debug(f"No drift: {target}")
            return DriftReport(state=DriftState.CLEAN)

        if result.exit_code == DIFF_FOUND_EXIT_CODE:
            logger.debug(f"Drift detected: {target}")
            return DriftReport(state=DriftState.DIRTY, diff=result.stdout)

        raise DriftCheckError(
            f"git diff failed for {target} (exit {result.exit_code}): {result.stderr.strip()}"
        )

    def _ensure_tracked(self, target: Path) -> None:
        """Raise unless git tracks the file; untracked files always diff clean."""
        result = self._git(target, ["ls-files", "--error-unmatch", "--", target.name])
        if not result.succeeded:
            raise DriftCheckError(
                f"{target} is not tracked by git; commit it before running a drift check.\n"
                f"{result.stderr.strip()}"
            )

    def _git(self, target: Path, args: list[str]) -> InvocationResult:
        return self.runner(self.git, args, cwd=target.parent)


def check_drift(
    target_path: Path | str,
    *,
    runner: Callable[..., InvocationResult] = run,
    git: str = "git",
) -> DriftReport:
    """Check a file for drift (convenience function).

    Example:
        >>> from command_docs.drift_checker import check_drift
        >>> report = check_drift("docs/commands.md")
        >>> if report.is_dirty:
        ...     print(report.diff)
    """
    return DriftChecker(git=git, runner=runner).check(target_path)


__all__ = ["DriftChecker", "check_drift"]
