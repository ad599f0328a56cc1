"""External formatter invocation.

Runs a formatting tool (prettier by default) over the freshly written
document so whitespace normalization never shows up as drift. Must finish
before the drift check reads the file.
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from command_docs.exceptions import FormatterError, ProcessLaunchError
from command_docs.process_runner import InvocationResult, run

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER_COMMAND = ("prettier", "--write")


def format_file(
    target_path: Path | str,
    command: Sequence[str] = DEFAULT_FORMATTER_COMMAND,
    *,
    runner: Callable[..., InvocationResult] = run,
) -> InvocationResult:
    """Run the formatter command with the target path appended.

    Args:
        target_path: File to format in place
        command: Formatter argv prefix, e.g. ["npx", "prettier", "--write"]
        runner: Process runner, injectable for tests

    Returns:
        InvocationResult of the formatter

    Raises:
        FormatterError: If the command is empty, cannot be started, or
            exits nonzero
    """
    if not command:
        raise FormatterError("Formatter command is empty")

    executable, *args = command
    try:
        result = runner(executable, [*args, str(target_path)])
    except ProcessLaunchError as e:
        raise FormatterError(f"Formatter could not be started: {e}") from e

    if not result.succeeded:
        details = result.stderr.strip() or result.stdout.strip()
        raise FormatterError(
            f"{' '.join(command)} failed on {target_path} (exit {result.exit_code}): {details}"
        )

    logger.debug(f"Formatted {target_path} with {executable}")
    return result


__all__ = ["DEFAULT_FORMATTER_COMMAND", "format_file"]
