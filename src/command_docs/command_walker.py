"""Help-text harvesting over a discovered command tree.

Runs the root command's help, discovers its subcommands from the output and
runs each subcommand's help in turn. Only first-level subcommands are
walked. Invocations are issued one at a time so entry order follows the
order the root help lists them in.
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from command_docs.help_parser import extract_subcommands
from command_docs.models import CommandHelpEntry
from command_docs.process_runner import InvocationResult, run

logger = logging.getLogger(__name__)

DEFAULT_HELP_FLAG = "--help"

Runner = Callable[[Path | str, Sequence[str]], InvocationResult]


def fetch_help(
    binary_path: Path | str,
    subcommand: str | None = None,
    *,
    runner: Runner = run,
    help_flag: str = DEFAULT_HELP_FLAG,
) -> str:
    """Return the help text of the root command or one subcommand.

    The command's stdout is used whatever its exit status; a nonzero exit is
    only logged. A single final newline is stripped, everything else is kept.
    """
    args = [subcommand, help_flag] if subcommand else [help_flag]
    result = runner(binary_path, args)
    if not result.succeeded:
        logger.warning(
            f"{' '.join([Path(binary_path).name, *args])} exited with status "
            f"{result.exit_code}: {result.stderr.strip()}"
        )
    return strip_final_newline(result.stdout)


def strip_final_newline(text: str) -> str:
    """Remove one trailing "\\n" or "\\r\\n"."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def build_document_model(
    binary_path: Path | str,
    root_label: str | None = None,
    *,
    runner: Runner = run,
    help_flag: str = DEFAULT_HELP_FLAG,
) -> list[CommandHelpEntry]:
    """Harvest help entries for the root command and its subcommands.

    Args:
        binary_path: Target binary
        root_label: Label of the root entry (default: the binary's file name)
        runner: Process runner, injectable for tests
        help_flag: Flag that makes the binary print its help

    Returns:
        Entries with the root first, followed by one entry per subcommand in
        discovery order. Never empty.

    Example:
        >>> entries = build_document_model("target/debug/mytool")
        >>> [entry.label for entry in entries]
        ['mytool', 'mytool install', 'mytool list']
    """
    label = root_label or Path(binary_path).name

    root_text = fetch_help(binary_path, runner=runner, help_flag=help_flag)
    entries = [CommandHelpEntry(label=label, help_text=root_text)]

    subcommands = extract_subcommands(root_text)
    logger.debug(f"Discovered {len(subcommands)} subcommands: {', '.join(subcommands)}")

    for subcommand in subcommands:
        text = fetch_help(binary_path, subcommand, runner=runner, help_flag=help_flag)
        entries.append(CommandHelpEntry(label=f"{label} {subcommand}", help_text=text))

    return entries


__all__ = ["DEFAULT_HELP_FLAG", "build_document_model", "fetch_help", "strip_final_newline"]
