"""Documentation generation orchestration.

This module runs the complete generate process:
- Validate the target binary
- Harvest help text for the root command and its subcommands
- Render and write the markdown document
- Run the external formatter
- Optionally check the result for drift against git

Philosophy:
- Orchestration, not implementation
- Delegates to specialized modules
- Returns the outcome (including the exit status); never exits the process
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from command_docs.command_walker import DEFAULT_HELP_FLAG, build_document_model
from command_docs.drift_checker import DriftChecker
from command_docs.exceptions import BinaryNotFoundError, OutputWriteError
from command_docs.formatter import DEFAULT_FORMATTER_COMMAND, format_file
from command_docs.models import GenerationResult, RenderedDocument
from command_docs.process_runner import InvocationResult, run
from command_docs.renderer import render

logger = logging.getLogger(__name__)


def validate_binary(binary_path: Path | str | None) -> Path:
    """Ensure the target binary exists before anything is invoked.

    Returns an absolute path, so a bare file name found in the current
    directory is executed from there instead of being looked up on PATH.

    Raises:
        BinaryNotFoundError: If no path was given or it is not a file
    """
    if binary_path is None:
        raise BinaryNotFoundError(
            "No binary path configured. Build the project (e.g. `cargo build`), "
            "set command_name or binary_path in command-docs.toml, "
            "or pass --binary-path."
        )

    path = Path(binary_path)
    if not path.is_file():
        raise BinaryNotFoundError(
            f"Can't find binary at {path}. Build the project (e.g. `cargo build`) "
            "or provide a specific binary path with --binary-path."
        )
    return path.absolute()


def write_document(document: RenderedDocument, target_path: Path) -> None:
    """Replace the target file with the rendered document.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(document.text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Failed to write {target_path}: {e}") from e


class DocsPipeline:
    """Orchestrates help harvesting, rendering, formatting and drift checking.

    Example:
        >>> pipeline = DocsPipeline(Path("target/debug/mytool"), Path("docs/commands.md"))
        >>> result = pipeline.generate(check=True)
        >>> result.exit_code
        0
    """

    def __init__(
        self,
        binary_path: Path | str | None,
        target_path: Path | str,
        *,
        root_label: str | None = None,
        formatter: Sequence[str] = DEFAULT_FORMATTER_COMMAND,
        help_flag: str = DEFAULT_HELP_FLAG,
        runner: Callable[..., InvocationResult] = run,
    ):
        """Initialize pipeline.

        Args:
            binary_path: Target binary whose help is documented
            target_path: Markdown file to (re)write
            root_label: Label of the root section (default: binary file name)
            formatter: Formatter argv prefix; empty skips formatting
            help_flag: Flag that makes the binary print its help
            runner: Process runner shared by every stage
        """
        self.binary_path = binary_path
        self.target_path = Path(target_path)
        self.root_label = root_label
        self.formatter = list(formatter)
        self.help_flag = help_flag
        self.runner = runner

    def generate(self, check: bool = False) -> GenerationResult:
        """Regenerate the document and optionally check it for drift.

        Args:
            check: Compare the result against the committed copy

        Returns:
            GenerationResult; its exit_code is 1 only when drift was found

        Raises:
            CommandDocsError: On any fatal error, before later stages run
        """
        binary = validate_binary(self.binary_path)

        entries = build_document_model(
            binary, self.root_label, runner=self.runner, help_flag=self.help_flag
        )
        write_document(render(entries), self.target_path)
        logger.info(f"Wrote {len(entries)} sections to {self.target_path}")

        result = GenerationResult(target_path=self.target_path, entries=entries)

        if self.formatter:
            format_file(self.target_path, self.formatter, runner=self.runner)
            result.formatted = True

        if check:
            result.drift = DriftChecker(runner=self.runner).check(self.target_path)

        return result


__all__ = ["DocsPipeline", "validate_binary", "write_document"]
