"""command-docs CLI.

Entry point for the ``command-docs`` console script. This is the only place
that decides the process exit status: stages raise CommandDocsError or return
a GenerationResult, and the commands here turn those into exit codes.

Exit codes:
    0  Document generated (and clean, when --check was given)
    1  Drift detected with --check, or any fatal error
    2  Usage error
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from command_docs import __version__
from command_docs.click_group import DocsGroup
from command_docs.config import ConfigManager, DocsConfig
from command_docs.exceptions import CommandDocsError
from command_docs.models import DriftReport
from command_docs.pipeline import DocsPipeline


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


def _report_drift(drift: DriftReport, regenerate_hint: str) -> None:
    """Print the drift hint and the diff to stderr."""
    console = Console(stderr=True)
    console.print(
        f"[bold red]The file has changed.[/bold red] Please re-run `{escape(regenerate_hint)}`.",
        highlight=False,
    )
    console.print("hint: The following diff was found:", highlight=False)
    console.print()
    console.print(Syntax(drift.diff or "", "diff", background_color="default"))


@click.group(cls=DocsGroup)
@click.version_option(__version__, prog_name="command-docs")
def main() -> None:
    """command-docs - markdown reference for a CLI's help output.

    Runs the target binary with --help, discovers its subcommands from the
    "Commands:" block and writes every help screen into one markdown file.

    \b
    Examples:
        # Regenerate docs/commands.md from target/debug/mytool
        command-docs generate --binary-path target/debug/mytool

    \b
        # Regenerate and fail if the committed copy was stale
        command-docs generate --check

    \b
    CONFIGURATION:
        Config file: ./command-docs.toml (create one with: command-docs init)
    """


@main.command()
@click.option("--check", is_flag=True, help="Fail if the generated file differs from git.")
@click.option(
    "--binary-path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Target binary (default: target/debug/<command_name>).",
)
@click.option(
    "--target",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Markdown file to write (default: docs/commands.md).",
)
@click.option("--command-name", help="Label of the root command (default: binary file name).")
@click.option("--no-format", is_flag=True, help="Skip the external formatter.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Config file path (default: ./command-docs.toml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.pass_context
def generate(
    ctx: click.Context,
    check: bool,
    binary_path: Path | None,
    target: Path | None,
    command_name: str | None,
    no_format: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Regenerate the command reference document.

    \b
    Steps:
    1. Run <binary> --help and discover subcommands
    2. Run <binary> <subcommand> --help for each one
    3. Write the markdown document
    4. Run the formatter (prettier by default)
    5. With --check, compare the file against git
    """
    _setup_logging(verbose)

    try:
        config = ConfigManager.load_config(config_path)
        pipeline = DocsPipeline(
            binary_path or config.default_binary_path,
            target or config.target_path,
            root_label=command_name or config.command_name,
            formatter=[] if no_format else config.formatter,
            help_flag=config.help_flag,
        )
        result = pipeline.generate(check=check)
    except CommandDocsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result.drift is not None and result.drift.is_dirty:
        _report_drift(result.drift, config.regenerate_hint)
    elif result.drift is not None:
        click.echo(f"{result.target_path} is up to date.")

    ctx.exit(result.exit_code)


@main.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Where to write the config (default: ./command-docs.toml).",
)
@click.option("--command-name", help="Name of the documented binary.")
@click.option("--binary-path", help="Explicit binary path, relative to the config file.")
@click.option("--target", "target_file", help="Markdown file to generate.")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(
    config_path: Path | None,
    command_name: str | None,
    binary_path: str | None,
    target_file: str | None,
    force: bool,
) -> None:
    """Write a starter command-docs.toml."""
    config = DocsConfig(command_name=command_name, binary_path=binary_path)
    if target_file:
        config.target_file = target_file

    try:
        written = ConfigManager.save_config(config, config_path, force=force)
    except CommandDocsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote config: {written}")


if __name__ == "__main__":
    main()
