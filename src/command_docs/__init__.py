"""command-docs - markdown reference generator for command-line help text

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- Fail fast with helpful guidance

command-docs runs a companion binary with --help, discovers its subcommands,
renders every help screen into a single markdown document, and optionally
verifies that the committed copy of that document is up to date.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
