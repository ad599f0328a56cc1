"""Custom exceptions for command-docs."""


class CommandDocsError(Exception):
    """Base exception for command-docs errors."""

    pass


class ConfigError(CommandDocsError):
    """Configuration file missing, unreadable, or invalid."""

    pass


class BinaryNotFoundError(CommandDocsError):
    """Target binary does not exist on disk."""

    pass


class ProcessLaunchError(CommandDocsError):
    """Executable could not be spawned."""

    pass


class FormatterError(CommandDocsError):
    """External formatter failed or could not be started."""

    pass


class DriftCheckError(CommandDocsError):
    """Version control could not compare the target file."""

    pass


class OutputWriteError(CommandDocsError):
    """Rendered document could not be written."""

    pass
