"""Configuration management module.

Reads project settings from a TOML file (``command-docs.toml`` in the
current directory by default) and writes a starter file for ``init``.

Example command-docs.toml:

    command_name = "mytool"
    binary_path = "target/debug/mytool"
    target_file = "docs/commands.md"
    formatter = ["npx", "prettier", "--write"]
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib  # type: ignore[import]
except ImportError:
    # Python < 3.11
    import tomli as tomllib  # type: ignore[import,no-redef]

import tomlkit

from command_docs.command_walker import DEFAULT_HELP_FLAG
from command_docs.exceptions import ConfigError
from command_docs.formatter import DEFAULT_FORMATTER_COMMAND

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("command-docs.toml")
DEFAULT_TARGET_FILE = "docs/commands.md"
DEFAULT_REGENERATE_HINT = "command-docs generate"
DEBUG_BUILD_DIR = Path("target") / "debug"
CONFIG_KEYS = frozenset(
    {"command_name", "binary_path", "target_file", "formatter", "help_flag", "regenerate_hint"}
)


@dataclass
class DocsConfig:
    """command-docs configuration data."""

    command_name: str | None = None
    binary_path: str | None = None
    target_file: str = DEFAULT_TARGET_FILE
    formatter: list[str] = field(default_factory=lambda: list(DEFAULT_FORMATTER_COMMAND))
    help_flag: str = DEFAULT_HELP_FLAG
    regenerate_hint: str = DEFAULT_REGENERATE_HINT
    base_dir: Path = field(default_factory=Path.cwd)

    @property
    def default_binary_path(self) -> Path | None:
        """Configured binary, else the debug build of command_name."""
        if self.binary_path:
            return self.resolve(self.binary_path)
        if self.command_name:
            return self.resolve(DEBUG_BUILD_DIR / self.command_name)
        return None

    @property
    def target_path(self) -> Path:
        return self.resolve(self.target_file)

    def resolve(self, path: Path | str) -> Path:
        """Resolve a path relative to the config file's directory."""
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values and base_dir."""
        data = asdict(self)
        data.pop("base_dir")
        # TOML has no null
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "DocsConfig":
        """Create from dictionary, validating value types.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type
        """
        unknown = sorted(set(data) - CONFIG_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        for key in CONFIG_KEYS - {"formatter"}:
            if key in data and not isinstance(data[key], str):
                raise ConfigError(f"Config value '{key}' must be a string")

        formatter = data.get("formatter", list(DEFAULT_FORMATTER_COMMAND))
        if not isinstance(formatter, list) or not all(isinstance(a, str) for a in formatter):
            raise ConfigError("Config value 'formatter' must be a list of strings")

        return cls(
            command_name=data.get("command_name"),
            binary_path=data.get("binary_path"),
            target_file=data.get("target_file", DEFAULT_TARGET_FILE),
            formatter=list(formatter),
            help_flag=data.get("help_flag", DEFAULT_HELP_FLAG),
            regenerate_hint=data.get("regenerate_hint", DEFAULT_REGENERATE_HINT),
            base_dir=base_dir or Path.cwd(),
        )


class ConfigManager:
    """Load and write command-docs configuration files."""

    @classmethod
    def get_config_path(cls, custom_path: str | Path | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If a custom path was given and does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return DEFAULT_CONFIG_FILE.resolve()

    @classmethod
    def load_config(cls, custom_path: str | Path | None = None) -> DocsConfig:
        """Load configuration from file.

        A missing default config file yields the defaults.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            DocsConfig object

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return DocsConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")
        return DocsConfig.from_dict(data, base_dir=config_path.parent)

    @classmethod
    def save_config(
        cls, config: DocsConfig, custom_path: str | Path | None = None, *, force: bool = False
    ) -> Path:
        """Write configuration to a TOML file.

        Args:
            config: Configuration to write
            custom_path: Destination (default: command-docs.toml in cwd)
            force: Overwrite an existing file

        Returns:
            Path of the written file

        Raises:
            ConfigError: If the file exists and force is False, or writing fails
        """
        config_path = Path(custom_path or DEFAULT_CONFIG_FILE).expanduser().resolve()
        if config_path.exists() and not force:
            raise ConfigError(f"Config file already exists: {config_path} (use --force)")

        document = tomlkit.document()
        document.add(tomlkit.comment("command-docs configuration"))
        for key, value in config.to_dict().items():
            document.add(key, value)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(tomlkit.dumps(document), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to write config {config_path}: {e}") from e

        logger.debug(f"Saved config to: {config_path}")
        return config_path


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_REGENERATE_HINT",
    "DEFAULT_TARGET_FILE",
    "ConfigManager",
    "DocsConfig",
]
