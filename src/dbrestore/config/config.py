"""Configuration management for dbrestore."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from dbrestore.config.file_ops import write_text_file
from dbrestore.config.paths import default_backup_dir, default_config_path
from dbrestore.features.restoration.domain.errors import ConfigurationError
from dbrestore.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _default_filesystems() -> dict[str, dict[str, Any]]:
    return {"local": {"type": "local", "root": str(default_backup_dir())}}


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Scratch directory for downloaded and decompressed dumps
    working_path: Path | None = _path_field()

    # Storage services keyed by name, e.g. {"local": {"type": "local", "root": "..."}}
    filesystems: dict[str, dict[str, Any]] = field(default_factory=_default_filesystems)

    # Database connections keyed by name
    databases: dict[str, dict[str, Any]] = field(default_factory=dict)

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# dbrestore Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/dbrestore.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Scratch directory for downloaded dumps (optional, defaults to the system temp dir)")
        lines.append('# Example: working_path = "/tmp/dbrestore"')
        if config["working_path"] is not None:
            lines.append(f"working_path = {self._format_toml_value(config['working_path'])}")
        lines.append("")

        lines.append("# Storage services that hold backup files")
        lines.append("# Supported types: local (requires root)")
        for name, options in config["filesystems"].items():
            lines.extend(self._render_table("filesystems", name, options))
        lines.append("")

        lines.append("# Database connections that backups can be restored into")
        lines.append("# Supported types: mysql, postgresql, sqlite")
        lines.append("# Example:")
        lines.append("# [databases.default]")
        lines.append('# type = "mysql"')
        lines.append('# host = "localhost"')
        lines.append("# port = 3306")
        lines.append('# user = "root"')
        lines.append('# password = ""')
        lines.append('# database = "app"')
        for name, options in config["databases"].items():
            lines.extend(self._render_table("databases", name, options))
        lines.append("")

        return "\n".join(lines)

    def _render_table(self, section: str, name: str, options: dict[str, Any]) -> list[str]:
        lines = [f"[{section}.{name}]"]
        for key, value in options.items():
            if value is None:
                continue
            lines.append(f"{key} = {self._format_toml_value(value)}")
        return lines

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one on first use.

        Returns:
            Config: Cached configuration object.

        Raises:
            ConfigurationError: If the file is not valid TOML or a
                ``filesystems``/``databases`` entry is not a table.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        if config_file.exists():
            instance = cls._from_file(config_file)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            instance.save()
            logger.info("Created default configuration at %s", config_file)

        cls._instance = instance
        return instance

    @classmethod
    def _from_file(cls, config_file: Path) -> "Config":
        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        for key in sorted(set(raw) - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)

        values = {key: value for key, value in raw.items() if key in known}
        for section in ("filesystems", "databases"):
            tables = values.setdefault(section, {})
            for name, options in tables.items():
                if not isinstance(options, dict):
                    raise ConfigurationError(
                        f"[{section}.{name}] in {config_file} must be a table of options"
                    )
        return cls(**values)
