"""Configuration management for the Component Usage Scanner."""

import copy
import logging
from pathlib import Path
from typing import Any

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "component-usage.toml"


class Config:
    """Application configuration."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize configuration.

        Args:
            config_file: Optional path to configuration file. When omitted,
                ``component-usage.toml`` in the working directory is used
                if it exists.
        """
        if config_file is None:
            candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if candidate.exists():
                config_file = candidate

        self.config_file = config_file
        self._config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file or defaults."""
        config: dict[str, Any] = self._get_defaults()

        if self.config_file and self.config_file.exists():
            try:
                file_config = toml.load(self.config_file)
                for section, values in file_config.items():
                    if isinstance(values, dict) and isinstance(config.get(section), dict):
                        config[section].update(values)
                    else:
                        config[section] = values
                logger.debug(f"Loaded config from {self.config_file}")
            except toml.TomlDecodeError as e:
                logger.warning(f"Invalid TOML in config file {self.config_file}: {e}")
            except OSError as e:
                logger.warning(f"Error loading config file {self.config_file}: {e}")
        elif self.config_file:
            logger.warning(f"Config file not found: {self.config_file}")

        return config

    @staticmethod
    def _get_defaults() -> dict[str, Any]:
        """Get default configuration values."""
        return copy.deepcopy({
            "scan": {
                "target_module": "your-package-name",
                "extensions": [".ts", ".tsx", ".js", ".jsx"],
                "ignore_patterns": [
                    "node_modules",
                    "dist",
                    "build",
                    ".git",
                ],
            },
            "report": {
                "filename": "component-usage-report.txt",
                "merged": False,
            },
        })

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "scan.target_module")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value: Any = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def target_module(self) -> str:
        """Get the module whose imports are tracked."""
        return str(self.get("scan.target_module", "your-package-name"))

    @property
    def extensions(self) -> list[str]:
        """Get file extensions to scan."""
        return list(self.get("scan.extensions", []))

    @property
    def ignore_patterns(self) -> list[str]:
        """Get path substrings that exclude an entry from the walk."""
        return list(self.get("scan.ignore_patterns", []))

    @property
    def report_filename(self) -> str:
        """Get report file name (written to the working directory)."""
        return str(self.get("report.filename", "component-usage-report.txt"))

    @property
    def merged_report(self) -> bool:
        """Check if the merged single-table report layout is selected."""
        return bool(self.get("report.merged", False))


# Global config instance
_config: Config | None = None


def get_config(config_file: Path | None = None) -> Config:
    """Get or create global configuration instance.

    Args:
        config_file: Optional path to configuration file

    Returns:
        Config instance
    """
    global _config

    if _config is None:
        _config = Config(config_file)

    return _config


def reset_config() -> None:
    """Drop the global configuration instance."""
    global _config
    _config = None
