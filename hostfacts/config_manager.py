"""Configuration manager for the application."""

import json
from pathlib import Path
from typing import Any

from hostfacts.constants import (
    DEFAULT_BACKEND,
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
)


class ConfigError(Exception):
    """The configuration file has an unusable structure or value."""


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self._config: dict[str, Any] = {}
        self._defaults: dict[str, Any] = {
            "log_level": DEFAULT_LOG_LEVEL,
            "backend": DEFAULT_BACKEND,
            "indent": DEFAULT_JSON_INDENT,
        }

    def load(self) -> dict[str, Any]:
        """Load configuration from file.

        Writes the defaults to disk when no file exists yet.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON.
            ConfigError: If the file is not a JSON object or a value is invalid.
        """
        if self.config_path.exists():
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ConfigError(f"expected a JSON object, got {type(data).__name__}")
            if "indent" in data:
                try:
                    data["indent"] = int(data["indent"])
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"invalid indent {data['indent']!r}") from e
            self._config = data
        else:
            self._config = self._defaults.copy()
            self.save()

        return self._config

    def save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        if default is None:
            default = self._defaults.get(key)
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        self._config[key] = value

    def update(self, data: dict[str, Any]) -> None:
        """Update multiple configuration values."""
        self._config.update(data)

    @property
    def log_level(self) -> str:
        """Get log level name."""
        return str(self.get("log_level")).upper()

    @property
    def backend(self) -> str:
        """Get sysctl backend name."""
        return self.get("backend")

    @property
    def indent(self) -> int:
        """Get JSON output indentation."""
        return int(self.get("indent"))
