"""
AssetIOConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> io = AssetIO()

    >>> # Explicit configuration
    >>> config = AssetIOConfig(project_path="./MyGame", lock_timeout=5)
    >>> io = AssetIO(config=config)

    >>> # From config file
    >>> config = AssetIOConfig.from_file("./assetio.toml")

Environment Variables:
    ASSETIO_PROJECT_PATH - Project directory containing the Assets folder
    ASSETIO_BACKEND - Database backend: "local" or "memory"
    ASSETIO_LOCK_TIMEOUT - Seconds to wait for the local database lock
    ASSETIO_DATA_PATH - Data path reported by the memory backend
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

BACKENDS = ("local", "memory")


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


class AssetIOConfig:
    """Configuration for AssetIO."""

    # === Project ===

    project_path: str = "."
    """Project directory; its Assets folder is the asset root"""

    # === Database ===

    backend: str = "local"
    """Database backend: "local" or "memory" """

    lock_timeout: float = 30.0
    """Seconds the local backend waits for its mutation lock"""

    data_path: str | None = None
    """Data path reported by the memory backend (None = its default)"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

        self._validate()

    def _validate(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {self.backend}. Expected one of {BACKENDS}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if project_path := os.getenv("ASSETIO_PROJECT_PATH"):
            self.project_path = project_path
        if backend := os.getenv("ASSETIO_BACKEND"):
            self.backend = backend.lower()
        if timeout := os.getenv("ASSETIO_LOCK_TIMEOUT"):
            self.lock_timeout = float(timeout)
        if data_path := os.getenv("ASSETIO_DATA_PATH"):
            self.data_path = data_path

    @classmethod
    def from_file(cls, path: str | Path) -> "AssetIOConfig":
        """
        Load configuration from TOML file.

        Example TOML:
            [project]
            path = "./MyGame"

            [database]
            backend = "local"
            lock_timeout = 10

        Args:
            path: Path to TOML configuration file

        Returns:
            AssetIOConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)
        flat_config: dict[str, Any] = {}

        project = data.get("project", {})
        if "path" in project:
            flat_config["project_path"] = project["path"]

        for key, value in data.get("database", {}).items():
            flat_config[key] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "AssetIOConfig":
        """Load configuration from environment variables only."""
        return cls()

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        sections: dict[str, dict[str, str | float | None]] = {
            "project": {
                "path": self.project_path,
            },
            "database": {
                "backend": self.backend,
                "lock_timeout": self.lock_timeout,
                "data_path": self.data_path,
            },
        }

        # Build TOML string manually (avoids extra dependency)
        lines = ["# AssetIO Configuration", ""]

        for section_name, section_values in sections.items():
            lines.append(f"[{section_name}]")
            for key, value in section_values.items():
                if isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
            lines.append("")

        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "AssetIOConfig":
        """Return new config with specified overrides."""
        new_config = AssetIOConfig.__new__(AssetIOConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if not hasattr(new_config, key):
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(new_config, key, value)
        new_config._validate()
        return new_config
