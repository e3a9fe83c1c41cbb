"""Persistent user settings for the fs-utils CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fs_utils.copy import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

# Default configuration location
CONFIG_DIR = Path.home() / ".fs-utils"

DEFAULT_HEAD_BYTES = 1024
DEFAULT_TRUNCATION_MESSAGE = "\n... [truncated]"

# CLI key -> Settings field
CONFIG_KEYS = {
    "head-bytes": "head_bytes",
    "truncation-message": "truncation_message",
    "max-depth": "max_depth",
}


class Settings(BaseModel):
    """User-adjustable defaults."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    version: str = "1.0"
    head_bytes: int = Field(default=DEFAULT_HEAD_BYTES, ge=0, alias="headBytes")
    truncation_message: str = Field(
        default=DEFAULT_TRUNCATION_MESSAGE, alias="truncationMessage"
    )
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, alias="maxDepth")


class ConfigManager:
    """Loads and saves Settings as JSON."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory for the config file. Defaults to ~/.fs-utils.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.config_file = self.config_dir / "config.json"

    @classmethod
    def create(cls, config_dir: Path) -> ConfigManager:
        """Create a config manager with a custom directory.

        Args:
            config_dir: Directory for the config file.

        Returns:
            Configured ConfigManager instance.
        """
        return cls(config_dir=config_dir)

    @classmethod
    def create_default(cls) -> ConfigManager:
        """Create a config manager using ~/.fs-utils."""
        return cls()

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored Settings, or defaults if no config file exists.
        """
        if not self.config_file.exists():
            return Settings()

        data = json.loads(self.config_file.read_text())
        return Settings.model_validate(data)

    def save(self, settings: Settings) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save.
        """
        self.ensure_config_dir()
        data = settings.model_dump(by_alias=True)
        self.config_file.write_text(json.dumps(data, indent=2))
        logger.debug("Saved settings to '%s'", self.config_file)

    def set_value(self, key: str, value: str) -> Settings:
        """Update a single setting and persist it.

        Args:
            key: CLI key, one of CONFIG_KEYS.
            value: New value as typed on the command line.

        Returns:
            The updated Settings.

        Raises:
            ValueError: If the key is unknown or the value is invalid.
        """
        field_name = CONFIG_KEYS.get(key)
        if field_name is None:
            raise ValueError(f"Unknown configuration key: {key}")

        settings = self.load()
        try:
            setattr(settings, field_name, value)
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise ValueError(f"Invalid value for {key}: {errors}") from e
        self.save(settings)
        return settings
