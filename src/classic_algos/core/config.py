"""Configuration management for classic-algos."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["text", "table", "csv"]


class OutputConfig(BaseModel):
    """Configuration for result output."""

    gap_marker: str = Field(default=" ", description="Gap character in edit alignments")
    default_format: OutputFormat = Field(default="text", description="Default output format")

    @field_validator("gap_marker")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"gap_marker must be a single character, got {value!r}")
        return value


class Config(BaseModel):
    """Main configuration for classic-algos."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    verbose: bool = Field(default=False, description="Enable debug logging")

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file.

        Raises:
            FileNotFoundError: If config_path does not exist
            ValueError: If the file is not valid JSON or fails validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

        return cls.model_validate(data)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the user and
            working-directory locations are tried before falling back to defaults.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "classic-algos" / "config.json",
            Path.cwd() / "classic-algos.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config()

    return Config.load_from_file(Path(config_path))
