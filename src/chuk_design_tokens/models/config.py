"""
Build configuration.

A build can be configured from a YAML file:

    # tokens.config.yaml
    tokens_dir: tokens
    build_dir: build
    strict: false
    button_table: tables/button.yaml   # optional, default: shipped table
    palette_file: tokens/palette.json  # optional

Relative paths are resolved against the directory holding the config
file. Without a config file, paths default to the current directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_design_tokens.constants import DEFAULT_CATEGORIES

CONFIG_FILENAME = "tokens.config.yaml"

_PATH_FIELDS = ("tokens_dir", "build_dir", "button_table", "palette_file")


class BuildConfig(BaseModel):
    """Inputs, outputs and policy for one build run."""

    tokens_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "tokens",
        description="Directory with one token document per category",
    )
    build_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "build",
        description="Output directory (overwritten on each run)",
    )
    categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Categories to load, in merge order",
    )
    button_table: Path | None = Field(
        None, description="Button size/variant table (default: shipped table)"
    )
    palette_file: Path | None = Field(None, description="Optional raw palette document")
    strict: bool = Field(False, description="Fail the build on any validation problem")

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: list[str]) -> list[str]:
        """Categories must be non-empty and unique."""
        if not v:
            raise ValueError("At least one category is required")
        if len(v) != len(set(v)):
            raise ValueError(f"Duplicate categories: {v}")
        return v

    @classmethod
    def from_yaml(cls, path: Path, **overrides: Any) -> BuildConfig:
        """
        Load configuration from a YAML file.

        Args:
            path: Config file path
            **overrides: Values taking precedence over the file (None is ignored)

        Returns:
            BuildConfig with paths resolved relative to the file
        """
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        base = path.parent
        for key in _PATH_FIELDS:
            value = data.get(key)
            if value is not None and not Path(value).is_absolute():
                data[key] = base / value

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)

    @classmethod
    def discover(cls, directory: Path | None = None, **overrides: Any) -> BuildConfig:
        """Use tokens.config.yaml from directory (default cwd) if present."""
        config_path = (directory or Path.cwd()) / CONFIG_FILENAME
        if config_path.is_file():
            return cls.from_yaml(config_path, **overrides)
        return cls(**{k: v for k, v in overrides.items() if v is not None})
