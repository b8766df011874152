"""
Component models - declarative tables that drive component stylesheets.

A ButtonTable lists the sizes and solid color variants of the button
component. Everything in the generated stylesheet is derived from it,
so adding a size or variant is a table edit only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


def _as_custom_property(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Custom property name must not be empty")
    return v if v.startswith("--") else f"--{v}"


class IconPadding(BaseModel):
    """Asymmetric horizontal padding used when a button shows an icon."""

    icon_side: str = Field(
        ..., alias="iconSide", description="Custom property for the side next to the icon"
    )
    text_side: str = Field(
        ..., alias="textSide", description="Custom property for the side next to the label"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("icon_side", "text_side")
    @classmethod
    def validate_property(cls, v: str) -> str:
        """Accept 'button-padding-xs' or '--button-padding-xs'."""
        return _as_custom_property(v)


class ButtonSize(BaseModel):
    """One row of the button size table."""

    name: str = Field(..., description="Modifier name (e.g., 'xsmall', 'medium')")
    size_token: str = Field(
        ..., alias="sizeToken", description="Suffix of the button-* tokens (e.g., 'xs', 'm')"
    )
    typography_style: str = Field(
        ...,
        alias="typographyStyleName",
        description="Flattened text style under 'styles' (e.g., 'title-2xs-bold')",
    )
    icon_size_token: str = Field(
        ..., alias="iconSizeToken", description="Suffix of the icon-size-* token"
    )
    icon_padding: IconPadding = Field(..., alias="iconPaddingTokens")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name", "size_token", "typography_style", "icon_size_token")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Values become part of selectors and property names."""
        if not v or not v.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"Invalid identifier: {v!r}")
        return v


class ButtonTable(BaseModel):
    """The full size/variant table for the button component."""

    block: str = Field(".ribbon-button", description="Block class selector")
    sizes: list[ButtonSize] = Field(..., min_length=1, description="Sizes, in output order")
    solid_variants: list[str] = Field(
        ...,
        alias="solidVariants",
        min_length=1,
        description="Variants sharing the solid disabled colors, in output order",
    )
    default_size: str = Field("medium", alias="defaultSize")
    default_variant: str = Field("brand-solid", alias="defaultVariant")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("block")
    @classmethod
    def validate_block(cls, v: str) -> str:
        """Block must be a class selector."""
        if not v.startswith("."):
            raise ValueError(f"Block must be a class selector, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_table(self) -> ButtonTable:
        """Names must be unique and defaults must exist."""
        names = [size.name for size in self.sizes]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate size names in {names}")
        if len(self.solid_variants) != len(set(self.solid_variants)):
            raise ValueError(f"Duplicate variants in {self.solid_variants}")
        if self.default_size not in names:
            raise ValueError(f"Default size {self.default_size!r} is not in the table")
        if self.default_variant not in self.solid_variants:
            raise ValueError(f"Default variant {self.default_variant!r} is not a solid variant")
        return self

    def get_size(self, name: str) -> ButtonSize:
        """Get a size row by name."""
        for size in self.sizes:
            if size.name == name:
                return size
        raise KeyError(name)

    @property
    def default(self) -> ButtonSize:
        return self.get_size(self.default_size)

    @classmethod
    def from_yaml(cls, path: Path) -> ButtonTable:
        """Load a table from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
        return cls.model_validate(data)
