"""
Constants and enums for the token pipeline.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class TokenCategory(str, Enum):
    """Token documents read by a default build, in merge order."""

    COLOR = "color"
    DIMENSION = "dimension"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER_RADIUS = "borderRadius"
    BORDER = "border"


DEFAULT_CATEGORIES: list[str] = [category.value for category in TokenCategory]


class TokenType(str, Enum):
    """Type tags assigned to tokens produced by flattening."""

    FONT_SIZES = "fontSizes"
    LINE_HEIGHTS = "lineHeights"
    FONT_WEIGHTS = "fontWeights"


# Sub-properties of a typography style composite, in output order.
# (composite field, flattened name suffix, type tag, CSS property)
TYPOGRAPHY_PARTS: list[tuple[str, str, TokenType, str]] = [
    ("fontSize", "-fontSize", TokenType.FONT_SIZES, "font-size"),
    ("lineHeight", "-lineHeight", TokenType.LINE_HEIGHTS, "line-height"),
    ("fontWeight", "-fontWeight", TokenType.FONT_WEIGHTS, "font-weight"),
]

# Shadow shorthand order: x y blur spread color
SHADOW_LENGTH_FIELDS: tuple[str, ...] = ("x", "y", "blur", "spread")
SHADOW_FIELDS: tuple[str, ...] = (*SHADOW_LENGTH_FIELDS, "color")

# The only locale written to CSS. Other locales are dropped on purpose.
CANONICAL_LOCALE = "en"

# Where each composite flattener applies: (document, path inside document)
SHADOW_GROUP: tuple[str, ...] = ("shadow",)
LINE_HEIGHT_GROUP: tuple[str, ...] = ("lineHeight",)
TYPOGRAPHY_STYLES_GROUP: tuple[str, ...] = ("styles",)

TokenFileFormat = Literal["json", "yaml"]
TOKEN_FILE_SUFFIXES: dict[str, TokenFileFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# Output layout
VARIABLES_FILE = "variables.css"
TYPOGRAPHY_FILE = "typography.css"
COMPONENTS_DIR = "components"
BUTTON_FILE = "button.css"
PALETTE_FILE = "palette-vars.css"

VARIABLES_HEADER = "/**\n * Do not edit directly, this file was auto-generated.\n */\n\n"
TYPOGRAPHY_HEADER = "/* Typography Utility Classes - Auto-generated from typography.json */\n\n"
BUTTON_HEADER = "/* Ribbon Button Component - Auto-generated from design tokens */\n\n"
PALETTE_HEADER = "/* Auto-generated from {source} */\n"


class ErrorMessages:
    """Standardized error messages."""

    TOKEN_FILE_NOT_FOUND = "Token file for category '{category}' not found in {path}."
    TOKEN_FILE_INVALID = "Could not parse token file {path}: {error}"
    TOKEN_FILE_NOT_MAPPING = "Token file {path} must contain a mapping at the top level."
    OUTPUT_DIR_FAILED = "Could not create output directory {path}: {error}"
    VALIDATION_FAILED = "Token validation failed with {count} error(s)."


class SuccessMessages:
    """Standardized success messages."""

    FILE_WRITTEN = "Done! Output: {path}"
    BUILD_COMPLETE = "Built {tokens} tokens and {classes} typography classes into {path}."
