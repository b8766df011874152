"""
Models for the token pipeline.

This module provides:
- Token: A leaf of the token tree with a tagged value
- TokenReference, ShadowComposite, LocaleLineHeight, TypographyStyleComposite:
  the tagged value variants
- ButtonTable, ButtonSize, IconPadding: the button component table
- BuildConfig: Build inputs, outputs and policy
"""

from chuk_design_tokens.models.component import ButtonSize, ButtonTable, IconPadding
from chuk_design_tokens.models.config import BuildConfig
from chuk_design_tokens.models.token import (
    LocaleLineHeight,
    ShadowComposite,
    Token,
    TokenReference,
    TokenTree,
    TokenValue,
    TypographyStyleComposite,
    iter_tokens,
    parse_tree,
    parse_value,
    tree_to_raw,
)

__all__ = [
    "BuildConfig",
    "ButtonSize",
    "ButtonTable",
    "IconPadding",
    "LocaleLineHeight",
    "ShadowComposite",
    "Token",
    "TokenReference",
    "TokenTree",
    "TokenValue",
    "TypographyStyleComposite",
    "iter_tokens",
    "parse_tree",
    "parse_value",
    "tree_to_raw",
]
