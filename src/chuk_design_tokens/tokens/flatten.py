"""
Composite flattener - turns nested token values into scalar tokens.

Three independent transforms, each scoped to one part of the token set:

- shadows: ``shadow.shadow``        {x, y, blur, spread, color} -> "1px 2px 3px 4px #000"
- line heights: ``typography.lineHeight``   {en, ko, ...} -> en value
- text styles: ``typography.styles``        {fontSize, lineHeight, fontWeight}
  -> three sibling tokens ``<name>-fontSize``, ``<name>-lineHeight``, ``<name>-fontWeight``

Line-height flattening keeps only the ``en`` locale. The CSS output is
single-locale, so every other locale is dropped and cannot be recovered
from the build output.

All transforms return new trees, preserve key order, and leave tokens
that are already flat untouched, so running them twice changes nothing.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from chuk_design_tokens.constants import (
    LINE_HEIGHT_GROUP,
    SHADOW_GROUP,
    TYPOGRAPHY_PARTS,
    TYPOGRAPHY_STYLES_GROUP,
    TokenCategory,
)
from chuk_design_tokens.models.token import (
    LocaleLineHeight,
    ShadowComposite,
    Token,
    TokenTree,
    TypographyStyleComposite,
    get_group,
)

# (key, token) -> replacement entries for that key, in order
LeafTransform = Callable[[str, Token], list[tuple[str, Any]]]


def _map_leaves(group: TokenTree, transform: LeafTransform) -> TokenTree:
    """Rebuild a group, letting transform replace each token entry."""
    result: TokenTree = {}
    for key, node in group.items():
        if isinstance(node, Token):
            for new_key, new_node in transform(key, node):
                result[new_key] = new_node
        elif isinstance(node, dict):
            result[key] = _map_leaves(node, transform)
        else:
            result[key] = node
    return result


def _flatten_shadow(key: str, token: Token) -> list[tuple[str, Any]]:
    if isinstance(token.value, ShadowComposite):
        return [(key, token.with_value(token.value.to_css()))]
    return [(key, token)]


def _flatten_line_height(key: str, token: Token) -> list[tuple[str, Any]]:
    if isinstance(token.value, LocaleLineHeight):
        return [(key, token.with_value(token.value.canonical_value()))]
    return [(key, token)]


def _decompose_style(key: str, token: Token) -> list[tuple[str, Any]]:
    style = token.value
    if not isinstance(style, TypographyStyleComposite):
        return [(key, token)]

    entries: list[tuple[str, Any]] = []
    for field_name, suffix, token_type, _ in TYPOGRAPHY_PARTS:
        part = style.get_part(field_name)
        if part is None:
            continue
        entries.append((f"{key}{suffix}", Token(value=part, type=token_type.value)))
    return entries


def flatten_shadows(group: TokenTree) -> TokenTree:
    """Replace every shadow composite with its CSS shorthand string."""
    return _map_leaves(group, _flatten_shadow)


def flatten_line_heights(group: TokenTree) -> TokenTree:
    """Replace every multi-locale line height with its ``en`` value."""
    return _map_leaves(group, _flatten_line_height)


def flatten_typography_styles(group: TokenTree) -> TokenTree:
    """
    Split every text style composite into three sibling tokens.

    The original entry is removed; the new entries take its position.
    """
    return _map_leaves(group, _decompose_style)


@dataclass
class FlattenResult:
    """Flattened documents plus the pre-flatten text styles."""

    documents: dict[str, TokenTree]
    raw_styles: TokenTree | None


# (document, group path inside it, transform)
FLATTEN_RULES: list[tuple[str, tuple[str, ...], Callable[[TokenTree], TokenTree]]] = [
    (TokenCategory.SHADOW.value, SHADOW_GROUP, flatten_shadows),
    (TokenCategory.TYPOGRAPHY.value, LINE_HEIGHT_GROUP, flatten_line_heights),
    (TokenCategory.TYPOGRAPHY.value, TYPOGRAPHY_STYLES_GROUP, flatten_typography_styles),
]


def _replace_group(
    tree: TokenTree,
    path: tuple[str, ...],
    transform: Callable[[TokenTree], TokenTree],
) -> TokenTree:
    """Return a copy of tree with the group at path transformed."""
    head, *rest = path
    node = tree.get(head)
    if not isinstance(node, dict):
        return tree
    updated = dict(tree)
    updated[head] = _replace_group(node, tuple(rest), transform) if rest else transform(node)
    return updated


def flatten_documents(documents: Mapping[str, TokenTree]) -> FlattenResult:
    """
    Apply every flattening rule to its document.

    The typography ``styles`` group is deep-copied before flattening, so
    utility classes can still be generated from the composite shapes.
    Input documents are not modified.
    """
    typography = documents.get(TokenCategory.TYPOGRAPHY.value) or {}
    styles = get_group(typography, TYPOGRAPHY_STYLES_GROUP)
    raw_styles = copy.deepcopy(styles) if styles is not None else None

    flattened = dict(documents)
    for document, group_path, transform in FLATTEN_RULES:
        if document in flattened:
            flattened[document] = _replace_group(flattened[document], group_path, transform)

    return FlattenResult(documents=flattened, raw_styles=raw_styles)
