"""
Token model - the tagged representation of a design token.

A raw token document is a nested mapping. Any mapping with a ``value``
key is a token leaf; everything else is a group. Leaf values are
classified once, at parse time, into one of:

- Scalar: str, int, float, bool
- TokenReference: a string of the exact form ``{a.b.c}``
- ShadowComposite: an object carrying ``blur``
- LocaleLineHeight: an object carrying ``en``
- TypographyStyleComposite: an object carrying ``fontSize``
- anything else is kept as an opaque object and passed through

Downstream code dispatches on these types instead of probing fields.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from chuk_design_tokens.constants import (
    CANONICAL_LOCALE,
    SHADOW_FIELDS,
    SHADOW_LENGTH_FIELDS,
)

# Matches one reference, whole-string or embedded: {color.base.red}
REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")

Scalar = str | int | float | bool


def format_number(value: int | float) -> str:
    """Render a number the way JSON tooling does (2.0 -> '2')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_scalar(value: Any) -> str:
    """Render a scalar for CSS output."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


@dataclass(frozen=True)
class TokenReference:
    """A placeholder meaning 'use the token at this dotted path'."""

    path: str

    @classmethod
    def parse(cls, text: str) -> TokenReference | None:
        """Return a reference if text is exactly ``{a.b.c}``, else None."""
        match = REFERENCE_PATTERN.fullmatch(text.strip())
        if match is None:
            return None
        return cls(match.group(1).strip())

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.path.split("."))

    def to_raw(self) -> str:
        return "{" + self.path + "}"

    def __str__(self) -> str:
        return self.to_raw()


@dataclass(frozen=True)
class ShadowComposite:
    """
    A drop shadow: ``{x, y, blur, spread, color}``.

    Flattens to the CSS shorthand ``"{x}px {y}px {blur}px {spread}px {color}"``.
    Missing length fields render as 0 and a missing color as nothing;
    the validator reports such shadows as malformed.
    """

    x: Scalar | None = None
    y: Scalar | None = None
    blur: Scalar | None = None
    spread: Scalar | None = None
    color: Scalar | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> ShadowComposite:
        return cls(**{name: data.get(name) for name in SHADOW_FIELDS}, raw=copy.deepcopy(data))

    def missing_fields(self) -> list[str]:
        """Shadow fields absent from the source object."""
        return [name for name in SHADOW_FIELDS if getattr(self, name) is None]

    def to_css(self) -> str:
        parts = []
        for name in SHADOW_LENGTH_FIELDS:
            length = getattr(self, name)
            parts.append(f"{format_scalar(0 if length is None else length)}px")
        if self.color is not None:
            parts.append(format_scalar(self.color))
        return " ".join(parts)

    def to_raw(self) -> dict[str, Any]:
        return copy.deepcopy(self.raw)


@dataclass(frozen=True)
class LocaleLineHeight:
    """
    Line heights keyed by locale code, e.g. ``{"en": "1.4", "ko": "1.6"}``.

    Only the canonical ``en`` entry is ever written to CSS. Every other
    locale is discarded when flattening.
    """

    values: dict[str, Any] = field(default_factory=dict)

    @property
    def dropped_locales(self) -> list[str]:
        return [locale for locale in self.values if locale != CANONICAL_LOCALE]

    def canonical_value(self) -> TokenValue:
        return parse_value(self.values[CANONICAL_LOCALE])

    def to_raw(self) -> dict[str, Any]:
        return copy.deepcopy(self.values)


@dataclass(frozen=True)
class TypographyStyleComposite:
    """A named text style bundling fontSize, lineHeight and fontWeight."""

    font_size: TokenValue | None = None
    line_height: TokenValue | None = None
    font_weight: TokenValue | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> TypographyStyleComposite:
        def part(name: str) -> TokenValue | None:
            return parse_value(data[name]) if data.get(name) is not None else None

        return cls(
            font_size=part("fontSize"),
            line_height=part("lineHeight"),
            font_weight=part("fontWeight"),
            raw=copy.deepcopy(data),
        )

    def get_part(self, name: str) -> TokenValue | None:
        """Look up a sub-value by its document field name (e.g. 'fontSize')."""
        return {
            "fontSize": self.font_size,
            "lineHeight": self.line_height,
            "fontWeight": self.font_weight,
        }[name]

    def to_raw(self) -> dict[str, Any]:
        return copy.deepcopy(self.raw)


TokenValue = (
    Scalar
    | TokenReference
    | ShadowComposite
    | LocaleLineHeight
    | TypographyStyleComposite
    | dict
    | list
    | None
)


def parse_value(raw: Any) -> TokenValue:
    """Classify a raw document value into its tagged form."""
    if isinstance(raw, str):
        return TokenReference.parse(raw) or raw
    if isinstance(raw, dict):
        if "blur" in raw:
            return ShadowComposite.from_raw(raw)
        if CANONICAL_LOCALE in raw:
            return LocaleLineHeight(values=copy.deepcopy(raw))
        if raw.get("fontSize"):
            return TypographyStyleComposite.from_raw(raw)
        return copy.deepcopy(raw)
    if isinstance(raw, list):
        return copy.deepcopy(raw)
    return raw


def value_to_raw(value: TokenValue) -> Any:
    """Inverse of parse_value."""
    if isinstance(
        value, (TokenReference, ShadowComposite, LocaleLineHeight, TypographyStyleComposite)
    ):
        return value.to_raw()
    return copy.deepcopy(value)


def iter_references(value: TokenValue) -> Iterator[str]:
    """Yield every dotted path referenced by a value, in order."""
    if isinstance(value, TokenReference):
        yield value.path
    elif isinstance(value, str):
        for match in REFERENCE_PATTERN.finditer(value):
            yield match.group(1).strip()
    elif isinstance(value, ShadowComposite):
        if isinstance(value.color, str):
            yield from iter_references(parse_value(value.color))
    elif isinstance(value, LocaleLineHeight):
        for item in value.values.values():
            yield from iter_references(parse_value(item))
    elif isinstance(value, TypographyStyleComposite):
        for part in (value.font_size, value.line_height, value.font_weight):
            if part is not None:
                yield from iter_references(part)


@dataclass(frozen=True)
class Token:
    """
    A leaf of the token tree.

    ``metadata`` keeps any extra keys from the source document so a
    token survives a parse/serialize round trip.
    """

    value: TokenValue
    type: str | None = None
    comment: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> Token:
        extra = {k: copy.deepcopy(v) for k, v in data.items() if k not in ("value", "type", "comment")}
        return cls(
            value=parse_value(data["value"]),
            type=data.get("type"),
            comment=data.get("comment"),
            metadata=extra,
        )

    def with_value(self, value: TokenValue) -> Token:
        return replace(self, value=value)

    def to_raw(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": value_to_raw(self.value)}
        if self.type is not None:
            data["type"] = self.type
        if self.comment is not None:
            data["comment"] = self.comment
        data.update(copy.deepcopy(self.metadata))
        return data


# A token tree: ordered mapping of name -> Token | nested tree
TokenTree = dict[str, Any]


def is_token_leaf(node: Any) -> bool:
    """True for a raw mapping that denotes a token rather than a group."""
    return isinstance(node, dict) and "value" in node


def parse_tree(raw: dict[str, Any]) -> TokenTree:
    """Parse a raw document into a tree of groups and Tokens."""
    tree: TokenTree = {}
    for key, node in raw.items():
        if is_token_leaf(node):
            tree[key] = Token.from_raw(node)
        elif isinstance(node, dict):
            tree[key] = parse_tree(node)
        else:
            # Group-level annotations ($schema, description, ...)
            tree[key] = copy.deepcopy(node)
    return tree


def tree_to_raw(tree: TokenTree) -> dict[str, Any]:
    """Serialize a token tree back into plain document data."""
    raw: dict[str, Any] = {}
    for key, node in tree.items():
        if isinstance(node, Token):
            raw[key] = node.to_raw()
        elif isinstance(node, dict):
            raw[key] = tree_to_raw(node)
        else:
            raw[key] = copy.deepcopy(node)
    return raw


def iter_tokens(
    tree: TokenTree, prefix: tuple[str, ...] = ()
) -> Iterator[tuple[tuple[str, ...], Token]]:
    """Depth-first walk yielding (path, token) in tree order."""
    for key, node in tree.items():
        path = (*prefix, key)
        if isinstance(node, Token):
            yield path, node
        elif isinstance(node, dict):
            yield from iter_tokens(node, path)


def get_group(tree: TokenTree, path: tuple[str, ...]) -> TokenTree | None:
    """Return the nested group at path, or None if absent or not a group."""
    node: Any = tree
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, dict) else None
