"""
Typography utility classes - one CSS class per named text style.

Reads the typography ``styles`` group as it was *before* flattening:

    styles.heading.title-1 = {fontSize: "{fontSize.t10}", ...}

    .heading-title-1 {
      font-size: var(--font-size-t10);
      line-height: var(--line-height-t10);
      font-weight: var(--font-weight-bold);
    }

Declarations use the reference strings found inside the composite, not
their resolved values. Every sub-value is rendered the way variables.css
renders it, so a locale line height writes only its en entry.
"""

from __future__ import annotations

from collections.abc import Iterator

from chuk_design_tokens.constants import TYPOGRAPHY_HEADER, TYPOGRAPHY_PARTS
from chuk_design_tokens.emitters.variables import format_token_value
from chuk_design_tokens.models.token import (
    Token,
    TokenTree,
    TypographyStyleComposite,
)


def iter_text_styles(
    raw_styles: TokenTree,
) -> Iterator[tuple[str, str, TypographyStyleComposite]]:
    """Yield (category, name, composite) for each style, in document order."""
    for category, items in raw_styles.items():
        if not isinstance(items, dict):
            continue
        for name, node in items.items():
            if isinstance(node, Token) and isinstance(node.value, TypographyStyleComposite):
                yield category, name, node.value


def emit_typography_classes(raw_styles: TokenTree) -> str:
    """
    Emit utility classes for every text style composite.

    Entries that are not composites get no class.
    """
    css = TYPOGRAPHY_HEADER
    for category, name, style in iter_text_styles(raw_styles):
        css += f".{category}-{name} {{\n"
        for field_name, _, _, css_property in TYPOGRAPHY_PARTS:
            part = style.get_part(field_name)
            if part is not None:
                css += f"  {css_property}: {format_token_value(part)};\n"
        css += "}\n\n"
    return css


def count_text_styles(raw_styles: TokenTree | None) -> int:
    """Number of classes emit_typography_classes would write."""
    if not raw_styles:
        return 0
    return sum(1 for _ in iter_text_styles(raw_styles))
