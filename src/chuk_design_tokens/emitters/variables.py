"""
Variable emitter - the merged token tree as CSS custom properties.

    :root {
      --color-brand-primary: #06c755;
      --button-height-m: var(--dimension-40);
    }

References are never inlined: a token whose value is ``{a.b}`` is
written as ``var(--a-b)`` so a change to the referenced token cascades
at render time. References embedded in longer strings (for example a
flattened shadow whose color is a reference) are rewritten in place.

Output is deterministic: same tree -> same bytes.
"""

from __future__ import annotations

import json
import logging

from chuk_design_tokens.constants import VARIABLES_HEADER
from chuk_design_tokens.models.token import (
    LocaleLineHeight,
    ShadowComposite,
    TokenReference,
    TokenTree,
    TokenValue,
    TypographyStyleComposite,
    format_scalar,
    iter_tokens,
    value_to_raw,
)
from chuk_design_tokens.tokens.naming import (
    css_variable_name,
    reference_to_var,
    replace_references,
)

logger = logging.getLogger(__name__)


def format_token_value(value: TokenValue) -> str:
    """Render a token value as a CSS property value."""
    if isinstance(value, TokenReference):
        return reference_to_var(value)
    if isinstance(value, str):
        return replace_references(value)
    if isinstance(value, ShadowComposite):
        return replace_references(value.to_css())
    if isinstance(value, LocaleLineHeight):
        return format_token_value(value.canonical_value())
    if isinstance(value, (TypographyStyleComposite, dict, list)):
        # Composites outside the flattened groups have no CSS form
        return json.dumps(value_to_raw(value))
    return format_scalar(value)


def collect_declarations(tree: TokenTree) -> dict[str, tuple[str, str | None]]:
    """
    Map custom property name -> (rendered value, comment), in tree order.

    A name produced twice keeps its first position and its last value.
    """
    declarations: dict[str, tuple[str, str | None]] = {}
    for path, token in iter_tokens(tree):
        name = css_variable_name(path)
        if name in declarations:
            logger.warning(f"Duplicate custom property {name} from {'.'.join(path)}")
        declarations[name] = (format_token_value(token.value), token.comment)
    return declarations


def emit_variables(tree: TokenTree, header: bool = True) -> str:
    """
    Emit one ``:root`` block with a custom property per token leaf.

    Args:
        tree: Flattened, merged token tree
        header: Prefix the "do not edit" banner

    Returns:
        CSS text
    """
    declarations = collect_declarations(tree)
    lines = []
    for name, (value, comment) in declarations.items():
        line = f"  {name}: {value};"
        if comment:
            line += f" /* {comment} */"
        lines.append(line)
    body = "\n".join(lines)
    css = f":root {{\n{body}\n}}\n"
    return VARIABLES_HEADER + css if header else css
