"""
Naming - token paths to CSS custom property names.

    fontSize.t10     -> --font-size-t10
    {fontSize.t10}   -> var(--font-size-t10)

Each path segment is converted from camelCase to kebab-case and the
segments are joined with '-'. The same conversion is used for variable
declarations and for every var() reference, so a reference always points
at the name its target was declared under.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from chuk_design_tokens.models.token import REFERENCE_PATTERN, TokenReference

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def kebab_case(segment: str) -> str:
    """Convert one path segment: 'lineHeight' -> 'line-height'."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", segment).lower()


def css_variable_name(path: str | Sequence[str]) -> str:
    """Custom property name for a token path (dotted string or segments)."""
    segments = path.split(".") if isinstance(path, str) else path
    return "--" + "-".join(kebab_case(segment) for segment in segments)


def reference_to_var(reference: str | TokenReference) -> str:
    """Convert a reference (``{a.b}``, ``a.b`` or TokenReference) to ``var(--a-b)``."""
    if isinstance(reference, TokenReference):
        path = reference.path
    else:
        path = reference.replace("{", "").replace("}", "").strip()
    return f"var({css_variable_name(path)})"


def replace_references(text: str) -> str:
    """Replace every embedded ``{a.b}`` in text with its var() expression."""
    return REFERENCE_PATTERN.sub(lambda match: reference_to_var(match.group(1)), text)
