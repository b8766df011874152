"""
Palette dump - a raw color palette as ``--palette-*`` custom properties.

Unlike the token variables, a palette is a plain nested mapping of
names to literal values (no ``value``/``type`` wrappers, no references).
Keys are used as written.
"""

from __future__ import annotations

from typing import Any

from chuk_design_tokens.constants import PALETTE_HEADER
from chuk_design_tokens.models.token import format_scalar


def palette_declarations(palette: dict[str, Any], prefix: str = "--palette") -> list[str]:
    """Flatten a nested palette into ``name: value;`` declaration lines."""
    lines: list[str] = []
    for key, value in palette.items():
        if isinstance(value, dict):
            lines.extend(palette_declarations(value, f"{prefix}-{key}"))
        else:
            lines.append(f"{prefix}-{key}: {format_scalar(value)};")
    return lines


def emit_palette_variables(
    palette: dict[str, Any],
    source: str = "palette",
    prefix: str = "--palette",
) -> str:
    """Emit the palette as a ``:root`` block."""
    body = "".join(f"  {line}\n" for line in palette_declarations(palette, prefix))
    return f"{PALETTE_HEADER.format(source=source)}:root {{\n{body}}}\n"
