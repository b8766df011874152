"""
Button stylesheet generator - expands the size/variant table into CSS.

The stylesheet is built from fixed groups, always in this order:

1. Icon container
2. Base rule (default size + default variant) and its pressed state
3. Per size: modifier, icon sizes, icon-left/icon-right padding
4. Per solid variant: colors and pressed state
5. Outline variant
6. Ghost variant
7. Disabled states (shared solid selector list, outline, ghost)
8. Icon-only: no padding, square width per size
9. Per size: embedded svg sizing
10. Loading state
11. Flex-grow utility

Every size- or variant-dependent rule is derived from the ButtonTable,
so changing the table regenerates all dependent groups.
All operations are deterministic: same table -> same bytes.
"""

from __future__ import annotations

from pathlib import Path

from chuk_design_tokens.constants import BUTTON_HEADER, TYPOGRAPHY_PARTS
from chuk_design_tokens.models.component import ButtonSize, ButtonTable
from chuk_design_tokens.tokens.naming import css_variable_name

DEFAULT_TABLE_PATH = Path(__file__).parent / "library" / "button.yaml"

Declarations = list[tuple[str, str]]


def load_button_table(path: Path | None = None) -> ButtonTable:
    """Load a button table, defaulting to the shipped library table."""
    return ButtonTable.from_yaml(path or DEFAULT_TABLE_PATH)


def var(name: str) -> str:
    return f"var({name})"


def block_rule(selector: str, declarations: Declarations) -> str:
    """A multi-line rule."""
    body = "".join(f"  {prop}: {value};\n" for prop, value in declarations)
    return f"{selector} {{\n{body}}}\n"


def inline_rule(selector: str, declarations: Declarations) -> str:
    """A single-line rule."""
    body = " ".join(f"{prop}: {value};" for prop, value in declarations)
    return f"{selector} {{ {body} }}\n"


def typography_declarations(style_name: str) -> Declarations:
    """font-size/line-height/font-weight for a flattened text style."""
    return [
        (css_property, var(css_variable_name(("styles", f"{style_name}{suffix}"))))
        for _, suffix, _, css_property in TYPOGRAPHY_PARTS
    ]


def size_declarations(size: ButtonSize) -> Declarations:
    tk = size.size_token
    return [
        ("height", var(f"--button-height-{tk}")),
        ("padding", f"0 {var(f'--button-padding-{tk}')}"),
        *typography_declarations(size.typography_style),
        ("border-radius", var(f"--button-radius-{tk}")),
    ]


def icon_size_declarations(size: ButtonSize) -> Declarations:
    icon = var(f"--icon-size-{size.icon_size_token}")
    return [("width", icon), ("height", icon)]


class ButtonStylesheetBuilder:
    """
    Builds the button component stylesheet from a ButtonTable.

    Each group method returns its CSS chunk; build() joins them in the
    fixed group order.
    """

    def __init__(self, table: ButtonTable):
        """
        Initialize the builder.

        Args:
            table: Size/variant table to expand
        """
        self.table = table
        self.block = table.block

    def build(self) -> str:
        """Generate the complete stylesheet."""
        groups = [
            BUTTON_HEADER,
            self.icon_container(),
            self.base(),
            *(self.size(size) for size in self.table.sizes),
            *(self.solid_variant(variant) for variant in self.table.solid_variants),
            self.outline(),
            self.ghost(),
            self.disabled(),
            self.icon_only(),
            self.svg_sizes(),
            self.loading(),
            self.flex_grow(),
        ]
        return "".join(groups)

    def icon_container(self) -> str:
        return (
            block_rule(
                f"{self.block}__icon",
                [
                    ("display", "flex"),
                    ("align-items", "center"),
                    ("justify-content", "center"),
                    ("flex-shrink", "0"),
                ],
            )
            + "\n"
        )

    def base(self) -> str:
        size = self.table.default
        variant = self.table.default_variant
        tk = size.size_token
        declarations: Declarations = [
            ("display", "inline-flex"),
            ("align-items", "center"),
            ("justify-content", "center"),
            ("box-sizing", "border-box"),
            *size_declarations(size),
            ("border", "none"),
            ("cursor", "pointer"),
            ("transition", "all 0.2s ease"),
            ("gap", var(f"--button-gap-{tk}")),
            ("color", var(f"--color-button-{variant}-fg")),
            ("background", var(f"--color-button-{variant}-bg")),
        ]
        pressed = [("background", var(f"--color-button-{variant}-bg-pressed"))]
        return (
            block_rule(self.block, declarations)
            + block_rule(f"{self.block}:active", pressed)
            + "\n"
        )

    def size(self, size: ButtonSize) -> str:
        b = self.block
        modifier = f"{b}--{size.name}"
        padding = size.icon_padding
        return "".join(
            [
                f"/* ── Size: {size.name} ── */\n",
                block_rule(
                    modifier,
                    [*size_declarations(size), ("gap", var(f"--button-gap-{size.size_token}"))],
                ),
                inline_rule(f"{modifier} {b}__icon", icon_size_declarations(size)),
                inline_rule(f"{modifier} {b}__icon svg", icon_size_declarations(size)),
                inline_rule(
                    f"{modifier}{b}--icon-left",
                    [("padding", f"0 {var(padding.text_side)} 0 {var(padding.icon_side)}")],
                ),
                inline_rule(
                    f"{modifier}{b}--icon-right",
                    [("padding", f"0 {var(padding.icon_side)} 0 {var(padding.text_side)}")],
                ),
                "\n",
            ]
        )

    def solid_variant(self, variant: str) -> str:
        modifier = f"{self.block}--{variant}"
        return (
            block_rule(
                modifier,
                [
                    ("color", var(f"--color-button-{variant}-fg")),
                    ("background", var(f"--color-button-{variant}-bg")),
                ],
            )
            + inline_rule(
                f"{modifier}:active",
                [("background", var(f"--color-button-{variant}-bg-pressed"))],
            )
            + "\n"
        )

    def outline(self) -> str:
        modifier = f"{self.block}--outline"
        return (
            block_rule(
                modifier,
                [
                    ("color", var("--color-button-outline-fg")),
                    ("background", "transparent"),
                    (
                        "border",
                        f"{var('--border-thin')} solid {var('--color-button-outline-border')}",
                    ),
                ],
            )
            + inline_rule(
                f"{modifier}:active", [("background", var("--color-button-outline-bg-pressed"))]
            )
            + "\n"
        )

    def ghost(self) -> str:
        modifier = f"{self.block}--ghost"
        return (
            block_rule(
                modifier,
                [("color", var("--color-button-ghost-fg")), ("background", "transparent")],
            )
            + inline_rule(
                f"{modifier}:active", [("background", var("--color-button-ghost-bg-pressed"))]
            )
            + "\n"
        )

    def disabled_selectors(self) -> str:
        """Comma-joined disabled selectors for every solid variant, in table order."""
        return ",\n".join(
            f"{self.block}--{variant}:disabled" for variant in self.table.solid_variants
        )

    def disabled(self) -> str:
        b = self.block
        return "".join(
            [
                block_rule(f"{b}:disabled", [("cursor", "not-allowed"), ("opacity", "0.6")]),
                block_rule(
                    self.disabled_selectors(),
                    [
                        ("color", var("--color-button-disabled-fg")),
                        ("background", var("--color-button-disabled-bg")),
                    ],
                ),
                block_rule(
                    f"{b}--outline:disabled",
                    [
                        ("color", var("--color-button-outline-fg-disabled")),
                        ("border-color", var("--color-button-outline-border-disabled")),
                        ("background", "transparent"),
                    ],
                ),
                block_rule(
                    f"{b}--ghost:disabled",
                    [
                        ("color", var("--color-button-ghost-fg-disabled")),
                        ("background", "transparent"),
                    ],
                ),
                "\n",
            ]
        )

    def icon_only(self) -> str:
        b = self.block
        rules = [inline_rule(f"{b}--icon-only", [("padding", "0")])]
        for size in self.table.sizes:
            rules.append(
                inline_rule(
                    f"{b}--icon-only{b}--{size.name}",
                    [("width", var(f"--button-height-{size.size_token}"))],
                )
            )
        return "".join(rules) + "\n"

    def svg_sizes(self) -> str:
        rules = [
            inline_rule(f"{self.block}--{size.name} svg", icon_size_declarations(size))
            for size in self.table.sizes
        ]
        return "".join(rules) + "\n"

    def loading(self) -> str:
        return (
            block_rule(
                f"{self.block}--loading", [("pointer-events", "none"), ("opacity", "0.6")]
            )
            + "\n"
        )

    def flex_grow(self) -> str:
        return block_rule(f"{self.block}--flex-grow", [("flex-grow", "1")])


def generate_button_css(table: ButtonTable | None = None) -> str:
    """Generate the button stylesheet (default: shipped library table)."""
    return ButtonStylesheetBuilder(table or load_button_table()).build()
