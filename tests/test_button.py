"""
Tests for the button component stylesheet.

Tests cover:
- ButtonTable model validation and YAML loading
- Group content for sizes, variants and states
- Fixed group ordering and table-driven regeneration
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_design_tokens.components.button import (
    DEFAULT_TABLE_PATH,
    ButtonStylesheetBuilder,
    generate_button_css,
    load_button_table,
)
from chuk_design_tokens.constants import BUTTON_HEADER
from chuk_design_tokens.models.component import ButtonSize, ButtonTable, IconPadding


@pytest.fixture
def table() -> ButtonTable:
    """The shipped button table."""
    return load_button_table()


@pytest.fixture
def css(table: ButtonTable) -> str:
    """The stylesheet generated from the shipped table."""
    return ButtonStylesheetBuilder(table).build()


def _size(name: str, tk: str) -> ButtonSize:
    return ButtonSize(
        name=name,
        size_token=tk,
        typography_style="title-2xs-bold",
        icon_size_token="s",
        icon_padding=IconPadding(icon_side="--button-padding-m", text_side="--button-padding-l"),
    )


class TestButtonTable:
    """Tests for the table model."""

    def test_default_table(self, table: ButtonTable):
        """The shipped table lists five sizes and six solid variants."""
        assert DEFAULT_TABLE_PATH.exists()
        assert [s.name for s in table.sizes] == ["xsmall", "small", "medium", "large", "xlarge"]
        assert table.solid_variants == [
            "brand-solid",
            "brand-weak",
            "neutral-solid",
            "neutral-weak",
            "critical-solid",
            "critical-weak",
        ]
        assert table.block == ".ribbon-button"
        assert table.default.size_token == "m"

    def test_aliases(self, table: ButtonTable):
        """YAML keys map onto model fields."""
        xsmall = table.get_size("xsmall")
        assert xsmall.size_token == "xs"
        assert xsmall.typography_style == "title-4xs-bold"
        assert xsmall.icon_padding.icon_side == "--button-padding-xs"
        assert xsmall.icon_padding.text_side == "--spacing-m-plus"

    def test_padding_prefix_added(self):
        """Property names without -- are accepted."""
        padding = IconPadding(iconSide="button-padding-s", textSide="--button-padding-xl")
        assert padding.icon_side == "--button-padding-s"

    def test_unknown_default_size(self):
        """The default size must be in the table."""
        with pytest.raises(ValidationError):
            ButtonTable(sizes=[_size("small", "s")], solid_variants=["brand-solid"])

    def test_duplicate_sizes(self):
        """Size names must be unique."""
        with pytest.raises(ValidationError):
            ButtonTable(
                sizes=[_size("medium", "m"), _size("medium", "l")],
                solid_variants=["brand-solid"],
            )

    def test_block_must_be_class(self):
        """The block is a class selector."""
        with pytest.raises(ValidationError):
            ButtonTable(block="button", sizes=[_size("medium", "m")], solid_variants=["brand-solid"])

    def test_get_size_missing(self, table: ButtonTable):
        """Unknown sizes raise KeyError."""
        with pytest.raises(KeyError):
            table.get_size("huge")

    def test_from_yaml(self, temp_dir: Path):
        """Tables load from YAML files."""
        path = temp_dir / "button.yaml"
        path.write_text(
            "block: .btn\n"
            "defaultSize: only\n"
            "defaultVariant: primary\n"
            "sizes:\n"
            "  - name: only\n"
            "    sizeToken: m\n"
            "    typographyStyleName: body-bold\n"
            "    iconSizeToken: s\n"
            "    iconPaddingTokens: {iconSide: '--a', textSide: '--b'}\n"
            "solidVariants: [primary]\n"
        )
        table = ButtonTable.from_yaml(path)
        assert table.block == ".btn"
        assert table.default.name == "only"


class TestButtonStylesheet:
    """Tests for the generated stylesheet."""

    def test_header(self, css: str):
        """The stylesheet starts with the generator banner."""
        assert css.startswith(BUTTON_HEADER)

    def test_icon_container_first(self, css: str):
        """The icon container rule comes right after the header."""
        assert css[len(BUTTON_HEADER) :].startswith(
            ".ribbon-button__icon {\n"
            "  display: flex;\n"
            "  align-items: center;\n"
            "  justify-content: center;\n"
            "  flex-shrink: 0;\n"
            "}\n\n"
        )

    def test_base_rule(self, css: str):
        """The base rule uses the medium size and brand-solid colors."""
        assert (
            ".ribbon-button {\n"
            "  display: inline-flex;\n"
            "  align-items: center;\n"
            "  justify-content: center;\n"
            "  box-sizing: border-box;\n"
            "  height: var(--button-height-m);\n"
            "  padding: 0 var(--button-padding-m);\n"
            "  font-size: var(--styles-title-2xs-bold-font-size);\n"
            "  line-height: var(--styles-title-2xs-bold-line-height);\n"
            "  font-weight: var(--styles-title-2xs-bold-font-weight);\n"
            "  border-radius: var(--button-radius-m);\n"
            "  border: none;\n"
            "  cursor: pointer;\n"
            "  transition: all 0.2s ease;\n"
            "  gap: var(--button-gap-m);\n"
            "  color: var(--color-button-brand-solid-fg);\n"
            "  background: var(--color-button-brand-solid-bg);\n"
            "}\n"
            ".ribbon-button:active {\n"
            "  background: var(--color-button-brand-solid-bg-pressed);\n"
            "}\n\n"
        ) in css

    def test_xsmall_group(self, css: str):
        """A size group has its modifier, icon sizes and icon paddings."""
        assert (
            "/* ── Size: xsmall ── */\n"
            ".ribbon-button--xsmall {\n"
            "  height: var(--button-height-xs);\n"
            "  padding: 0 var(--button-padding-xs);\n"
            "  font-size: var(--styles-title-4xs-bold-font-size);\n"
            "  line-height: var(--styles-title-4xs-bold-line-height);\n"
            "  font-weight: var(--styles-title-4xs-bold-font-weight);\n"
            "  border-radius: var(--button-radius-xs);\n"
            "  gap: var(--button-gap-xs);\n"
            "}\n"
            ".ribbon-button--xsmall .ribbon-button__icon "
            "{ width: var(--icon-size-xs); height: var(--icon-size-xs); }\n"
            ".ribbon-button--xsmall .ribbon-button__icon svg "
            "{ width: var(--icon-size-xs); height: var(--icon-size-xs); }\n"
            ".ribbon-button--xsmall.ribbon-button--icon-left "
            "{ padding: 0 var(--spacing-m-plus) 0 var(--button-padding-xs); }\n"
            ".ribbon-button--xsmall.ribbon-button--icon-right "
            "{ padding: 0 var(--button-padding-xs) 0 var(--spacing-m-plus); }\n\n"
        ) in css

    def test_small_icon_left(self, css: str):
        """The small icon-left padding puts textSide first."""
        assert (
            ".ribbon-button--small.ribbon-button--icon-left "
            "{ padding: 0 var(--button-padding-xl) 0 var(--button-padding-s); }\n"
        ) in css

    def test_solid_variant(self, css: str):
        """Each solid variant has colors and a pressed state."""
        assert (
            ".ribbon-button--critical-weak {\n"
            "  color: var(--color-button-critical-weak-fg);\n"
            "  background: var(--color-button-critical-weak-bg);\n"
            "}\n"
            ".ribbon-button--critical-weak:active "
            "{ background: var(--color-button-critical-weak-bg-pressed); }\n\n"
        ) in css

    def test_outline_and_ghost(self, css: str):
        """Outline has a border; ghost does not."""
        assert (
            "  border: var(--border-thin) solid var(--color-button-outline-border);\n" in css
        )
        assert (
            ".ribbon-button--ghost {\n"
            "  color: var(--color-button-ghost-fg);\n"
            "  background: transparent;\n"
            "}\n"
        ) in css

    def test_disabled_selector_list(self, css: str):
        """All six solid variants share one disabled block, in table order."""
        assert (
            ".ribbon-button--brand-solid:disabled,\n"
            ".ribbon-button--brand-weak:disabled,\n"
            ".ribbon-button--neutral-solid:disabled,\n"
            ".ribbon-button--neutral-weak:disabled,\n"
            ".ribbon-button--critical-solid:disabled,\n"
            ".ribbon-button--critical-weak:disabled {\n"
            "  color: var(--color-button-disabled-fg);\n"
            "  background: var(--color-button-disabled-bg);\n"
            "}\n"
        ) in css

    def test_outline_ghost_disabled(self, css: str):
        """Outline and ghost have dedicated disabled rules."""
        assert (
            ".ribbon-button--outline:disabled {\n"
            "  color: var(--color-button-outline-fg-disabled);\n"
            "  border-color: var(--color-button-outline-border-disabled);\n"
            "  background: transparent;\n"
            "}\n"
            ".ribbon-button--ghost:disabled {\n"
            "  color: var(--color-button-ghost-fg-disabled);\n"
            "  background: transparent;\n"
            "}\n\n"
        ) in css

    def test_icon_only(self, css: str):
        """Icon-only removes padding and squares every size."""
        assert ".ribbon-button--icon-only { padding: 0; }\n" in css
        assert (
            ".ribbon-button--icon-only.ribbon-button--xlarge "
            "{ width: var(--button-height-xl); }\n"
        ) in css

    def test_svg_sizes(self, css: str):
        """Every size sizes its embedded svg."""
        assert (
            ".ribbon-button--large svg { width: var(--icon-size-m); height: var(--icon-size-m); }\n"
        ) in css

    def test_ends_with_loading_and_flex_grow(self, css: str):
        """Loading and flex-grow close the stylesheet."""
        assert css.endswith(
            ".ribbon-button--loading {\n"
            "  pointer-events: none;\n"
            "  opacity: 0.6;\n"
            "}\n\n"
            ".ribbon-button--flex-grow {\n"
            "  flex-grow: 1;\n"
            "}\n"
        )

    def test_group_order(self, css: str):
        """Groups appear in their fixed order."""
        markers = [
            ".ribbon-button__icon {",
            ".ribbon-button {",
            "/* ── Size: xsmall ── */",
            "/* ── Size: xlarge ── */",
            ".ribbon-button--brand-solid {",
            ".ribbon-button--critical-weak {",
            ".ribbon-button--outline {",
            ".ribbon-button--ghost {",
            ".ribbon-button:disabled {",
            ".ribbon-button--icon-only {",
            ".ribbon-button--xsmall svg {",
            ".ribbon-button--loading {",
            ".ribbon-button--flex-grow {",
        ]
        positions = [css.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_deterministic(self, table: ButtonTable):
        """Same table, same bytes."""
        assert generate_button_css(table) == generate_button_css(table)
        assert generate_button_css() == generate_button_css(table)

    def test_table_change_regenerates_groups(self, table: ButtonTable):
        """Adding a size and variant updates every dependent group."""
        extended = table.model_copy(
            update={
                "sizes": [*table.sizes, _size("huge", "xxl")],
                "solid_variants": [*table.solid_variants, "accent-solid"],
            }
        )
        css = generate_button_css(extended)

        assert "/* ── Size: huge ── */\n" in css
        assert ".ribbon-button--icon-only.ribbon-button--huge { width: var(--button-height-xxl); }" in css
        assert ".ribbon-button--huge svg {" in css
        assert ".ribbon-button--accent-solid {\n" in css
        assert ".ribbon-button--critical-weak:disabled,\n.ribbon-button--accent-solid:disabled {\n" in css
