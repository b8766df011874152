"""
Tests for the CSS emitters.

Tests cover:
- Custom property emission, references and determinism
- Typography utility classes from pre-flatten styles
- Palette dumps
"""

from chuk_design_tokens.constants import TYPOGRAPHY_HEADER, VARIABLES_HEADER
from chuk_design_tokens.emitters.palette import emit_palette_variables, palette_declarations
from chuk_design_tokens.emitters.typography import count_text_styles, emit_typography_classes
from chuk_design_tokens.emitters.variables import (
    collect_declarations,
    emit_variables,
    format_token_value,
)
from chuk_design_tokens.models.token import TokenReference, parse_tree, parse_value
from chuk_design_tokens.tokens.flatten import flatten_documents
from chuk_design_tokens.tokens.merge import merge_documents


def _merged(documents):
    parsed = {name: parse_tree(doc) for name, doc in documents.items()}
    result = flatten_documents(parsed)
    return merge_documents(result.documents), result.raw_styles


class TestFormatTokenValue:
    """Tests for value rendering."""

    def test_reference(self):
        """References become var() expressions."""
        assert format_token_value(TokenReference("fontSize.t10")) == "var(--font-size-t10)"

    def test_embedded_reference(self):
        """Embedded references are rewritten in place."""
        value = "0px 4px 8px 0px {color.base.black}"
        assert format_token_value(value) == "0px 4px 8px 0px var(--color-base-black)"

    def test_scalars(self):
        """Numbers render without Python artifacts."""
        assert format_token_value(700) == "700"
        assert format_token_value(1.0) == "1"
        assert format_token_value("8px") == "8px"

    def test_unflattened_shadow(self):
        """A shadow outside the shadow group still renders as shorthand."""
        shadow = parse_value({"x": 0, "y": 1, "blur": 2, "spread": 0, "color": "{c.x}"})
        assert format_token_value(shadow) == "0px 1px 2px 0px var(--c-x)"


class TestEmitVariables:
    """Tests for variables.css generation."""

    def test_full_output(self, sample_documents):
        """Every leaf becomes one custom property, in tree order."""
        merged, _ = _merged(sample_documents)
        css = emit_variables(merged)

        assert css == VARIABLES_HEADER + (
            ":root {\n"
            "  --color-base-white: #ffffff;\n"
            "  --color-base-black: #000000;\n"
            "  --color-button-brand-solid-bg: var(--color-base-black);\n"
            "  --dimension-40: 40px;\n"
            "  --spacing-m-plus: 14px;\n"
            "  --font-size-t10: 13px;\n"
            "  --font-weight-bold: 700;\n"
            "  --line-height-body-t10: 1.4;\n"
            "  --styles-heading-title1-font-size: var(--font-size-t10);\n"
            "  --styles-heading-title1-line-height: var(--line-height-body-t10);\n"
            "  --styles-heading-title1-font-weight: var(--font-weight-bold);\n"
            "  --styles-heading-caption: 12px;\n"
            "  --shadow-sm: 1px 2px 3px 4px #000;\n"
            "  --shadow-md: 0px 4px 8px 0px var(--color-base-black);\n"
            "  --border-radius-m: 8px;\n"
            "  --border-thin: 1px;\n"
            "}\n"
        )

    def test_no_dropped_locale_in_output(self, sample_documents):
        """Only en line heights are emitted."""
        merged, _ = _merged(sample_documents)
        assert "1.6" not in emit_variables(merged)

    def test_without_header(self):
        """header=False gives the bare :root block."""
        tree = parse_tree({"a": {"value": "1"}})
        assert emit_variables(tree, header=False) == ":root {\n  --a: 1;\n}\n"

    def test_comment(self):
        """Token comments are appended to the declaration."""
        tree = parse_tree({"a": {"value": "1", "comment": "note"}})
        assert "  --a: 1; /* note */\n" in emit_variables(tree)

    def test_no_duplicate_declarations(self):
        """Two paths with the same CSS name produce one declaration."""
        tree = parse_tree({"fontSize": {"value": "1"}, "font-size": {"value": "2"}})
        declarations = collect_declarations(tree)
        assert list(declarations) == ["--font-size"]
        assert declarations["--font-size"] == ("2", None)
        assert emit_variables(tree).count("--font-size:") == 1

    def test_deterministic(self, sample_documents):
        """Same input, same bytes."""
        first, _ = _merged(sample_documents)
        second, _ = _merged(sample_documents)
        assert emit_variables(first) == emit_variables(second)


class TestTypographyClasses:
    """Tests for typography.css generation."""

    def test_class_per_style(self, sample_documents):
        """Each composite style gets a class referencing its parts."""
        _, raw_styles = _merged(sample_documents)
        css = emit_typography_classes(raw_styles)

        assert css == TYPOGRAPHY_HEADER + (
            ".heading-title1 {\n"
            "  font-size: var(--font-size-t10);\n"
            "  line-height: var(--line-height-body-t10);\n"
            "  font-weight: var(--font-weight-bold);\n"
            "}\n\n"
        )

    def test_non_composites_skipped(self, sample_documents):
        """Plain tokens in the styles group get no class."""
        _, raw_styles = _merged(sample_documents)
        assert ".heading-caption" not in emit_typography_classes(raw_styles)
        assert count_text_styles(raw_styles) == 1

    def test_category_order(self):
        """Classes are grouped by category in document order."""
        styles = parse_tree(
            {
                "title": {
                    "a": {"value": {"fontSize": "{f.a}", "lineHeight": "{l.a}", "fontWeight": "{w.a}"}},
                    "b": {"value": {"fontSize": "{f.b}", "lineHeight": "{l.b}", "fontWeight": "{w.b}"}},
                },
                "body": {
                    "c": {"value": {"fontSize": "{f.c}", "lineHeight": "{l.c}", "fontWeight": "{w.c}"}},
                },
            }
        )
        css = emit_typography_classes(styles)
        assert css.index(".title-a") < css.index(".title-b") < css.index(".body-c")

    def test_count_without_styles(self):
        """No styles means no classes."""
        assert count_text_styles(None) == 0

    def test_locale_line_height_part(self):
        """A per-locale lineHeight inside a style writes only the en value."""
        styles = parse_tree(
            {
                "body": {
                    "a": {
                        "value": {
                            "fontSize": "{f.a}",
                            "lineHeight": {"en": "1.4", "ko": "1.6"},
                            "fontWeight": "{w.a}",
                        }
                    }
                }
            }
        )
        css = emit_typography_classes(styles)
        assert "  line-height: 1.4;\n" in css
        assert "LocaleLineHeight" not in css
        assert "1.6" not in css

    def test_parts_render_like_variables(self):
        """Embedded references and literals match the variable emitter."""
        styles = parse_tree(
            {
                "body": {
                    "a": {
                        "value": {
                            "fontSize": "calc({f.a} * 2)",
                            "lineHeight": 1.0,
                            "fontWeight": {"weight": 700},
                        }
                    }
                }
            }
        )
        css = emit_typography_classes(styles)
        assert "  font-size: calc(var(--f-a) * 2);\n" in css
        assert "  line-height: 1;\n" in css
        assert '  font-weight: {"weight": 700};\n' in css


class TestPalette:
    """Tests for the palette dump."""

    def test_nested_keys(self):
        """Nested keys are joined under the prefix."""
        palette = {"green": {"50": "#e6f9ee", "500": "#06c755"}, "white": "#fff"}
        assert palette_declarations(palette) == [
            "--palette-green-50: #e6f9ee;",
            "--palette-green-500: #06c755;",
            "--palette-white: #fff;",
        ]

    def test_output(self):
        """The dump is a single :root block with a source header."""
        css = emit_palette_variables({"white": "#fff"}, source="palette.json")
        assert css == (
            "/* Auto-generated from palette.json */\n"
            ":root {\n"
            "  --palette-white: #fff;\n"
            "}\n"
        )
