"""
Component stylesheets generated from declarative tables.
"""

from chuk_design_tokens.components.button import (
    ButtonStylesheetBuilder,
    generate_button_css,
    load_button_table,
)

__all__ = [
    "ButtonStylesheetBuilder",
    "generate_button_css",
    "load_button_table",
]
