"""
CSS emitters - the end of the pipeline.

All emitters are deterministic: same tree -> same bytes.
"""

from chuk_design_tokens.emitters.palette import emit_palette_variables
from chuk_design_tokens.emitters.typography import emit_typography_classes
from chuk_design_tokens.emitters.variables import emit_variables, format_token_value

__all__ = [
    "emit_palette_variables",
    "emit_typography_classes",
    "emit_variables",
    "format_token_value",
]
