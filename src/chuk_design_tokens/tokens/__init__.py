"""
Token processing - loading, flattening, merging and validation.

Token documents are loaded per category, composite values are flattened
into scalar tokens, and the categories are merged into one tree.
"""

from chuk_design_tokens.tokens.flatten import (
    FlattenResult,
    flatten_documents,
    flatten_line_heights,
    flatten_shadows,
    flatten_typography_styles,
)
from chuk_design_tokens.tokens.loader import TokenLoader, read_document
from chuk_design_tokens.tokens.merge import find_collisions, merge_documents
from chuk_design_tokens.tokens.naming import (
    css_variable_name,
    kebab_case,
    reference_to_var,
    replace_references,
)
from chuk_design_tokens.tokens.validator import (
    TokenValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)

__all__ = [
    "FlattenResult",
    "TokenLoader",
    "TokenValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "css_variable_name",
    "find_collisions",
    "flatten_documents",
    "flatten_line_heights",
    "flatten_shadows",
    "flatten_typography_styles",
    "kebab_case",
    "merge_documents",
    "read_document",
    "reference_to_var",
    "replace_references",
]
