"""
Token Validator - pre-flight checks over a token set.

Validates:
- Every reference points at a token that exists in the merged tree
- Shadow composites carry all of x, y, blur, spread and color
- Text style composites carry fontSize, lineHeight and fontWeight
- Top-level groups are not defined by two documents
- No two token paths produce the same custom property name
- Reports locales dropped by line-height flattening (informational)

Validation never changes build output. In strict mode every problem
is reported as an error and the build refuses to write anything.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from chuk_design_tokens.constants import TYPOGRAPHY_PARTS
from chuk_design_tokens.models.token import (
    LocaleLineHeight,
    ShadowComposite,
    TokenTree,
    TypographyStyleComposite,
    iter_references,
    iter_tokens,
)
from chuk_design_tokens.tokens.merge import find_collisions
from chuk_design_tokens.tokens.naming import css_variable_name


class ValidationSeverity(str, Enum):
    """How much a validation issue matters to the build."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def log_level(self) -> int:
        """Logging level the build reports this severity at."""
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    ValidationSeverity.ERROR: logging.ERROR,
    ValidationSeverity.WARNING: logging.WARNING,
    ValidationSeverity.INFO: logging.DEBUG,
}


@dataclass(frozen=True)
class ValidationIssue:
    """One finding, located by dotted token path or top-level group name."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        where = f" ({self.location})" if self.location else ""
        return f"{self.severity.value.upper()} {self.code}{where}: {self.message}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


@dataclass
class ValidationResult:
    """
    Issues found in a token set, in the order the checks ran.

    ``strict`` decides how problems are recorded: as warnings that let
    the build write its output, or as errors that stop it.
    """

    strict: bool = False
    issues: list[ValidationIssue] = field(default_factory=list)

    def add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        location: str | None = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, code, message, location))

    def problem(self, code: str, message: str, location: str | None = None) -> None:
        """Record something that makes the output suspect."""
        severity = ValidationSeverity.ERROR if self.strict else ValidationSeverity.WARNING
        self.add(severity, code, message, location)

    def note(self, code: str, message: str, location: str | None = None) -> None:
        """Record something worth knowing that never blocks a build."""
        self.add(ValidationSeverity.INFO, code, message, location)

    def of(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.of(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.of(ValidationSeverity.WARNING)

    @property
    def is_valid(self) -> bool:
        """A token set is buildable unless an error was recorded."""
        return not self.errors

    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    def summary(self) -> str:
        return ", ".join(
            f"{len(self.of(severity))} {severity.value}(s)" for severity in ValidationSeverity
        )

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Token set is clean: no issues found"
        lines = [str(issue) for issue in self.issues]
        lines.append(self.summary())
        return "\n".join(lines)


class TokenValidator:
    """Validates loaded and merged token trees."""

    def __init__(self, strict: bool = False):
        """
        Initialize the validator.

        Args:
            strict: Report problems as errors instead of warnings
        """
        self.strict = strict

    def validate(
        self,
        documents: Mapping[str, TokenTree],
        merged: TokenTree,
    ) -> ValidationResult:
        """
        Validate a token set.

        Args:
            documents: Per-category trees as loaded (before flattening)
            merged: The flattened, merged tree that will be emitted

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult(strict=self.strict)

        self._validate_composites(documents, result)
        self._validate_collisions(documents, result)
        self._validate_names(merged, result)
        self._validate_references(merged, result)

        return result

    def _validate_composites(
        self, documents: Mapping[str, TokenTree], result: ValidationResult
    ) -> None:
        """Check composite shapes in the raw documents."""
        for name, document in documents.items():
            for path, token in iter_tokens(document):
                location = ".".join(path)
                value = token.value

                if isinstance(value, ShadowComposite):
                    missing = value.missing_fields()
                    if missing:
                        result.problem(
                            "MALFORMED_SHADOW",
                            f"Shadow in {name} is missing {', '.join(missing)}",
                            location,
                        )

                elif isinstance(value, TypographyStyleComposite):
                    missing = [
                        field_name
                        for field_name, *_ in TYPOGRAPHY_PARTS
                        if value.get_part(field_name) is None
                    ]
                    if missing:
                        result.problem(
                            "MALFORMED_TYPOGRAPHY",
                            f"Text style in {name} is missing {', '.join(missing)}",
                            location,
                        )

                elif isinstance(value, LocaleLineHeight) and value.dropped_locales:
                    result.note(
                        "LOCALE_DROPPED",
                        f"Only 'en' is written; dropping {', '.join(value.dropped_locales)}",
                        location,
                    )

    def _validate_collisions(
        self, documents: Mapping[str, TokenTree], result: ValidationResult
    ) -> None:
        """Check that documents define disjoint top-level groups."""
        for key, owners in find_collisions(documents).items():
            result.problem(
                "CATEGORY_COLLISION",
                f"Defined by {', '.join(owners)}; the last definition wins",
                key,
            )

    def _validate_names(self, merged: TokenTree, result: ValidationResult) -> None:
        """Check that no two paths share a custom property name."""
        seen: dict[str, str] = {}
        for path, _ in iter_tokens(merged):
            dotted = ".".join(path)
            name = css_variable_name(path)
            if name in seen:
                result.problem(
                    "NAME_COLLISION",
                    f"{name} is produced by both {seen[name]} and {dotted}",
                    dotted,
                )
            else:
                seen[name] = dotted

    def _validate_references(self, merged: TokenTree, result: ValidationResult) -> None:
        """Check that every reference resolves to a token."""
        known = {".".join(path) for path, _ in iter_tokens(merged)}
        for path, token in iter_tokens(merged):
            for reference in iter_references(token.value):
                if reference not in known:
                    result.problem(
                        "DANGLING_REFERENCE",
                        f"Reference {{{reference}}} does not resolve to a token",
                        ".".join(path),
                    )
