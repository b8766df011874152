"""
Exceptions raised by the token pipeline.

Everything here is fatal to a build run: no partial output should be
considered valid once one of these is raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_design_tokens.tokens.validator import ValidationResult


class TokenBuildError(Exception):
    """Base class for build failures."""


class TokenFileNotFoundError(TokenBuildError, FileNotFoundError):
    """A token document required by the build does not exist."""


class TokenParseError(TokenBuildError, ValueError):
    """A token document exists but could not be parsed."""


class TokenValidationError(TokenBuildError):
    """Strict validation found problems in the token tree."""

    def __init__(self, message: str, result: ValidationResult):
        super().__init__(message)
        self.result = result
