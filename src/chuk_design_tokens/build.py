"""
Token build - the full pipeline from token documents to CSS files.

The pipeline:
    token documents → token trees (tagged values)
    → flattened trees (+ raw text styles kept aside)
    → merged tree
    → variables.css / typography.css / components/button.css

Output files are fully overwritten on every run. The same inputs always
produce byte-identical outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chuk_design_tokens.components.button import generate_button_css, load_button_table
from chuk_design_tokens.constants import (
    BUTTON_FILE,
    COMPONENTS_DIR,
    PALETTE_FILE,
    TYPOGRAPHY_FILE,
    VARIABLES_FILE,
    ErrorMessages,
    SuccessMessages,
)
from chuk_design_tokens.emitters.palette import emit_palette_variables
from chuk_design_tokens.emitters.typography import count_text_styles, emit_typography_classes
from chuk_design_tokens.emitters.variables import emit_variables
from chuk_design_tokens.exceptions import TokenBuildError, TokenValidationError
from chuk_design_tokens.models.config import BuildConfig
from chuk_design_tokens.models.token import TokenTree, iter_tokens
from chuk_design_tokens.tokens.flatten import FlattenResult, flatten_documents
from chuk_design_tokens.tokens.loader import TokenLoader, read_document
from chuk_design_tokens.tokens.merge import merge_documents
from chuk_design_tokens.tokens.validator import TokenValidator, ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class TokenSet:
    """Everything known about the tokens before any file is written."""

    documents: dict[str, TokenTree]
    flattened: FlattenResult
    merged: TokenTree
    validation: ValidationResult

    @property
    def token_count(self) -> int:
        return sum(1 for _ in iter_tokens(self.merged))


@dataclass
class BuildResult:
    """Result of a build run."""

    outputs: dict[str, Path]
    token_count: int
    class_count: int
    validation: ValidationResult
    css: dict[str, str] = field(default_factory=dict, repr=False)


class TokenBuilder:
    """
    Runs the token pipeline for one configuration.

    Nothing is cached: every call re-reads the token documents.
    """

    def __init__(self, config: BuildConfig):
        """
        Initialize the builder.

        Args:
            config: Build configuration
        """
        self.config = config
        self.loader = TokenLoader(config.tokens_dir)
        self.validator = TokenValidator(strict=config.strict)

    def load(self) -> TokenSet:
        """Load, flatten, merge and validate the token documents."""
        documents = self.loader.load_all(self.config.categories)
        flattened = flatten_documents(documents)
        merged = merge_documents(flattened.documents)
        validation = self.validator.validate(documents, merged)
        return TokenSet(
            documents=documents,
            flattened=flattened,
            merged=merged,
            validation=validation,
        )

    def render(self, tokens: TokenSet) -> dict[str, str]:
        """
        Render every output file.

        Returns:
            Mapping of output path (relative to build_dir) to CSS text,
            in write order
        """
        css: dict[str, str] = {VARIABLES_FILE: emit_variables(tokens.merged)}

        if tokens.flattened.raw_styles is not None:
            css[TYPOGRAPHY_FILE] = emit_typography_classes(tokens.flattened.raw_styles)

        try:
            table = load_button_table(self.config.button_table)
        except (OSError, ValueError) as e:
            raise TokenBuildError(f"Could not load button table: {e}") from e
        css[f"{COMPONENTS_DIR}/{BUTTON_FILE}"] = generate_button_css(table)

        if self.config.palette_file is not None:
            palette = read_document(self.config.palette_file)
            css[PALETTE_FILE] = emit_palette_variables(
                palette, source=self.config.palette_file.name
            )

        return css

    def build(self) -> BuildResult:
        """
        Run the full pipeline and write the output files.

        Raises:
            TokenBuildError: an input is missing or an output cannot be written
            TokenValidationError: strict mode and validation found problems
        """
        tokens = self.load()
        self._report(tokens.validation)
        if not tokens.validation.is_valid:
            raise TokenValidationError(
                ErrorMessages.VALIDATION_FAILED.format(count=len(tokens.validation.errors)),
                tokens.validation,
            )

        css = self.render(tokens)
        outputs: dict[str, Path] = {}
        for relative, text in css.items():
            path = self.config.build_dir / relative
            self._ensure_dir(path.parent)
            path.write_text(text, encoding="utf-8")
            outputs[relative] = path
            logger.info(SuccessMessages.FILE_WRITTEN.format(path=path))

        class_count = count_text_styles(tokens.flattened.raw_styles)
        logger.info(
            SuccessMessages.BUILD_COMPLETE.format(
                tokens=tokens.token_count, classes=class_count, path=self.config.build_dir
            )
        )
        return BuildResult(
            outputs=outputs,
            token_count=tokens.token_count,
            class_count=class_count,
            validation=tokens.validation,
            css=css,
        )

    def _ensure_dir(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TokenBuildError(
                ErrorMessages.OUTPUT_DIR_FAILED.format(path=directory, error=e)
            ) from e

    def _report(self, validation: ValidationResult) -> None:
        for issue in validation.issues:
            logger.log(issue.severity.log_level, str(issue))


def build_tokens(config: BuildConfig | None = None) -> BuildResult:
    """Build with the given config (default: discovered from cwd)."""
    return TokenBuilder(config or BuildConfig.discover()).build()
