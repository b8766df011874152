"""
Token loader - reads per-category token documents into token trees.

Each category lives in its own file inside the tokens directory:

    tokens/
        color.json
        typography.json
        shadow.yaml
        ...

JSON and YAML documents are both accepted. Documents are read fresh on
every call; nothing is cached between builds.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from chuk_design_tokens.constants import (
    DEFAULT_CATEGORIES,
    TOKEN_FILE_SUFFIXES,
    ErrorMessages,
)
from chuk_design_tokens.exceptions import TokenFileNotFoundError, TokenParseError
from chuk_design_tokens.models.token import TokenTree, parse_tree

logger = logging.getLogger(__name__)


def read_document(path: Path) -> dict[str, Any]:
    """
    Read a JSON or YAML document and return its top-level mapping.

    Raises:
        TokenFileNotFoundError: path does not exist
        TokenParseError: content is not valid JSON/YAML or not a mapping
    """
    if not path.is_file():
        raise TokenFileNotFoundError(f"Token file not found: {path}")

    file_format = TOKEN_FILE_SUFFIXES.get(path.suffix.lower(), "json")
    try:
        with open(path, encoding="utf-8") as f:
            if file_format == "yaml":
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise TokenParseError(ErrorMessages.TOKEN_FILE_INVALID.format(path=path, error=e)) from e
    except OSError as e:
        raise TokenFileNotFoundError(
            ErrorMessages.TOKEN_FILE_INVALID.format(path=path, error=e)
        ) from e

    if not isinstance(data, dict):
        raise TokenParseError(ErrorMessages.TOKEN_FILE_NOT_MAPPING.format(path=path))
    return data


class TokenLoader:
    """
    Discovers and loads token documents by category name.

    A category 'color' is looked up as color.json, then color.yaml,
    then color.yml.
    """

    def __init__(self, tokens_dir: Path):
        """
        Initialize the loader.

        Args:
            tokens_dir: Directory holding one document per category
        """
        self.tokens_dir = tokens_dir

    def find(self, category: str) -> Path | None:
        """Return the document path for a category, or None if absent."""
        for suffix in TOKEN_FILE_SUFFIXES:
            path = self.tokens_dir / f"{category}{suffix}"
            if path.is_file():
                return path
        return None

    def list_categories(self) -> list[str]:
        """List categories with a document in the tokens directory."""
        if not self.tokens_dir.is_dir():
            return []
        names = {
            path.stem
            for path in self.tokens_dir.iterdir()
            if path.is_file() and path.suffix.lower() in TOKEN_FILE_SUFFIXES
        }
        return sorted(names)

    def load_raw(self, category: str) -> dict[str, Any]:
        """Load a category document as plain data."""
        path = self.find(category)
        if path is None:
            raise TokenFileNotFoundError(
                ErrorMessages.TOKEN_FILE_NOT_FOUND.format(category=category, path=self.tokens_dir)
            )
        logger.debug(f"Loading {category} tokens from {path}")
        return read_document(path)

    def load(self, category: str) -> TokenTree:
        """Load a category document as a parsed token tree."""
        return parse_tree(self.load_raw(category))

    def load_all(self, categories: Iterable[str] | None = None) -> dict[str, TokenTree]:
        """
        Load several categories, preserving the requested order.

        Args:
            categories: Category names (default: every standard category)

        Returns:
            Mapping of category name to token tree

        Any missing or unreadable document aborts the whole load.
        """
        documents: dict[str, TokenTree] = {}
        for category in categories if categories is not None else DEFAULT_CATEGORIES:
            documents[category] = self.load(category)
        return documents
