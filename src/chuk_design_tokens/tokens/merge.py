"""
Token merger - unions per-category trees into one token tree.

Categories are expected to use disjoint top-level names. When two
documents do define the same top-level key, the later document wins
(its value replaces the earlier one at the earlier position) and a
warning is logged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chuk_design_tokens.models.token import TokenTree

logger = logging.getLogger(__name__)


def find_collisions(documents: Mapping[str, TokenTree]) -> dict[str, list[str]]:
    """
    Find top-level keys defined by more than one document.

    Returns:
        Mapping of key to the documents defining it, in load order
    """
    owners: dict[str, list[str]] = {}
    for name, document in documents.items():
        for key in document:
            owners.setdefault(key, []).append(name)
    return {key: names for key, names in owners.items() if len(names) > 1}


def merge_documents(documents: Mapping[str, TokenTree]) -> TokenTree:
    """Merge documents in order into a single tree (last write wins)."""
    merged: TokenTree = {}
    for name, document in documents.items():
        for key, node in document.items():
            if key in merged:
                logger.warning(f"Top-level group '{key}' redefined by {name}; last definition wins")
            merged[key] = node
    return merged
