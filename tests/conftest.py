"""
Pytest configuration and shared fixtures.
"""

import copy
import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

SAMPLE_DOCUMENTS: dict[str, dict[str, Any]] = {
    "color": {
        "color": {
            "base": {
                "white": {"value": "#ffffff", "type": "color"},
                "black": {"value": "#000000", "type": "color"},
            },
            "button": {
                "brand-solid-bg": {"value": "{color.base.black}", "type": "color"},
            },
        }
    },
    "dimension": {
        "dimension": {
            "40": {"value": "40px", "type": "dimension"},
        }
    },
    "spacing": {
        "spacing": {
            "mPlus": {"value": "14px", "type": "spacing"},
        }
    },
    "typography": {
        "fontSize": {
            "t10": {"value": "13px", "type": "fontSizes"},
        },
        "fontWeight": {
            "bold": {"value": 700, "type": "fontWeights"},
        },
        "lineHeight": {
            "body": {
                "t10": {"value": {"en": "1.4", "ko": "1.6"}, "type": "lineHeights"},
            }
        },
        "styles": {
            "heading": {
                "title1": {
                    "value": {
                        "fontSize": "{fontSize.t10}",
                        "lineHeight": "{lineHeight.body.t10}",
                        "fontWeight": "{fontWeight.bold}",
                    },
                    "type": "typography",
                },
                "caption": {"value": "12px", "type": "fontSizes"},
            }
        },
    },
    "shadow": {
        "shadow": {
            "sm": {
                "value": {"x": 1, "y": 2, "blur": 3, "spread": 4, "color": "#000"},
                "type": "boxShadow",
            },
            "md": {
                "value": {"x": 0, "y": 4, "blur": 8, "spread": 0, "color": "{color.base.black}"},
                "type": "boxShadow",
            },
        }
    },
    "borderRadius": {
        "borderRadius": {
            "m": {"value": "8px", "type": "borderRadius"},
        }
    },
    "border": {
        "border": {
            "thin": {"value": "1px", "type": "borderWidth"},
        }
    },
}


def write_documents(directory: Path, documents: dict[str, dict[str, Any]]) -> Path:
    """Write one JSON file per category into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for category, document in documents.items():
        (directory / f"{category}.json").write_text(json.dumps(document, indent=2))
    return directory


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_documents() -> dict[str, dict[str, Any]]:
    """Raw token documents covering every composite shape."""
    return copy.deepcopy(SAMPLE_DOCUMENTS)


@pytest.fixture
def tokens_dir(temp_dir: Path, sample_documents: dict[str, dict[str, Any]]) -> Path:
    """A tokens directory populated with the sample documents."""
    return write_documents(temp_dir / "tokens", sample_documents)


@pytest.fixture
def build_dir(temp_dir: Path) -> Path:
    """Output directory (not created)."""
    return temp_dir / "build"
