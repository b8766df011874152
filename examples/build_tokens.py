#!/usr/bin/env python3
"""
Example: Build the sample token set to CSS.

This demonstrates the full pipeline from token documents to stylesheets.

Usage:
    python examples/build_tokens.py
    # Creates: examples/build/variables.css
    #          examples/build/typography.css
    #          examples/build/components/button.css

This is the "Hello World" for chuk-design-tokens - proving that:
1. Token documents are loaded per category
2. Shadows, line heights and text styles are flattened
3. References survive as var() expressions
4. Typography classes and the button stylesheet are generated
"""

from pathlib import Path

from chuk_design_tokens.build import TokenBuilder
from chuk_design_tokens.models.config import BuildConfig


def main() -> None:
    """Build the sample tokens."""
    examples_dir = Path(__file__).parent
    config = BuildConfig(
        tokens_dir=examples_dir / "tokens",
        build_dir=examples_dir / "build",
    )

    print("CHUK Design Tokens Builder")
    print("=" * 40)
    print(f"Tokens: {config.tokens_dir}")
    print(f"Output: {config.build_dir}")
    print()

    builder = TokenBuilder(config)

    print("Loading tokens...")
    tokens = builder.load()
    for category, document in tokens.documents.items():
        print(f"  {category}: {', '.join(document)}")
    print(f"  Total tokens after flattening: {tokens.token_count}")
    print()

    print("Validation:")
    print(f"  {tokens.validation}")
    print()

    print("Building...")
    result = builder.build()
    for name, path in result.outputs.items():
        size = path.stat().st_size
        print(f"  {name}: {size} bytes")
    print()

    print("Preview (variables.css):")
    for line in result.css["variables.css"].splitlines()[:16]:
        print(f"  {line}")


if __name__ == "__main__":
    main()
