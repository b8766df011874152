#!/usr/bin/env python3
"""
Command line entry point for the token build.

    chuk-design-tokens build [--config tokens.config.yaml] [--strict]
    chuk-design-tokens validate
    chuk-design-tokens button > button.css
"""

import argparse
import logging
import sys
from pathlib import Path

from chuk_design_tokens.build import TokenBuilder
from chuk_design_tokens.components.button import generate_button_css, load_button_table
from chuk_design_tokens.exceptions import TokenBuildError
from chuk_design_tokens.models.config import BuildConfig

logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> BuildConfig:
    overrides = {
        "tokens_dir": args.tokens_dir,
        "build_dir": args.build_dir,
        "strict": True if args.strict else None,
    }
    if args.config:
        return BuildConfig.from_yaml(args.config, **overrides)
    return BuildConfig.discover(**overrides)


def _build(args: argparse.Namespace) -> int:
    config = _load_config(args)
    logger.info("Building design tokens...")
    result = TokenBuilder(config).build()
    for warning in result.validation.warnings:
        print(warning, file=sys.stderr)
    return 0


def _validate(args: argparse.Namespace) -> int:
    config = _load_config(args)
    validation = TokenBuilder(config).load().validation
    print(validation)
    return 0 if validation.is_valid else 1


def _button(args: argparse.Namespace) -> int:
    config = _load_config(args)
    sys.stdout.write(generate_button_css(load_button_table(config.button_table)))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Build CSS from design token documents")
    parser.add_argument("--config", type=Path, help="Path to tokens.config.yaml")
    parser.add_argument("--tokens-dir", type=Path, help="Token documents directory")
    parser.add_argument("--build-dir", type=Path, help="Output directory")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat validation warnings as errors",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("build", help="Write variables, typography and component CSS")
    subparsers.add_parser("validate", help="Check token documents without writing")
    subparsers.add_parser("button", help="Print the button stylesheet to stdout")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    commands = {"build": _build, "validate": _validate, "button": _button}
    try:
        return commands[args.command](args)
    except (TokenBuildError, OSError) as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        # Invalid configuration or component table
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
