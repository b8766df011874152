#!/usr/bin/env python3
"""
Entry point for the CHUK Design Tokens MCP Server.

Supports stdio and http transports. By default the server looks for
tokens.config.yaml in the current directory; --config points it at
another project and the current directory is then never read.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _load_server(args: argparse.Namespace):
    """Return the MCP server selected by the command line."""
    if not (args.config or args.strict):
        from chuk_design_tokens.async_server import mcp

        return mcp

    from chuk_design_tokens.app import create_server
    from chuk_design_tokens.models.config import BuildConfig

    strict = True if args.strict else None
    if args.config:
        config = BuildConfig.from_yaml(args.config, strict=strict)
    else:
        config = BuildConfig.discover(strict=strict)
    server, _ = create_server(config)
    return server


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Design Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument("--config", type=Path, help="Path to tokens.config.yaml")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail builds on any validation problem",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    mcp = _load_server(args)

    if args.transport == "stdio":
        logger.info("Starting CHUK Design Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
