"""
MCP server factory.

Builds a server for an explicit BuildConfig. Importing this module has
no side effects; the default, cwd-configured server lives in
async_server.
"""

import logging
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_design_tokens.models.config import BuildConfig
from chuk_design_tokens.tools import register_build_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-design-tokens"


def create_server(config: BuildConfig) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create an MCP server with every token tool registered.

    Args:
        config: Build configuration shared by all tools

    Returns:
        (server, registered tool functions)
    """
    server = ChukMCPServer(SERVER_NAME)
    tools = register_build_tools(server, config)

    logger.info("CHUK Design Tokens MCP Server initialized")
    logger.info(f"  Tokens dir: {config.tokens_dir}")
    logger.info(f"  Build dir: {config.build_dir}")
    return server, tools
