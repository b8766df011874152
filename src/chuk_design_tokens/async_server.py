#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server exposes the design-token build pipeline as MCP tools.
Token documents are read from the project's tokens/ directory and CSS
is written to build/ (both configurable through tokens.config.yaml).

The server provides tools for:
- Building variables.css, typography.css and components/button.css
- Validating token documents (dangling references, malformed composites)
- Listing the generated custom properties
- Previewing the button component stylesheet
"""

import logging
from pathlib import Path

from chuk_design_tokens.app import create_server
from chuk_design_tokens.models.config import BuildConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Paths - use standard project structure
BASE_PATH = Path.cwd()
config = BuildConfig.discover(BASE_PATH)

mcp, build_tools = create_server(config)

# Export tool functions for direct access
tokens_build = build_tools["tokens_build"]
tokens_validate = build_tools["tokens_validate"]
tokens_list = build_tools["tokens_list"]
tokens_generate_button = build_tools["tokens_generate_button"]
