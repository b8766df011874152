"""
MCP tool implementations.

Tools are organized by domain:
- build - Building, validating and inspecting design tokens
"""

from chuk_design_tokens.tools.build import register_build_tools

__all__ = [
    "register_build_tools",
]
