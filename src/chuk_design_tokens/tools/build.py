"""
Build tools - MCP tools for building and inspecting design tokens.

Tools for running the token build, validating token documents,
listing the generated custom properties and previewing the button
component stylesheet.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_design_tokens.build import TokenBuilder
from chuk_design_tokens.components.button import generate_button_css, load_button_table
from chuk_design_tokens.emitters.variables import collect_declarations
from chuk_design_tokens.exceptions import TokenBuildError, TokenValidationError
from chuk_design_tokens.models.config import BuildConfig

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(mcp: ChukMCPServer, config: BuildConfig) -> dict[str, Any]:
    """
    Register token build tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Build configuration used by every tool

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build(strict: bool | None = None) -> str:
        """
        Build CSS from the token documents.

        Writes variables.css, typography.css and components/button.css
        into the build directory, replacing any previous output.

        Args:
            strict: Fail on validation warnings (default: from config)

        Returns:
            JSON string with written files and counts

        Example:
            tokens_build()
        """
        try:
            run_config = config if strict is None else config.model_copy(update={"strict": strict})
            result = TokenBuilder(run_config).build()

            return json.dumps(
                {
                    "status": "success",
                    "outputs": {name: str(path) for name, path in result.outputs.items()},
                    "tokens": result.token_count,
                    "typography_classes": result.class_count,
                    "warnings": [str(w) for w in result.validation.warnings],
                    "message": f"Built {result.token_count} tokens",
                }
            )
        except TokenValidationError as e:
            return json.dumps(
                {
                    "status": "error",
                    "message": str(e),
                    "issues": [issue.to_dict() for issue in e.result.errors],
                }
            )
        except TokenBuildError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate() -> str:
        """
        Validate the token documents without writing anything.

        Reports dangling references, malformed composites, category
        collisions, custom property name collisions and dropped locales.

        Returns:
            JSON string with validation issues

        Example:
            tokens_validate()
        """
        try:
            tokens = TokenBuilder(config).load()
            validation = tokens.validation

            return json.dumps(
                {
                    "status": "success",
                    "valid": validation.is_valid,
                    "issues": [issue.to_dict() for issue in validation.issues],
                    "error_count": len(validation.errors),
                    "warning_count": len(validation.warnings),
                }
            )
        except TokenBuildError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to validate tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate"] = tokens_validate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list(prefix: str | None = None) -> str:
        """
        List the custom properties a build would emit.

        Args:
            prefix: Only include names starting with this (e.g., '--color')

        Returns:
            JSON string mapping custom property names to values

        Example:
            tokens_list(prefix="--button")
        """
        try:
            tokens = TokenBuilder(config).load()
            declarations = collect_declarations(tokens.merged)
            variables = {
                name: value
                for name, (value, _) in declarations.items()
                if prefix is None or name.startswith(prefix)
            }

            return json.dumps(
                {
                    "status": "success",
                    "variables": variables,
                    "count": len(variables),
                }
            )
        except TokenBuildError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list"] = tokens_list

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_generate_button() -> str:
        """
        Generate the button component stylesheet without writing it.

        Returns:
            JSON string with the CSS and the table it was built from

        Example:
            tokens_generate_button()
        """
        try:
            table = load_button_table(config.button_table)
            css = generate_button_css(table)

            return json.dumps(
                {
                    "status": "success",
                    "css": css,
                    "sizes": [size.name for size in table.sizes],
                    "solid_variants": list(table.solid_variants),
                }
            )
        except Exception as e:
            logger.exception("Failed to generate button stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_generate_button"] = tokens_generate_button

    return tools
