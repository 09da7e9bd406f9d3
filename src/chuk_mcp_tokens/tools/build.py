"""
Build tools - MCP tools for validating and building artifacts.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.errors import TokenError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(mcp: ChukMCPServer, builder: TokenBuilder) -> dict[str, Any]:
    """
    Register build tools with the MCP server.

    Args:
        mcp: The MCP server instance
        builder: The token builder

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate() -> str:
        """
        Validate the token files without writing anything.

        Checks property-name collisions, missing responsive breakpoint
        values, and reports fluid ranges that clamp at a breakpoint.

        Returns:
            JSON string with validation issues

        Example:
            tokens_validate()
        """
        try:
            token_set = builder.load()
            result = builder.check(token_set)

            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "token_count": len(token_set),
                    "issues": [issue.to_dict() for issue in result.issues],
                    "errors": len(result.errors),
                    "warnings": len(result.warnings),
                }
            )
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to validate tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate"] = tokens_validate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build() -> str:
        """
        Build all artifacts.

        Writes the clamp() stylesheet, one JSON export per breakpoint,
        the combined export and the Figma plugin format. Existing files
        are overwritten.

        Returns:
            JSON string with the written paths

        Example:
            tokens_build()
        """
        try:
            result = builder.build()

            return json.dumps(
                {
                    "status": "success",
                    "token_count": result.token_count,
                    "files": [str(p) for p in result.written],
                    "warnings": [str(w) for w in result.validation.warnings],
                    "message": SuccessMessages.BUILD_COMPLETE.format(
                        tokens=result.token_count, files=len(result.written)
                    ),
                }
            )
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_init_project(overwrite: bool = False) -> str:
        """
        Copy the bundled starter tokens into the project.

        Gives a fluid type scale and a responsive spacing scale to
        start from.

        Args:
            overwrite: Replace token files that already exist

        Returns:
            JSON string with the copied paths

        Example:
            tokens_init_project()
        """
        try:
            copied = builder.loader.copy_library_to_project(overwrite=overwrite)

            return json.dumps(
                {
                    "status": "success",
                    "files": [str(p) for p in copied],
                    "message": SuccessMessages.PROJECT_INITIALIZED.format(
                        count=len(copied), path=builder.config.tokens_dir
                    ),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to initialize project tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_init_project"] = tokens_init_project

    return tools
