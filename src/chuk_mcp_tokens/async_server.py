#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server provides MCP tools for a fluid design-token pipeline. Token
files (JSON) are turned into a clamp()-based CSS stylesheet for the web
and per-breakpoint JSON snapshots for Figma.

The server provides tools for:
- Listing and describing tokens
- Evaluating fluid tokens at any viewport width
- Sampling tokens at the configured breakpoints
- Validating token files
- Building all artifacts
- Copying starter tokens into a project
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.config import BuildConfig
from chuk_mcp_tokens.tools import register_build_tools, register_inspection_tools

logger = logging.getLogger(__name__)


def create_server(config: BuildConfig) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server with every token tool registered.

    Args:
        config: Resolved build configuration

    Returns:
        The server and a dictionary of its tool functions
    """
    mcp = ChukMCPServer("chuk-mcp-tokens")
    builder = TokenBuilder(config)

    tools: dict[str, Any] = {}
    tools.update(register_inspection_tools(mcp, builder))
    tools.update(register_build_tools(mcp, builder))

    logger.info("CHUK Tokens MCP Server initialized")
    logger.info(f"  Tokens dir: {config.tokens_dir}")
    logger.info(f"  Output dir: {config.output_dir}")
    logger.info(f"  Breakpoints: {config.breakpoints}")
    logger.info(f"  Tools: {', '.join(sorted(tools))}")

    return mcp, tools
