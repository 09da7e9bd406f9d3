#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

Supports the stdio and http transports. Token locations come from
tokens.config.yaml in the working directory unless --config is given.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    from chuk_mcp_tokens.constants import DEFAULT_CONFIG_FILE

    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
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
    parser.add_argument(
        "--config",
        type=Path,
        default=Path.cwd() / DEFAULT_CONFIG_FILE,
        help=f"Build config file (default: ./{DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_tokens.async_server import create_server
    from chuk_mcp_tokens.config import load_config

    mcp, _ = create_server(load_config(args.config))

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
