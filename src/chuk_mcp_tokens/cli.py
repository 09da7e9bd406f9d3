#!/usr/bin/env python3
"""
Command-line token build.

Usage:
    chuk-mcp-tokens-build                     # tokens/ -> dist/
    chuk-mcp-tokens-build --config tokens.config.yaml
    chuk-mcp-tokens-build --check             # validate only

Exit codes: 0 on success, 1 on a token or write error.
"""

import argparse
import logging
import sys
from pathlib import Path

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.config import load_config
from chuk_mcp_tokens.constants import DEFAULT_CONFIG_FILE, SuccessMessages
from chuk_mcp_tokens.errors import TokenError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Build fluid CSS and Figma breakpoint exports from design tokens"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"Build config file (default: {DEFAULT_CONFIG_FILE}; optional)",
    )
    parser.add_argument(
        "--tokens-dir",
        type=Path,
        help="Override the token source directory",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Override the artifact directory",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate tokens without writing artifacts",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a build (or a check) and return the exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        config = load_config(args.config)
        overrides = {}
        if args.tokens_dir is not None:
            overrides["tokens_dir"] = args.tokens_dir.resolve()
        if args.output_dir is not None:
            overrides["output_dir"] = args.output_dir.resolve()
        if overrides:
            config = config.model_copy(update=overrides)

        builder = TokenBuilder(config)

        if args.check:
            token_set = builder.load()
            result = builder.check(token_set)
            for issue in result.issues:
                logger.info(str(issue))
            if not result.is_valid:
                logger.error(f"Validation failed with {len(result.errors)} errors")
                return 1
            logger.info(SuccessMessages.VALIDATION_PASSED.format(tokens=len(token_set)))
            return 0

        builder.build()
        return 0
    except TokenError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
