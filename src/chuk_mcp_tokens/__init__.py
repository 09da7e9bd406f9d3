"""
CHUK Tokens - a fluid design-token pipeline.

Reads JSON token definitions (typography, spacing) and builds:
- A CSS stylesheet with clamp() interpolation and responsive overrides
- Per-breakpoint JSON exports for Figma
- A combined export and the Figma plugin format

Quick start:
    from chuk_mcp_tokens import TokenBuilder, load_config

    result = TokenBuilder(load_config()).build()
"""

from chuk_mcp_tokens.builder import BuildResult, TokenBuilder, build_tokens
from chuk_mcp_tokens.config import BuildConfig, load_config
from chuk_mcp_tokens.errors import (
    InvalidConfig,
    InvalidDescriptor,
    MissingBreakpointValue,
    MissingInputFile,
    OutputWriteFailure,
    TokenCollision,
    TokenError,
)
from chuk_mcp_tokens.models import (
    DEFAULT_BREAKPOINTS,
    Breakpoint,
    BreakpointSet,
    FluidRange,
    TokenDescriptor,
    TokenSet,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "BuildConfig",
    "BuildResult",
    "TokenBuilder",
    "build_tokens",
    "load_config",
    # Models
    "DEFAULT_BREAKPOINTS",
    "Breakpoint",
    "BreakpointSet",
    "FluidRange",
    "TokenDescriptor",
    "TokenSet",
    # Errors
    "InvalidConfig",
    "InvalidDescriptor",
    "MissingBreakpointValue",
    "MissingInputFile",
    "OutputWriteFailure",
    "TokenCollision",
    "TokenError",
]
