"""
Pydantic models for the token pipeline.

This module provides:
- TokenDescriptor: A single token with an explicit kind
- FluidRange: Viewport/size bounds for fluid tokens
- TokenSet: All loaded tokens by category and name
- Breakpoint / BreakpointSet: Named viewport sample points
"""

from chuk_mcp_tokens.models.breakpoint import DEFAULT_BREAKPOINTS, Breakpoint, BreakpointSet
from chuk_mcp_tokens.models.token import FluidRange, TokenDescriptor, TokenSet, token_key

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "Breakpoint",
    "BreakpointSet",
    "FluidRange",
    "TokenDescriptor",
    "TokenSet",
    "token_key",
]
