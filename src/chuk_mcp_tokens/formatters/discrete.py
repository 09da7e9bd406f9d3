"""
Discrete export formatter - per-breakpoint records for design-tool import.

Every artifact uses the same "category/name" key, which the Figma import
plugin splits to regroup tokens by category:

    {"phone": {"fontSizes/base": {"value": 18, "type": "fontSize",
                                  "breakpoint": "phone",
                                  "description": "Fluid from 18px to 20px"}}}
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tokens.constants import (
    CSS_UNIT,
    DEFAULT_PRECISION,
    EXPORT_TYPE_MAP,
    ExportType,
    TokenKind,
)
from chuk_mcp_tokens.core.fluid import format_number, json_number
from chuk_mcp_tokens.core.sampler import SampledValue, sample_token
from chuk_mcp_tokens.models.breakpoint import DEFAULT_BREAKPOINTS, BreakpointSet
from chuk_mcp_tokens.models.token import TokenDescriptor, TokenSet

TokenRecord = dict[str, Any]
BreakpointExport = dict[str, TokenRecord]


def export_type(token: TokenDescriptor) -> ExportType:
    """
    Type tag for a token.

    Uses the declared type; without one, the category name is mapped the
    same way. Unknown types export as a generic dimension.
    """
    declared = token.type if token.type is not None else token.category
    return EXPORT_TYPE_MAP.get(declared, ExportType.DIMENSION)


def describe(token: TokenDescriptor, breakpoint: str, precision: int = DEFAULT_PRECISION) -> str:
    """Description for an export record; an authored one wins."""
    if token.description:
        return token.description
    if token.kind == TokenKind.FLUID and token.fluid is not None:
        low = format_number(token.fluid.min_size, precision)
        high = format_number(token.fluid.max_size, precision)
        return f"Fluid from {low}{CSS_UNIT} to {high}{CSS_UNIT}"
    if token.kind == TokenKind.RESPONSIVE:
        return f"Responsive {breakpoint} value"
    return "Fixed value"


def build_record(
    token: TokenDescriptor,
    breakpoint: str,
    value: SampledValue,
    precision: int = DEFAULT_PRECISION,
) -> TokenRecord:
    """Build one export record."""
    return {
        "value": json_number(value) if isinstance(value, float) else value,
        "type": export_type(token).value,
        "breakpoint": breakpoint,
        "description": describe(token, breakpoint, precision),
    }


def build_breakpoint_exports(
    token_set: TokenSet,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> dict[str, BreakpointExport]:
    """
    Build the combined export: breakpoint name -> key -> record.

    Each value of the result is also a per-breakpoint artifact. Every
    token appears under every breakpoint.

    Raises:
        MissingBreakpointValue: If a responsive token lacks a breakpoint
    """
    exports: dict[str, BreakpointExport] = {name: {} for name in breakpoints.names}

    for token in token_set.iter_tokens():
        values = sample_token(token, breakpoints, precision)
        for name, value in values.items():
            exports[name][token.key] = build_record(token, name, value, precision)

    return exports
