"""
Breakpoint sampler - one value per named breakpoint for any token kind.

The result always has an entry for every breakpoint, in breakpoint order.
Formatters rely on that completeness.
"""

from __future__ import annotations

import re

from chuk_mcp_tokens.constants import DEFAULT_PRECISION, ErrorMessages, TokenKind
from chuk_mcp_tokens.core.fluid import evaluate_fluid, round_value
from chuk_mcp_tokens.errors import InvalidDescriptor, MissingBreakpointValue
from chuk_mcp_tokens.models.breakpoint import DEFAULT_BREAKPOINTS, BreakpointSet
from chuk_mcp_tokens.models.token import TokenDescriptor, TokenSet

# A plain number with an optional px unit: "4", "4px", "-1.5px", ".5"
_PIXEL_LITERAL = re.compile(r"^\s*(-?(?:\d+(?:\.\d*)?|\.\d+))\s*(?:px)?\s*$")

SampledValue = float | str


def parse_literal(value: float | str) -> SampledValue:
    """
    Parse a literal token value.

    Numbers and pixel strings ("4px") become floats. Any other string
    ("1.5rem", "bold") is returned unchanged.
    """
    if isinstance(value, (int, float)):
        return float(value)
    match = _PIXEL_LITERAL.match(value)
    if match:
        return float(match.group(1))
    return value


def sample_token(
    token: TokenDescriptor,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> dict[str, SampledValue]:
    """
    Sample a token at every breakpoint.

    Args:
        token: The token to sample
        breakpoints: Breakpoints to sample at
        precision: Decimal places for numeric values

    Returns:
        Mapping of breakpoint name to value, one entry per breakpoint

    Raises:
        MissingBreakpointValue: If a responsive token lacks a breakpoint
        InvalidDescriptor: If the field for the token's kind is absent
    """
    if token.kind == TokenKind.FLUID and token.fluid is not None:
        return {
            bp.name: evaluate_fluid(token.fluid, bp.viewport_width, precision)
            for bp in breakpoints.breakpoints
        }

    if token.kind == TokenKind.RESPONSIVE and token.responsive is not None:
        values: dict[str, SampledValue] = {}
        for bp in breakpoints.breakpoints:
            if bp.name not in token.responsive:
                raise MissingBreakpointValue(
                    ErrorMessages.MISSING_BREAKPOINT.format(key=token.key, breakpoint=bp.name),
                    key=token.key,
                    breakpoint=bp.name,
                )
            values[bp.name] = _round_if_numeric(parse_literal(token.responsive[bp.name]), precision)
        return values

    if token.kind == TokenKind.FIXED and token.value is not None:
        literal = _round_if_numeric(parse_literal(token.value), precision)
        return {bp.name: literal for bp in breakpoints.breakpoints}

    raise InvalidDescriptor(ErrorMessages.NO_KIND.format(key=token.key), key=token.key)


def sample_tokens(
    token_set: TokenSet,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> dict[str, dict[str, SampledValue]]:
    """
    Sample every token in a set.

    Returns:
        Mapping of "category/name" key to per-breakpoint values
    """
    return {
        token.key: sample_token(token, breakpoints, precision) for token in token_set.iter_tokens()
    }


def value_at(
    token: TokenDescriptor,
    viewport_width: float,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> SampledValue:
    """
    Resolve a token at an arbitrary viewport width.

    Fluid tokens are interpolated. Responsive tokens take the value of the
    widest breakpoint not wider than the viewport (the narrowest one below
    every breakpoint), which is what the generated media queries select.
    """
    if token.kind == TokenKind.FLUID and token.fluid is not None:
        return evaluate_fluid(token.fluid, viewport_width, precision)

    values = sample_token(token, breakpoints, precision)
    if token.kind == TokenKind.FIXED:
        return values[breakpoints.widest.name]

    active = breakpoints.breakpoints[0]
    for bp in breakpoints.breakpoints:
        if bp.viewport_width <= viewport_width:
            active = bp
    return values[active.name]


def _round_if_numeric(value: SampledValue, precision: int) -> SampledValue:
    if isinstance(value, float):
        return round_value(value, precision)
    return value
