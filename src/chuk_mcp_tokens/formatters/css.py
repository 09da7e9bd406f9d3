"""
CSS formatter - tokens as custom properties.

- Fixed tokens: the authored literal; numbers get px unless the declared
  type is unitless
- Fluid tokens: a clamp() expression equivalent to the fluid evaluator
- Responsive tokens: the widest breakpoint's value in :root, with
  max-width media queries overriding it for every narrower breakpoint
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tokens.constants import (
    CSS_UNIT,
    DEFAULT_PRECISION,
    UNITLESS_TYPES,
    ErrorMessages,
    TokenKind,
)
from chuk_mcp_tokens.core.fluid import format_number, round_value
from chuk_mcp_tokens.core.naming import css_property_name
from chuk_mcp_tokens.core.sampler import SampledValue, sample_token
from chuk_mcp_tokens.errors import InvalidDescriptor, TokenCollision
from chuk_mcp_tokens.models.breakpoint import DEFAULT_BREAKPOINTS, Breakpoint, BreakpointSet
from chuk_mcp_tokens.models.token import FluidRange, TokenDescriptor, TokenSet

HEADER = """\
/**
 * Fluid design tokens with clamp() interpolation
 * Auto-generated - do not edit directly
 */
"""


@dataclass(frozen=True)
class FluidExpression:
    """
    A clamp() expression for a fluid range.

    Renders as

        clamp(LO, MIN + (MAX - MIN) * ((100vw - MIN_W) / (MAX_W - MIN_W)), HI)

    where LO/HI are the smaller/larger size, so negative slopes stay valid.
    All numbers pass through the shared rounding policy.
    """

    min_width: float
    max_width: float
    min_size: float
    max_size: float
    precision: int = DEFAULT_PRECISION

    @classmethod
    def from_range(cls, fluid: FluidRange, precision: int = DEFAULT_PRECISION) -> FluidExpression:
        """Create an expression from a fluid range."""
        return cls(
            min_width=round_value(fluid.min_width, precision),
            max_width=round_value(fluid.max_width, precision),
            min_size=round_value(fluid.min_size, precision),
            max_size=round_value(fluid.max_size, precision),
            precision=precision,
        )

    def render(self) -> str:
        """Render the CSS expression."""
        n = self._fmt
        lower = min(self.min_size, self.max_size)
        upper = max(self.min_size, self.max_size)
        return (
            f"clamp({n(lower)}{CSS_UNIT}, "
            f"{n(self.min_size)}{CSS_UNIT} + ({n(self.max_size)} - {n(self.min_size)}) * "
            f"((100vw - {n(self.min_width)}{CSS_UNIT}) / "
            f"({n(self.max_width)} - {n(self.min_width)})), "
            f"{n(upper)}{CSS_UNIT})"
        )

    def evaluate(self, viewport_width: float) -> float:
        """
        Evaluate the expression the way a browser would at a viewport width.

        Returns:
            The resolved size, rounded to the expression's precision
        """
        preferred = self.min_size + (self.max_size - self.min_size) * (
            (viewport_width - self.min_width) / (self.max_width - self.min_width)
        )
        lower = min(self.min_size, self.max_size)
        upper = max(self.min_size, self.max_size)
        return round_value(max(lower, min(preferred, upper)), self.precision)

    def _fmt(self, value: float) -> str:
        return format_number(value, self.precision)

    def __str__(self) -> str:
        return self.render()


def css_unit(token: TokenDescriptor) -> str:
    """Unit for a token's numbers: px, or none for unitless types such as line heights."""
    return "" if token.type in UNITLESS_TYPES else CSS_UNIT


def css_literal(
    value: SampledValue,
    precision: int = DEFAULT_PRECISION,
    unit: str = CSS_UNIT,
) -> str:
    """Render a literal: numbers get the unit, strings are verbatim."""
    if isinstance(value, str):
        return value
    return f"{format_number(value, precision)}{unit}"


def css_value(
    token: TokenDescriptor,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Render the :root value of a token.

    Responsive tokens use the widest breakpoint's value. Fixed strings are
    written as authored; numbers get px unless the declared type is unitless.
    """
    if token.kind == TokenKind.FLUID and token.fluid is not None:
        return FluidExpression.from_range(token.fluid, precision).render()

    unit = css_unit(token)
    if token.kind == TokenKind.RESPONSIVE:
        values = sample_token(token, breakpoints, precision)
        return css_literal(values[breakpoints.widest.name], precision, unit)

    if token.kind == TokenKind.FIXED and token.value is not None:
        return css_literal(token.value, precision, unit)

    raise InvalidDescriptor(ErrorMessages.NO_KIND.format(key=token.key), key=token.key)


def media_query(breakpoints: BreakpointSet, breakpoint: Breakpoint) -> str | None:
    """
    Media query covering a breakpoint up to the next one.

    The widest breakpoint has no query: its values live in :root.
    """
    ordered = breakpoints.breakpoints
    index = ordered.index(breakpoint)
    if index == len(ordered) - 1:
        return None

    upper = ordered[index + 1].viewport_width - 1
    if index == 0:
        return f"@media (max-width: {upper}px)"
    return f"@media (min-width: {breakpoint.viewport_width}px) and (max-width: {upper}px)"


def render_stylesheet(
    token_set: TokenSet,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Render the complete stylesheet.

    Args:
        token_set: Tokens to render
        breakpoints: Breakpoints for responsive overrides
        precision: Decimal places for numbers

    Returns:
        The CSS text

    Raises:
        TokenCollision: If two tokens map to the same property
        MissingBreakpointValue: If a responsive token lacks a breakpoint
    """
    root: list[str] = []
    overrides: dict[str, list[str]] = {bp.name: [] for bp in breakpoints.breakpoints}
    owners: dict[str, str] = {}

    for token in token_set.iter_tokens():
        prop = css_property_name(token.category, token.name)
        if prop in owners:
            raise TokenCollision(
                ErrorMessages.DUPLICATE_PROPERTY.format(
                    keys=f"{owners[prop]}, {token.key}", property=prop
                )
            )
        owners[prop] = token.key

        root.append(f"  {prop}: {css_value(token, breakpoints, precision)};")

        if token.kind == TokenKind.RESPONSIVE:
            values = sample_token(token, breakpoints, precision)
            for bp in breakpoints.breakpoints[:-1]:
                literal = css_literal(values[bp.name], precision, css_unit(token))
                overrides[bp.name].append(f"    {prop}: {literal};")

    blocks = [HEADER, ":root {\n" + "".join(f"{line}\n" for line in root) + "}\n"]

    for bp in breakpoints.breakpoints:
        query = media_query(breakpoints, bp)
        lines = overrides[bp.name]
        if query is None or not lines:
            continue
        body = "".join(f"{line}\n" for line in lines)
        blocks.append(f"/* Responsive overrides: {bp} */\n{query} {{\n  :root {{\n{body}  }}\n}}\n")

    return "\n".join(blocks)
