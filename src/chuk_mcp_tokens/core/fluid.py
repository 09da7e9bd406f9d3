"""
Fluid evaluator - bounded linear interpolation across a viewport range.

    ratio  = clamp((viewport - min_width) / (max_width - min_width), 0, 1)
    result = min_size + (max_size - min_size) * ratio

Outside [min_width, max_width] the result is pinned to the nearest bound,
so a fluid value never extrapolates. At the bounds the authored sizes are
returned exactly.

Rounding lives here too: the CSS and discrete export paths both go through
round_value/format_number, so the two artifacts agree at every breakpoint.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import DEFAULT_PRECISION, ErrorMessages
from chuk_mcp_tokens.errors import InvalidDescriptor
from chuk_mcp_tokens.models.token import FluidRange


def interpolate(
    min_width: float,
    max_width: float,
    min_size: float,
    max_size: float,
    viewport_width: float,
) -> float:
    """
    Interpolate a size for a viewport width.

    Args:
        min_width: Viewport width where min_size applies
        max_width: Viewport width where max_size applies
        min_size: Size at min_width
        max_size: Size at max_width
        viewport_width: Target viewport width

    Returns:
        The interpolated size, clamped to [min_size, max_size]

    Raises:
        InvalidDescriptor: If max_width == min_width
    """
    span = max_width - min_width
    if span == 0:
        raise InvalidDescriptor(ErrorMessages.ZERO_WIDTH_RANGE.format(width=f"{min_width:g}"))

    ratio = (viewport_width - min_width) / span
    if ratio <= 0:
        return float(min_size)
    if ratio >= 1:
        return float(max_size)
    return min_size + (max_size - min_size) * ratio


def evaluate_fluid(
    fluid: FluidRange,
    viewport_width: float,
    precision: int | None = None,
) -> float:
    """
    Evaluate a fluid range at a viewport width.

    Args:
        fluid: The fluid range
        viewport_width: Target viewport width in px
        precision: Decimal places to round to (None = no rounding)

    Returns:
        The interpolated value
    """
    value = interpolate(
        fluid.min_width,
        fluid.max_width,
        fluid.min_size,
        fluid.max_size,
        viewport_width,
    )
    if precision is None:
        return value
    return round_value(value, precision)


def round_value(value: float, precision: int = DEFAULT_PRECISION) -> float:
    """Round to a fixed number of decimals; -0.0 is normalised to 0.0."""
    return round(float(value), precision) + 0.0


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a number for CSS without locale or float noise.

    Trailing zeros are stripped: 18.0 -> "18", 12.50 -> "12.5".
    """
    text = f"{round_value(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def json_number(value: float) -> float | int:
    """Integral floats become ints so JSON shows 18 rather than 18.0."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
