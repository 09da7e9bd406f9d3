"""
Core token computation - pure functions, no I/O.

- kebab_case / css_property_name: Identifier derivation
- interpolate / evaluate_fluid: Bounded linear interpolation
- round_value / format_number: The shared rounding policy
- sample_token / sample_tokens: Per-breakpoint value tables
"""

from chuk_mcp_tokens.core.fluid import (
    evaluate_fluid,
    format_number,
    interpolate,
    json_number,
    round_value,
)
from chuk_mcp_tokens.core.naming import css_property_name, kebab_case
from chuk_mcp_tokens.core.sampler import parse_literal, sample_token, sample_tokens, value_at

__all__ = [
    # Naming
    "css_property_name",
    "kebab_case",
    # Fluid
    "evaluate_fluid",
    "format_number",
    "interpolate",
    "json_number",
    "round_value",
    # Sampling
    "parse_literal",
    "sample_token",
    "sample_tokens",
    "value_at",
]
