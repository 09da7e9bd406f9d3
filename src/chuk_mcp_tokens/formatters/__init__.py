"""
Output formatters - render tokens into artifact content.

All formatters are pure and build their output in memory:
- css: :root custom properties with clamp() and media-query overrides
- discrete: per-breakpoint records for design-tool import
- plugin: category/name/breakpoint regrouping for the Figma plugin
"""

from chuk_mcp_tokens.formatters.css import (
    FluidExpression,
    css_literal,
    css_value,
    media_query,
    render_stylesheet,
)
from chuk_mcp_tokens.formatters.discrete import (
    build_breakpoint_exports,
    build_record,
    describe,
    export_type,
)
from chuk_mcp_tokens.formatters.plugin import build_plugin_tokens, split_key

__all__ = [
    # CSS
    "FluidExpression",
    "css_literal",
    "css_value",
    "media_query",
    "render_stylesheet",
    # Discrete
    "build_breakpoint_exports",
    "build_record",
    "describe",
    "export_type",
    # Plugin
    "build_plugin_tokens",
    "split_key",
]
