"""
MCP tool implementations.

Tools are organized by domain:
- inspection - Listing, describing, evaluating and sampling tokens
- build - Validation, artifact builds and project setup
"""

from chuk_mcp_tokens.tools.build import register_build_tools
from chuk_mcp_tokens.tools.inspection import register_inspection_tools

__all__ = [
    "register_build_tools",
    "register_inspection_tools",
]
