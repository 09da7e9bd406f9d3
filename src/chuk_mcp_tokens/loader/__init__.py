"""
Token loading - JSON token files into a TokenSet.

Ships a small library of starter tokens (a fluid type scale and a
responsive spacing scale) that can be copied into a project.
"""

from chuk_mcp_tokens.loader.loader import LIBRARY_PATH, TokenLoader, infer_kind

__all__ = [
    "LIBRARY_PATH",
    "TokenLoader",
    "infer_kind",
]
