"""
Identifier derivation - camel case to kebab case.

One pure string transform used for every CSS property name:

    fontSizes     -> font-sizes
    lineHeightXL  -> line-height-xl
    HTMLParser    -> html-parser      (a capital run ends before the next word)
    h1Size        -> h1-size
    spacing2XL    -> spacing2-xl      (digit followed by a capital is a boundary)
    2xl           -> 2xl              (leading digits are kept)
    font_size     -> font-size        (underscores, spaces and dots become '-')

Runs of separators collapse to one '-', and leading/trailing separators
are dropped.
"""

from __future__ import annotations

import re

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import InvalidDescriptor

# "HTMLParser" -> "HTML-Parser"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# "fontSizes" -> "font-Sizes", "h2Size" -> "h2-Size"
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_IDENTIFIER = re.compile(r"[^a-z0-9-]+")
_REPEATED_DASH = re.compile(r"-{2,}")


def kebab_case(name: str) -> str:
    """
    Convert a camelCase (or PascalCase) identifier to kebab-case.

    Args:
        name: Identifier to convert

    Returns:
        Lowercase identifier using '-' as the only separator

    Raises:
        InvalidDescriptor: If nothing usable is left after conversion
    """
    result = _ACRONYM_BOUNDARY.sub(r"\1-\2", name)
    result = _WORD_BOUNDARY.sub(r"\1-\2", result)
    result = _NON_IDENTIFIER.sub("-", result.lower())
    result = _REPEATED_DASH.sub("-", result).strip("-")

    if not result:
        raise InvalidDescriptor(ErrorMessages.EMPTY_IDENTIFIER.format(name=name))
    return result


def css_property_name(category: str, name: str) -> str:
    """
    Derive the CSS custom property for a token.

    Example:
        css_property_name("fontSizes", "baseLarge") -> "--font-sizes-base-large"
    """
    return f"--{kebab_case(category)}-{kebab_case(name)}"
