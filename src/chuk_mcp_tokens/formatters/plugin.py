"""
Plugin formatter - regroups breakpoint exports for the Figma sync plugin.

    From: {"phone": {"spacing/xs": {"value": 4}}, "tablet": {...}}
    To:   {"spacing": {"xs": {"phone": 4, "tablet": 6, "desktop": 8}}}
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tokens.constants import KEY_SEPARATOR
from chuk_mcp_tokens.errors import InvalidDescriptor
from chuk_mcp_tokens.formatters.discrete import BreakpointExport


def split_key(key: str) -> tuple[str, str]:
    """
    Split a "category/name" key.

    Raises:
        InvalidDescriptor: If the key has no separator
    """
    category, sep, name = key.partition(KEY_SEPARATOR)
    if not sep or not category or not name:
        raise InvalidDescriptor(f"Malformed token key: '{key}'", key=key)
    return category, name


def build_plugin_tokens(
    exports: dict[str, BreakpointExport],
) -> dict[str, dict[str, dict[str, Any]]]:
    """
    Regroup the combined export by category and name.

    Args:
        exports: Combined export (breakpoint -> key -> record)

    Returns:
        category -> name -> breakpoint -> value
    """
    plugin: dict[str, dict[str, dict[str, Any]]] = {}

    for breakpoint, records in exports.items():
        for key, record in records.items():
            category, name = split_key(key)
            plugin.setdefault(category, {}).setdefault(name, {})[breakpoint] = record["value"]

    return plugin
