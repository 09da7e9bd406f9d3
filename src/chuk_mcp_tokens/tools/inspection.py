"""
Inspection tools - MCP tools for browsing and evaluating tokens.

Tokens are re-read from disk on every call, so edits to the token files
show up without restarting the server.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.constants import ErrorMessages, TokenKind
from chuk_mcp_tokens.core import css_property_name, json_number, sample_token, value_at
from chuk_mcp_tokens.errors import TokenError
from chuk_mcp_tokens.formatters import FluidExpression, css_value, export_type

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _jsonable(value: float | str) -> float | int | str:
    return json_number(value) if isinstance(value, float) else value


def register_inspection_tools(mcp: ChukMCPServer, builder: TokenBuilder) -> dict[str, Any]:
    """
    Register token inspection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        builder: The token builder (provides config, loader and breakpoints)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list(category: str | None = None) -> str:
        """
        List tokens.

        Args:
            category: Optional category filter (e.g. 'spacing')

        Returns:
            JSON string with token summaries

        Example:
            tokens_list(category="fontSizes")
        """
        try:
            token_set = builder.load()
            tokens = token_set.filter(category) if category else list(token_set.iter_tokens())

            return json.dumps(
                {
                    "status": "success",
                    "tokens": [
                        {
                            "key": t.key,
                            "kind": t.kind.value,
                            "type": export_type(t).value,
                            "property": css_property_name(t.category, t.name),
                        }
                        for t in tokens
                    ],
                    "categories": list(token_set.categories),
                    "count": len(tokens),
                }
            )
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list"] = tokens_list

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe(key: str) -> str:
        """
        Get full details of one token.

        Returns the source descriptor, the CSS declaration and the value
        at every breakpoint.

        Args:
            key: Token key in "category/name" form

        Returns:
            JSON string with token details

        Example:
            tokens_describe(key="fontSizes/base")
        """
        try:
            token = builder.load().get(key)
            if token is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_NOT_FOUND.format(key=key)}
                )

            precision = builder.config.precision
            values = sample_token(token, builder.breakpoints, precision)

            return json.dumps(
                {
                    "status": "success",
                    "token": {
                        "key": token.key,
                        "kind": token.kind.value,
                        "type": export_type(token).value,
                        "source": token.to_json_dict(),
                        "css": {
                            "property": css_property_name(token.category, token.name),
                            "value": css_value(token, builder.breakpoints, precision),
                        },
                        "breakpoints": {name: _jsonable(v) for name, v in values.items()},
                    },
                }
            )
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe"] = tokens_describe

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_evaluate(key: str, viewport_width: float) -> str:
        """
        Evaluate a token at a viewport width.

        Fluid tokens are interpolated (and clamped outside their range);
        responsive tokens resolve to the breakpoint active at that width.

        Args:
            key: Token key in "category/name" form
            viewport_width: Viewport width in px

        Returns:
            JSON string with the resolved value

        Example:
            tokens_evaluate(key="fontSizes/base", viewport_width=780)
        """
        try:
            token = builder.load().get(key)
            if token is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_NOT_FOUND.format(key=key)}
                )

            precision = builder.config.precision
            value = value_at(token, viewport_width, builder.breakpoints, precision)
            result: dict[str, Any] = {
                "status": "success",
                "key": token.key,
                "kind": token.kind.value,
                "viewport_width": viewport_width,
                "value": _jsonable(value),
            }
            if token.kind == TokenKind.FLUID and token.fluid is not None:
                result["in_range"] = token.fluid.covers(viewport_width)
                result["css"] = FluidExpression.from_range(token.fluid, precision).render()

            return json.dumps(result)
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to evaluate token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_evaluate"] = tokens_evaluate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_sample(category: str | None = None) -> str:
        """
        Sample tokens at every breakpoint.

        Args:
            category: Optional category filter

        Returns:
            JSON string mapping "category/name" to per-breakpoint values

        Example:
            tokens_sample(category="spacing")
        """
        try:
            token_set = builder.load()
            tokens = token_set.filter(category) if category else list(token_set.iter_tokens())
            precision = builder.config.precision

            return json.dumps(
                {
                    "status": "success",
                    "breakpoints": builder.breakpoints.to_dict(),
                    "values": {
                        t.key: {
                            name: _jsonable(v)
                            for name, v in sample_token(t, builder.breakpoints, precision).items()
                        }
                        for t in tokens
                    },
                }
            )
        except TokenError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to sample tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_sample"] = tokens_sample

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_breakpoints() -> str:
        """
        List the configured breakpoints.

        Returns:
            JSON string with breakpoint names and viewport widths

        Example:
            tokens_list_breakpoints()
        """
        return json.dumps(
            {
                "status": "success",
                "breakpoints": [
                    {"name": bp.name, "viewport_width": bp.viewport_width}
                    for bp in builder.breakpoints.breakpoints
                ],
                "precision": builder.config.precision,
            }
        )

    tools["tokens_list_breakpoints"] = tokens_list_breakpoints

    return tools
