"""
Token models - the unit of configuration.

A TokenDescriptor carries an explicit `kind` discriminant decided once at
load time. Nothing downstream inspects which raw fields were present.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_tokens.constants import KEY_SEPARATOR, ErrorMessages, TokenKind


def token_key(category: str, name: str) -> str:
    """Build the export key for a token ("spacing/xs")."""
    return f"{category}{KEY_SEPARATOR}{name}"


class FluidRange(BaseModel):
    """
    Viewport bounds and the sizes reached at those bounds.

    Sizes may describe a negative slope (max_size < min_size).
    """

    min_width: float = Field(..., alias="minWidth", description="Viewport width (px) of min_size")
    max_width: float = Field(..., alias="maxWidth", description="Viewport width (px) of max_size")
    min_size: float = Field(..., alias="minSize", description="Size at min_width")
    max_size: float = Field(..., alias="maxSize", description="Size at max_width")

    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}

    @model_validator(mode="after")
    def _check_widths(self) -> FluidRange:
        if self.max_width == self.min_width:
            raise ValueError(ErrorMessages.ZERO_WIDTH_RANGE.format(width=f"{self.min_width:g}"))
        if self.max_width < self.min_width:
            raise ValueError(
                ErrorMessages.INVERTED_RANGE.format(
                    max_width=f"{self.max_width:g}", min_width=f"{self.min_width:g}"
                )
            )
        return self

    @property
    def lower_size(self) -> float:
        """The smaller of the two sizes."""
        return min(self.min_size, self.max_size)

    @property
    def upper_size(self) -> float:
        """The larger of the two sizes."""
        return max(self.min_size, self.max_size)

    def covers(self, viewport_width: float) -> bool:
        """Check if a viewport width lies inside the interpolation range."""
        return self.min_width <= viewport_width <= self.max_width

    def to_json_dict(self) -> dict[str, float]:
        """Convert to the source JSON shape."""
        return self.model_dump(by_alias=True)


class TokenDescriptor(BaseModel):
    """
    A single design token.

    Exactly one of `value` (fixed), `fluid` or `responsive` determines the
    evaluation path, recorded in `kind`. Fluid and responsive tokens may
    still carry an authored `value`; it is descriptive only, kept for
    round-tripping the source and never read when building.
    """

    category: str = Field(..., min_length=1, description="Token family (e.g. 'spacing')")
    name: str = Field(..., min_length=1, description="Identifier within the category")
    kind: TokenKind
    value: float | str | None = Field(default=None, description="Literal value")
    fluid: FluidRange | None = None
    responsive: dict[str, float | str] | None = Field(
        default=None,
        description="Explicit value per breakpoint name",
    )
    type: str | None = Field(default=None, description="Declared token type (e.g. 'fontSizes')")
    description: str | None = None

    model_config = {"frozen": True, "allow_inf_nan": False}

    @model_validator(mode="after")
    def _check_kind(self) -> TokenDescriptor:
        if self.kind == TokenKind.FLUID and self.fluid is None:
            raise ValueError("fluid token requires a 'fluid' range")
        if self.kind == TokenKind.RESPONSIVE and self.responsive is None:
            raise ValueError("responsive token requires 'responsive' values")
        if self.kind == TokenKind.FIXED and self.value is None:
            raise ValueError("fixed token requires a 'value'")
        return self

    @property
    def key(self) -> str:
        """Export key ("category/name")."""
        return token_key(self.category, self.name)

    def to_json_dict(self) -> dict[str, object]:
        """Convert back to the source JSON shape (without category/name)."""
        data: dict[str, object] = {}
        if self.value is not None:
            data["value"] = self.value
        if self.type is not None:
            data["type"] = self.type
        if self.description is not None:
            data["description"] = self.description
        if self.fluid is not None:
            data["fluid"] = self.fluid.to_json_dict()
        if self.responsive is not None:
            data["responsive"] = dict(self.responsive)
        return data


class TokenSet(BaseModel):
    """
    All loaded tokens, keyed by category then name.

    Insertion order follows the source files and is preserved in every
    artifact.
    """

    categories: dict[str, dict[str, TokenDescriptor]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def iter_tokens(self) -> Iterator[TokenDescriptor]:
        """Iterate over every token in source order."""
        for tokens in self.categories.values():
            yield from tokens.values()

    def get(self, key: str) -> TokenDescriptor | None:
        """Get a token by its "category/name" key."""
        category, sep, name = key.partition(KEY_SEPARATOR)
        if not sep:
            return None
        return self.categories.get(category, {}).get(name)

    def filter(self, category: str) -> list[TokenDescriptor]:
        """Get all tokens in a category."""
        return list(self.categories.get(category, {}).values())

    @property
    def keys(self) -> list[str]:
        """All export keys in source order."""
        return [token.key for token in self.iter_tokens()]

    def __len__(self) -> int:
        return sum(len(tokens) for tokens in self.categories.values())
