"""
Tests for the token and breakpoint models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_tokens.constants import TokenKind
from chuk_mcp_tokens.models import (
    DEFAULT_BREAKPOINTS,
    Breakpoint,
    BreakpointSet,
    FluidRange,
    TokenDescriptor,
    TokenSet,
    token_key,
)


class TestFluidRange:
    """Tests for FluidRange model."""

    def test_from_json_aliases(self) -> None:
        """Accepts the camelCase JSON field names."""
        fluid = FluidRange.model_validate(
            {"minWidth": 320, "maxWidth": 1240, "minSize": 18, "maxSize": 20}
        )
        assert fluid.min_width == 320
        assert fluid.max_size == 20

    def test_zero_width_rejected(self) -> None:
        """maxWidth == minWidth is invalid."""
        with pytest.raises(ValidationError, match="maxWidth == minWidth"):
            FluidRange(min_width=320, max_width=320, min_size=18, max_size=20)

    def test_inverted_range_rejected(self) -> None:
        """maxWidth < minWidth is invalid."""
        with pytest.raises(ValidationError, match="maxWidth"):
            FluidRange(min_width=1240, max_width=320, min_size=18, max_size=20)

    def test_negative_slope_allowed(self) -> None:
        """Sizes may decrease."""
        fluid = FluidRange(min_width=320, max_width=1240, min_size=40, max_size=20)
        assert fluid.lower_size == 20
        assert fluid.upper_size == 40

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, bad: float) -> None:
        """Widths and sizes must be finite numbers."""
        with pytest.raises(ValidationError):
            FluidRange(min_width=320, max_width=bad, min_size=18, max_size=20)
        with pytest.raises(ValidationError):
            FluidRange(min_width=320, max_width=1240, min_size=bad, max_size=20)

    def test_covers(self) -> None:
        """Checks the interpolation range inclusively."""
        fluid = FluidRange(min_width=320, max_width=1240, min_size=18, max_size=20)
        assert fluid.covers(320) is True
        assert fluid.covers(1240) is True
        assert fluid.covers(1241) is False

    def test_to_json_dict(self) -> None:
        """Serializes with the JSON aliases."""
        fluid = FluidRange(min_width=320, max_width=1240, min_size=18, max_size=20)
        assert fluid.to_json_dict() == {
            "minWidth": 320,
            "maxWidth": 1240,
            "minSize": 18,
            "maxSize": 20,
        }


class TestTokenDescriptor:
    """Tests for TokenDescriptor model."""

    def test_key(self) -> None:
        """Key joins category and name with a slash."""
        token = TokenDescriptor(category="spacing", name="xs", kind=TokenKind.FIXED, value="4px")
        assert token.key == "spacing/xs"
        assert token_key("spacing", "xs") == "spacing/xs"

    def test_kind_requires_matching_field(self) -> None:
        """The discriminant must match a present field."""
        with pytest.raises(ValidationError):
            TokenDescriptor(category="spacing", name="xs", kind=TokenKind.FLUID)
        with pytest.raises(ValidationError):
            TokenDescriptor(category="spacing", name="xs", kind=TokenKind.RESPONSIVE)
        with pytest.raises(ValidationError):
            TokenDescriptor(category="spacing", name="xs", kind=TokenKind.FIXED)

    def test_frozen(self) -> None:
        """Descriptors are immutable."""
        token = TokenDescriptor(category="spacing", name="xs", kind=TokenKind.FIXED, value="4px")
        with pytest.raises(ValidationError):
            token.value = "8px"

    def test_non_finite_value_rejected(self) -> None:
        """NaN and infinite literals are rejected for every kind."""
        with pytest.raises(ValidationError):
            TokenDescriptor(
                category="spacing", name="xs", kind=TokenKind.FIXED, value=float("nan")
            )
        with pytest.raises(ValidationError):
            TokenDescriptor(
                category="spacing",
                name="xs",
                kind=TokenKind.RESPONSIVE,
                responsive={"phone": float("inf"), "tablet": 4, "desktop": 4},
            )

    def test_to_json_dict(self) -> None:
        """Round-trips to the source shape."""
        token = TokenDescriptor(
            category="spacing",
            name="sm",
            kind=TokenKind.RESPONSIVE,
            value="8px",
            type="dimension",
            responsive={"phone": 6, "tablet": 8, "desktop": 8},
        )
        assert token.to_json_dict() == {
            "value": "8px",
            "type": "dimension",
            "responsive": {"phone": 6, "tablet": 8, "desktop": 8},
        }


class TestTokenSet:
    """Tests for TokenSet model."""

    def make_set(self) -> TokenSet:
        return TokenSet(
            categories={
                "spacing": {
                    "xs": TokenDescriptor(
                        category="spacing", name="xs", kind=TokenKind.FIXED, value="4px"
                    ),
                    "sm": TokenDescriptor(
                        category="spacing", name="sm", kind=TokenKind.FIXED, value="8px"
                    ),
                },
                "fontSizes": {
                    "base": TokenDescriptor(
                        category="fontSizes", name="base", kind=TokenKind.FIXED, value="18px"
                    ),
                },
            }
        )

    def test_len_and_keys(self) -> None:
        """Counts and keys follow insertion order."""
        token_set = self.make_set()
        assert len(token_set) == 3
        assert token_set.keys == ["spacing/xs", "spacing/sm", "fontSizes/base"]

    def test_get(self) -> None:
        """Looks tokens up by key."""
        token_set = self.make_set()
        assert token_set.get("spacing/sm").value == "8px"
        assert token_set.get("spacing/missing") is None
        assert token_set.get("nokey") is None

    def test_filter(self) -> None:
        """Filters by category."""
        token_set = self.make_set()
        assert [t.name for t in token_set.filter("spacing")] == ["xs", "sm"]
        assert token_set.filter("colors") == []


class TestBreakpointSet:
    """Tests for BreakpointSet model."""

    def test_defaults(self) -> None:
        """Canonical breakpoints: phone 320, tablet 768, desktop 1240."""
        assert DEFAULT_BREAKPOINTS.to_dict() == {"phone": 320, "tablet": 768, "desktop": 1240}
        assert DEFAULT_BREAKPOINTS.widest.name == "desktop"
        assert len(DEFAULT_BREAKPOINTS) == 3

    def test_sorted_by_width(self) -> None:
        """Breakpoints are kept narrowest first."""
        bps = BreakpointSet.from_widths({"desktop": 1240, "phone": 320})
        assert bps.names == ["phone", "desktop"]

    def test_duplicate_names_rejected(self) -> None:
        """Names must be unique."""
        with pytest.raises(ValidationError, match="Duplicate breakpoint"):
            BreakpointSet(
                breakpoints=(
                    Breakpoint(name="phone", viewport_width=320),
                    Breakpoint(name="phone", viewport_width=480),
                )
            )

    def test_duplicate_widths_rejected(self) -> None:
        """Widths must be unique."""
        with pytest.raises(ValidationError, match="share width"):
            BreakpointSet.from_widths({"phone": 320, "small": 320})

    def test_empty_rejected(self) -> None:
        """At least one breakpoint is required."""
        with pytest.raises(ValidationError):
            BreakpointSet(breakpoints=())

    def test_get(self) -> None:
        """Looks breakpoints up by name."""
        assert DEFAULT_BREAKPOINTS.get("tablet").viewport_width == 768
        assert DEFAULT_BREAKPOINTS.get("watch") is None

    def test_str(self) -> None:
        """Readable string form."""
        assert str(Breakpoint(name="phone", viewport_width=320)) == "phone@320px"
