"""
Breakpoint models - named viewport widths used as sampling points.

Breakpoints are immutable values passed explicitly into the sampler and
formatters, so tests can inject their own sets.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tokens.constants import DEFAULT_BREAKPOINT_WIDTHS


class Breakpoint(BaseModel):
    """A named viewport sample point."""

    name: str = Field(..., min_length=1, description="Breakpoint name (e.g. 'phone')")
    viewport_width: int = Field(..., gt=0, description="Viewport width in px")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.name}@{self.viewport_width}px"


class BreakpointSet(BaseModel):
    """
    An ordered, immutable set of breakpoints.

    Breakpoints are kept sorted by viewport width. Names must be unique
    and no two breakpoints may share a width.
    """

    breakpoints: tuple[Breakpoint, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("breakpoints")
    @classmethod
    def _sorted_and_unique(cls, value: tuple[Breakpoint, ...]) -> tuple[Breakpoint, ...]:
        ordered = tuple(sorted(value, key=lambda bp: bp.viewport_width))

        names = [bp.name for bp in ordered]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate breakpoint names: {', '.join(duplicates)}")

        for prev, bp in zip(ordered, ordered[1:]):
            if prev.viewport_width == bp.viewport_width:
                raise ValueError(
                    f"Breakpoints '{prev.name}' and '{bp.name}' share width {bp.viewport_width}px"
                )

        return ordered

    @classmethod
    def from_widths(cls, widths: dict[str, int]) -> BreakpointSet:
        """Create a set from a {name: width} mapping."""
        return cls(
            breakpoints=tuple(
                Breakpoint(name=name, viewport_width=width) for name, width in widths.items()
            )
        )

    @property
    def names(self) -> list[str]:
        """Breakpoint names, narrowest first."""
        return [bp.name for bp in self.breakpoints]

    @property
    def widest(self) -> Breakpoint:
        """The breakpoint with the largest viewport width."""
        return self.breakpoints[-1]

    def get(self, name: str) -> Breakpoint | None:
        """Get a breakpoint by name."""
        for bp in self.breakpoints:
            if bp.name == name:
                return bp
        return None

    def to_dict(self) -> dict[str, int]:
        """Convert to a {name: width} mapping."""
        return {bp.name: bp.viewport_width for bp in self.breakpoints}

    def __len__(self) -> int:
        return len(self.breakpoints)


DEFAULT_BREAKPOINTS = BreakpointSet.from_widths(DEFAULT_BREAKPOINT_WIDTHS)
