"""
Build configuration.

Loaded from an optional YAML file; every field has a default so a bare
project (tokens/ in, dist/ out) needs no file at all:

    tokens_dir: tokens
    sources:
      - typography/font-sizes.json
      - spacing/spacing.json
    output_dir: dist
    precision: 2
    breakpoints:
      phone: 320
      tablet: 768
      desktop: 1240

Relative paths resolve against the directory holding the config file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from chuk_mcp_tokens.constants import (
    DEFAULT_BREAKPOINT_FILE_TEMPLATE,
    DEFAULT_BREAKPOINT_WIDTHS,
    DEFAULT_COMBINED_FILE,
    DEFAULT_CSS_FILE,
    DEFAULT_FIGMA_DIR,
    DEFAULT_PLUGIN_FILE,
    DEFAULT_PRECISION,
    DEFAULT_SOURCES,
)
from chuk_mcp_tokens.errors import InvalidConfig
from chuk_mcp_tokens.models.breakpoint import BreakpointSet

logger = logging.getLogger(__name__)


class BuildConfig(BaseModel):
    """Where tokens come from, where artifacts go, and how values are sampled."""

    tokens_dir: Path = Field(default=Path("tokens"), description="Token source directory")
    sources: tuple[str, ...] = Field(
        default=DEFAULT_SOURCES,
        min_length=1,
        description="Token files, relative to tokens_dir",
    )
    output_dir: Path = Field(default=Path("dist"), description="Artifact directory")
    css_file: str = Field(
        default=DEFAULT_CSS_FILE,
        description="Stylesheet, relative to output_dir",
    )
    figma_dir: str = Field(
        default=DEFAULT_FIGMA_DIR,
        description="Directory for breakpoint exports, relative to output_dir",
    )
    breakpoint_file_template: str = Field(
        default=DEFAULT_BREAKPOINT_FILE_TEMPLATE,
        description="Per-breakpoint export filename ({breakpoint} is substituted)",
    )
    combined_file: str = Field(
        default=DEFAULT_COMBINED_FILE,
        description="Combined export filename, inside figma_dir",
    )
    plugin_file: str = Field(
        default=DEFAULT_PLUGIN_FILE,
        description="Plugin-format export, relative to output_dir",
    )
    precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=6)
    breakpoints: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_BREAKPOINT_WIDTHS),
        min_length=1,
        description="Breakpoint name -> viewport width (px)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_breakpoints(self) -> BuildConfig:
        BreakpointSet.from_widths(self.breakpoints)
        return self

    @property
    def breakpoint_set(self) -> BreakpointSet:
        """Breakpoints as an immutable set."""
        return BreakpointSet.from_widths(self.breakpoints)

    @property
    def css_path(self) -> Path:
        return self.output_dir / self.css_file

    @property
    def figma_path(self) -> Path:
        return self.output_dir / self.figma_dir

    @property
    def combined_path(self) -> Path:
        return self.figma_path / self.combined_file

    @property
    def plugin_path(self) -> Path:
        return self.output_dir / self.plugin_file

    def breakpoint_path(self, breakpoint: str) -> Path:
        """Path of one per-breakpoint export."""
        return self.figma_path / self.breakpoint_file_template.format(breakpoint=breakpoint)

    def resolve(self, base: Path) -> BuildConfig:
        """Return a copy with relative directories resolved against base."""
        return self.model_copy(
            update={
                "tokens_dir": _resolve(base, self.tokens_dir),
                "output_dir": _resolve(base, self.output_dir),
            }
        )


def load_config(path: Path | None = None, base: Path | None = None) -> BuildConfig:
    """
    Load the build configuration.

    Args:
        path: YAML config file; None or a missing file gives the defaults
        base: Directory for resolving relative paths when there is no file
              (defaults to the current directory)

    Returns:
        The resolved configuration

    Raises:
        InvalidConfig: If the file is not valid YAML or has bad values
    """
    if path is None or not path.exists():
        if path is not None:
            logger.info(f"No config file at {path}, using defaults")
        return BuildConfig().resolve(base or Path.cwd())

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidConfig(f"Config file is not valid YAML: {path} ({e})") from e

    if not isinstance(data, dict):
        raise InvalidConfig(f"Config file must contain a mapping: {path}")

    try:
        config = BuildConfig(**data)
    except ValidationError as e:
        raise InvalidConfig(f"Invalid config {path}: {e}") from e

    logger.debug(f"Loaded config from {path}")
    return config.resolve(path.parent)


def _resolve(base: Path, path: Path) -> Path:
    return path if path.is_absolute() else base / path
