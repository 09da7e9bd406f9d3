"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest

from chuk_mcp_tokens.config import BuildConfig

FONT_SIZES = {
    "fontSizes": {
        "sm": {
            "type": "fontSizes",
            "fluid": {"minWidth": 320, "maxWidth": 1240, "minSize": 15, "maxSize": 16},
        },
        "base": {
            "value": "clamp(18px, 18px + (20 - 18) * ((100vw - 320px) / (1240 - 320)), 20px)",
            "type": "fontSizes",
            "fluid": {"minWidth": 320, "maxWidth": 1240, "minSize": 18, "maxSize": 20},
        },
        "lineHeight": {"type": "lineHeights", "value": 1.5},
    }
}

SPACING = {
    "spacing": {
        "xs": {
            "value": "4px",
            "type": "spacing",
            "responsive": {"phone": 4, "tablet": 4, "desktop": 4},
        },
        "sm": {
            "value": "8px",
            "type": "dimension",
            "responsive": {"phone": 4, "tablet": 6, "desktop": 8},
        },
        "gutter": {"value": "16px"},
    }
}


def _write_tokens(tokens_dir: Path, font_sizes: dict, spacing: dict) -> None:
    (tokens_dir / "typography").mkdir(parents=True, exist_ok=True)
    (tokens_dir / "spacing").mkdir(parents=True, exist_ok=True)
    (tokens_dir / "typography" / "font-sizes.json").write_text(json.dumps(font_sizes))
    (tokens_dir / "spacing" / "spacing.json").write_text(json.dumps(spacing))


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_project(temp_dir: Path):
    """Factory writing token source files into temp_dir/tokens."""

    def _make(font_sizes: dict | None = None, spacing: dict | None = None) -> Path:
        _write_tokens(
            temp_dir / "tokens",
            FONT_SIZES if font_sizes is None else font_sizes,
            SPACING if spacing is None else spacing,
        )
        return temp_dir

    return _make


@pytest.fixture
def project_dir(make_project) -> Path:
    """A project with tokens/ populated from the sample token files."""
    return make_project()


@pytest.fixture
def build_config(project_dir: Path) -> BuildConfig:
    """Default build config rooted at the sample project."""
    return BuildConfig().resolve(project_dir)
