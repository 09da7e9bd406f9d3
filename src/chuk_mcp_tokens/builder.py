"""
Token Builder - runs the whole pipeline and writes the artifacts.

    token files → TokenSet → validation → sampling/formatting → files

Every artifact is rendered in memory before the first write, so a failed
run can leave a file missing or truncated but never half-computed. Files
are overwritten whole on every run; unchanged input gives byte-identical
output.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from chuk_mcp_tokens.config import BuildConfig
from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import OutputWriteFailure
from chuk_mcp_tokens.formatters.css import render_stylesheet
from chuk_mcp_tokens.formatters.discrete import BreakpointExport, build_breakpoint_exports
from chuk_mcp_tokens.formatters.plugin import build_plugin_tokens
from chuk_mcp_tokens.loader import TokenLoader
from chuk_mcp_tokens.models.token import TokenSet
from chuk_mcp_tokens.validation import TokenValidator, ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of a build."""

    token_set: TokenSet
    validation: ValidationResult
    css: str
    exports: dict[str, BreakpointExport]
    plugin_tokens: dict[str, Any]
    artifacts: dict[Path, str] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        return len(self.token_set)


def to_json(data: Any) -> str:
    """Serialize an artifact: two-space indent, source order, trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class TokenBuilder:
    """
    Builds CSS and design-tool artifacts from token files.

    Builds are abort-on-error: a validation error raises before anything
    is rendered or written.
    """

    def __init__(self, config: BuildConfig | None = None):
        """
        Initialize the builder.

        Args:
            config: Build configuration (defaults resolve against the cwd)
        """
        self.config = config or BuildConfig().resolve(Path.cwd())
        self.breakpoints = self.config.breakpoint_set
        self.loader = TokenLoader(self.config.tokens_dir, self.config.sources)
        self.validator = TokenValidator(self.breakpoints)

    def load(self) -> TokenSet:
        """Load the token set fresh from disk."""
        return self.loader.load()

    def check(self, token_set: TokenSet | None = None) -> ValidationResult:
        """
        Validate without rendering or writing anything.

        Args:
            token_set: Tokens to check (loaded from disk if omitted)
        """
        return self.validator.validate(token_set if token_set is not None else self.load())

    def render(self, token_set: TokenSet) -> BuildResult:
        """
        Validate and render every artifact in memory.

        Raises:
            InvalidDescriptor, MissingBreakpointValue, TokenCollision:
                If validation finds an error
        """
        validation = self.validator.validate(token_set)
        for issue in validation.warnings:
            logger.warning(str(issue))
        validation.raise_for_errors()

        precision = self.config.precision
        css = render_stylesheet(token_set, self.breakpoints, precision)
        exports = build_breakpoint_exports(token_set, self.breakpoints, precision)
        plugin_tokens = build_plugin_tokens(exports)

        artifacts: dict[Path, str] = {self.config.css_path: css}
        for breakpoint, records in exports.items():
            artifacts[self.config.breakpoint_path(breakpoint)] = to_json(records)
        artifacts[self.config.combined_path] = to_json(exports)
        artifacts[self.config.plugin_path] = to_json(plugin_tokens)

        return BuildResult(
            token_set=token_set,
            validation=validation,
            css=css,
            exports=exports,
            plugin_tokens=plugin_tokens,
            artifacts=artifacts,
        )

    def write(self, artifacts: dict[Path, str]) -> list[Path]:
        """
        Write rendered artifacts, overwriting existing files.

        Raises:
            OutputWriteFailure: If a directory or file cannot be written
        """
        written: list[Path] = []
        for path, content in artifacts.items():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise OutputWriteFailure(
                    ErrorMessages.WRITE_FAILED.format(path=path, error=e)
                ) from e
            logger.debug(f"Wrote {path}")
            written.append(path)
        return written

    def build(self) -> BuildResult:
        """
        Run the full pipeline.

        Returns:
            BuildResult with the rendered content and written paths
        """
        token_set = self.load()
        result = self.render(token_set)
        result.written = self.write(result.artifacts)

        logger.info(f"Built {result.token_count} tokens into {len(result.written)} files")
        for path in result.written:
            logger.info(f"  {path}")
        return result


def build_tokens(config: BuildConfig | None = None) -> BuildResult:
    """
    Convenience function to run a build.

    Args:
        config: Build configuration

    Returns:
        BuildResult with written paths
    """
    builder = TokenBuilder(config)
    return builder.build()
