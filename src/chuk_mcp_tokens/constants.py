"""
Constants and enums for the token pipeline.

No magic strings - use enums and named constants for constrained values.
"""

from enum import Enum


class TokenKind(str, Enum):
    """
    Evaluation path for a token.

    Decided once when the descriptor is loaded.
    """

    FIXED = "fixed"  # One literal for every viewport
    FLUID = "fluid"  # Linear interpolation between two viewport widths
    RESPONSIVE = "responsive"  # Explicit value per breakpoint


class ExportType(str, Enum):
    """Type tag written into the design-tool exports."""

    FONT_SIZE = "fontSize"
    SPACING = "spacing"
    DIMENSION = "dimension"


# Declared token types (and category names) that map onto an export type.
# Anything else exports as a generic dimension.
EXPORT_TYPE_MAP: dict[str, ExportType] = {
    "fontSizes": ExportType.FONT_SIZE,
    "fontSize": ExportType.FONT_SIZE,
    "spacing": ExportType.SPACING,
}

# Canonical breakpoints (name, viewport width in px).
# Desktop is 1240 so it matches the max width of the fluid type scale.
DEFAULT_BREAKPOINT_WIDTHS: dict[str, int] = {
    "phone": 320,
    "tablet": 768,
    "desktop": 1240,
}

# Decimal places used by both the CSS and the discrete export paths
DEFAULT_PRECISION = 2

# Unit appended to numeric values in CSS
CSS_UNIT = "px"

# Declared token types whose numbers are written to CSS without a unit
UNITLESS_TYPES: frozenset[str] = frozenset(
    {"lineHeights", "lineHeight", "fontWeights", "fontWeight", "opacity", "zIndex"}
)

# Separator between category and name in export keys ("spacing/xs")
KEY_SEPARATOR = "/"

# Default source files, relative to the tokens directory
DEFAULT_SOURCES: tuple[str, ...] = (
    "typography/font-sizes.json",
    "spacing/spacing.json",
)

# Default artifact locations, relative to the output directory
DEFAULT_CSS_FILE = "css/enhanced-tokens.css"
DEFAULT_FIGMA_DIR = "figma"
DEFAULT_BREAKPOINT_FILE_TEMPLATE = "{breakpoint}-enhanced.json"
DEFAULT_COMBINED_FILE = "figma-tokens-enhanced.json"
DEFAULT_PLUGIN_FILE = "figma-plugin-format.json"

DEFAULT_CONFIG_FILE = "tokens.config.yaml"


class ErrorMessages:
    """Standardized error messages."""

    MISSING_INPUT_FILE = "Token source file not found: {path}"
    INVALID_JSON = "Token source file is not valid JSON: {path} ({error})"
    NOT_AN_OBJECT = "Expected a JSON object at '{location}', got {actual}"
    AMBIGUOUS_KIND = "Token '{key}' defines both 'fluid' and 'responsive'"
    NO_KIND = "Token '{key}' has none of 'value', 'fluid' or 'responsive'"
    ZERO_WIDTH_RANGE = "Fluid range has maxWidth == minWidth ({width}px)"
    INVERTED_RANGE = "Fluid range has maxWidth ({max_width}px) < minWidth ({min_width}px)"
    MISSING_BREAKPOINT = "Token '{key}' has no responsive value for breakpoint '{breakpoint}'"
    DUPLICATE_KEY = "Token '{key}' is defined more than once"
    DUPLICATE_PROPERTY = "Tokens {keys} all map to CSS property '{property}'"
    RESERVED_SEPARATOR = "Name '{name}' must not contain '/'"
    EMPTY_IDENTIFIER = "Cannot derive an identifier from '{name}'"
    TOKEN_NOT_FOUND = "Token '{key}' not found."
    WRITE_FAILED = "Failed to write {path}: {error}"


class SuccessMessages:
    """Standardized success messages."""

    BUILD_COMPLETE = "Built {tokens} tokens into {files} files."
    VALIDATION_PASSED = "Validated {tokens} tokens: no errors."
    PROJECT_INITIALIZED = "Copied {count} starter token files to {path}."
