"""
Token Validator - checks a TokenSet against a breakpoint set before building.

Validates:
- Every token maps to a usable, unique CSS property name
- Responsive tokens define a value for every breakpoint
- Fluid ranges cover the breakpoints (informational)
- Literal values that cannot be sampled as numbers (informational)

Errors abort the build; warnings and info are only reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_tokens.constants import ErrorMessages, TokenKind
from chuk_mcp_tokens.core.naming import css_property_name
from chuk_mcp_tokens.core.sampler import parse_literal
from chuk_mcp_tokens.errors import (
    InvalidDescriptor,
    MissingBreakpointValue,
    TokenCollision,
    TokenError,
)
from chuk_mcp_tokens.models.breakpoint import DEFAULT_BREAKPOINTS, BreakpointSet
from chuk_mcp_tokens.models.token import FluidRange, TokenSet

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Prevents building
    WARNING = "warning"  # Build possible but output may surprise
    INFO = "info"  # Informational only


# Exception raised for the first error of each code
ERROR_TYPES: dict[str, type[TokenError]] = {
    "INVALID_IDENTIFIER": InvalidDescriptor,
    "DUPLICATE_PROPERTY": TokenCollision,
    "MISSING_BREAKPOINT": MissingBreakpointValue,
}


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"

    def to_dict(self) -> dict[str, str | None]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


class ValidationResult:
    """Result of validating a token set."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def raise_for_errors(self) -> None:
        """
        Raise if any error was found.

        The exception type follows the first error's code; the message
        lists every error.
        """
        errors = self.errors
        if not errors:
            return
        error_type = ERROR_TYPES.get(errors[0].code, InvalidDescriptor)
        raise error_type("\n".join(str(issue) for issue in errors))

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class TokenValidator:
    """Validates a token set against a breakpoint set."""

    def __init__(self, breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS):
        """
        Initialize the validator.

        Args:
            breakpoints: Breakpoints every token must resolve at
        """
        self.breakpoints = breakpoints

    def validate(self, token_set: TokenSet) -> ValidationResult:
        """
        Validate a token set.

        Args:
            token_set: The tokens to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        if len(token_set) == 0:
            result.add_warning("EMPTY_TOKEN_SET", "No tokens defined", "tokens")
            return result

        self._validate_property_names(token_set, result)
        for token in token_set.iter_tokens():
            if token.kind == TokenKind.RESPONSIVE and token.responsive is not None:
                self._validate_responsive(token.key, token.responsive, result)
            elif token.kind == TokenKind.FLUID and token.fluid is not None:
                self._validate_fluid(token.key, token.fluid, result)
            elif token.value is not None:
                self._validate_fixed(token.key, token.value, result)

        for issue in result.issues:
            logger.debug(str(issue))
        return result

    def _validate_property_names(self, token_set: TokenSet, result: ValidationResult) -> None:
        """Check that every token gets a usable and unique CSS property."""
        users: dict[str, list[str]] = {}

        for token in token_set.iter_tokens():
            try:
                prop = css_property_name(token.category, token.name)
            except InvalidDescriptor as e:
                result.add_error("INVALID_IDENTIFIER", str(e), token.key)
                continue
            users.setdefault(prop, []).append(token.key)

        for prop, keys in users.items():
            if len(keys) > 1:
                result.add_error(
                    "DUPLICATE_PROPERTY",
                    ErrorMessages.DUPLICATE_PROPERTY.format(keys=", ".join(keys), property=prop),
                    keys[0],
                )

    def _validate_responsive(
        self, key: str, values: dict[str, float | str], result: ValidationResult
    ) -> None:
        """Check that a responsive token covers every breakpoint."""
        known = set(self.breakpoints.names)

        for name in self.breakpoints.names:
            if name not in values:
                result.add_error(
                    "MISSING_BREAKPOINT",
                    ErrorMessages.MISSING_BREAKPOINT.format(key=key, breakpoint=name),
                    f"{key}/responsive",
                )

        for name in values:
            if name not in known:
                result.add_info(
                    "UNKNOWN_BREAKPOINT",
                    f"Token '{key}' has a value for unknown breakpoint '{name}'",
                    f"{key}/responsive/{name}",
                )

        for name, value in values.items():
            if isinstance(parse_literal(value), str):
                result.add_info(
                    "NON_NUMERIC_VALUE",
                    f"Token '{key}' value for '{name}' is not numeric: {value!r}",
                    f"{key}/responsive/{name}",
                )

    def _validate_fluid(self, key: str, fluid: FluidRange, result: ValidationResult) -> None:
        """Report breakpoints that fall outside the fluid range."""
        outside = [
            bp.name for bp in self.breakpoints.breakpoints if not fluid.covers(bp.viewport_width)
        ]
        if outside:
            result.add_info(
                "FLUID_RANGE_CLAMPED",
                f"Token '{key}' is clamped at breakpoints: {', '.join(outside)}",
                f"{key}/fluid",
            )

        if fluid.lower_size < 0:
            result.add_warning(
                "NEGATIVE_SIZE",
                f"Token '{key}' reaches a negative size ({fluid.lower_size:g})",
                f"{key}/fluid",
            )

    def _validate_fixed(self, key: str, value: float | str, result: ValidationResult) -> None:
        """Report literals that export as strings."""
        if isinstance(parse_literal(value), str):
            result.add_info(
                "NON_NUMERIC_VALUE",
                f"Token '{key}' value is not numeric: {value!r}",
                f"{key}/value",
            )


def validate_tokens(
    token_set: TokenSet,
    breakpoints: BreakpointSet = DEFAULT_BREAKPOINTS,
) -> ValidationResult:
    """
    Convenience function to validate a token set.

    Args:
        token_set: The tokens to validate
        breakpoints: Breakpoints every token must resolve at

    Returns:
        ValidationResult with any issues found
    """
    validator = TokenValidator(breakpoints)
    return validator.validate(token_set)
