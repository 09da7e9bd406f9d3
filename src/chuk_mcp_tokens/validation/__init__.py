"""
Token validation - collects issues before anything is rendered.
"""

from chuk_mcp_tokens.validation.validator import (
    TokenValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_tokens,
)

__all__ = [
    "TokenValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_tokens",
]
