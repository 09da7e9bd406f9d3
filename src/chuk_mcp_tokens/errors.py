"""
Error kinds raised by the token pipeline.

Every error is terminal for the run: nothing here is used for control flow.
"""

from __future__ import annotations


class TokenError(Exception):
    """Base class for all token pipeline errors."""


class MissingInputFile(TokenError, FileNotFoundError):
    """A required token source file does not exist."""


class InvalidDescriptor(TokenError, ValueError):
    """A token's fields are ambiguous or violate an invariant."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class MissingBreakpointValue(InvalidDescriptor):
    """A responsive token lacks a value for one of the breakpoints."""

    def __init__(self, message: str, key: str | None = None, breakpoint: str | None = None):
        super().__init__(message, key)
        self.breakpoint = breakpoint


class TokenCollision(TokenError, ValueError):
    """Two descriptors map to the same key or CSS property name."""


class OutputWriteFailure(TokenError, OSError):
    """An artifact could not be written."""


class InvalidConfig(TokenError, ValueError):
    """The build configuration file is malformed."""
