"""
Token loader - reads category-partitioned JSON token files.

Token files are JSON objects keyed by category, then by token name:

    {"spacing": {"xs": {"value": "4px", "type": "dimension",
                        "responsive": {"phone": 4, "tablet": 4, "desktop": 4}}}}

Files are merged into one TokenSet. Every descriptor gets its `kind` here,
once; later stages never re-inspect the raw shape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chuk_mcp_tokens.constants import (
    DEFAULT_SOURCES,
    KEY_SEPARATOR,
    ErrorMessages,
    TokenKind,
)
from chuk_mcp_tokens.errors import InvalidDescriptor, MissingInputFile, TokenCollision
from chuk_mcp_tokens.models.token import TokenDescriptor, TokenSet, token_key

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


def _reject_constant(constant: str) -> float:
    """Refuse the NaN and Infinity literals json accepts by default."""
    raise ValueError(f"non-finite number {constant}")


def infer_kind(key: str, data: dict[str, Any]) -> TokenKind:
    """
    Decide the evaluation path of a raw descriptor.

    `fluid` and `responsive` are mutually exclusive. A `value` next to
    either of them is descriptive only and does not select the path.

    Raises:
        InvalidDescriptor: If both or none of the path fields are present
    """
    has_fluid = data.get("fluid") is not None
    has_responsive = data.get("responsive") is not None

    if has_fluid and has_responsive:
        raise InvalidDescriptor(ErrorMessages.AMBIGUOUS_KIND.format(key=key), key=key)
    if has_fluid:
        return TokenKind.FLUID
    if has_responsive:
        return TokenKind.RESPONSIVE
    if data.get("value") is not None:
        return TokenKind.FIXED
    raise InvalidDescriptor(ErrorMessages.NO_KIND.format(key=key), key=key)


class TokenLoader:
    """
    Loads token definitions from a tokens directory.

    Sources are read in order. Categories split across files are merged;
    the same category/name in two files is a collision.
    """

    def __init__(
        self,
        tokens_dir: Path,
        sources: tuple[str, ...] | list[str] = DEFAULT_SOURCES,
        library_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            tokens_dir: Directory containing the token files
            sources: Token files to read, relative to tokens_dir
            library_path: Directory of bundled starter tokens
        """
        self.tokens_dir = tokens_dir
        self.sources = tuple(sources)
        self.library_path = library_path or LIBRARY_PATH

    @property
    def source_paths(self) -> list[Path]:
        """Absolute paths of the configured sources."""
        return [self.tokens_dir / source for source in self.sources]

    def load(self) -> TokenSet:
        """
        Load and merge every configured source.

        Returns:
            The merged TokenSet

        Raises:
            MissingInputFile: If a source file does not exist
            InvalidDescriptor: If a file or descriptor is malformed
            TokenCollision: If a token is defined in more than one file
        """
        categories: dict[str, dict[str, TokenDescriptor]] = {}
        origins: dict[str, Path] = {}

        for path in self.source_paths:
            data = self.read_file(path)
            count = 0
            for token in self.parse_tokens(data, location=path.name):
                if token.key in origins:
                    raise TokenCollision(
                        f"{ErrorMessages.DUPLICATE_KEY.format(key=token.key)}"
                        f" ({origins[token.key].name} and {path.name})"
                    )
                origins[token.key] = path
                categories.setdefault(token.category, {})[token.name] = token
                count += 1
            logger.debug(f"Loaded {count} tokens from {path}")

        token_set = TokenSet(categories=categories)
        logger.info(f"Loaded {len(token_set)} tokens from {len(self.sources)} source files")
        return token_set

    def read_file(self, path: Path) -> dict[str, Any]:
        """Read one token file as a JSON object."""
        if not path.is_file():
            raise MissingInputFile(ErrorMessages.MISSING_INPUT_FILE.format(path=path))

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except ValueError as e:
            raise InvalidDescriptor(ErrorMessages.INVALID_JSON.format(path=path, error=e)) from e

        if not isinstance(data, dict):
            raise InvalidDescriptor(
                ErrorMessages.NOT_AN_OBJECT.format(location=path.name, actual=type(data).__name__)
            )
        return data

    def parse_tokens(
        self, data: dict[str, Any], location: str = "<tokens>"
    ) -> list[TokenDescriptor]:
        """
        Parse a {category: {name: descriptor}} mapping.

        Args:
            data: Parsed JSON data
            location: Where the data came from (for error messages)

        Returns:
            Descriptors in source order
        """
        tokens: list[TokenDescriptor] = []

        for category, category_tokens in data.items():
            _check_name(category)
            if not isinstance(category_tokens, dict):
                raise InvalidDescriptor(
                    ErrorMessages.NOT_AN_OBJECT.format(
                        location=f"{location}:{category}",
                        actual=type(category_tokens).__name__,
                    )
                )
            for name, raw in category_tokens.items():
                tokens.append(self.parse_descriptor(category, name, raw))

        return tokens

    def parse_descriptor(self, category: str, name: str, data: Any) -> TokenDescriptor:
        """
        Parse one raw descriptor.

        Raises:
            InvalidDescriptor: If the descriptor is malformed
        """
        _check_name(name)
        key = token_key(category, name)

        if not isinstance(data, dict):
            raise InvalidDescriptor(
                ErrorMessages.NOT_AN_OBJECT.format(location=key, actual=type(data).__name__),
                key=key,
            )

        kind = infer_kind(key, data)

        try:
            return TokenDescriptor(
                category=category,
                name=name,
                kind=kind,
                value=data.get("value"),
                fluid=data.get("fluid"),
                responsive=data.get("responsive"),
                type=data.get("type"),
                description=data.get("description"),
            )
        except ValidationError as e:
            raise InvalidDescriptor(f"Invalid token '{key}': {_summarize(e)}", key=key) from e

    def list_library(self) -> list[Path]:
        """List bundled starter token files, relative to the library."""
        if not self.library_path.exists():
            return []
        return sorted(p.relative_to(self.library_path) for p in self.library_path.rglob("*.json"))

    def copy_library_to_project(self, overwrite: bool = False) -> list[Path]:
        """
        Copy the bundled starter tokens into the tokens directory.

        Args:
            overwrite: Replace files that already exist

        Returns:
            Paths of the copied files

        Raises:
            ValueError: If a file already exists and overwrite is False
        """
        relative_paths = self.list_library()

        if not overwrite:
            existing = [p for p in relative_paths if (self.tokens_dir / p).exists()]
            if existing:
                names = ", ".join(str(p) for p in existing)
                raise ValueError(f"Token files already exist in project: {names}")

        copied: list[Path] = []
        for relative in relative_paths:
            dest = self.tokens_dir / relative
            dest.parent.mkdir(parents=True, exist_ok=True)
            source = self.library_path / relative
            dest.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
            copied.append(dest)

        logger.info(f"Copied {len(copied)} starter token files to {self.tokens_dir}")
        return copied


def _check_name(name: str) -> None:
    if KEY_SEPARATOR in name:
        raise InvalidDescriptor(ErrorMessages.RESERVED_SEPARATOR.format(name=name))


def _summarize(error: ValidationError) -> str:
    """First validation message, without pydantic's boilerplate."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid")
    return f"{location}: {message}" if location else message
