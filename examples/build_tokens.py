#!/usr/bin/env python3
"""
Example: Building Fluid Design Tokens.

This demonstrates the token pipeline end to end: copy the starter tokens
into a scratch project, inspect how fluid and responsive tokens resolve at
each breakpoint, then write the stylesheet and the Figma exports.

Usage:
    python examples/build_tokens.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_tokens import BuildConfig, TokenBuilder
from chuk_mcp_tokens.constants import TokenKind
from chuk_mcp_tokens.core import css_property_name, sample_token, value_at
from chuk_mcp_tokens.formatters import css_value


def main() -> None:
    """Demonstrate the token pipeline."""
    print("CHUK Tokens Pipeline Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        config = BuildConfig().resolve(Path(tmp))
        builder = TokenBuilder(config)

        # Start from the bundled type and spacing scales
        copied = builder.loader.copy_library_to_project()
        print(f"Copied {len(copied)} starter token files")
        print()

        token_set = builder.load()
        breakpoints = builder.breakpoints
        print("Breakpoints:")
        for bp in breakpoints.breakpoints:
            print(f"  {bp}")
        print()

        # Sample every token at every breakpoint
        print("Sampled values:")
        for token in token_set.iter_tokens():
            values = sample_token(token, breakpoints)
            row = ", ".join(f"{name}={value}" for name, value in values.items())
            print(f"  {token.key:<24} [{token.kind.value}] {row}")
        print()

        # Fluid tokens keep interpolating between breakpoints
        base = token_set.get("fontSizes/base")
        if base is not None and base.kind == TokenKind.FLUID:
            print(f"{css_property_name(base.category, base.name)}: {css_value(base)}")
            for width in [320, 540, 780, 1024, 1240, 1600]:
                print(f"  at {width}px -> {value_at(base, width)}px")
            print()

        # Validate, then write every artifact
        check = builder.check(token_set)
        print(f"Validation: {len(check.errors)} errors, {len(check.warnings)} warnings")

        result = builder.build()
        print(f"Built {result.token_count} tokens:")
        for path in result.written:
            print(f"  {path.relative_to(config.output_dir)}")
        print()

        print("Stylesheet preview:")
        for line in result.css.splitlines()[:12]:
            print(f"  {line}")

    print()
    print("Done!")


if __name__ == "__main__":
    main()
