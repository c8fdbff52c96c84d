"""
File helpers for tests.
"""

from __future__ import annotations

import textwrap
from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Write text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content to write

    Returns:
        Path of the written file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_java(p: Path, source: str) -> Path:
    """Write a Java source, dedenting it first."""
    return write(p, textwrap.dedent(source).lstrip("\n"))


__all__ = ["write", "write_java"]
