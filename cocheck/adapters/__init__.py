from __future__ import annotations

# Public API of adapters package:
#  • extract_comments — comment blocks of a Java source

__all__ = ["extract_comments"]


def extract_comments(text: str):
    # tree-sitter is imported only when a source is actually parsed
    from .java import extract_comments as _extract
    return _extract(text)
