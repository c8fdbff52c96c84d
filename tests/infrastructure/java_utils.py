"""
Tree-sitter Java availability helpers.
"""

import pytest


def is_tree_sitter_java_available() -> bool:
    """Check if the tree-sitter Java grammar can be imported."""
    try:
        import tree_sitter
        import tree_sitter_java
        return True
    except ImportError:
        return False


requires_java_grammar = pytest.mark.skipif(
    not is_tree_sitter_java_available(), reason="tree-sitter Java grammar not available"
)


__all__ = ["is_tree_sitter_java_available", "requires_java_grammar"]
