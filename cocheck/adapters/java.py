"""
Java comment extraction built on the tree-sitter Java grammar.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from tree_sitter import Language

from .tree_sitter_support import TreeSitterDocument
from ..types import CommentBlock

logger = logging.getLogger(__name__)

QUERIES = {
    # Comments (both single-line and block comments)
    "comments": """
    (line_comment) @comment

    (block_comment) @comment
    """,
}


class JavaDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_java as tsjava
        return Language(tsjava.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


def extract_comments(text: str) -> List[CommentBlock]:
    """
    Extract every comment of a Java source in document order.

    Consecutive ``//`` comments stay separate blocks. Line numbers are
    1-based and inclusive; block text is the exact source slice.
    """
    doc = JavaDocument(text)
    if doc.has_error():
        logger.debug("Java source has %d syntax error node(s); comments are still extracted", len(doc.get_errors()))

    blocks: List[CommentBlock] = []
    for node, _capture in doc.query("comments"):
        start_row, end_row = doc.get_line_range(node)
        # a node ending at column 0 stops before that row
        if end_row > start_row and node.end_point[1] == 0:
            end_row -= 1
        blocks.append(CommentBlock(doc.get_node_text(node), start_row + 1, end_row + 1))
    return blocks


__all__ = ["JavaDocument", "QUERIES", "extract_comments"]
