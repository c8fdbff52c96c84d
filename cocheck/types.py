from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ---- Input ----

@dataclass(frozen=True)
class CommentBlock:
    """
    One lexical comment as it appears in the source.

    Text is the raw slice including comment delimiters.
    Line numbers are 1-based and inclusive.
    """
    text: str
    start_line: int
    end_line: int

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


# ---- Output ----

@dataclass(frozen=True)
class ClassificationResult:
    """
    Verdict for a single comment block.

    For blocks classified as code, ``probability`` holds the combined
    probability of the first line that reached the threshold and
    ``line_index`` its 0-based index inside the block.
    """
    is_code: bool
    start_line: int
    end_line: int
    probability: Optional[float] = None
    line_index: Optional[int] = None

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


__all__ = ["CommentBlock", "ClassificationResult"]
