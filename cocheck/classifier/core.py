"""
Commented-out code classifier.

Decides for one comment block at a time whether it is likely to be
commented-out Java code. Lines are scored independently and the block
is reported as code as soon as one line reaches the threshold.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List

from .scoring import score_line
from ..types import ClassificationResult, CommentBlock

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.85
DEFAULT_SKIP_SEQUENCE = "cmt"

_JAVADOC_RE = re.compile(r"[ \t]*/\*\*.*")
_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Classifier settings, fixed for a whole run.

    Threshold must lie in (0, 1]; the configuration loader rejects other
    values before a classifier is ever built.
    """
    threshold: float = DEFAULT_THRESHOLD
    skip_sequence: str = DEFAULT_SKIP_SEQUENCE
    skip_javadocs: bool = True

    def __post_init__(self):
        if not 0.0 < self.threshold <= 1.0:
            raise ValueError(f"threshold must be in (0, 1], got {self.threshold!r}")
        if not self.skip_sequence:
            raise ValueError("skip_sequence must not be empty")


def build_skip_pattern(skip_sequence: str) -> re.Pattern[str]:
    """
    Pattern for a comment line that opts out of the check.

    Matches ``//`` or a block opener (``/*``, ``/**``, ...) with optional
    surrounding blanks, followed by the skip sequence.
    """
    return re.compile(r"[ \t]*(//|/\*(\*)*)[ \t]*" + re.escape(skip_sequence) + r".*")


def split_lines(text: str) -> List[str]:
    """Split on ``\\r\\n``, ``\\r`` or ``\\n``; an empty text has no lines."""
    if not text:
        return []
    return _LINE_SPLIT_RE.split(text)


class CodeLikelihoodClassifier:
    """
    Stateless classifier; safe to share between threads.

    Args:
        config: Classifier settings
        scorer: Per-line scoring function (combined probability for one line)
    """

    def __init__(self, config: ClassifierConfig | None = None, scorer: Callable[[str], float] = score_line):
        self.config = config or ClassifierConfig()
        self.scorer = scorer
        self._skip_re = build_skip_pattern(self.config.skip_sequence)

    def is_javadoc(self, lines: List[str]) -> bool:
        return bool(lines) and _JAVADOC_RE.fullmatch(lines[0]) is not None

    def is_skip_line(self, line: str) -> bool:
        return self._skip_re.fullmatch(line) is not None

    def classify(self, block: CommentBlock) -> ClassificationResult:
        lines = split_lines(block.text)

        if self.config.skip_javadocs and self.is_javadoc(lines):
            logger.debug("lines %d-%d: javadoc, not checked", block.start_line, block.end_line)
            return self._not_code(block)

        for index, line in enumerate(lines):
            if self.is_skip_line(line):
                logger.debug("lines %d-%d: skip sequence found", block.start_line, block.end_line)
                return self._not_code(block)

            probability = self.scorer(line)
            if probability >= self.config.threshold:
                return ClassificationResult(
                    is_code=True,
                    start_line=block.start_line,
                    end_line=block.end_line,
                    probability=probability,
                    line_index=index,
                )

        return self._not_code(block)

    def classify_text(self, text: str, start_line: int = 1) -> ClassificationResult:
        """Classify a bare comment text, numbering its lines from ``start_line``."""
        line_count = max(1, len(split_lines(text)))
        return self.classify(CommentBlock(text, start_line, start_line + line_count - 1))

    @staticmethod
    def _not_code(block: CommentBlock) -> ClassificationResult:
        return ClassificationResult(is_code=False, start_line=block.start_line, end_line=block.end_line)


__all__ = [
    "DEFAULT_THRESHOLD",
    "DEFAULT_SKIP_SEQUENCE",
    "ClassifierConfig",
    "CodeLikelihoodClassifier",
    "build_skip_pattern",
    "split_lines",
]
