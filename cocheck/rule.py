"""
Commented-out code rule: classifier verdicts turned into violations.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Iterator, List

from .classifier import CodeLikelihoodClassifier
from .config import CheckConfig
from .report_schema import Violation
from .types import ClassificationResult, CommentBlock

_TWO_PLACES = Decimal("0.01")


def format_two_places(value: float) -> str:
    """Two decimals, rounding half up on the shortest decimal form of ``value``."""
    return str(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class CommentedOutCodeRule:
    """
    Runs the classifier over every comment block of a source file.

    One rule instance is built per run and may be shared between threads.
    """

    def __init__(self, config: CheckConfig | None = None):
        self.config = config or CheckConfig()
        self.classifier = CodeLikelihoodClassifier(self.config.classifier)

    def build_message(self, result: ClassificationResult) -> str:
        if result.is_single_line:
            where = f"Line {result.start_line}"
        else:
            where = f"Lines from {result.start_line} to {result.end_line}"
        return (
            f"{self.config.message} {where} classified as commented out java code"
            f" with a probability of {format_two_places(result.probability)}."
            f" (TIP: you can adjust classificationTreshold property"
            f" (actual is {format_two_places(self.config.classification_threshold)})"
            f" or use skipCheckSequence (actual is {self.config.skip_check_sequence}))."
        )

    def check_blocks(self, blocks: Iterable[CommentBlock]) -> Iterator[Violation]:
        for block in blocks:
            result = self.classifier.classify(block)
            if not result.is_code:
                continue
            yield Violation(
                start_line=result.start_line,
                end_line=result.end_line,
                probability=result.probability,
                message=self.build_message(result),
            )

    def check_source(self, text: str) -> List[Violation]:
        """Extract Java comments from ``text`` and check each of them."""
        from .adapters import extract_comments
        return list(self.check_blocks(extract_comments(text)))


__all__ = ["CommentedOutCodeRule", "format_two_places"]
