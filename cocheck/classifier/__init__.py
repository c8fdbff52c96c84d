"""
Heuristic classification of comment blocks as commented-out code.
"""

from __future__ import annotations

from .core import (
    DEFAULT_SKIP_SEQUENCE,
    DEFAULT_THRESHOLD,
    ClassifierConfig,
    CodeLikelihoodClassifier,
    build_skip_pattern,
    split_lines,
)
from .evidence import EVIDENCE, Evidence
from .scoring import line_evidence, noisy_or, score_line

__all__ = [
    "DEFAULT_SKIP_SEQUENCE",
    "DEFAULT_THRESHOLD",
    "ClassifierConfig",
    "CodeLikelihoodClassifier",
    "build_skip_pattern",
    "split_lines",
    "EVIDENCE",
    "Evidence",
    "line_evidence",
    "noisy_or",
    "score_line",
]
