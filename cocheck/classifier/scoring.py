from __future__ import annotations

from functools import reduce
from typing import Iterable, List, Sequence

from .evidence import EVIDENCE, Evidence


def noisy_or(probabilities: Iterable[float]) -> float:
    """
    Probability that at least one of several independent signals fired.

    Folded left to right as ``P = 1 - (1 - P) * (1 - p)`` starting from 0.
    """
    return reduce(lambda acc, p: 1 - ((1 - acc) * (1 - p)), probabilities, 0.0)


def line_evidence(line: str, evidence: Sequence[Evidence] = EVIDENCE) -> List[float]:
    """Evidence probabilities for one line, in combination order."""
    return [e.probability(line) for e in evidence]


def score_line(line: str) -> float:
    """Combined probability that a single comment line is code."""
    return noisy_or(line_evidence(line))


__all__ = ["noisy_or", "line_evidence", "score_line"]
