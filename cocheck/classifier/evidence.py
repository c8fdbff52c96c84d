"""
Per-line evidence that a comment line looks like code rather than prose.

Each heuristic counts matches of one static token set and turns the
count into a probability with ``1 - (1 - weight) ** count``, so a single
strong marker dominates quickly while weak markers add up slowly.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Tuple


# ---- Token sets ----

# Statement terminators checked at the end of the line
TERMINATORS: Tuple[str, ...] = ("}", ";", "{")

LOGICAL_OPERATORS: Tuple[str, ...] = ("||", "&&")

KEYWORDS: Tuple[str, ...] = (
    "public", "abstract", "class", "implements", "extends", "return", "throw",
    "private", "protected", "enum", "continue", "assert", "package", "synchronized",
    "boolean", "this", "double", "instanceof", "final", "interface", "static",
    "void", "long", "int", "float", "super", "true", "case:",
)

# Matched after all whitespace is removed from the line
CONTROL_FLOW_IDIOMS: Tuple[str, ...] = (
    "++", "for(", "if(", "while(", "catch(", "switch(", "try{", "else{",
)

_WHITESPACE_RE = re.compile(r"\s")


# ---- Measures ----

def ends_with_terminator(line: str) -> int:
    """1 if the line (trailing whitespace ignored) ends a statement or opens/closes a block."""
    return 1 if line.rstrip().endswith(TERMINATORS) else 0


def count_tokens(line: str, tokens: Tuple[str, ...]) -> int:
    """
    Count occurrences of every token in the line.

    Each token is scanned independently (non-overlapping with itself),
    so nested tokens both count: ``interface`` yields ``interface`` and ``int``.
    """
    return sum(line.count(token) for token in tokens)


def count_logical_operators(line: str) -> int:
    return count_tokens(line, LOGICAL_OPERATORS)


def count_keywords(line: str) -> int:
    return count_tokens(line, KEYWORDS)


def count_control_flow(line: str) -> int:
    return count_tokens(_WHITESPACE_RE.sub("", line), CONTROL_FLOW_IDIOMS)


def has_camel_case(line: str) -> int:
    """
    1 if an uppercase letter directly follows a lowercase one anywhere in the line.

    Characters outside the Basic Multilingual Plane are surrogate pairs in
    UTF-16 and never take part in a match.
    """
    prev = "Zs"  # a space precedes the first character
    for ch in line:
        curr = "Cs" if ord(ch) > 0xFFFF else unicodedata.category(ch)
        if prev == "Ll" and curr == "Lu":
            return 1
        prev = curr
    return 0


# ---- Evidence descriptors ----

@dataclass(frozen=True)
class Evidence:
    """One weighted heuristic: a match counter plus the per-match probability."""
    name: str
    weight: float
    measure: Callable[[str], int]

    def probability(self, line: str) -> float:
        return 1 - pow(1 - self.weight, self.measure(line))


# Order matters: probabilities are combined in this sequence
EVIDENCE: Tuple[Evidence, ...] = (
    Evidence("terminator", 0.95, ends_with_terminator),
    Evidence("logical_operators", 0.7, count_logical_operators),
    Evidence("keywords", 0.1, count_keywords),
    Evidence("control_flow", 0.95, count_control_flow),
    Evidence("camel_case", 0.5, has_camel_case),
)


__all__ = [
    "TERMINATORS",
    "LOGICAL_OPERATORS",
    "KEYWORDS",
    "CONTROL_FLOW_IDIOMS",
    "ends_with_terminator",
    "count_tokens",
    "count_logical_operators",
    "count_keywords",
    "count_control_flow",
    "has_camel_case",
    "Evidence",
    "EVIDENCE",
]
