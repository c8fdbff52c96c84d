"""
cocheck — detection of commented-out Java code in comments.
"""

from .classifier import ClassifierConfig, CodeLikelihoodClassifier
from .types import ClassificationResult, CommentBlock

__all__ = ["ClassifierConfig", "CodeLikelihoodClassifier", "ClassificationResult", "CommentBlock"]
