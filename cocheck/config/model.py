from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..classifier import DEFAULT_SKIP_SEQUENCE, DEFAULT_THRESHOLD, ClassifierConfig
from ..errors import ConfigLoadError

DEFAULT_MESSAGE = "Avoid leaving commented out code."

# YAML property name -> CheckConfig field
PROPERTY_ALIASES: Dict[str, str] = {
    "classificationThreshold": "classification_threshold",
    "skipCheckSequence": "skip_check_sequence",
    "skipJavaDocs": "skip_java_docs",
    "message": "message",
    "extensions": "extensions",
    "exclude": "exclude",
    "respectGitignore": "respect_gitignore",
    "jobs": "jobs",
}


@dataclass(frozen=True)
class CheckConfig:
    """Effective settings for one run: classifier properties plus host options."""
    classification_threshold: float = DEFAULT_THRESHOLD
    skip_check_sequence: str = DEFAULT_SKIP_SEQUENCE
    skip_java_docs: bool = True
    message: str = DEFAULT_MESSAGE
    extensions: List[str] = field(default_factory=lambda: [".java"])
    exclude: List[str] = field(default_factory=list)
    respect_gitignore: bool = True
    jobs: int = 1

    def validate(self) -> CheckConfig:
        """Reject values the classifier does not accept as preconditions."""
        if not 0.0 < self.classification_threshold <= 1.0:
            raise ConfigLoadError(
                f"classificationThreshold: must be in (0, 1], got {self.classification_threshold!r}"
            )
        if not self.skip_check_sequence:
            raise ConfigLoadError("skipCheckSequence: must not be empty")
        if self.jobs < 1:
            raise ConfigLoadError(f"jobs: must be >= 1, got {self.jobs!r}")
        if not self.extensions:
            raise ConfigLoadError("extensions: at least one extension is required")
        return self

    @property
    def classifier(self) -> ClassifierConfig:
        return ClassifierConfig(
            threshold=self.classification_threshold,
            skip_sequence=self.skip_check_sequence,
            skip_javadocs=self.skip_java_docs,
        )

    @property
    def normalized_extensions(self) -> set[str]:
        return {(e if e.startswith(".") else "." + e).lower() for e in self.extensions}

    def as_properties(self) -> Dict[str, object]:
        """Settings keyed by their YAML property names."""
        return {prop: getattr(self, name) for prop, name in PROPERTY_ALIASES.items()}


__all__ = ["CheckConfig", "DEFAULT_MESSAGE", "PROPERTY_ALIASES"]
