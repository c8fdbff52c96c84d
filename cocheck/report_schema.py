"""
JSON report schema for ``cocheck check --json``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Violation(_Model):
    start_line: int = Field(alias="startLine")
    end_line: int = Field(alias="endLine")
    probability: float
    message: str


class FileReport(_Model):
    path: str
    violations: List[Violation] = Field(default_factory=list)
    error: Optional[str] = None


class CheckReport(_Model):
    tool_version: str = Field(alias="toolVersion")
    settings: Dict[str, Any]
    files: List[FileReport] = Field(default_factory=list)
    files_checked: int = Field(0, alias="filesChecked")
    violations: int = 0
    skipped: int = 0

    @property
    def has_violations(self) -> bool:
        return self.violations > 0


__all__ = ["Violation", "FileReport", "CheckReport"]
