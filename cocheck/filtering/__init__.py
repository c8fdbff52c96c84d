from __future__ import annotations

from .fs import build_gitignore_spec, build_spec, collect_files, iter_files, read_text

__all__ = ["build_gitignore_spec", "build_spec", "collect_files", "iter_files", "read_text"]
