from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

import pathspec

from ..errors import SourceNotFoundError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", errors="ignore") as f:
        return f.read()


def build_spec(lines: Iterable[str]) -> Optional[pathspec.GitIgnoreSpec]:
    """GitIgnoreSpec from gitignore-style lines; None when there are no patterns."""
    patterns = []
    for ln in lines:
        ln = ln.strip()
        if ln and not ln.startswith("#"):
            patterns.append(ln)
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def build_gitignore_spec(root: Path) -> Optional[pathspec.GitIgnoreSpec]:
    """
    Build GitIgnoreSpec from .gitignore. Return None if .gitignore is missing.
    """
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    return build_spec(gitignore.read_text(encoding="utf-8", errors="ignore").splitlines())


def iter_files(
    root: Path,
    *,
    extensions: Set[str],
    specs: Sequence[pathspec.PathSpec] = (),
) -> Iterable[Path]:
    """
    Recursive file iterator; ignored directories are pruned early.
    Specs are matched against root-relative POSIX paths.
    """
    root = root.resolve()

    def ignored(rel_posix: str) -> bool:
        return any(spec.match_file(rel_posix) for spec in specs)

    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        keep: List[str] = []
        for d in dirnames:
            rel_dir = Path(dirpath, d).relative_to(root).as_posix()
            if ignored(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = sorted(keep)

        for fn in filenames:
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            if ignored(p.relative_to(root).as_posix()):
                continue
            yield p


def collect_files(
    paths: Sequence[Path],
    *,
    extensions: Set[str],
    exclude: Sequence[str] = (),
    respect_gitignore: bool = True,
) -> List[Path]:
    """
    Resolve command-line paths into a sorted list of unique source files.

    Files given explicitly are kept regardless of their extension;
    directories are walked and filtered.

    Raises:
        SourceNotFoundError: If a path does not exist
    """
    exclude_spec = build_spec(exclude)
    found: Set[Path] = set()

    for path in paths:
        if not path.exists():
            raise SourceNotFoundError(f"Path not found: {path}")

        if path.is_file():
            found.add(path.resolve())
            continue

        specs = []
        if respect_gitignore:
            git_spec = build_gitignore_spec(path)
            if git_spec is not None:
                specs.append(git_spec)
        if exclude_spec is not None:
            specs.append(exclude_spec)

        before = len(found)
        found.update(p.resolve() for p in iter_files(path, extensions=extensions, specs=specs))
        logger.debug("%s: %d file(s) selected", path, len(found) - before)

    return sorted(found)


__all__ = ["read_text", "build_spec", "build_gitignore_spec", "iter_files", "collect_files"]
