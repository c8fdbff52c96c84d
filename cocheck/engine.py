from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from .config import CheckConfig
from .filtering import collect_files, read_text
from .report_schema import CheckReport, FileReport
from .rule import CommentedOutCodeRule
from .version import tool_version

logger = logging.getLogger(__name__)


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def check_file(rule: CommentedOutCodeRule, path: Path, root: Path) -> FileReport:
    """Check one file; read failures are reported on the file instead of raised."""
    shown = _display_path(path, root)
    try:
        text = read_text(path)
    except OSError as e:
        logger.warning("Skipping %s: %s", shown, e)
        return FileReport(path=shown, error=str(e))

    violations = rule.check_source(text)
    logger.debug("%s: %d violation(s)", shown, len(violations))
    return FileReport(path=shown, violations=violations)


def run_check(paths: Sequence[Path], config: CheckConfig, *, root: Optional[Path] = None) -> CheckReport:
    """
    Check every source file found under ``paths``.

    Files are checked on ``config.jobs`` worker threads; the report lists
    them in path order whatever the completion order was.
    """
    root = (root or Path.cwd()).resolve()
    files = collect_files(
        paths,
        extensions=config.normalized_extensions,
        exclude=config.exclude,
        respect_gitignore=config.respect_gitignore,
    )
    logger.info("Checking %d file(s) with %d job(s)", len(files), config.jobs)

    rule = CommentedOutCodeRule(config)
    if config.jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=config.jobs) as executor:
            reports: List[FileReport] = list(executor.map(lambda p: check_file(rule, p, root), files))
    else:
        reports = [check_file(rule, p, root) for p in files]

    skipped = sum(1 for r in reports if r.error is not None)
    return CheckReport(
        tool_version=tool_version(),
        settings=config.as_properties(),
        files=reports,
        files_checked=len(reports) - skipped,
        violations=sum(len(r.violations) for r in reports),
        skipped=skipped,
    )


__all__ = ["check_file", "run_check"]
