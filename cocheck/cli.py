from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import CheckConfig, apply_overrides, load_config
from .engine import run_check
from .errors import CocheckUserError
from .jsonic import dumps as jdumps
from .report_schema import CheckReport
from .rule import CommentedOutCodeRule
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cocheck",
        description="Find comments that are likely commented-out Java code",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared classifier options for check/classify
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--config", type=Path, metavar="FILE", help="YAML config (default: ./cocheck.yaml if present)")
        sp.add_argument("--threshold", type=float, metavar="X", help="classificationThreshold, in (0, 1]")
        sp.add_argument("--skip-sequence", metavar="S", help="skipCheckSequence marker")
        sp.add_argument(
            "--skip-javadocs",
            dest="skip_javadocs",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="skip comments starting with /** (skipJavaDocs)",
        )
        sp.add_argument("--verbose", action="store_true", help="log progress to stderr")

    sp_check = sub.add_parser("check", help="Check Java sources for commented-out code")
    sp_check.add_argument("paths", nargs="+", type=Path, metavar="PATH", help="files or directories")
    sp_check.add_argument("--exclude", action="append", metavar="PATTERN", help="gitignore-style pattern (repeatable)")
    sp_check.add_argument("--jobs", type=int, metavar="N", help="worker threads")
    sp_check.add_argument("--json", action="store_true", help="print the JSON report")
    add_common(sp_check)

    sp_classify = sub.add_parser("classify", help="Classify a single comment block (JSON)")
    sp_classify.add_argument("text", metavar="TEXT|@FILE|-", help="comment text, @file to read a file, - for stdin")
    add_common(sp_classify)

    return p


def _setup_logging(verbose: bool) -> None:
    if os.environ.get("COCHECK_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    log = logging.getLogger("cocheck")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _config(ns: argparse.Namespace) -> CheckConfig:
    cfg = load_config(Path.cwd(), ns.config)
    exclude = getattr(ns, "exclude", None)
    return apply_overrides(
        cfg,
        classification_threshold=ns.threshold,
        skip_check_sequence=ns.skip_sequence,
        skip_java_docs=ns.skip_javadocs,
        jobs=getattr(ns, "jobs", None),
        exclude=[*cfg.exclude, *exclude] if exclude else None,
    )


def _parse_text(arg: str) -> str:
    """
    Comment text argument.

    Supports three formats:
    - Direct string: "// int x = 5;"
    - From file: @path/to/comment.txt
    - From stdin: -
    """
    if arg == "-":
        return sys.stdin.read().rstrip("\r\n")

    if arg.startswith("@"):
        file_path = Path(arg[1:])
        if not file_path.is_file():
            raise CocheckUserError(f"Comment file not found: {file_path}")
        try:
            return file_path.read_text(encoding="utf-8").rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise CocheckUserError(f"Failed to read comment file {file_path}: {e}") from e

    return arg


def _render_text(report: CheckReport) -> str:
    lines = []
    for f in report.files:
        if f.error is not None:
            lines.append(f"{f.path}: skipped ({f.error})")
        for v in f.violations:
            lines.append(f"{f.path}:{v.start_line}: {v.message}")
    lines.append(
        f"{report.violations} violation(s) in {report.files_checked} file(s)"
        + (f", {report.skipped} skipped" if report.skipped else "")
    )
    return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(getattr(ns, "verbose", False)))

    try:
        cfg = _config(ns)

        if ns.cmd == "check":
            report = run_check(ns.paths, cfg)
            if ns.json:
                sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            else:
                sys.stdout.write(_render_text(report))
            return 1 if report.has_violations else 0

        if ns.cmd == "classify":
            rule = CommentedOutCodeRule(cfg)
            result = rule.classifier.classify_text(_parse_text(ns.text))
            data = {
                "isCode": result.is_code,
                "probability": result.probability,
                "line": None if result.line_index is None else result.start_line + result.line_index,
            }
            if result.is_code:
                data["message"] = rule.build_message(result)
            sys.stdout.write(jdumps(data))
            return 0

    except CocheckUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
