"""
Tests for running the check over a project.
"""

from pathlib import Path

import pytest

from cocheck.config import CheckConfig
from cocheck.engine import check_file, run_check
from cocheck.rule import CommentedOutCodeRule
from tests.infrastructure import requires_java_grammar, write

pytestmark = requires_java_grammar


def test_report_lists_files_in_path_order(javaproj: Path):
    report = run_check([javaproj], CheckConfig(), root=javaproj)
    assert [f.path for f in report.files] == ["src/demo/Clean.java", "src/demo/Greeter.java"]
    assert report.files_checked == 2
    assert report.violations == 2
    assert report.skipped == 0
    assert report.has_violations


def test_violations_per_file(javaproj: Path):
    report = run_check([javaproj], CheckConfig(), root=javaproj)
    clean, greeter = report.files
    assert clean.violations == []
    assert [(v.start_line, v.end_line) for v in greeter.violations] == [(12, 12), (13, 16)]


def test_parallel_run_matches_sequential(javaproj: Path):
    for i in range(5):
        write(javaproj / "more" / f"Extra{i}.java", f"class Extra{i} {{\n  // counter{i}++;\n}}\n")
    sequential = run_check([javaproj], CheckConfig(), root=javaproj)
    parallel = run_check([javaproj], CheckConfig(jobs=4), root=javaproj)
    assert parallel.files == sequential.files
    assert parallel.violations == sequential.violations == 7


def test_strict_threshold_reduces_findings(javaproj: Path):
    report = run_check([javaproj], CheckConfig(classification_threshold=0.99), root=javaproj)
    assert report.violations == 1


def test_report_settings_and_json_aliases(javaproj: Path):
    report = run_check([javaproj], CheckConfig(), root=javaproj)
    data = report.model_dump(mode="json", by_alias=True)
    assert data["settings"]["classificationThreshold"] == 0.85
    assert data["filesChecked"] == 2
    first = data["files"][1]["violations"][0]
    assert set(first) == {"startLine", "endLine", "probability", "message"}


def test_unreadable_file_is_reported_not_raised(tmp_path: Path):
    missing = tmp_path / "Gone.java"
    report = check_file(CommentedOutCodeRule(), missing, tmp_path)
    assert report.path == "Gone.java"
    assert report.error
    assert report.violations == []


def test_paths_outside_root_are_shown_absolute(javaproj: Path, tmp_path_factory: pytest.TempPathFactory):
    other_root = tmp_path_factory.mktemp("elsewhere")
    report = run_check([javaproj / "src" / "demo" / "Clean.java"], CheckConfig(), root=other_root)
    assert Path(report.files[0].path).is_absolute()
