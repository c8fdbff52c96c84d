"""
Tests for source file discovery.
"""

import warnings
from pathlib import Path

import pytest

from cocheck.errors import SourceNotFoundError
from cocheck.filtering import build_spec, collect_files
from tests.infrastructure import write


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    write(tmp_path / "src" / "A.java", "class A {}\n")
    write(tmp_path / "src" / "b" / "B.JAVA", "class B {}\n")
    write(tmp_path / "src" / "notes.txt", "// int x = 5;\n")
    write(tmp_path / "build" / "Gen.java", "class Gen {}\n")
    write(tmp_path / "generated" / "Gen2.java", "class Gen2 {}\n")
    write(tmp_path / ".git" / "Hidden.java", "class Hidden {}\n")
    write(tmp_path / ".gitignore", "# build output\nbuild/\n")
    return tmp_path


def rel(root: Path, files):
    return [p.relative_to(root.resolve()).as_posix() for p in files]


def test_walks_directories_by_extension(tree: Path):
    files = collect_files([tree], extensions={".java"})
    assert rel(tree, files) == ["generated/Gen2.java", "src/A.java", "src/b/B.JAVA"]


def test_gitignore_can_be_disabled(tree: Path):
    files = collect_files([tree], extensions={".java"}, respect_gitignore=False)
    assert "build/Gen.java" in rel(tree, files)
    assert ".git/Hidden.java" not in rel(tree, files)


def test_exclude_patterns(tree: Path):
    files = collect_files([tree], extensions={".java"}, exclude=["generated/", "**/b/*"])
    assert rel(tree, files) == ["src/A.java"]


def test_explicit_files_ignore_extension_filter(tree: Path):
    files = collect_files([tree / "src" / "notes.txt"], extensions={".java"})
    assert rel(tree, files) == ["src/notes.txt"]


def test_results_are_unique_and_sorted(tree: Path):
    files = collect_files([tree / "src", tree / "src" / "A.java"], extensions={".java"})
    assert rel(tree, files) == ["src/A.java", "src/b/B.JAVA"]


def test_missing_path(tmp_path: Path):
    with pytest.raises(SourceNotFoundError):
        collect_files([tmp_path / "missing"], extensions={".java"})


def test_build_spec_skips_blank_and_comment_lines():
    assert build_spec(["", "  ", "# only a comment"]) is None
    spec = build_spec(["*.gen.java"])
    assert spec.match_file("a/b/X.gen.java")


def test_build_spec_raises_no_deprecation_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        spec = build_spec(["build/"])
    assert spec.match_file("build/Out.java")
