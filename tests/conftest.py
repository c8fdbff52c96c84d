import textwrap
from pathlib import Path

import pytest

from cocheck.classifier import ClassifierConfig, CodeLikelihoodClassifier
from tests.infrastructure.file_utils import write, write_java

# Line numbers below are referenced by the tests: the `// int x = 5;` comment
# is on line 12 and the block comment with the old loop spans lines 13-16.
GREETER_JAVA = textwrap.dedent("""
    package demo;

    import java.util.List;

    /**
     * Greets people.
     * public static void main(String[] args) {
     */
    public class Greeter {
        // This is a great helper method.
        public String greet(String name) {
            // int x = 5;
            /*
             * The old implementation:
             * for (int i = 0; i < 10; i++) {
             */
            // cmt if (name == null) { return null; }
            return "Hello " + name;
        }
    }
    """).lstrip("\n")


@pytest.fixture
def classifier() -> CodeLikelihoodClassifier:
    """Classifier with default settings."""
    return CodeLikelihoodClassifier(ClassifierConfig())


@pytest.fixture
def greeter_source() -> str:
    return GREETER_JAVA


@pytest.fixture
def javaproj(tmp_path: Path) -> Path:
    """Minimal project: one Java file with commented-out code, one clean file."""
    root = tmp_path
    write(root / "src" / "demo" / "Greeter.java", GREETER_JAVA)
    write_java(root / "src" / "demo" / "Clean.java", """
        package demo;

        // Holds nothing of interest.
        class Clean {
        }
        """)
    return root
