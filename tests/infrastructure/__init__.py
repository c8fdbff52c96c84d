"""
Shared test infrastructure for cocheck.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- java_utils: Tree-sitter Java availability checks
"""

from .file_utils import write, write_java
from .cli_utils import run_cli, jload, PROJECT_ROOT
from .java_utils import is_tree_sitter_java_available, requires_java_grammar

__all__ = [
    "write", "write_java",
    "run_cli", "jload", "PROJECT_ROOT",
    "is_tree_sitter_java_available", "requires_java_grammar",
]
