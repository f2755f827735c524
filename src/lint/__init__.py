"""
Lint module.

Well-formedness checks for post files.
"""

from src.lint.linter import (
    LintIssue,
    LintReport,
    MAX_TAG_LENGTH,
    find_unclosed_fence,
    lint_directory,
    lint_file,
    lint_text,
)

__all__ = [
    "LintIssue",
    "LintReport",
    "MAX_TAG_LENGTH",
    "find_unclosed_fence",
    "lint_directory",
    "lint_file",
    "lint_text",
]
