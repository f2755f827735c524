"""
Post linter for Markdown Blog.

Checks that posts are well-formed before they are published:

| Field        | Rule                                                   |
|--------------|--------------------------------------------------------|
| frontmatter  | leading `---` block holding a YAML mapping             |
| title        | non-empty string                                       |
| date         | ISO-8601 calendar date, `YYYY-MM-DD`                   |
| tags         | non-empty list of short lowercase strings, no spaces   |
| body         | not empty, every code fence closed                     |

The loader is more lenient than the linter: a post with no tags still loads
and is served, but fails linting.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, List

from src.content.loader import find_post_files
from src.content.parser import split_frontmatter
from src.models.post import FrontMatterError


KNOWN_FIELDS = ("title", "date", "tags")

MAX_TAG_LENGTH = 32

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Opening fence: 3+ backticks or tildes, up to 3 spaces of indent
FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class LintIssue:
    """
    A single problem found in a post.

    Attributes:
        path: File the issue was found in.
        field: Frontmatter field or document part ("frontmatter", "body").
        message: Human-readable description.
        severity: "error" or "warning".
    """
    path: str
    field: str
    message: str
    severity: str = SEVERITY_ERROR

    def __str__(self) -> str:
        return f"{self.path}: [{self.severity}] {self.field}: {self.message}"


@dataclass
class LintReport:
    """Result of linting a content directory."""
    content_dir: str
    files_checked: int = 0
    issues: List[LintIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[LintIssue]:
        return [i for i in self.issues if i.severity == SEVERITY_ERROR]

    @property
    def warnings(self) -> List[LintIssue]:
        return [i for i in self.issues if i.severity == SEVERITY_WARNING]

    @property
    def ok(self) -> bool:
        """True when no errors were found (warnings allowed)."""
        return not self.errors

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "LINT REPORT",
            "=" * 60,
            f"Content dir:   {self.content_dir}",
            f"Files checked: {self.files_checked}",
            f"Errors:        {len(self.errors)}",
            f"Warnings:      {len(self.warnings)}",
        ]

        if self.issues:
            lines.append("")
            for issue in self.issues:
                status = "✗" if issue.severity == SEVERITY_ERROR else "⚠"
                lines.append(f"  {status} {issue}")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Field Checks
# =============================================================================

def _check_title(value: Any) -> List[str]:
    if value is None:
        return ["title is required"]
    if not isinstance(value, str):
        return [f"title must be a string, got {type(value).__name__}"]
    if not value.strip():
        return ["title cannot be empty"]
    return []


def _check_date(value: Any) -> List[str]:
    if value is None:
        return ["date is required"]

    # Unquoted YAML timestamps arrive as datetime, plain dates as date
    if isinstance(value, datetime):
        return [f"date must be a calendar date without a time, got {value.isoformat(sep=' ')!r}"]
    if isinstance(value, date):
        return []

    if not isinstance(value, str):
        return [f"date must be a string, got {type(value).__name__}"]

    if not ISO_DATE_RE.match(value):
        return [f"date must be in YYYY-MM-DD form, got {value!r}"]

    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return [f"date is not a valid calendar date: {value!r}"]

    return []


def _check_tags(value: Any) -> List[tuple]:
    """Return (severity, message) pairs."""
    if value is None:
        return [(SEVERITY_ERROR, "tags is required")]
    if not isinstance(value, list):
        return [(SEVERITY_ERROR, f"tags must be a list, got {type(value).__name__}")]
    if not value:
        return [(SEVERITY_ERROR, "tags cannot be empty")]

    problems = []
    seen = set()
    for tag in value:
        if not isinstance(tag, str):
            problems.append((SEVERITY_ERROR, f"tag must be a string, got {tag!r}"))
            continue
        if not tag.strip():
            problems.append((SEVERITY_ERROR, "tag cannot be empty"))
            continue
        if tag != tag.lower():
            problems.append((SEVERITY_ERROR, f"tag must be lowercase: {tag!r}"))
        if any(ch.isspace() for ch in tag):
            problems.append((SEVERITY_ERROR, f"tag cannot contain whitespace: {tag!r}"))
        if len(tag) > MAX_TAG_LENGTH:
            problems.append((SEVERITY_ERROR, f"tag longer than {MAX_TAG_LENGTH} characters: {tag!r}"))
        if tag in seen:
            problems.append((SEVERITY_WARNING, f"duplicate tag: {tag!r}"))
        seen.add(tag)

    return problems


def find_unclosed_fence(body: str) -> int:
    """
    Find a code fence that is never closed.

    Returns:
        1-based line number of the unclosed opening fence, or 0 if all
        fences are balanced.
    """
    open_fence = None
    open_line = 0

    for lineno, line in enumerate(body.splitlines(), start=1):
        match = FENCE_RE.match(line)
        if not match:
            continue
        marker = match.group(1)
        if open_fence is None:
            open_fence = marker
            open_line = lineno
        elif marker[0] == open_fence[0] and len(marker) >= len(open_fence) \
                and not line.strip()[len(marker):].strip():
            # A closing fence uses the same character, is at least as long,
            # and carries no info string
            open_fence = None

    return open_line if open_fence is not None else 0


# =============================================================================
# Public API
# =============================================================================

def lint_text(text: str, path: str = "<string>") -> List[LintIssue]:
    """
    Lint raw post text.

    Args:
        text: Full file contents.
        path: Name used in reported issues.

    Returns:
        List of issues (empty if the post is well-formed).
    """
    issues: List[LintIssue] = []

    try:
        metadata, body = split_frontmatter(text)
    except FrontMatterError as e:
        return [LintIssue(path, "frontmatter", str(e))]

    for message in _check_title(metadata.get("title")):
        issues.append(LintIssue(path, "title", message))

    for message in _check_date(metadata.get("date")):
        issues.append(LintIssue(path, "date", message))

    for severity, message in _check_tags(metadata.get("tags")):
        issues.append(LintIssue(path, "tags", message, severity))

    for key in metadata:
        if key not in KNOWN_FIELDS:
            issues.append(LintIssue(path, "frontmatter", f"unknown field: {key!r}", SEVERITY_WARNING))

    if not body.strip():
        issues.append(LintIssue(path, "body", "body is empty"))
    else:
        unclosed = find_unclosed_fence(body.strip())
        if unclosed:
            issues.append(LintIssue(path, "body", f"code fence opened on body line {unclosed} is never closed"))

    return issues


def lint_file(path: Path) -> List[LintIssue]:
    """Lint a single post file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return [LintIssue(str(path), "file", f"cannot read file: {e}")]
    return lint_text(text, path=str(path))


def lint_directory(content_dir: Path) -> LintReport:
    """
    Lint every *.md post in a directory.

    A missing directory is reported as a single error.
    """
    report = LintReport(content_dir=str(content_dir))

    if not Path(content_dir).is_dir():
        report.issues.append(LintIssue(str(content_dir), "file", "content directory not found"))
        return report

    for path in find_post_files(content_dir):
        report.files_checked += 1
        report.issues.extend(lint_file(path))

    return report
