"""
Core data model for Markdown Blog.

Defines the FrontMatter and Post dataclasses. A Post is one Markdown file:
a YAML frontmatter block delimited by `---` lines, followed by the body.
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime
from typing import Any, Optional


class FrontMatterError(ValueError):
    """Raised when a post's frontmatter is missing or malformed."""


@dataclass
class FrontMatter:
    """
    Metadata block at the top of a post.

    Attributes:
        title: Post title.
        date: Publication date as a `YYYY-MM-DD` string.
        tags: Ordered list of tags, or None when the post declares none.
    """

    title: str
    date: str
    tags: Optional[list[str]] = None

    @classmethod
    def from_metadata(cls, metadata: dict[str, Any]) -> "FrontMatter":
        """
        Build FrontMatter from parsed YAML.

        YAML turns an unquoted `2024-01-15` into a date object; it is
        normalised back to its ISO string so that dates always compare as text.

        Raises:
            FrontMatterError: If required fields are missing or mistyped.
        """
        errors = []

        title = metadata.get("title")
        if not isinstance(title, str) or not title.strip():
            errors.append("title is required and must be a non-empty string")

        raw_date = metadata.get("date")
        if isinstance(raw_date, (date, datetime)):
            raw_date = raw_date.isoformat()[:10]
        if not isinstance(raw_date, str) or not raw_date.strip():
            errors.append("date is required and must be a string")

        tags = metadata.get("tags")
        if tags is not None:
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                errors.append("tags must be a list of strings")

        if errors:
            raise FrontMatterError(f"Invalid frontmatter: {'; '.join(errors)}")

        return cls(title=title, date=raw_date.strip(), tags=list(tags) if tags is not None else None)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Post:
    """
    A single blog entry.

    Attributes:
        slug: File stem of the source file, used in the post URL.
        frontmatter: Parsed metadata.
        content: Markdown body with surrounding whitespace stripped.
        html: Rendered HTML of the body.
    """

    slug: str
    frontmatter: FrontMatter
    content: str = ""
    html: str = ""

    @property
    def title(self) -> str:
        return self.frontmatter.title

    @property
    def date(self) -> str:
        return self.frontmatter.date

    @property
    def tags(self) -> list[str]:
        return self.frontmatter.tags or []

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        tag = tag.strip().lower()
        return any(t.lower() == tag for t in self.tags)

    def to_dict(self, include_content: bool = False) -> dict:
        """
        Convert to a JSON-friendly dictionary.

        Args:
            include_content: Also include the Markdown body and rendered HTML.
        """
        data = {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "tags": self.tags,
            "url": f"/posts/{self.slug}",
        }
        if include_content:
            data["content"] = self.content
            data["html"] = self.html
        return data

    def __str__(self) -> str:
        return f"[{self.date}] {self.title} ({self.slug})"

    def __repr__(self) -> str:
        return f"Post(slug={self.slug!r}, title={self.title!r}, date={self.date!r})"
