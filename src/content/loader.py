"""
Post loader for Markdown Blog.

Scans the content directory for Markdown files and builds the in-memory
post cache served by the web app.

Design principles:
- Error isolation: one broken post never stops the others from loading
- Posts are ordered newest first (ISO dates compare as text)
- A missing content directory is an empty blog, not a crash
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from src.content.parser import parse_post_strict
from src.models.post import FrontMatterError, Post
from src.utils import setup_logger

logger = setup_logger(__name__)

POST_EXTENSION = ".md"


# =============================================================================
# Load Result Data Structures
# =============================================================================

@dataclass
class SkippedFile:
    """A content file that was not loaded."""
    path: str
    error: str


@dataclass
class LoadResult:
    """Outcome of scanning a content directory."""
    content_dir: str
    posts: List[Post] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def loaded_count(self) -> int:
        return len(self.posts)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            f"Content dir: {self.content_dir}",
            f"Loaded:      {self.loaded_count}",
            f"Skipped:     {self.skipped_count}",
        ]
        for skipped in self.skipped:
            lines.append(f"  ✗ {skipped.path}: {skipped.error}")
        return "\n".join(lines)


def sort_newest_first(posts: Iterable[Post]) -> List[Post]:
    """Sort by date descending; posts sharing a date are ordered by slug."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.date, reverse=True)


def find_post_files(content_dir: Path) -> List[Path]:
    """Return the *.md files directly inside content_dir, sorted by name."""
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        return []
    return sorted(
        p for p in content_dir.iterdir()
        if p.is_file() and p.suffix == POST_EXTENSION
    )


def load_posts(content_dir: Path, verbose: bool = False) -> LoadResult:
    """
    Load every post in a content directory.

    Args:
        content_dir: Directory holding *.md posts (not searched recursively).
        verbose: Print a line for each loaded post.

    Returns:
        LoadResult with posts sorted newest first and the files that failed.
    """
    result = LoadResult(content_dir=str(content_dir))

    if not Path(content_dir).is_dir():
        logger.warning(f"Content directory not found: {content_dir}")
        return result

    posts: List[Post] = []

    for path in find_post_files(content_dir):
        try:
            post = parse_post_strict(path)
        except (OSError, UnicodeDecodeError, FrontMatterError) as e:
            error_msg = f"{type(e).__name__}: {e}"
            logger.warning(f"Skipping {path.name}: {error_msg}")
            result.skipped.append(SkippedFile(path=str(path), error=error_msg))
            continue

        posts.append(post)
        logger.debug(f"Loaded post: {post.title}")
        if verbose:
            print(f"Loaded post: {post.title}")

    result.posts = sort_newest_first(posts)
    logger.info(f"Loaded {result.loaded_count} posts from {content_dir} ({result.skipped_count} skipped)")
    return result


# =============================================================================
# Post Index (in-memory cache)
# =============================================================================

class PostIndex:
    """
    In-memory post cache keyed by slug.

    Usage:
        index = PostIndex.from_directory("content")
        post = index.get("hello-world")
        for post in index.all():
            print(post.title)
    """

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts: Dict[str, Post] = {}
        for post in posts:
            self._posts[post.slug] = post

    @classmethod
    def from_directory(cls, content_dir: Path, verbose: bool = False) -> "PostIndex":
        return cls(load_posts(content_dir, verbose=verbose).posts)

    def get(self, slug: str) -> Optional[Post]:
        return self._posts.get(slug)

    def all(self) -> List[Post]:
        """All posts, newest first."""
        return sort_newest_first(self._posts.values())

    def tags(self) -> List[str]:
        """Sorted unique tags across all posts."""
        return sorted({tag.lower() for post in self._posts.values() for tag in post.tags})

    def with_tag(self, tag: str) -> List[Post]:
        """Posts carrying the tag, newest first."""
        return [p for p in self.all() if p.has_tag(tag)]

    def __contains__(self, slug: str) -> bool:
        return slug in self._posts

    def __len__(self) -> int:
        return len(self._posts)

    def __repr__(self) -> str:
        return f"<PostIndex posts={len(self)}>"
