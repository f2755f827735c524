"""
Content module.

Reads posts from disk and keeps them in an in-memory index.
"""

from src.content.parser import (
    parse_post,
    parse_post_strict,
    parse_post_text,
    split_frontmatter,
)
from src.content.loader import (
    LoadResult,
    PostIndex,
    SkippedFile,
    find_post_files,
    load_posts,
    sort_newest_first,
)

__all__ = [
    "parse_post",
    "parse_post_strict",
    "parse_post_text",
    "split_frontmatter",
    "LoadResult",
    "PostIndex",
    "SkippedFile",
    "find_post_files",
    "load_posts",
    "sort_newest_first",
]
