"""
Data models module.

Defines the post and frontmatter structures.
"""

from src.models.post import FrontMatter, FrontMatterError, Post

__all__ = [
    "FrontMatter",
    "FrontMatterError",
    "Post",
]
