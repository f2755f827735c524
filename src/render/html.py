"""
HTML rendering for Markdown Blog.

Markdown bodies are converted with Python-Markdown. The inline pages below
are what the server sends when no Jinja2 template is available, so the blog
stays browsable with an empty templates directory.
"""

from typing import Iterable

import markdown
from markupsafe import escape

from src.models.post import Post


# Fenced code blocks are the main requirement: posts are mostly tutorials
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

NOT_FOUND_HTML = "<h1>404 - Post Not Found</h1>"


def render_markdown(text: str) -> str:
    """
    Convert a Markdown body to HTML.

    Args:
        text: Markdown source.

    Returns:
        Rendered HTML fragment (empty string for an empty body).
    """
    if not text or not text.strip():
        return ""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")


def render_post_list_fallback(posts: Iterable[Post], heading: str = "Blog Posts") -> str:
    """Inline home page: one linked line per post, in the given order."""
    items = "".join(
        f'<li><a href="/posts/{escape(p.slug)}">{escape(p.title)}</a> - {escape(p.date)}</li>'
        for p in posts
    )
    return f"<h1>{escape(heading)}</h1><ul>{items}</ul>"


def render_post_fallback(post: Post) -> str:
    """Inline post page. The body HTML is already rendered and is inserted as-is."""
    return (
        f"<h1>{escape(post.title)}</h1>"
        f"<p>Date: {escape(post.date)}</p>"
        f"<div>{post.html}</div>"
    )
