"""
Rendering module.

Markdown-to-HTML conversion and the inline fallback pages.
"""

from src.render.html import (
    MARKDOWN_EXTENSIONS,
    NOT_FOUND_HTML,
    render_markdown,
    render_post_fallback,
    render_post_list_fallback,
)

__all__ = [
    "MARKDOWN_EXTENSIONS",
    "NOT_FOUND_HTML",
    "render_markdown",
    "render_post_fallback",
    "render_post_list_fallback",
]
