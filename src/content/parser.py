"""
Post parser for Markdown Blog.

Splits a Markdown file into its YAML frontmatter and body, validates the
frontmatter and renders the body to HTML.

Expected file layout:

    ---
    title: "Hello"
    date: "2024-01-15"
    tags: ["intro", "rust"]
    ---

    Markdown body...
"""

from pathlib import Path
from typing import Any, Optional, Tuple

import frontmatter
import yaml

from src.models.post import FrontMatter, FrontMatterError, Post
from src.render.html import render_markdown


_YAML_HANDLER = frontmatter.YAMLHandler()


def split_frontmatter(text: str) -> Tuple[dict[str, Any], str]:
    """
    Split raw post text into (metadata, body).

    Args:
        text: Full file contents.

    Returns:
        Tuple of the parsed metadata mapping and the unmodified body.

    Raises:
        FrontMatterError: If there is no leading `---` block, the block is
            not closed, the YAML does not parse, or it is not a mapping.
    """
    text = text.lstrip("\ufeff")

    if not _YAML_HANDLER.detect(text):
        raise FrontMatterError("missing frontmatter: file must start with a '---' line")

    try:
        fm_text, body = _YAML_HANDLER.split(text)
    except ValueError:
        raise FrontMatterError("unterminated frontmatter: no closing '---' line")

    try:
        metadata = _YAML_HANDLER.load(fm_text)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"frontmatter is not valid YAML: {e}") from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontMatterError(
            f"frontmatter must be a mapping, got {type(metadata).__name__}"
        )

    return metadata, body


def parse_post_text(text: str, slug: str) -> Post:
    """
    Parse a post from its raw text.

    Args:
        text: Full file contents.
        slug: URL slug for the post.

    Returns:
        Post with rendered HTML.

    Raises:
        FrontMatterError: If the frontmatter is missing or invalid.
    """
    metadata, body = split_frontmatter(text)
    fm = FrontMatter.from_metadata(metadata)
    content = body.strip()

    return Post(
        slug=slug,
        frontmatter=fm,
        content=content,
        html=render_markdown(content),
    )


def parse_post_strict(path: Path) -> Post:
    """
    Parse a post file, raising on any failure.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
        FrontMatterError: If the frontmatter is missing or invalid.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_post_text(text, slug=path.stem)


def parse_post(path: Path) -> Optional[Post]:
    """
    Parse a post file.

    Returns:
        The Post, or None if the file cannot be read or parsed.
    """
    try:
        return parse_post_strict(path)
    except (OSError, UnicodeDecodeError, FrontMatterError):
        return None
