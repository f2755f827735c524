"""
Tests for loading a content directory and the in-memory post index.

Test data and expected values are defined in tests/test_config.py.
"""

import pytest
from pathlib import Path

from src.content.loader import (
    LoadResult,
    PostIndex,
    find_post_files,
    load_posts,
    sort_newest_first,
)
from src.models.post import FrontMatter, Post
from tests.test_config import EXPECTED, MESSAGES, TEST_DATA, write_posts


def make_post(slug, date, tags=None):
    return Post(slug=slug, frontmatter=FrontMatter(title=slug.title(), date=date, tags=tags))


class TestFindPostFiles:
    """Tests for find_post_files."""

    def test_only_markdown_files(self, content_dir):
        (content_dir / "notes.txt").write_text("ignored")
        (content_dir / "draft.markdown").write_text("ignored")
        (content_dir / "sub").mkdir()
        (content_dir / "sub" / "nested.md").write_text(TEST_DATA["valid_posts"]["first-post"])

        names = [p.name for p in find_post_files(content_dir)]

        assert names == ["first-post.md", "second-post.md", "third-post.md"]

    def test_missing_directory(self, tmp_path):
        assert find_post_files(tmp_path / "missing") == []


class TestLoadPosts:
    """Tests for load_posts."""

    def test_loads_all_valid_posts(self, content_dir):
        result = load_posts(content_dir)

        assert isinstance(result, LoadResult)
        assert result.loaded_count == 3
        assert result.skipped_count == 0

    def test_newest_first(self, content_dir):
        result = load_posts(content_dir)

        assert [p.slug for p in result.posts] == EXPECTED["newest_first_slugs"]

    def test_broken_post_isolated(self, content_dir):
        """One invalid file must not stop the others from loading."""
        write_posts(content_dir, {
            "broken": TEST_DATA["invalid_yaml"],
            "plain": TEST_DATA["no_frontmatter"],
        })

        result = load_posts(content_dir)

        assert result.loaded_count == 3
        assert result.skipped_count == 2
        skipped_names = sorted(Path(s.path).name for s in result.skipped)
        assert skipped_names == ["broken.md", "plain.md"]
        assert all("FrontMatterError" in s.error for s in result.skipped)

    def test_missing_directory_is_empty_blog(self, tmp_path):
        result = load_posts(tmp_path / "missing")

        assert result.posts == []
        assert result.skipped == []

    def test_empty_directory(self, empty_content_dir):
        assert load_posts(empty_content_dir).loaded_count == 0

    def test_verbose_prints_loaded_posts(self, content_dir, capsys):
        load_posts(content_dir, verbose=True)

        output = capsys.readouterr().out
        assert f"{MESSAGES['loaded_post']} First Post" in output
        assert f"{MESSAGES['loaded_post']} Third Post" in output

    def test_quiet_by_default(self, content_dir, capsys):
        load_posts(content_dir)

        assert MESSAGES["loaded_post"] not in capsys.readouterr().out

    def test_summary_lists_skipped(self, content_dir):
        write_posts(content_dir, {"broken": TEST_DATA["no_frontmatter"]})

        summary = load_posts(content_dir).to_summary()

        assert "Loaded:      3" in summary
        assert "Skipped:     1" in summary
        assert "broken.md" in summary


class TestSortNewestFirst:
    """Tests for sort_newest_first."""

    def test_orders_by_date_descending(self):
        posts = [make_post("a", "2023-12-31"), make_post("b", "2024-06-01"), make_post("c", "2024-01-01")]

        assert [p.slug for p in sort_newest_first(posts)] == ["b", "c", "a"]

    def test_same_date_ordered_by_slug(self):
        posts = [make_post("zeta", "2024-01-01"), make_post("alpha", "2024-01-01")]

        assert [p.slug for p in sort_newest_first(posts)] == ["alpha", "zeta"]


class TestPostIndex:
    """Tests for the in-memory post cache."""

    @pytest.fixture
    def index(self):
        return PostIndex([
            make_post("old", "2023-01-01", ["rust", "web"]),
            make_post("new", "2024-01-01", ["Web"]),
            make_post("mid", "2023-06-01"),
        ])

    def test_get(self, index):
        assert index.get("new").date == "2024-01-01"
        assert index.get("missing") is None

    def test_contains_and_len(self, index):
        assert "old" in index
        assert "missing" not in index
        assert len(index) == 3

    def test_all_newest_first(self, index):
        assert [p.slug for p in index.all()] == ["new", "mid", "old"]

    def test_tags_unique_and_sorted(self, index):
        assert index.tags() == ["rust", "web"]

    def test_with_tag(self, index):
        assert [p.slug for p in index.with_tag("web")] == ["new", "old"]
        assert index.with_tag("python") == []

    def test_last_duplicate_slug_wins(self):
        index = PostIndex([make_post("same", "2023-01-01"), make_post("same", "2024-01-01")])

        assert len(index) == 1
        assert index.get("same").date == "2024-01-01"

    def test_from_directory(self, content_dir):
        index = PostIndex.from_directory(content_dir)

        assert len(index) == 3
        assert index.get("second-post").title == "Second Post"
