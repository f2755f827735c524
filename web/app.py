"""
Markdown Blog - Web Server

A Flask app serving the posts in the content directory.

Run with: python main.py
Or: python -m web.app
"""

import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, g, jsonify, render_template, request
from jinja2 import TemplateError

from src.config import CONTENT_DIR, DEBUG, HOST, PORT, STATIC_DIR, TEMPLATES_DIR
from src.content.loader import PostIndex
from src.render.html import (
    NOT_FOUND_HTML,
    render_post_fallback,
    render_post_list_fallback,
)
from src.utils import setup_logger

logger = setup_logger("web.app")

app = Flask(
    __name__,
    template_folder=TEMPLATES_DIR,
    static_folder=STATIC_DIR,
    static_url_path="/static",
)

HTML_MIMETYPE = "text/html"


# =============================================================================
# Post Cache
# =============================================================================

# Built once per process, by init_posts() or on first request
_post_index: Optional[PostIndex] = None


def init_posts(content_dir: str = None, verbose: bool = False) -> PostIndex:
    """Load posts from disk and install them as the served index."""
    global _post_index
    _post_index = PostIndex.from_directory(content_dir or CONTENT_DIR, verbose=verbose)
    return _post_index


def get_index() -> PostIndex:
    """Get the served post index, loading it on first use."""
    if _post_index is None:
        return init_posts()
    return _post_index


def _render_or_fallback(template: str, fallback_html: str, **context) -> str:
    """Render a template; use the inline page when it is missing or broken."""
    try:
        return render_template(template, **context)
    except TemplateError as e:
        logger.warning(f"Template {template} failed ({type(e).__name__}: {e}), using inline page")
        return fallback_html


# =============================================================================
# Request Logging
# =============================================================================

@app.before_request
def _start_timer():
    g.request_started = time.perf_counter()


@app.after_request
def _log_request(response):
    started = g.get("request_started")
    duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
    logger.info(
        f'{request.remote_addr} "{request.method} {request.path}" '
        f"{response.status_code} {response.content_length or 0} {duration_ms:.1f}ms"
    )
    return response


# =============================================================================
# Pages
# =============================================================================

@app.route("/")
def home():
    """All posts, newest first."""
    posts = get_index().all()
    body = _render_or_fallback(
        "home.html",
        render_post_list_fallback(posts),
        posts=posts,
    )
    return app.response_class(body, mimetype=HTML_MIMETYPE)


@app.route("/posts/<slug>")
def post_detail(slug):
    """A single post."""
    post = get_index().get(slug)

    if post is None:
        return app.response_class(NOT_FOUND_HTML, status=404, mimetype=HTML_MIMETYPE)

    body = _render_or_fallback("post.html", render_post_fallback(post), post=post)
    return app.response_class(body, mimetype=HTML_MIMETYPE)


@app.route("/tags/<tag>")
def tag_listing(tag):
    """Posts carrying a tag."""
    posts = get_index().with_tag(tag)
    body = _render_or_fallback(
        "tag.html",
        render_post_list_fallback(posts, heading=f"Posts tagged {tag}"),
        posts=posts,
        tag=tag,
    )
    return app.response_class(body, mimetype=HTML_MIMETYPE)


# =============================================================================
# JSON API
# =============================================================================

@app.route("/api/posts")
def api_posts():
    """Post metadata, newest first. Optional ?tag= filter."""
    index = get_index()
    tag = request.args.get("tag", "").strip()

    posts = index.with_tag(tag) if tag else index.all()

    return jsonify({
        "count": len(posts),
        "tag": tag or None,
        "posts": [p.to_dict() for p in posts],
    })


@app.route("/api/posts/<slug>")
def api_post(slug):
    """A single post including its Markdown body and rendered HTML."""
    post = get_index().get(slug)

    if post is None:
        return jsonify({"error": f"Post not found: {slug}"}), 404

    return jsonify(post.to_dict(include_content=True))


@app.route("/api/tags")
def api_tags():
    """All tags with their post counts."""
    index = get_index()
    return jsonify({
        "tags": [
            {"tag": tag, "count": len(index.with_tag(tag))}
            for tag in index.tags()
        ],
    })


# =============================================================================
# Template Filters
# =============================================================================

@app.template_filter("format_date")
def format_date(value):
    """Format a YYYY-MM-DD date for display."""
    if not value:
        return "Unknown"
    if isinstance(value, str):
        try:
            value = datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return value
    return value.strftime("%b %d, %Y")


if __name__ == "__main__":
    print("=" * 50)
    print("Starting markdown blog server...")
    print("=" * 50)
    init_posts(verbose=True)
    print(f"Open http://{HOST}:{PORT} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(host=HOST, port=PORT, debug=DEBUG)
