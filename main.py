#!/usr/bin/env python3
"""
Markdown Blog - Serve a folder of Markdown posts.

Command-line entry point:
  - Load posts (YAML frontmatter + Markdown body) from the content directory
  - Serve the home page, post pages and static files over HTTP
  - Lint posts for well-formed frontmatter and bodies

Usage:
    python main.py                      # Load posts and start the server
    python main.py --port 9000          # Serve on another port
    python main.py --lint               # Check posts and exit
    python main.py --list               # Print loaded posts and exit

Examples:
    # Check content before deploying
    python main.py --lint --content-dir content

    # Local preview, printing the effective configuration first
    python main.py --verbose
"""

import argparse
import sys

from src.config import (
    CONTENT_DIR,
    DEBUG,
    HOST,
    PORT,
    print_config_summary,
    validate_config,
)
from src.content.loader import LoadResult, load_posts
from src.lint.linter import lint_directory

__version__ = "1.0.0"


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="markdown-blog",
        description="Serve and lint a folder of Markdown blog posts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Load posts and start the server
  %(prog)s --host 0.0.0.0 --port 80  Listen on all interfaces
  %(prog)s --content-dir posts       Read posts from ./posts
  %(prog)s --lint                    Check posts, exit 1 on errors
  %(prog)s --list                    Print loaded posts and exit
        """,
    )

    # Server options
    parser.add_argument(
        "--host",
        default=None,
        help=f"Interface to bind (default: {HOST})",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        metavar="N",
        help=f"Port to listen on (default: {PORT})",
    )

    parser.add_argument(
        "--content-dir", "-c",
        default=None,
        metavar="DIR",
        help=f"Directory holding *.md posts (default: {CONTENT_DIR})",
    )

    # Actions
    parser.add_argument(
        "--lint",
        action="store_true",
        help="Lint posts and exit (exit code 1 if errors are found)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print loaded posts and exit",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show configuration and tracebacks",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors and final summary",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> int:
    """Display current configuration. Returns 1 if it is invalid."""
    print("=" * 60)
    print("Markdown Blog Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)
    return 1 if errors else 0


def run_lint(content_dir: str, quiet: bool = False) -> int:
    """Lint the content directory and print the report."""
    report = lint_directory(content_dir)

    if quiet:
        for issue in report.errors:
            print(issue)
    else:
        print(report.to_summary())

    return 0 if report.ok else 1


def print_post_list(result: LoadResult) -> None:
    """Print one line per loaded post."""
    for post in result.posts:
        tags = ", ".join(post.tags) or "-"
        print(f"{post.date}  {post.slug:<30} {post.title}  [{tags}]")
    print()
    print(result.to_summary())


def serve(content_dir: str, host: str, port: int, verbose: bool = False) -> None:
    """Load posts and run the web server until interrupted."""
    from web.app import app, init_posts

    index = init_posts(content_dir, verbose=verbose)
    print(f"Serving {len(index)} posts on http://{host}:{port}")
    app.run(host=host, port=port, debug=DEBUG, use_reloader=False)


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        return show_config()

    content_dir = args.content_dir or CONTENT_DIR
    host = args.host or HOST
    port = args.port if args.port is not None else PORT

    if not (1 <= port <= 65535):
        print(f"❌ Invalid port: {port}")
        return 1

    try:
        if args.lint:
            return run_lint(content_dir, quiet=args.quiet)

        if args.list:
            print_post_list(load_posts(content_dir))
            return 0

        if not args.quiet:
            print("Starting markdown blog server...")
            if args.verbose:
                print("\nConfiguration:")
                print_config_summary()
                print()

        serve(content_dir, host, port, verbose=not args.quiet)
        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
