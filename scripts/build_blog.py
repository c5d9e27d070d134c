"""Build the static blog index page.

Usage:
    python -m scripts.build_blog                        # Uses settings
    python -m scripts.build_blog --output-dir dist      # Override output dir
    python -m scripts.build_blog --content-dir posts    # Override content dir
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from blog_site.config import get_settings
from blog_site.models.blog import BlogIndexQueryResult
from blog_site.services.blog_index import load_blog_index, to_view_models
from blog_site.services.blog_render import render_blog_page
from blog_site.services.content_files import FileContentSource
from blog_site.services.content_query import ContentQueryError, get_content_source
from blog_site.services.http_client import close_shared_client

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the static blog index page")
    parser.add_argument(
        "--output-dir",
        help="Directory to write blog/index.html into (default: settings.output_dir)",
    )
    parser.add_argument(
        "--content-dir",
        help="Read articles from this directory instead of the configured source",
    )
    return parser.parse_args(argv)


def write_page(output_dir: Path, page: str) -> Path:
    """Write the rendered page to ``<output_dir>/blog/index.html``."""
    target = output_dir / "blog" / "index.html"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(page, encoding="utf-8")
    return target


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    source = (
        FileContentSource(args.content_dir) if args.content_dir else get_content_source()
    )
    output_dir = Path(args.output_dir or settings.output_dir)

    print("Building blog index...")
    try:
        result: BlogIndexQueryResult = await load_blog_index(source)
    except ContentQueryError as e:
        logger.error("Blog index query failed: %s", e)
        print(f"ERROR: {e}")
        return 1
    finally:
        await close_shared_client()

    articles = to_view_models(result)
    target = write_page(output_dir, render_blog_page(articles))

    print("\nBuild complete:")
    print(f"  Articles: {len(articles)}")
    print(f"  Output:   {target}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(main()))
