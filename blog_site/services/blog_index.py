"""Blog index: load articles, derive their URLs, build the page.

``load_blog_index`` is the only step that suspends; ``to_view_models`` and
rendering are synchronous and pure.
"""

import logging
import re

from blog_site.models.blog import ArticleViewModel, BlogIndexQuery, BlogIndexQueryResult
from blog_site.services.blog_render import render_blog_page
from blog_site.services.content_query import ContentSource, get_content_source

logger = logging.getLogger(__name__)

BLOG_URL_PREFIX = "/blog/"

_INDEX_FILE_RE = re.compile(r"/index\.mdx?$")


def derive_article_url(relative_path: str) -> str:
    """Map a content file path to its blog URL.

    ``"Foo/Bar/index.mdx"`` -> ``"/blog/foo/bar"``
    """
    return BLOG_URL_PREFIX + _INDEX_FILE_RE.sub("", relative_path).lower()


def to_view_models(result: BlogIndexQueryResult) -> list[ArticleViewModel]:
    """Turn query edges into view-models, one per edge, in query order."""
    articles = [
        ArticleViewModel(
            title=edge.node.frontmatter.title,
            date=edge.node.frontmatter.date,
            url=derive_article_url(edge.node.parent.relativePath),
        )
        for edge in result.allMdx.edges
    ]

    seen: set[str] = set()
    for article in articles:
        if article.url in seen:
            logger.warning("Duplicate blog URL %s; list keys will collide", article.url)
        seen.add(article.url)

    return articles


async def load_blog_index(source: ContentSource | None = None) -> BlogIndexQueryResult:
    """Fetch the filtered, date-sorted article records.

    Uses the configured content source when none is given. Errors from the
    source propagate unchanged.
    """
    if source is None:
        source = get_content_source()
    return await source.query(BlogIndexQuery())


async def build_blog_page(source: ContentSource | None = None) -> str:
    """Load, transform and render the blog index page."""
    result = await load_blog_index(source)
    return render_blog_page(to_view_models(result))
