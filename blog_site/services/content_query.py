"""Content query interface for the blog index.

Holds the canonical query text, the ``ContentSource`` protocol every backend
implements, and the error type raised when a query cannot be answered.
"""

from typing import Protocol

from blog_site.config import get_settings
from blog_site.models.blog import BlogIndexQuery, BlogIndexQueryResult

# Field names and date format are consumed downstream; keep them stable.
BLOG_INDEX_QUERY = """
  query BlogIndexQuery {
    allMdx(
      sort: { order: DESC, fields: frontmatter___date }
      filter: { frontmatter: { listed: { ne: false } } }
    ) {
      edges {
        node {
          id
          frontmatter {
            date(formatString: "MMMM D, YYYY")
            title
          }
          parent {
            ... on File {
              relativePath
            }
          }
        }
      }
    }
  }
"""


class ContentQueryError(Exception):
    """Raised when the content source fails or returns malformed records."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class ContentSource(Protocol):
    """Anything that can answer the blog index query."""

    async def query(self, request: BlogIndexQuery) -> BlogIndexQueryResult: ...

    async def check(self) -> bool: ...


def get_content_source() -> ContentSource:
    """Build the content source selected by ``settings.content_source``."""
    settings = get_settings()
    if settings.content_source == "graphql":
        from blog_site.services.content_graphql import GraphQLContentSource

        return GraphQLContentSource(
            url=settings.content_graphql_url,
            token=settings.content_graphql_token,
        )

    from blog_site.services.content_files import FileContentSource

    return FileContentSource(settings.content_dir)
