"""Blog index data models.

The query result models mirror the content graph's field names exactly
(``allMdx``, ``relativePath``) so a GraphQL ``data`` payload validates
without any renaming.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class BlogIndexQuery(BaseModel):
    """Typed request for the blog index content query."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Mdx"] = "Mdx"
    sort_field: str = "frontmatter.date"
    sort_order: Literal["ASC", "DESC"] = "DESC"
    exclude_listed_false: bool = True
    date_format: str = "MMMM D, YYYY"


class Frontmatter(BaseModel):
    title: str
    date: str


class FileParent(BaseModel):
    relativePath: str


class MdxNode(BaseModel):
    id: str
    frontmatter: Frontmatter
    parent: FileParent


class MdxEdge(BaseModel):
    node: MdxNode


class AllMdx(BaseModel):
    edges: list[MdxEdge] = []


class BlogIndexQueryResult(BaseModel):
    """Result of the blog index query, already filtered and sorted."""

    allMdx: AllMdx


class ArticleViewModel(BaseModel):
    """One entry in the rendered blog index. ``url`` is the list key."""

    model_config = ConfigDict(frozen=True)

    title: str
    date: str
    url: str


class ArticleList(BaseModel):
    """Blog index view-model as exposed over JSON."""

    articles: list[ArticleViewModel]
    total: int
