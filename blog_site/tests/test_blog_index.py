"""Tests for blog_index: URL derivation, view-model transform, load step."""

import logging
from unittest.mock import AsyncMock

import pytest

from blog_site.models.blog import BlogIndexQuery, BlogIndexQueryResult
from blog_site.services.blog_index import (
    build_blog_page,
    derive_article_url,
    load_blog_index,
    to_view_models,
)
from blog_site.services.content_query import ContentQueryError


def _make_result(*records):
    """Build a query result from (title, date, relativePath) tuples."""
    return BlogIndexQueryResult.model_validate(
        {
            "allMdx": {
                "edges": [
                    {
                        "node": {
                            "id": f"node-{i}",
                            "frontmatter": {"title": title, "date": date},
                            "parent": {"relativePath": path},
                        }
                    }
                    for i, (title, date, path) in enumerate(records)
                ]
            }
        }
    )


class TestDeriveArticleUrl:
    """Tests for derive_article_url()."""

    @pytest.mark.parametrize(
        "relative_path, expected",
        [
            ("Foo/Bar/index.mdx", "/blog/foo/bar"),
            ("Foo/Bar/index.md", "/blog/foo/bar"),
            ("Foo/index.mdx", "/blog/foo"),
            ("hello-world/index.mdx", "/blog/hello-world"),
        ],
    )
    def test_strips_index_file_and_lowercases(self, relative_path, expected):
        assert derive_article_url(relative_path) == expected

    def test_non_index_file_keeps_its_name(self):
        assert derive_article_url("Notes/First-Post.mdx") == "/blog/notes/first-post.mdx"

    def test_suffix_match_is_case_sensitive(self):
        """Only the literal lower-case index.md(x) segment is stripped."""
        assert derive_article_url("Foo/INDEX.MDX") == "/blog/foo/index.mdx"

    def test_only_trailing_segment_is_stripped(self):
        assert (
            derive_article_url("a/index.mdx-archive/index.md")
            == "/blog/a/index.mdx-archive"
        )


class TestToViewModels:
    """Tests for to_view_models()."""

    def test_hello_world_scenario(self):
        result = _make_result(("Hello World", "June 1, 2020", "hello-world/index.mdx"))

        articles = to_view_models(result)

        assert len(articles) == 1
        assert articles[0].title == "Hello World"
        assert articles[0].date == "June 1, 2020"
        assert articles[0].url == "/blog/hello-world"

    def test_preserves_count_and_order(self):
        result = _make_result(
            ("Newest", "March 3, 2021", "c/index.mdx"),
            ("Middle", "February 2, 2021", "a/index.mdx"),
            ("Oldest", "January 1, 2021", "b/index.mdx"),
        )

        articles = to_view_models(result)

        assert [a.title for a in articles] == ["Newest", "Middle", "Oldest"]
        assert [a.url for a in articles] == ["/blog/c", "/blog/a", "/blog/b"]

    def test_title_and_date_pass_through_unchanged(self):
        title = "  Ünïcode & <Markup>  "
        date = "December 31, 1999"
        articles = to_view_models(_make_result((title, date, "x/index.md")))

        assert articles[0].title == title
        assert articles[0].date == date

    def test_empty_result_gives_empty_list(self):
        assert to_view_models(_make_result()) == []

    def test_is_idempotent(self):
        result = _make_result(
            ("One", "May 5, 2020", "One/index.mdx"),
            ("Two", "May 4, 2020", "Two/index.md"),
        )
        snapshot = result.model_dump()

        first = to_view_models(result)
        second = to_view_models(result)

        assert first == second
        assert result.model_dump() == snapshot

    def test_duplicate_urls_are_kept_and_logged(self, caplog):
        result = _make_result(
            ("First", "May 5, 2020", "Post/index.mdx"),
            ("Second", "May 4, 2020", "post/index.md"),
        )

        with caplog.at_level(logging.WARNING):
            articles = to_view_models(result)

        assert len(articles) == 2
        assert articles[0].url == articles[1].url == "/blog/post"
        assert "Duplicate blog URL /blog/post" in caplog.text


class TestLoadBlogIndex:
    """Tests for load_blog_index() and build_blog_page()."""

    async def test_sends_canonical_query_to_given_source(self):
        source = AsyncMock()
        source.query.return_value = _make_result()

        result = await load_blog_index(source)

        assert result.allMdx.edges == []
        source.query.assert_awaited_once_with(BlogIndexQuery())

    async def test_uses_configured_source_when_none_given(self, mocker):
        source = AsyncMock()
        source.query.return_value = _make_result(("A", "May 1, 2020", "a/index.mdx"))
        mocker.patch(
            "blog_site.services.blog_index.get_content_source", return_value=source
        )

        result = await load_blog_index()

        assert len(result.allMdx.edges) == 1

    async def test_source_errors_propagate(self):
        source = AsyncMock()
        source.query.side_effect = ContentQueryError("boom")

        with pytest.raises(ContentQueryError, match="boom"):
            await load_blog_index(source)

    async def test_build_blog_page_renders_loaded_articles(self):
        source = AsyncMock()
        source.query.return_value = _make_result(
            ("Hello World", "June 1, 2020", "hello-world/index.mdx")
        )

        page = await build_blog_page(source)

        assert '<a href="/blog/hello-world" class="inline-block">' in page
        assert "Hello World" in page
