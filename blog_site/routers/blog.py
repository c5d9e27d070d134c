"""Blog index endpoints."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from blog_site.models.blog import ArticleList, BlogIndexQueryResult
from blog_site.services.blog_index import load_blog_index, to_view_models
from blog_site.services.blog_render import render_blog_page
from blog_site.services.content_query import ContentQueryError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blog"])


async def _load_or_502() -> BlogIndexQueryResult:
    try:
        return await load_blog_index()
    except ContentQueryError as exc:
        logger.warning("Blog index query failed: %s", exc)
        raise HTTPException(
            status_code=502, detail="Failed to load blog content"
        ) from exc


@router.get("/blog", response_class=HTMLResponse)
async def blog_index_page():
    """Serve the rendered blog index page."""
    result = await _load_or_502()
    return HTMLResponse(content=render_blog_page(to_view_models(result)))


@router.get("/api/blog/articles", response_model=ArticleList)
async def list_blog_articles():
    """Get the blog index view-model (title, date, url per article)."""
    result = await _load_or_502()
    articles = to_view_models(result)
    return ArticleList(articles=articles, total=len(articles))
