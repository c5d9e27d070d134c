"""
Blog Site

FastAPI app serving the blog index page and its JSON view-model.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_site.config import get_settings
from blog_site.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from blog_site.routers import blog
from blog_site.services.content_query import get_content_source
from blog_site.services.http_client import close_shared_client

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    yield
    await close_shared_client()


app = FastAPI(
    title="Blog Site",
    description="Blog index page rendered from a content graph",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

# Request ID
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(blog.router)


def _check_config() -> str:
    """Verify required configuration is loaded. Returns 'ok' or 'fail'."""
    s = get_settings()
    if s.content_source == "graphql":
        return "ok" if s.content_graphql_url else "fail"
    return "ok" if s.content_dir else "fail"


async def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    config_status = _check_config()
    try:
        content_ok = await get_content_source().check()
    except Exception:
        logger.exception("Content source check raised")
        content_ok = False

    checks = {"config": config_status, "content": "ok" if content_ok else "fail"}
    failed = [k for k, v in checks.items() if v != "ok"]

    if config_status != "ok":
        overall = "fail"
        logger.error("Health check failed: configuration incomplete")
    elif failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": "blog-site",
        "version": VERSION,
        "checks": checks,
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check: 503 when configuration is unusable, else 200."""
    result = await _run_health_checks()
    status_code = 200 if result["status"] in ("ok", "degraded") else 503
    return JSONResponse(content=result, status_code=status_code)
