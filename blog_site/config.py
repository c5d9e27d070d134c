"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Content source: "files" reads .md/.mdx from content_dir,
    # "graphql" queries a content-graph endpoint
    content_source: Literal["files", "graphql"] = "files"
    content_dir: str = "content/blog"
    content_graphql_url: str = "http://localhost:8000/___graphql"
    content_graphql_token: str = ""

    # Static build output (blog page lands at <output_dir>/blog/index.html)
    output_dir: str = "public"

    http_timeout: float = 15.0

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
