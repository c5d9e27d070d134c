"""GraphQL content source: sends the blog index query to a content graph."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from blog_site.models.blog import BlogIndexQuery, BlogIndexQueryResult
from blog_site.services.content_query import BLOG_INDEX_QUERY, ContentQueryError
from blog_site.services.http_client import get_shared_client

logger = logging.getLogger(__name__)


class GraphQLContentSource:
    """Content source backed by a GraphQL endpoint (e.g. ``/___graphql``).

    The query text is sent verbatim; its sort, filter and date formatting are
    applied server-side, so ``request`` must match what the text encodes.
    """

    def __init__(self, url: str, token: str = "") -> None:
        if not url or not url.strip():
            raise ValueError("GraphQL URL must not be empty")
        self.url = url
        self._token = token

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        client = get_shared_client()
        try:
            return await client.post(self.url, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("Content graph request to %s failed: %s", self.url, e)
            raise ContentQueryError(f"Content graph request failed: {e}") from e

    async def query(self, request: BlogIndexQuery) -> BlogIndexQueryResult:
        """Run ``BLOG_INDEX_QUERY`` and validate the ``data`` payload.

        Raises:
            ContentQueryError: On transport errors, non-200 responses,
                GraphQL ``errors`` or a payload that does not match the
                expected result shape.
        """
        if request != BlogIndexQuery():
            raise ContentQueryError(
                "GraphQL source only serves the canonical blog index query"
            )

        resp = await self._post({"query": BLOG_INDEX_QUERY})
        if resp.status_code != 200:
            logger.warning("Content graph %d for %s", resp.status_code, self.url)
            raise ContentQueryError(f"Content graph returned {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise ContentQueryError("Content graph returned invalid JSON") from e

        if not isinstance(body, dict):
            raise ContentQueryError("Content graph returned a non-object payload")

        if body.get("errors"):
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in body["errors"]
            )
            raise ContentQueryError(f"Content graph query failed: {messages}")

        try:
            return BlogIndexQueryResult.model_validate(body.get("data") or {})
        except ValidationError as e:
            raise ContentQueryError(f"Malformed content graph payload: {e}") from e

    async def check(self) -> bool:
        """Endpoint answers a trivial ``__typename`` query."""
        try:
            resp = await self._post({"query": "{ __typename }"})
        except ContentQueryError:
            return False
        return resp.status_code == 200
