"""Filesystem content source: answers the blog index query from .md/.mdx files.

Each article is a markdown file with YAML frontmatter::

    ---
    title: Hello World
    date: 2020-06-01
    listed: true
    ---

Filtering and ordering follow the content graph's query semantics: records
whose ``listed`` is exactly ``false`` are dropped, the rest are sorted by
date (stable, ties keep path order) and dates are formatted as
``"June 1, 2020"``.
"""

import hashlib
import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from blog_site.models.blog import (
    AllMdx,
    BlogIndexQuery,
    BlogIndexQueryResult,
    MdxEdge,
    MdxNode,
)
from blog_site.services.content_query import ContentQueryError

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx")
SUPPORTED_SORT_FIELD = "frontmatter.date"
SUPPORTED_DATE_FORMAT = "MMMM D, YYYY"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def parse_frontmatter(content: str) -> dict[str, Any]:
    """Return the YAML frontmatter of a markdown document as a dict.

    Returns an empty dict when the document has no frontmatter block.

    Raises:
        yaml.YAMLError: If the frontmatter is not valid YAML.
        ValueError: If the frontmatter is not a mapping.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}
    data = yaml.safe_load(match.group(1))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a mapping")
    return data


def parse_content_date(value: Any) -> datetime:
    """Normalize a frontmatter date to an aware UTC datetime.

    Accepts YAML dates/datetimes and ISO-8601 strings; naive values are UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise ValueError(f"unsupported date value: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_content_date(dt: datetime) -> str:
    """Format as ``MMMM D, YYYY`` (full month name, unpadded day)."""
    return f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def _node_id(relative_path: str) -> str:
    """Stable node ID derived from the file's relative path."""
    return hashlib.sha256(relative_path.encode()).hexdigest()[:16]


class FileContentSource:
    """Content source backed by a directory of markdown files."""

    def __init__(self, content_dir: str | Path) -> None:
        self.content_dir = Path(content_dir)

    def _discover(self) -> list[Path]:
        if not self.content_dir.is_dir():
            raise ContentQueryError(
                f"Content directory not found: {self.content_dir}",
                path=str(self.content_dir),
            )
        files = [
            p
            for p in self.content_dir.rglob("*")
            if p.is_file() and p.suffix in CONTENT_SUFFIXES
        ]
        return sorted(files, key=lambda p: p.relative_to(self.content_dir).as_posix())

    def _read_record(self, path: Path) -> tuple[dict[str, Any], str]:
        relative_path = path.relative_to(self.content_dir).as_posix()
        try:
            meta = parse_frontmatter(path.read_text(encoding="utf-8-sig"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
            raise ContentQueryError(
                f"Could not read frontmatter of {relative_path}: {e}",
                path=relative_path,
            ) from e
        return meta, relative_path

    async def query(self, request: BlogIndexQuery) -> BlogIndexQueryResult:
        """Answer the blog index query from the files under ``content_dir``.

        Raises:
            ContentQueryError: If the directory is missing, a file cannot be
                parsed, or a listed record lacks a title or a valid date.
        """
        if request.sort_field != SUPPORTED_SORT_FIELD:
            raise ContentQueryError(f"Unsupported sort field: {request.sort_field}")
        if request.date_format != SUPPORTED_DATE_FORMAT:
            raise ContentQueryError(f"Unsupported date format: {request.date_format}")

        records: list[tuple[datetime, MdxNode]] = []
        skipped = 0
        for path in self._discover():
            meta, relative_path = self._read_record(path)

            if request.exclude_listed_false and meta.get("listed") is False:
                skipped += 1
                continue

            try:
                published = parse_content_date(meta.get("date"))
            except ValueError as e:
                raise ContentQueryError(
                    f"Invalid or missing date in {relative_path}: {e}",
                    path=relative_path,
                ) from e

            title = meta.get("title")
            try:
                node = MdxNode(
                    id=_node_id(relative_path),
                    frontmatter={
                        "title": str(title) if title is not None else None,
                        "date": format_content_date(published),
                    },
                    parent={"relativePath": relative_path},
                )
            except ValidationError as e:
                raise ContentQueryError(
                    f"Malformed record {relative_path}: {e}",
                    path=relative_path,
                ) from e
            records.append((published, node))

        records.sort(key=lambda r: r[0], reverse=request.sort_order == "DESC")

        logger.info(
            "Loaded %d articles from %s (%d unlisted)",
            len(records),
            self.content_dir,
            skipped,
        )
        return BlogIndexQueryResult(
            allMdx=AllMdx(edges=[MdxEdge(node=node) for _, node in records])
        )

    async def check(self) -> bool:
        """Content directory exists."""
        return self.content_dir.is_dir()
