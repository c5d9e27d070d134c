"""Shared fixtures for blog-site tests."""

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blog_site.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import blog_site.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    """Provide a Settings object with safe test defaults."""
    from blog_site.config import Settings, get_settings

    test_settings = Settings(
        content_source="files",
        content_dir=str(tmp_path / "content"),
        content_graphql_url="http://content.test/___graphql",
        content_graphql_token="",
        output_dir=str(tmp_path / "public"),
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blog_site.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from blog_site.config import get_settings creates a local binding that
    # the blog_site.config monkeypatch above does not affect)
    for mod_path in [
        "blog_site.main",
        "blog_site.services.content_query",
        "blog_site.services.http_client",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def write_article(mock_settings):
    """Write a markdown file with frontmatter under the test content dir."""
    from pathlib import Path

    root = Path(mock_settings.content_dir)

    def _write(relative_path: str, frontmatter: str, body: str = "Body text.\n"):
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{frontmatter.strip()}\n---\n\n{body}", encoding="utf-8")
        return path

    return _write
