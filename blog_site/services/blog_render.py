"""Blog index page renderer."""

import html

from blog_site.models.blog import ArticleViewModel
from blog_site.services.ui import DEFAULT_UI, UIComponents

PAGE_TITLE = "Blog"


def _render_item(article: ArticleViewModel, ui: UIComponents) -> str:
    heading = (
        '<h2 class="mt-1 text-lg font-semibold md:text-2xl">'
        f"{html.escape(article.title)}</h2>"
    )
    link = ui.link(article.url, heading, class_name="inline-block")
    key = html.escape(article.url, quote=True)
    return f'<li class="mt-6 md:mt-10" data-key="{key}">{link}</li>'


def render_blog_page(
    articles: list[ArticleViewModel], ui: UIComponents = DEFAULT_UI
) -> str:
    """Render the full blog index document.

    One list item per article, in the given order. The article date is
    carried on the view-model but not shown.
    """
    items = "".join(_render_item(a, ui) for a in articles)
    body = ui.container(
        "some",
        ui.spacer("xl")
        + ui.title(PAGE_TITLE)
        + f'<ul class="mt-12 leading-snug">{items}</ul>',
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>{PAGE_TITLE}</title>
</head>
<body>
<div class="pb-20">{body}</div>
</body>
</html>"""
