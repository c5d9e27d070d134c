"""Presentation primitives used by the page renderers.

Each primitive returns an HTML string. Text arguments are escaped here;
``children`` arguments are markup produced by other primitives and are
inserted as-is.
"""

import html
from typing import Protocol


class UIComponents(Protocol):
    """Capabilities a page renderer may use."""

    def container(self, size: str, children: str) -> str: ...

    def title(self, text: str) -> str: ...

    def spacer(self, size: str) -> str: ...

    def link(self, to: str, children: str, class_name: str = "") -> str: ...


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


class HtmlComponents:
    """Default primitives rendering plain HTML with utility class names."""

    def container(self, size: str, children: str) -> str:
        return f'<div class="container container--{_attr(size)}">{children}</div>'

    def title(self, text: str) -> str:
        return f'<h1 class="title">{html.escape(text)}</h1>'

    def spacer(self, size: str) -> str:
        return f'<div class="spacer spacer--{_attr(size)}" aria-hidden="true"></div>'

    def link(self, to: str, children: str, class_name: str = "") -> str:
        class_attr = f' class="{_attr(class_name)}"' if class_name else ""
        return f'<a href="{_attr(to)}"{class_attr}>{children}</a>'


DEFAULT_UI = HtmlComponents()
