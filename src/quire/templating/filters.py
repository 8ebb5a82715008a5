"""Built-in quire template filters.

Auto-registered on every quire kida Environment. They complement
Kida's built-in filters with what the docs shell needs.
"""

import html
from typing import Any

from kida.template import Markup


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="{{ link.href }}"{{ link.current | attr("aria-current") }}>
        → <a href="/docs/intro" aria-current="page">   (when current is "page")
        → <a href="/docs/intro">                       (when current is None)

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def url(value: str, fallback: str = "#") -> str:
    """Safelist URL for href attributes. Uses Kida's url_is_safe.

    Header links come from site config; anything with an unsafe scheme
    is replaced by *fallback*.

    Example:
        <a href="{{ href | url }}">GitHub</a>

    """
    from kida.utils.html import safe_url

    return safe_url(str(value), fallback=fallback)


def is_external(value: str) -> bool:
    """Whether a link leaves the docs site (absolute http(s) URL)."""
    return str(value).startswith(("http://", "https://", "//"))


def page_title(title: str, site_title: str) -> str:
    """``"Building · Site"``, or just the site title when *title* is empty.

    Example:
        <title>{{ document_title | page_title(site_title) }}</title>

    """
    if not title or title == site_title:
        return site_title
    return f"{title} · {site_title}"


# All built-in quire filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "is_external": is_external,
    "page_title": page_title,
    "url": url,
}
