"""Kida environment setup for the docs shell.

Creates a kida Environment from quire's SiteConfig. The environment is
created once when the app freezes and shared by every DocumentView.
"""

from collections.abc import Callable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from quire.config import SiteConfig
from quire.templating.filters import BUILTIN_FILTERS

SHELL_TEMPLATE = "quire/shell.html"


def create_environment(
    config: SiteConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment from site configuration.

    ``config.template_dir``, when set, is searched before the packaged
    templates so a site can override ``quire/shell.html`` wholesale.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("quire.templating", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=True,
        lstrip_blocks=True,
    )

    env.update_filters(BUILTIN_FILTERS)
    if filters:
        env.update_filters(filters)

    env.add_global("site_title", config.site_title)
    env.add_global("brand_href", config.brand_href)
    env.add_global("header_links", config.header_links)
    env.add_global("docs_href", config.doc_href(config.default_slug))
    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env


def render_page(env: Environment, context: dict[str, Any]) -> str:
    """Render the full two-pane shell."""
    template = env.get_template(SHELL_TEMPLATE)
    return template.render(context)


def render_content(env: Environment, context: dict[str, Any]) -> str:
    """Render only the content pane block of the shell."""
    template = env.get_template(SHELL_TEMPLATE)
    return template.render_block("content", context)


def render_navigation(env: Environment, context: dict[str, Any]) -> str:
    """Render the response to a boosted sidebar or pager click.

    The content pane is swapped into ``#content``.  The sidebar rides
    along as an ``hx-swap-oob`` element so the active link follows, and
    htmx lifts the ``<title>`` into ``document.title``.
    """
    template = env.get_template(SHELL_TEMPLATE)
    parts = [
        f"<title>{template.render_block('title', context).strip()}</title>",
        template.render_block("content", context),
        f'<div id="sidebar" hx-swap-oob="innerHTML">{template.render_block("sidebar", context)}</div>',
    ]
    return "\n".join(parts)
