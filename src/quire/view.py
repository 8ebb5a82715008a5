"""DocumentView — composes load state and navigation into the docs shell.

The view owns one ``ContentLoader``.  Each route change goes through
``navigate()``, which derives the slug and starts exactly one
resolution cycle per distinct slug.  ``render()`` draws whatever state
the loader last committed.

Usage::

    view = DocumentView(loader, navigation, env, config)
    await view.navigate("/docs/guides/building")
    html = view.render()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kida.template import Markup

from quire.content.paths import resolve_slug
from quire.content.state import Loaded, LoadState, Loading, NotFound
from quire.templating.integration import render_content, render_navigation, render_page

if TYPE_CHECKING:
    from kida import Environment

    from quire.config import SiteConfig
    from quire.content.loader import ContentLoader
    from quire.navigation.types import NavigationItem, NavigationModel

logger = logging.getLogger("quire.view")


@dataclass(frozen=True, slots=True)
class SidebarLink:
    """A navigation item prepared for rendering."""

    label: str
    href: str
    active: bool

    @property
    def current(self) -> str | None:
        return "page" if self.active else None


@dataclass(frozen=True, slots=True)
class SidebarSection:
    title: str
    links: tuple[SidebarLink, ...]


class DocumentView:
    """Render the docs shell for the current route.

    Args:
        loader: Resolves slugs; its committed state is what gets drawn.
        navigation: Sidebar model, consulted for active highlighting.
        env: Kida environment holding the shell template.
        config: Route prefix, default slug, and site labels.
    """

    __slots__ = ("_config", "_env", "_loader", "_navigation", "_slug")

    def __init__(
        self,
        loader: ContentLoader,
        navigation: NavigationModel,
        env: Environment,
        config: SiteConfig,
    ) -> None:
        self._loader = loader
        self._navigation = navigation
        self._env = env
        self._config = config
        self._slug: str | None = None

    @property
    def slug(self) -> str | None:
        """The slug of the current route, ``None`` before the first navigation."""
        return self._slug

    @property
    def state(self) -> LoadState:
        state = self._loader.state
        if state is None:
            return Loading(self._slug or self._config.default_slug)
        return state

    @property
    def status(self) -> int:
        """HTTP status matching the current state."""
        return 404 if isinstance(self.state, NotFound) else 200

    def slug_for(self, path: str) -> str:
        """The slug a route path resolves to."""
        return resolve_slug(
            path,
            prefix=self._config.route_prefix,
            default=self._config.default_slug,
        )

    async def navigate(self, path: str) -> LoadState | None:
        """Handle a route change to *path*.

        Starts a resolution cycle only when the slug differs from the
        current one.  Returns the committed state, or ``None`` if nothing
        was committed (same slug, or superseded by a later navigation).
        """
        slug = self.slug_for(path)
        if slug == self._slug:
            logger.debug("Route %s keeps slug %r; not re-resolving", path, slug)
            return None
        self._slug = slug
        return await self._loader.resolve(slug)

    # -- Rendering --

    def context(self) -> dict[str, Any]:
        """Template context for the current state."""
        state = self.state
        current = state.slug
        ctx: dict[str, Any] = {
            "slug": current,
            "sidebar": self._sidebar(current),
            "state_kind": "loading",
            "document": None,
            "document_html": "",
            "document_title": "",
            "previous": None,
            "next": None,
            "not_found_message": "",
            "default_label": self._default_label(),
        }
        match state:
            case Loaded(document=document):
                prev_item, next_item = self._navigation.neighbors(current)
                ctx.update(
                    state_kind="loaded",
                    document=document,
                    document_html=Markup(document.html),
                    document_title=document.title,
                    previous=self._link(prev_item, current) if prev_item else None,
                    next=self._link(next_item, current) if next_item else None,
                )
            case NotFound():
                ctx.update(
                    state_kind="not_found",
                    not_found_message=state.message,
                    document_title="Page Not Found",
                )
            case Loading():
                pass
        return ctx

    def render(self) -> str:
        """Render the full two-pane page."""
        return render_page(self._env, self.context())

    def render_content(self) -> str:
        """Render only the content pane, for partial navigation."""
        return render_content(self._env, self.context())

    def render_navigation(self) -> str:
        """Render the content pane plus an out-of-band sidebar update."""
        return render_navigation(self._env, self.context())

    def _sidebar(self, current: str) -> tuple[SidebarSection, ...]:
        return tuple(
            SidebarSection(
                title=section.title,
                links=tuple(self._link(item, current) for item in section.items),
            )
            for section in self._navigation.sections
        )

    def _link(self, item: NavigationItem, current: str) -> SidebarLink:
        return SidebarLink(
            label=item.label,
            href=self._config.doc_href(item.slug),
            active=self._navigation.is_active(item, current),
        )

    def _default_label(self) -> str:
        leaf = self._config.default_slug.rsplit("/", 1)[-1]
        return leaf.replace("-", " ").title()
