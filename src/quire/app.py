"""Quire docs application.

Configured at construction, frozen on first use.  Freezing indexes the
docs directory into a content registry, loads the navigation file, and
builds the kida environment; after that every request only reads.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from quire._internal.asgi import Receive, Scope, Send
from quire.config import SiteConfig
from quire.content.indexing import index_directory
from quire.content.loader import ContentLoader
from quire.errors import HTTPError, MethodNotAllowed, NotFound
from quire.http.request import Request
from quire.http.response import Response, redirect
from quire.markdown.renderer import MarkdownRenderer
from quire.navigation.loading import load_navigation
from quire.navigation.types import NavigationModel
from quire.server.errors import handle_http_error, handle_internal_error
from quire.server.sender import send_response
from quire.templating.integration import create_environment
from quire.view import DocumentView

if TYPE_CHECKING:
    from kida import Environment

    from quire.content.paths import PathResolver
    from quire.content.registry import ContentRegistry

logger = logging.getLogger("quire.server")

_ALLOWED_METHODS = frozenset({"GET", "HEAD"})


class DocsApp:
    """The quire ASGI application.

    Routes:
        ``/`` and ``/docs``: redirect to the default document.
        ``/docs/<slug>``: the docs shell for *slug*.  Requests with
        ``HX-Request: true`` get only the content pane.

    Args:
        config: Site configuration.
        registry: Pre-built content registry.  Defaults to indexing
            ``config.docs_dir`` at freeze time.
        navigation: Pre-built sidebar.  Defaults to
            ``config.navigation_path`` if that file exists, else empty.
        kida_env: Custom kida environment.

    Reloading:
        With ``config.debug`` on, every lifespan startup calls
        ``refresh()``, so a reloaded server worker re-indexes the docs
        directory and re-reads the navigation file even when it reuses
        this object.  A registry or navigation passed in is kept as is.

    Thread safety:
        Freezing uses a Lock + double-check so exactly one thread builds
        the registry, even when several workers take their first
        request at once.
    """

    __slots__ = (
        "_env",
        "_freeze_lock",
        "_frozen",
        "_navigation",
        "_owns_navigation",
        "_owns_registry",
        "_registry",
        "_resolver",
        "config",
    )

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        registry: ContentRegistry | None = None,
        navigation: NavigationModel | None = None,
        kida_env: Environment | None = None,
    ) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self.config.validate()
        self._registry: ContentRegistry | None = registry
        self._navigation: NavigationModel | None = navigation
        self._owns_registry = registry is None
        self._owns_navigation = navigation is None
        self._env: Environment | None = kida_env
        self._resolver: PathResolver = self.config.resolver()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Frozen state --

    @property
    def registry(self) -> ContentRegistry:
        self._ensure_frozen()
        assert self._registry is not None
        return self._registry

    @property
    def navigation(self) -> NavigationModel:
        self._ensure_frozen()
        assert self._navigation is not None
        return self._navigation

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def view(self) -> DocumentView:
        """A fresh DocumentView with its own ContentLoader.

        Each request gets its own view, so concurrent requests never
        share a current slug.
        """
        self._ensure_frozen()
        assert self._registry is not None
        assert self._navigation is not None
        assert self._env is not None
        loader = ContentLoader(self._registry, self._resolver)
        return DocumentView(loader, self._navigation, self._env, self.config)

    # -- Server --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        app_path: str | None = None,
    ) -> None:
        """Freeze the app and serve it with pounce.

        *app_path* (``"module:attribute"``) lets pounce re-import the
        app on reload instead of reusing this object.
        """
        from quire.server.dev import run_server

        self._ensure_frozen()
        run_server(self, self.config, host=host, port=port, app_path=app_path)

    def refresh(self) -> None:
        """Re-index the docs directory and reload the navigation file.

        Only the parts this app built itself are rebuilt.  Everything is
        built before anything is swapped in, so a failed rebuild leaves
        the previous registry and sidebar serving.
        """
        registry = self._build_registry() if self._owns_registry else None
        navigation = self._build_navigation() if self._owns_navigation else None
        with self._freeze_lock:
            if registry is not None:
                self._registry = registry
            if navigation is not None:
                self._navigation = navigation
            self._freeze()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        self._ensure_frozen()
        request = Request.from_asgi(scope)
        try:
            response = await self.handle(request)
        except HTTPError as exc:
            response = handle_http_error(exc, request, debug=self.config.debug)
        except Exception as exc:
            response = handle_internal_error(exc, request, debug=self.config.debug)
        await send_response(response, send, head=request.method == "HEAD")

    async def handle(self, request: Request) -> Response:
        """Route one request to a Response."""
        if request.method not in _ALLOWED_METHODS:
            raise MethodNotAllowed(_ALLOWED_METHODS)

        prefix = self.config.route_prefix
        default_href = self.config.doc_href(self.config.default_slug)
        path = request.path

        if path in ("/", "", prefix, prefix.rstrip("/")):
            logger.debug("Redirecting %s to %s", path, default_href)
            return redirect(default_href)
        if not path.startswith(prefix):
            raise NotFound(f"No route for {path}")

        view = self.view()
        await view.navigate(path)
        if request.is_fragment and not request.is_history_restore:
            body = view.render_navigation()
        else:
            body = view.render()
        return Response(body=body, status=view.status)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze at startup so indexing errors fail the server early.

        In debug mode startup rebuilds instead, picking up docs added or
        edited since the previous worker started.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    if self.config.debug:
                        self.refresh()
                    else:
                        self._ensure_frozen()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build registry, navigation, and templates.

        MUST only be called while holding _freeze_lock.
        """
        if self._registry is None:
            self._registry = self._build_registry()
        if self._navigation is None:
            self._navigation = self._build_navigation()
        if self._env is None:
            self._env = create_environment(self.config)
        self._frozen = True

    def _build_registry(self) -> ContentRegistry:
        config = self.config
        renderer = MarkdownRenderer(
            plugins=config.markdown_plugins,
            highlight=config.highlight,
        )
        registry = index_directory(
            config.docs_path,
            extensions=config.extensions,
            renderer=renderer,
        )
        logger.info("Indexed %d documents from %s", len(registry), config.docs_path)
        return registry

    def _build_navigation(self) -> NavigationModel:
        nav_file = self.config.navigation_path
        if nav_file.is_file():
            return load_navigation(nav_file)
        logger.info("No navigation file at %s; sidebar is empty", nav_file)
        return NavigationModel()
