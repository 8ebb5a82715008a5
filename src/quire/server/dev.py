"""Serving a DocsApp with pounce.

Pounce's ``run()`` wants an import string; quire usually holds a live
``DocsApp``, so ``pounce.Server`` is driven directly.  In debug mode the
docs directory is watched and edits to Markdown, MDX or the navigation
file restart the worker.  The restarted worker either re-imports the app
from *app_path* or reuses the live object, which rebuilds its registry
and sidebar at lifespan startup (see ``DocsApp.refresh``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quire.config import SiteConfig

logger = logging.getLogger("quire.server")


def run_server(
    app: object,
    config: SiteConfig,
    *,
    host: str | None = None,
    port: int | None = None,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for a quire DocsApp.

    Args:
        app: ASGI callable (the DocsApp).
        config: Supplies bind address, debug flag and the docs directory.
        host: Overrides ``config.host``.
        port: Overrides ``config.port``.
        app_path: Optional ``"module:attribute"`` import string.  With
            reload on, pounce reimports it on every restart.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    bind_host = host or config.host
    bind_port = port or config.port
    watch = (str(config.docs_path),) if config.debug else ()

    server_config = ServerConfig(
        host=bind_host,
        port=bind_port,
        workers=1,
        reload=config.debug,
        reload_include=config.reload_include if config.debug else (),
        reload_dirs=watch,
    )
    logger.info(
        "Serving %s at http://%s:%d%s",
        config.docs_path,
        bind_host,
        bind_port,
        config.doc_href(config.default_slug),
    )
    Server(server_config, app, app_path=app_path).run()
