"""Quire — sidebar-driven documentation sites from Markdown and MDX.

Resolves ``/docs/<slug>`` to one of several candidate source files,
loads it lazily, and renders it inside a static two-pane shell.

Basic usage::

    from quire import DocsApp, SiteConfig

    app = DocsApp(SiteConfig(docs_dir="docs", site_title="My Project"))
    app.run()

Resolution on its own::

    from quire import ContentLoader, PathResolver, index_directory

    loader = ContentLoader(index_directory("docs"), PathResolver())
    state = await loader.resolve("guides/building")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContentLoader",
    "Document",
    "DocsApp",
    "DocumentView",
    "LoaderInvocationError",
    "Loaded",
    "Loading",
    "MarkdownRenderer",
    "NavigationItem",
    "NavigationModel",
    "NavigationSection",
    "NotFound",
    "PathResolver",
    "QuireError",
    "ResolutionExhausted",
    "SiteConfig",
    "StaticRegistry",
    "index_directory",
    "load_navigation",
]


# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "quire.errors",
    "ContentLoader": "quire.content.loader",
    "Document": "quire.content.state",
    "DocsApp": "quire.app",
    "DocumentView": "quire.view",
    "LoaderInvocationError": "quire.errors",
    "Loaded": "quire.content.state",
    "Loading": "quire.content.state",
    "MarkdownRenderer": "quire.markdown.renderer",
    "NavigationItem": "quire.navigation.types",
    "NavigationModel": "quire.navigation.types",
    "NavigationSection": "quire.navigation.types",
    "NotFound": "quire.content.state",
    "PathResolver": "quire.content.paths",
    "QuireError": "quire.errors",
    "ResolutionExhausted": "quire.errors",
    "SiteConfig": "quire.config",
    "StaticRegistry": "quire.content.registry",
    "index_directory": "quire.content.indexing",
    "load_navigation": "quire.navigation.loading",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import quire`` fast while providing a clean top-level API.
    ``NotFound`` here is the load state; the HTTP error of the same name
    lives in ``quire.errors``.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
