"""Content layer — slug resolution, lazy loading, and staleness guarding.

Usage::

    from quire.content import ContentLoader, PathResolver, index_directory

    registry = index_directory("docs")
    loader = ContentLoader(registry, PathResolver())
    state = await loader.resolve("guides/building")
"""

from quire.content.chain import Exhausted, Stopped, Success, first_success
from quire.content.indexing import index_directory
from quire.content.loader import ContentLoader, ResolutionToken
from quire.content.paths import PathResolver, resolve_slug
from quire.content.registry import ContentRegistry, Loader, StaticRegistry
from quire.content.state import Document, Loaded, LoadState, Loading, NotFound

__all__ = [
    "ContentLoader",
    "ContentRegistry",
    "Document",
    "Exhausted",
    "LoadState",
    "Loaded",
    "Loader",
    "Loading",
    "NotFound",
    "PathResolver",
    "ResolutionToken",
    "StaticRegistry",
    "Stopped",
    "Success",
    "first_success",
    "index_directory",
    "resolve_slug",
]
