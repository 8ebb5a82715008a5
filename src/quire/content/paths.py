"""Slug to candidate-identifier resolution.

Pure and deterministic, no I/O.  A slug such as ``guides/building``
expands into the concrete content identifiers that might back it, most
specific first::

    guides/building.mdx
    guides/building.md
    guides/building/index.mdx
    guides/building/index.md

Whether any of them exists is the registry's business, not ours.
"""

from __future__ import annotations

from quire.errors import ConfigurationError


class PathResolver:
    """Expand slugs into ordered candidate content identifiers.

    Args:
        extensions: Markup extensions in priority order.
        default_slug: Slug used when the requested one is empty.
        index_name: File stem used for directory-style documents.
    """

    __slots__ = ("_default_slug", "_extensions", "_index_name")

    def __init__(
        self,
        *,
        extensions: tuple[str, ...] = (".mdx", ".md"),
        default_slug: str = "getting-started",
        index_name: str = "index",
    ) -> None:
        if not extensions:
            msg = "PathResolver needs at least one extension"
            raise ConfigurationError(msg)
        for ext in extensions:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"Extensions must look like '.md', got {ext!r}"
                raise ConfigurationError(msg)
        if not default_slug:
            msg = "default_slug cannot be empty"
            raise ConfigurationError(msg)
        self._extensions = tuple(extensions)
        self._default_slug = default_slug
        self._index_name = index_name

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    @property
    def default_slug(self) -> str:
        return self._default_slug

    def normalize(self, slug: str) -> str:
        """Return *slug*, or the default slug when it is empty."""
        return slug or self._default_slug

    def candidates(self, slug: str) -> tuple[str, ...]:
        """Candidate identifiers for *slug*, most specific first.

        File-style candidates (one per extension) come before
        index-style candidates (one per extension).
        """
        slug = self.normalize(slug)
        direct = tuple(f"{slug}{ext}" for ext in self._extensions)
        index = tuple(f"{slug}/{self._index_name}{ext}" for ext in self._extensions)
        return direct + index

    def __repr__(self) -> str:
        return (
            f"PathResolver(extensions={self._extensions!r}, "
            f"default_slug={self._default_slug!r})"
        )


def resolve_slug(path: str, *, prefix: str = "/docs/", default: str) -> str:
    """Derive the requested slug from a route path.

    Strips the route *prefix* and surrounding slashes.  A path that names
    nothing past the prefix (``/docs``, ``/docs/``) resolves to *default*.

    Example::

        resolve_slug("/docs/guides/building", default="getting-started")
        # -> "guides/building"
    """
    bare_prefix = prefix.rstrip("/")
    if path == bare_prefix:
        return default
    slug = path.removeprefix(prefix).strip("/")
    return slug or default
