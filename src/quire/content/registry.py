"""Content registry: the consumption contract for build-time indexing.

A registry maps content identifiers to lazy loaders.  It is populated
once, by an indexing collaborator (see ``quire.content.indexing``), and
never mutated afterwards.  The loader only ever asks two questions:
``has(identifier)`` and ``load(identifier)``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from quire._internal.invoke import invoke
from quire.content.state import Document
from quire.errors import LoaderInvocationError, UnknownContentError

# A zero-argument callable producing a Document, sync or async
type Loader = Callable[[], Document | Awaitable[Document]]


@runtime_checkable
class ContentRegistry(Protocol):
    """Anything that can answer ``has`` and ``load`` for identifiers."""

    def has(self, identifier: str) -> bool: ...

    async def load(self, identifier: str) -> Document: ...


class StaticRegistry:
    """Read-only registry backed by a fixed identifier → loader mapping.

    The mapping is copied at construction and exposed through a
    ``MappingProxyType``, so later changes to the caller's dict are not
    seen and nothing can be registered at runtime.

    Usage::

        registry = StaticRegistry({"intro.md": load_intro})
        if registry.has("intro.md"):
            doc = await registry.load("intro.md")
    """

    __slots__ = ("_loaders",)

    def __init__(self, loaders: Mapping[str, Loader] | None = None) -> None:
        self._loaders: Mapping[str, Loader] = MappingProxyType(dict(loaders or {}))

    def has(self, identifier: str) -> bool:
        return identifier in self._loaders

    async def load(self, identifier: str) -> Document:
        """Invoke the loader registered for *identifier*.

        Raises:
            UnknownContentError: *identifier* is not registered.
            LoaderInvocationError: the loader raised; the original
                exception is chained.
        """
        try:
            loader = self._loaders[identifier]
        except KeyError:
            raise UnknownContentError(identifier) from None

        try:
            return await invoke(loader)
        except Exception as exc:
            raise LoaderInvocationError(identifier, str(exc) or type(exc).__name__) from exc

    def identifiers(self) -> tuple[str, ...]:
        """All registered identifiers, sorted."""
        return tuple(sorted(self._loaders))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._loaders

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())

    def __len__(self) -> int:
        return len(self._loaders)

    def __repr__(self) -> str:
        return f"StaticRegistry({len(self._loaders)} documents)"
