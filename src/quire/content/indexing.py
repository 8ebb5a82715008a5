"""Build-time indexing of markup files into a content registry.

Walks the docs directory once and registers one lazy loader per
``.md``/``.mdx`` file.  Nothing is read or rendered until a loader is
invoked, so startup cost is a directory walk.

Conventions::

    docs/
      getting-started.mdx    -> "getting-started.mdx"
      guides/
        building.md          -> "guides/building.md"
        index.mdx            -> "guides/index.mdx"
      _drafts/               (skipped: leading underscore)
      .cache/                (skipped: leading dot)
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import anyio.to_thread

from quire.content.registry import Loader, StaticRegistry
from quire.content.state import Document
from quire.markdown.renderer import MarkdownRenderer


def index_directory(
    root: str | Path,
    *,
    extensions: tuple[str, ...] = (".mdx", ".md"),
    renderer: MarkdownRenderer | None = None,
) -> StaticRegistry:
    """Index every markup file under *root* into a ``StaticRegistry``.

    Args:
        root: The docs directory.
        extensions: File suffixes to index.
        renderer: Renderer used by the loaders.  One is created on
            first load when omitted.

    Returns:
        A registry keyed by POSIX paths relative to *root*.

    Raises:
        FileNotFoundError: *root* is not a directory.
    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise FileNotFoundError(f"Docs directory not found: {root_path}")

    source = _RendererSource(renderer)
    loaders: dict[str, Loader] = {}
    for file in _walk(root_path, frozenset(extensions)):
        identifier = file.relative_to(root_path).as_posix()
        loaders[identifier] = _file_loader(file, identifier, source)
    return StaticRegistry(loaders)


def _walk(directory: Path, extensions: frozenset[str]) -> Iterator[Path]:
    """Yield markup files under *directory*, files before subdirectories."""
    entries = sorted(directory.iterdir())
    for item in entries:
        if item.name.startswith(("_", ".")):
            continue
        if item.is_file() and item.suffix in extensions:
            yield item
    for item in entries:
        if item.name.startswith(("_", ".")):
            continue
        if item.is_dir():
            yield from _walk(item, extensions)


class _RendererSource:
    """Hands out one shared renderer, created on first use."""

    __slots__ = ("_renderer",)

    def __init__(self, renderer: MarkdownRenderer | None) -> None:
        self._renderer = renderer

    def get(self) -> MarkdownRenderer:
        if self._renderer is None:
            self._renderer = MarkdownRenderer()
        return self._renderer


def _file_loader(file: Path, identifier: str, source: _RendererSource) -> Loader:
    """Build the lazy loader for one markup file."""
    is_mdx = file.suffix == ".mdx"

    async def load() -> Document:
        text = await anyio.to_thread.run_sync(file.read_text, "utf-8")
        html, title = source.get().render_document(text, mdx=is_mdx)
        return Document(
            identifier=identifier,
            html=html,
            title=title or _title_from_stem(file),
        )

    return load


def _title_from_stem(file: Path) -> str:
    stem = file.parent.name if file.stem == "index" else file.stem
    return stem.replace("-", " ").replace("_", " ").title()
