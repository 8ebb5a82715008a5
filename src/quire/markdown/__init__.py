"""Markdown rendering for quire documents via patitas.

Turns ``.md`` and ``.mdx`` sources into the HTML bodies that fill the
content pane.  Thin wrapper around patitas with docs-site ergonomics:
MDX module lines are dropped and the first heading becomes the title.

Basic usage::

    from quire.markdown import MarkdownRenderer

    md = MarkdownRenderer(highlight=True)
    html, title = md.render_document(source)

Requires ``patitas``::

    pip install quire
"""

from quire.markdown.errors import MarkdownError, MarkdownNotInstalledError
from quire.markdown.renderer import MarkdownRenderer, extract_title, strip_mdx

__all__ = [
    "MarkdownError",
    "MarkdownNotInstalledError",
    "MarkdownRenderer",
    "extract_title",
    "strip_mdx",
]
