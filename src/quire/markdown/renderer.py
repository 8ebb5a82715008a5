"""Core markdown renderer wrapping patitas.

Documents are written in Markdown or MDX.  MDX sources may carry ES
module statements (``import Tabs from ...``, ``export const meta = {...}``,
often spread over several lines) that mean nothing outside a JS
bundler; they are removed before the source reaches patitas.  JSX
components embedded in MDX are left as raw HTML.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from quire.markdown.errors import MarkdownNotInstalledError

if TYPE_CHECKING:
    from patitas import Markdown

# Top-level ES module statements in MDX
_MDX_MODULE_RE = re.compile(r"^(?:import|export)(?=[\s{*]|$)")

# First ATX level-one heading
_TITLE_RE = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)

_FENCE_RE = re.compile(r"^(```|~~~).*?^\1", re.MULTILINE | re.DOTALL)

# Opening code fence: up to three spaces, then three or more ` or ~
_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")


class MarkdownRenderer:
    """Render Markdown source to HTML via patitas.

    Wraps ``patitas.Markdown`` with a stable interface that quire
    controls.  Every call does a full parse and render.

    Args:
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    def __init__(
        self,
        *,
        plugins: list[str] | tuple[str, ...] | None = None,
        highlight: bool = False,
    ) -> None:
        self._md: Markdown = _get_markdown(plugins=plugins, highlight=highlight)

    def render(self, source: str) -> str:
        """Render Markdown source to an HTML string.

        Args:
            source: Raw Markdown text.

        Returns:
            Rendered HTML.
        """
        if not source:
            return ""
        return self._md(source)

    def render_document(self, source: str, *, mdx: bool = False) -> tuple[str, str]:
        """Render a whole document and pull out its title.

        Args:
            source: Raw Markdown or MDX text.
            mdx: Drop MDX ``import``/``export`` lines before rendering.

        Returns:
            ``(html, title)``; *title* is ``""`` when the document has no
            level-one heading.
        """
        if mdx:
            source = strip_mdx(source)
        return self.render(source), extract_title(source)


def strip_mdx(source: str) -> str:
    """Remove top-level ``import``/``export`` statements outside code fences.

    A statement can span several lines.  It runs until its brackets
    balance and then either ends in ``;`` or is followed by a blank or
    unindented line, so a whole ``export const meta = {...}`` block or
    a wrapped ``import {...} from`` goes at once.
    """
    lines = source.splitlines(keepends=True)
    kept: list[str] = []
    fence: str | None = None
    i = 0
    while i < len(lines):
        line = lines[i]
        if fence is not None:
            kept.append(line)
            closing = line.strip()
            if closing.startswith(fence) and set(closing) == {fence[0]}:
                fence = None
            i += 1
        elif opened := _FENCE_OPEN_RE.match(line):
            fence = opened.group(1)
            kept.append(line)
            i += 1
        elif _MDX_MODULE_RE.match(line):
            i = _statement_end(lines, i)
        else:
            kept.append(line)
            i += 1
    return "".join(kept).lstrip("\n")


def _statement_end(lines: list[str], start: int) -> int:
    """Index of the first line after the ES statement opening at *start*."""
    depth = 0
    i = start
    while i < len(lines):
        line = lines[i]
        depth += _bracket_delta(line)
        i += 1
        if depth > 0:
            continue
        if line.rstrip().endswith(";") or i == len(lines):
            break
        following = lines[i]
        if not following.strip() or not following[0].isspace():
            break
    return i


def _bracket_delta(line: str) -> int:
    """Net count of opening over closing brackets, ignoring string literals."""
    depth = 0
    quote: str | None = None
    escaped = False
    for ch in line:
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in "'\"`":
            quote = ch
        elif ch in "{[(":
            depth += 1
        elif ch in "}])":
            depth -= 1
    return depth


def extract_title(source: str) -> str:
    """Return the text of the first ``# Heading`` outside code fences."""
    match = _TITLE_RE.search(_FENCE_RE.sub("", source))
    return match.group(1) if match else ""


def _get_markdown(
    *,
    plugins: list[str] | tuple[str, ...] | None,
    highlight: bool,
) -> Markdown:
    """Create a patitas Markdown instance, raising a clear error if missing."""
    try:
        from patitas import Markdown
    except ImportError:
        msg = (
            "quire.markdown requires 'patitas' for Markdown rendering. "
            "Install with: pip install patitas"
        )
        raise MarkdownNotInstalledError(msg) from None

    return Markdown(plugins=list(plugins or ["all"]), highlight=highlight)
