"""Documents and load states.

Immutable frozen dataclasses.  A ``LoadState`` is exactly one of
``Loading``, ``Loaded`` or ``NotFound``; the view matches on the type.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """A loaded, display-ready document.

    Attributes:
        identifier: Content identifier the document was loaded from
            (e.g. ``"guides/building.mdx"``).
        html: Rendered HTML body.
        title: Document title, usually its first heading.
    """

    identifier: str
    html: str
    title: str = ""


@dataclass(frozen=True, slots=True)
class Loading:
    """A resolution cycle for *slug* has started and not settled."""

    slug: str


@dataclass(frozen=True, slots=True)
class Loaded:
    """*slug* resolved to *document*."""

    slug: str
    document: Document


@dataclass(frozen=True, slots=True)
class NotFound:
    """Every candidate for *slug* was absent or failed to load."""

    slug: str

    @property
    def message(self) -> str:
        return f"Document not found: {self.slug}"


type LoadState = Loading | Loaded | NotFound
